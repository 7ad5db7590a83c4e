"""配置文件"""
import logging

# 日志参数
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 交互式命令行参数
REPL_CONFIG = {
    "greeting": "Enter a statement:",
    "prompt": "> ",
    "exit_command": "exit",
    "farewell": "Goodbye!",
    "invalid_message": "Invalid statement",
}

# 批量求值参数
BATCH_CONFIG = {
    "expression_column": "expression",
    "result_column": "result",
    "error_column": "error",
    "default_output_path": "results.csv",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert isinstance(logging.getLevelName(LOGGING_CONFIG["level"].upper()), int), \
        f"未知的日志级别: {LOGGING_CONFIG['level']}"
    assert REPL_CONFIG["prompt"], "提示符不能为空"
    assert REPL_CONFIG["exit_command"].strip(), "退出命令不能为空"
    columns = [BATCH_CONFIG["expression_column"], BATCH_CONFIG["result_column"], BATCH_CONFIG["error_column"]]
    assert len(set(columns)) == len(columns), "批量输出的列名必须互不相同"
