"""主程序入口 - 交互式求值、单条求值和批量求值"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, REPL_CONFIG, BATCH_CONFIG, validate_config
from core import try_evaluate, to_postfix, ExpressionError
from data import load_expressions, save_results, BatchEvaluator
from utils import format_result

logger = logging.getLogger(__name__)


def _setup_logging(level=None):
    logging.basicConfig(
        level=getattr(logging, (level or LOGGING_CONFIG['level']).upper(), logging.WARNING),
        format=LOGGING_CONFIG['format']
    )


def _print_rpn(text):
    try:
        print(f"RPN: {to_postfix(text)}")
    except ExpressionError as e:
        logger.debug(f"Cannot convert to postfix: {e}")


def evaluate_line(text, show_rpn=False):
    """求值一行输入并返回要打印的文本"""
    if show_rpn:
        _print_rpn(text)
    result = try_evaluate(text)
    if result is None:
        return REPL_CONFIG['invalid_message']
    return format_result(result)


def run_repl(show_rpn=False):
    """交互式循环，直到输入退出命令或 EOF"""
    print(REPL_CONFIG['greeting'])
    while True:
        try:
            line = input(REPL_CONFIG['prompt'])
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if line.strip() == REPL_CONFIG['exit_command']:
            break
        print(evaluate_line(line, show_rpn=show_rpn))

    print(REPL_CONFIG['farewell'])


def run_single(text, show_rpn=False):
    output = evaluate_line(text, show_rpn=show_rpn)
    print(output)
    return 1 if output == REPL_CONFIG['invalid_message'] else 0


def run_batch(file_path, column=None, output_path=None, show_rpn=False):
    expressions = load_expressions(file_path, column)
    evaluator = BatchEvaluator()
    results = evaluator.evaluate_series(expressions)

    if output_path:
        save_results(results, output_path)
    else:
        for text, value, error in zip(results[evaluator.expression_column],
                                      results[evaluator.result_column],
                                      results[evaluator.error_column]):
            if show_rpn:
                _print_rpn(text)
            shown = REPL_CONFIG['invalid_message'] if error else format_result(value)
            print(f"{text} = {shown}")

    summary = evaluator.summary(results)
    logger.info(f"Batch finished: {summary}")
    return 0 if summary['failed'] == 0 else 1


def main(argv=None):
    parser = argparse.ArgumentParser(description="Infix expression calculator (shunting-yard + RPN)")

    parser.add_argument(
        "--expr",
        type=str,
        default=None,
        help="Evaluate a single expression and exit"
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Path to a CSV or text file of expressions to evaluate in batch"
    )
    parser.add_argument(
        "--column",
        type=str,
        default=BATCH_CONFIG['expression_column'],
        help="CSV column holding the expressions"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write batch results to this CSV file instead of printing them"
    )
    parser.add_argument(
        "--show_rpn",
        action="store_true",
        help="Also print the postfix (RPN) form of each expression"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    args = parser.parse_args(argv)

    validate_config()
    _setup_logging(args.log_level)

    if args.expr is not None:
        return run_single(args.expr, show_rpn=args.show_rpn)
    if args.file is not None:
        return run_batch(args.file, args.column, args.output, show_rpn=args.show_rpn)

    run_repl(show_rpn=args.show_rpn)
    return 0


if __name__ == "__main__":
    sys.exit(main())
