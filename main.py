"""主程序入口 - 单个表达式、交互式会话、CSV批量计算"""
import argparse
import logging
import sys

from config.config import *
from core import AngleUnit, EngineError, compile_expression, format_rpn
from calculator import ExpressionEvaluator, normalize
from data.data_loader import (
    load_expression_dataset,
    evaluate_expression_frame,
    summarize_results,
    save_results
)

logger = logging.getLogger(__name__)

INTERACTIVE_SESSION = "cli"


def setup_logging(level=None):
    logging.basicConfig(
        level=getattr(logging, (level or LOGGING_CONFIG['level']).upper()),
        format=LOGGING_CONFIG['format']
    )


def run_single(evaluator, expression, show_rpn=False):
    """计算单个表达式，返回退出码"""
    if show_rpn:
        try:
            print(f"RPN: {format_rpn(compile_expression(normalize(expression)))}")
        except EngineError as e:
            logger.debug(f"Cannot show RPN: {e}")

    outcome = evaluator.calculate(expression)
    if not outcome.ok:
        print(f"Error: {outcome.error}")
        return 1
    print(outcome.formatted)
    return 0


def run_interactive(evaluator, input_func=input, output_func=print):
    """
    交互式会话
    命令: history 查看历史, deg / rad 切换角度单位, quit 退出
    """
    output_func(f"Angle unit: {evaluator.angle_unit.value}. Type 'quit' to exit.")
    while True:
        try:
            line = input_func("> ").strip()
        except EOFError:
            break

        command = line.lower()
        if not command:
            continue
        if command in ('quit', 'exit'):
            break
        if command == 'history':
            history = evaluator.history(INTERACTIVE_SESSION)
            if not len(history):
                output_func("(empty)")
            for entry in history:
                output_func(f"{entry.expression} = {entry.result}")
            continue
        if command in ('deg', 'rad'):
            evaluator.angle_unit = AngleUnit.parse(command)
            output_func(f"Angle unit: {evaluator.angle_unit.value}")
            continue

        outcome = evaluator.calculate(line, session_id=INTERACTIVE_SESSION)
        if outcome.ok:
            output_func(f"Result: {outcome.formatted}")
        else:
            output_func(f"Error: {outcome.error}")
    return 0


def run_batch(evaluator, args):
    df = load_expression_dataset(args.data_path, args.expression_column)
    result_df = evaluate_expression_frame(
        df, evaluator,
        expression_column=args.expression_column,
        angle_column=args.angle_column
    )

    summary = summarize_results(result_df)
    logger.info(f"Total: {summary['total']}, OK: {summary['ok']}, Failed: {summary['failed']}")
    for kind, count in summary['by_kind'].items():
        logger.info(f"  {kind}: {count}")

    if args.output_path:
        save_results(result_df, args.output_path)
    else:
        print(result_df.to_string(index=False))
    return 0 if summary['failed'] == 0 else 1


def main(args):
    validate_config()
    evaluator = ExpressionEvaluator(angle_unit=args.angle_unit, precision=args.precision)

    if args.data_path:
        return run_batch(evaluator, args)
    if args.expression is not None:
        return run_single(evaluator, args.expression, show_rpn=args.show_rpn)
    if args.interactive:
        return run_interactive(evaluator)

    logger.error("Nothing to do: pass --expression, --data_path or --interactive")
    return 2


def build_parser():
    parser = argparse.ArgumentParser(description="Scientific expression calculator")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Expression to evaluate, e.g. 'sin(30) + 2^3'"
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Start an interactive session with history"
    )
    parser.add_argument(
        "--data_path",
        type=str,
        default=None,
        help="Path to a CSV file with one expression per row"
    )
    parser.add_argument(
        "--expression_column",
        type=str,
        default=BATCH_CONFIG['expression_column'],
        help="Name of the expression column in the CSV file"
    )
    parser.add_argument(
        "--angle_column",
        type=str,
        default=None,
        help="Optional CSV column overriding the angle unit per row"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Where to write batch results (printed when omitted)"
    )
    parser.add_argument(
        "--angle_unit",
        type=str,
        choices=["degrees", "radians"],
        default=ENGINE_CONFIG['default_angle_unit'],
        help="Angle unit for trigonometric functions"
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=FORMAT_CONFIG['precision'],
        help="Significant digits in the printed result"
    )
    parser.add_argument(
        "--show_rpn",
        action="store_true",
        help="Also print the postfix (RPN) form of the expression"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        help="Logging level"
    )
    return parser


def cli():
    args = build_parser().parse_args()
    setup_logging(args.log_level)
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
