"""主程序入口 - 单个表达式、批量CSV、交互式计算器"""
import argparse
import logging
import sys

from config.config import ENGINE_CONFIG, BATCH_CONFIG, LOGGING_CONFIG, validate_config
from data.batch_loader import load_expressions, evaluate_batch, save_results
from engine import ExpressionEvaluator
from session import CalculatorSession

logger = logging.getLogger(__name__)

REPL_HELP = """Commands:
  <expression>   evaluate, e.g. 3+4*sin(90)
  :deg / :rad    switch angle mode
  :mode          show angle mode
  :history       list history
  :mc :mr :m+ :m-  memory register
  :% <expr>      apply percent to the trailing number, then evaluate
  :clear         clear history
  q              quit"""


def configure_logging(level=None):
    logging.basicConfig(
        level=getattr(logging, (level or LOGGING_CONFIG['level']).upper()),
        format=LOGGING_CONFIG['format'],
        force=True
    )


def run_single(expression, angle_mode, out=None):
    """求值单个表达式，返回退出码"""
    out = out or sys.stdout
    result = ExpressionEvaluator(angle_mode=angle_mode).evaluate(expression)
    if result.ok:
        print(result.display(), file=out)
        return 0
    print(f"Error: {result.kind.value}", file=out)
    return 1


def run_batch(batch_path, output_path, angle_mode, expression_column=None):
    df = load_expressions(batch_path, expression_column)
    results = evaluate_batch(df, angle_mode=angle_mode, expression_column=expression_column)
    save_results(results, output_path)
    return 0 if (results['error'] == '').all() else 1


def handle_command(session, line):
    """处理一行REPL输入，返回要打印的文本；返回 None 表示退出"""
    line = line.strip()
    if line.lower() == 'q':
        return None
    if line == ':deg' or line == ':rad':
        session.angle_mode = line[1:]
        return session.angle_mode.value.upper()
    if line == ':mode':
        return session.angle_mode.value.upper()
    if line == ':history':
        if not len(session.history):
            return "(empty)"
        return "\n".join(f"{h.equation} = {h.result}" for h in session.history)
    if line == ':clear':
        session.history.clear()
        return "(history cleared)"
    if line == ':mc':
        session.memory_clear()
        return "M = 0"
    if line == ':mr':
        return session.memory_recall()
    if line == ':m+':
        return f"M = {session.memory_add()}"
    if line == ':m-':
        return f"M = {session.memory_subtract()}"
    if line.startswith(':%'):
        session.clear()
        session.input(line[2:].strip())
        session.apply_percent()
    elif line.startswith(':'):
        return REPL_HELP
    else:
        session.clear()
        session.input(line)

    result = session.equals()
    if result.ok:
        return f"= {session.expression}"
    return f"Error: {result.kind.value}"


def run_interactive(angle_mode):
    session = CalculatorSession(angle_mode=angle_mode)
    print(f"[{session.angle_mode.value.upper()}] type ':help' for commands, 'q' to quit")
    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        if not line.strip():
            continue
        output = handle_command(session, line)
        if output is None:
            break
        print(output)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Scientific expression calculator")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Evaluate a single expression and print the result"
    )
    parser.add_argument(
        "--angle_mode",
        type=str,
        choices=["deg", "rad"],
        default=ENGINE_CONFIG["default_angle_mode"],
        help="Angle mode for sin/cos/tan (default: deg)"
    )
    parser.add_argument(
        "--batch_path",
        type=str,
        default=None,
        help="Path to a CSV file of expressions to evaluate"
    )
    parser.add_argument(
        "--expression_column",
        type=str,
        default=BATCH_CONFIG["expression_column"],
        help="Name of the expression column in the batch file"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=BATCH_CONFIG["output_path"],
        help="Path to save the batch results"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: INFO)"
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    validate_config()

    if args.expression is not None:
        return run_single(args.expression, args.angle_mode)
    if args.batch_path:
        return run_batch(args.batch_path, args.output_path, args.angle_mode, args.expression_column)
    return run_interactive(args.angle_mode)


if __name__ == "__main__":
    sys.exit(main())
