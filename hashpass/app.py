import argparse
import logging
import sys

from typing import List

from PyQt5 import QtCore

from hashpass.config import AnalyzerSettings, load_settings, open_settings, save_settings
from hashpass.errors import HashPassError
from hashpass.generator import build_charset, estimate_entropy, synthesize
from hashpass.hashing import Algorithm
from hashpass.report import ReportKind
from hashpass.strength import score_password
from hashpass.workers import AnalysisTask, TaskOutcome, submit

logger = logging.getLogger("hashpass")


def _build_parser(defaults: AnalyzerSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hashpass",
        description="Hash-function based password generator and analyzer.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--settings", help="read and store preferences in this INI file")
    commands = parser.add_subparsers(dest="command", required=True)

    gen = commands.add_parser("generate", help="generate passwords")
    gen.add_argument("-l", "--length", type=int, default=defaults.length)
    gen.add_argument(
        "-a", "--algorithm",
        default=defaults.algorithm.value,
        help="division, multiplicative or universal",
    )
    gen.add_argument("-n", "--count", type=int, default=1, help="number of passwords")
    gen.add_argument("--no-upper", dest="uppercase", action="store_false", default=defaults.uppercase)
    gen.add_argument("--no-lower", dest="lowercase", action="store_false", default=defaults.lowercase)
    gen.add_argument("--no-numbers", dest="numbers", action="store_false", default=defaults.numbers)
    gen.add_argument("--symbols", dest="symbols", action="store_true", default=defaults.symbols)

    analyze = commands.add_parser("analyze", help="run a performance or distribution analysis")
    analyze.add_argument(
        "-r", "--report",
        choices=[kind.value for kind in ReportKind],
        default=defaults.report.value,
    )
    analyze.add_argument("-i", "--iterations", type=int, default=defaults.iterations)

    return parser


# ---------- COMMANDS ----------

def run_generate(args: argparse.Namespace, values: AnalyzerSettings) -> int:
    algorithm = Algorithm.parse(args.algorithm)
    charset = build_charset(args.uppercase, args.lowercase, args.numbers, args.symbols)

    for _ in range(max(args.count, 1)):
        password = synthesize(charset, args.length, algorithm)
        print(f"{password}  [{score_password(password)}]")

    bits = estimate_entropy(args.length, len(set(charset)))
    print(f"Algorithm: {algorithm.label} | Alphabet size: {len(set(charset))} | Entropy: {bits:.2f} bits")

    values.length = args.length
    values.algorithm = algorithm
    values.uppercase = args.uppercase
    values.lowercase = args.lowercase
    values.numbers = args.numbers
    values.symbols = args.symbols
    return 0


def run_analyze(app: QtCore.QCoreApplication, args: argparse.Namespace, values: AnalyzerSettings) -> int:
    task = AnalysisTask.for_report(args.report, args.iterations)

    def on_completed(outcome: TaskOutcome) -> None:
        if outcome.ok:
            print(outcome.result)
            app.exit(0)
        else:
            print(f"Error during analysis: {outcome.error}", file=sys.stderr)
            app.exit(1)

    task.signals.completed.connect(on_completed)
    logger.debug("Submitting %s report (%d iterations)", args.report, args.iterations)
    submit(task)
    code = app.exec_()

    if code == 0:
        values.report = ReportKind(args.report)
        values.iterations = args.iterations
    return code


# =========================
#          ENTRY
# =========================

def main(argv: List[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    app = QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([sys.argv[0]])
    app.setApplicationName("Hash Password Analyzer")

    # --settings has to be known before the parser defaults can be filled in.
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--settings")
    known, _ = pre.parse_known_args(argv)

    settings = open_settings(known.settings)
    values = load_settings(settings)
    args = _build_parser(values).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "generate":
            code = run_generate(args, values)
        else:
            code = run_analyze(app, args, values)
    except HashPassError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if code == 0:
        save_settings(settings, values)
    sys.exit(code)


if __name__ == "__main__":
    main()
