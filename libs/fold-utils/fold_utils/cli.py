import argparse
import logging
from pathlib import Path
from typing import Any

from fold_core.combiners import get_combiner
from fold_core.fold import MISSING, Combiner, EmptySequenceError, fold
from fold_core.kinds import CombinerKind
from fold_utils.common import parse_value, parse_values
from fold_utils.render import TraceRenderer, write_trace
from fold_utils.settings import (
    DEFAULT_JOIN_SEPARATOR,
    DEFAULT_VERBOSITY,
    LOGGER_NAME,
    LOGGER_PREFIX,
)

logger = logging.getLogger(LOGGER_NAME)


class FoldClient:
    """Command line front end. Parses values, picks a built-in combiner and
    either prints the folded result (`run`) or a Markdown trace (`trace`).
    """

    logger_prefix: str
    verbosity: int

    argument_parser: argparse.ArgumentParser
    args: argparse.Namespace

    def __init__(self, logger_prefix: str = LOGGER_PREFIX):
        self.logger_prefix = logger_prefix
        self.verbosity = DEFAULT_VERBOSITY
        self.argument_parser = self.generate_parser()
        self.args = argparse.Namespace()

    def set_logger_config(self):
        logger = logging.getLogger(LOGGER_NAME)
        logger.propagate = False
        verbosity = min(max(0, self.verbosity), 2)
        logging_level = {0: logging.ERROR, 1: logging.INFO, 2: logging.DEBUG}.get(
            verbosity, logging.ERROR
        )
        logger.setLevel(logging.DEBUG)

        # repeated starts in one process must not stack handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

        console_handler = logging.StreamHandler()
        formatter = logging.Formatter(
            f"[{self.logger_prefix} %(asctime)s ~ %(levelname)s]: %(message)s"
        )
        console_handler.setFormatter(formatter)
        console_handler.setLevel(logging_level)
        logger.addHandler(console_handler)

    def add_shared_flags(self, subparser: argparse.ArgumentParser):
        """Flags shared between run and trace"""
        subparser.add_argument(
            "kind", choices=[kind.value for kind in CombinerKind], help="built-in combiner"
        )
        subparser.add_argument("values", nargs="*", metavar="VALUE", help="values to fold")
        subparser.add_argument(
            "-s", "--seed", metavar="VALUE", type=str, help="initial accumulator value"
        )
        subparser.add_argument(
            "--separator",
            type=str,
            default=DEFAULT_JOIN_SEPARATOR,
            help="separator used by the join combiner",
        )
        subparser.add_argument(
            "-v", "--verbosity", default=DEFAULT_VERBOSITY, choices=[0, 1, 2], type=int
        )

    def generate_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="fold",
            description="Fold command line values with a built-in combiner",
        )
        subparsers = parser.add_subparsers(required=True, dest="command")

        # --- Subcommand: run ---
        run_parser = subparsers.add_parser("run", help="Print the folded result")
        self.add_shared_flags(run_parser)

        # --- Subcommand: trace ---
        trace_parser = subparsers.add_parser("trace", help="Render a Markdown trace of the fold")
        self.add_shared_flags(trace_parser)
        trace_parser.add_argument(
            "-o", "--out", metavar="OUTPUT_FILE", type=str, help="write the trace to a file"
        )

        return parser

    def extract_seed(self) -> Any:
        if self.args.seed is None:
            return MISSING
        return parse_value(self.args.seed)

    def start(self, argv: list[str] | None = None) -> int:
        self.args = self.argument_parser.parse_args(argv)
        self.verbosity = self.args.verbosity
        self.set_logger_config()

        combine = get_combiner(self.args.kind, separator=self.args.separator)
        values = parse_values(self.args.values)
        seed = self.extract_seed()
        logger.info(f"{self.args.command} '{self.args.kind}' over {len(values)} value(s)")
        logger.debug(f"  - values : {values}")
        logger.debug(f"  - seed   : {seed}")

        try:
            match self.args.command:
                case "run":
                    self.run(values, combine, seed)
                case "trace":
                    self.trace(values, combine, seed)
        except EmptySequenceError as e:
            self.argument_parser.error(f"{e}, pass at least one VALUE or --seed")
        return 0

    def run(self, values: list[Any], combine: Combiner, seed: Any):
        print(fold(values, combine, seed))

    def trace(self, values: list[Any], combine: Combiner, seed: Any):
        content = TraceRenderer().render(values, combine, seed, title=self.args.kind)
        if self.args.out:
            out_file = Path(self.args.out)
            if out_file.is_dir():
                self.argument_parser.error("--out requires a file path, found a directory!")
            write_trace(out_file, content)
        else:
            print(content, end="")


def main(argv: list[str] | None = None) -> int:
    return FoldClient().start(argv)


if __name__ == "__main__":
    raise SystemExit(main())
