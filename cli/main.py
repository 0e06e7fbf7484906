# cli/main.py

"""
Entry point for the Exam History CLI.

Parses command-line options, configures logging, loads the stored history, and hands control
to the Exam History menu.
"""

import argparse
import logging

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menus import history_menu
from cli.path_utils import resolve_data_dir
from core.storage import FileStore
from models.exam_history import ExamHistory

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exam-history",
        description="Track your exam attempts and review your progress.",
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Directory holding the stored history (default: ~/Documents/ExamHistory).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    return parser


def run_cli(argv: list[str] | None = None) -> None:
    """
    Loads the exam history and runs the Exam History menu.

    Args:
        argv (list[str] | None): Command-line arguments; defaults to `sys.argv[1:]`.

    Raises:
        SystemExit:
            - With status 1 if the stored history cannot be loaded (for example, a corrupt blob).
            - With status 0 when the user exits the menu.

    Notes:
        - A corrupt stored history is never replaced here; the file is left in place for manual recovery.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level), format="%(levelname)s: %(message)s"
    )

    data_dir = resolve_data_dir(args.data_dir)
    storage = FileStore(data_dir)

    logger.info("Using data directory %s", data_dir)

    history_response = ExamHistory.load(storage)

    if not history_response.success:
        helpers.display_response_failure(history_response)
        print(f"\nThe stored history in {data_dir} was left unchanged.")
        raise SystemExit(1)

    history = history_response.data["history"]
    print(f"\n... Loaded {len(history)} exam records.")

    history_menu.run(history, data_dir)

    exit_program()


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    run_cli()
