"""Command line interface collecting the options for a new project."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import DEFAULT_PROJECT_NAME, CliResults, ConfigOverrides, Language, resolve_config
from .errors import PromptCancelled
from .naming import validate_project_name
from .prompts import Prompter, QuestionaryPrompter
from .title import render_title

LOGGER = logging.getLogger(__name__)

CANCEL_MESSAGE = "So sad to see you go :("


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="volt",
        description="Quickly bootstrap your Electron app, without the complexity.",
    )
    parser.add_argument(
        "dir",
        nargs="?",
        help="Application name and directory to create the project in",
    )
    parser.add_argument(
        "-y",
        "--default",
        action="store_true",
        help="Use the default options and bypass the CLI prompts",
    )
    parser.add_argument(
        "--language",
        choices=[language.value for language in Language],
        help="Language of the generated application",
    )
    parser.add_argument(
        "--tailwind",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Add Tailwind CSS",
    )
    parser.add_argument(
        "--eslint",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Add ESLint",
    )
    parser.add_argument("--no-title", action="store_true", help="Do not print the title banner")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    # basicConfig does nothing once the root logger has handlers.
    logging.getLogger("volt").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _overrides_from_args(args: argparse.Namespace) -> ConfigOverrides:
    return ConfigOverrides(
        project_name=args.dir,
        language=Language(args.language) if args.language else None,
        tailwind=args.tailwind,
        eslint=args.eslint,
    )


def collect(
    args: argparse.Namespace,
    *,
    prompter: Prompter | None = None,
    console: Console | None = None,
) -> CliResults | None:
    """Turn parsed arguments into :class:`CliResults`.

    Returns ``None`` when the user cancels one of the prompts.
    """

    console = console or Console(stderr=True, soft_wrap=True)
    if args.default:
        console.print("Using default options...", style="italic")
        return resolve_config(_overrides_from_args(args), use_defaults=True)

    try:
        return resolve_config(_overrides_from_args(args), prompter or QuestionaryPrompter())
    except PromptCancelled as exc:
        LOGGER.debug("%s", exc)
        console.print(CANCEL_MESSAGE, style="red")
        return None


def main(
    argv: Sequence[str] | None = None,
    *,
    prompter: Prompter | None = None,
    console: Console | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    console = console or Console(stderr=True, soft_wrap=True)

    if not args.no_title:
        render_title(console)

    target = args.dir if args.dir is not None else DEFAULT_PROJECT_NAME
    console.print(f"Creating project in directory: {escape(target)}")

    if args.dir is not None:
        result = validate_project_name(args.dir)
        if not result:
            console.print(result.message, style="red")
            return 1

    results = collect(args, prompter=prompter, console=console)
    if results is None:
        return 0

    LOGGER.debug("collected configuration %r", results)
    sys.stdout.write(json.dumps(results.context(), indent=2))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
