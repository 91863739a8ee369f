"""CLI entry point for ganteng.

Parses arguments, configures logging, and dispatches to the selected mode.

Subcommands:
    (none)  — transform text from --text or stdin (default)
    kamus   — look up words in the loaded dictionary
    tui     — interactive Textual app
"""

import argparse
import dataclasses
import logging
import os
import sys

from ganteng.api import TypingGanteng
from ganteng.apps.config import GantengConfig, load_config
from ganteng.core.constants import LOAD_ERROR_MESSAGE


def _add_shared_args(parser: argparse.ArgumentParser, subcommand: bool = False) -> None:
    """Add arguments shared across subcommands.

    Subcommand copies default to SUPPRESS so they never overwrite a value
    given before the subcommand name.
    """
    default = argparse.SUPPRESS if subcommand else None
    parser.add_argument(
        "--dictionary",
        default=default,
        help="Dictionary JSON file or http(s) URL (default: bundled dictionary)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=default,
        help="Seed for the randomized passes (default: from config or unseeded)",
    )
    parser.add_argument(
        "--config-file",
        default=default,
        help="JSON config file (default: ~/.config/ganteng/config.json)",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser with subcommand support."""
    parser = argparse.ArgumentParser(
        description="Ubah teks gaul jadi gaya typing ganteng"
    )
    _add_shared_args(parser)

    parser.add_argument(
        "-t", "--text", default=None, help="Text to transform (default: read stdin)"
    )
    parser.add_argument(
        "--no-emoji", action="store_true", help="Never append the trailing emoji"
    )
    parser.add_argument(
        "--capitalize-sentences",
        action="store_true",
        help="Also capitalize after . ? ! and …",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Show the text after every pipeline pass",
    )

    subparsers = parser.add_subparsers(dest="subcommand")

    # `ganteng kamus`
    kamus_parser = subparsers.add_parser(
        "kamus", help="Look up words in the dictionary"
    )
    _add_shared_args(kamus_parser, subcommand=True)
    kamus_parser.add_argument("words", nargs="*", help="Words to look up")
    kamus_parser.add_argument(
        "--limit",
        type=int,
        default=20,
        help="Entries to list when no words are given (default: 20)",
    )

    # `ganteng tui`
    tui_parser = subparsers.add_parser("tui", help="Interactive terminal app")
    _add_shared_args(tui_parser, subcommand=True)
    return parser


def _resolve_config(args: argparse.Namespace) -> GantengConfig:
    """Load the config file and apply CLI overrides."""
    config = load_config(args.config_file)

    transform = config.transform
    if getattr(args, "no_emoji", False):
        transform = dataclasses.replace(transform, emoji_probability=0.0)
    if getattr(args, "capitalize_sentences", False):
        transform = dataclasses.replace(transform, capitalize_sentences=True)

    seed = args.seed if args.seed is not None else config.seed
    dictionary = config.dictionary
    if args.dictionary:
        dictionary = dataclasses.replace(dictionary, source=args.dictionary)

    return dataclasses.replace(
        config, transform=transform, seed=seed, dictionary=dictionary,
    )


def _load_engine(config: GantengConfig) -> TypingGanteng:
    engine = TypingGanteng(config.transform, config.make_rng())
    engine.load(config.dictionary.source, config.dictionary.extra)
    return engine


def _read_input(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def _run_transform(args: argparse.Namespace) -> int:
    """Transform one text and print the result."""
    from rich.console import Console

    from ganteng.ui import render_pass_table, render_result_panel

    engine = _load_engine(_resolve_config(args))
    if not engine.is_ready:
        Console(stderr=True).print(f"[red]{LOAD_ERROR_MESSAGE}[/red]")
        return 1

    text = _read_input(args)
    if not args.explain:
        print(engine.transform(text))
        return 0

    console = Console()
    steps = engine.trace(text)
    result = steps[-1].text if steps else ""
    console.print(render_pass_table(steps))
    console.print(render_result_panel(text.strip(), result))
    return 0


def _run_kamus(args: argparse.Namespace) -> int:
    """Print dictionary lookups as a table."""
    from rich.console import Console

    from ganteng.ui import render_dictionary_table

    engine = _load_engine(_resolve_config(args))
    if not engine.is_ready:
        Console(stderr=True).print(f"[red]{LOAD_ERROR_MESSAGE}[/red]")
        return 1

    Console().print(
        render_dictionary_table(engine.dictionary, args.words, args.limit)
    )
    return 0


def _run_tui(args: argparse.Namespace) -> int:
    """Run the Textual app; it loads the dictionary itself."""
    from ganteng.apps.tui import GantengApp

    config = _resolve_config(args)
    engine = TypingGanteng(config.transform, config.make_rng())
    app = GantengApp(
        engine,
        source=config.dictionary.source,
        extra=config.dictionary.extra,
    )
    app.run()
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code."""
    from rich.console import Console
    from rich.logging import RichHandler

    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_time=False,
                show_path=False,
                rich_tracebacks=False,
            )
        ],
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.subcommand == "kamus":
        return _run_kamus(args)
    if args.subcommand == "tui":
        return _run_tui(args)
    return _run_transform(args)
