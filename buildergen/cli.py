"""CLI entrypoints for buildergen commands."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .errors import GeneratorError
from .generator import ProgramGenerator
from .logging import configure_logging, get_logger


def _add_logging_options(parser: argparse.ArgumentParser, *, inherited: bool = False) -> None:
    # Sub-command copies suppress their defaults; the top-level parser owns them.
    group = parser.add_argument_group("logging")
    group.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if inherited else False,
        help="Show debug output, including discovery counts.",
    )
    group.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=argparse.SUPPRESS if inherited else False,
        help="Only report warnings and errors.",
    )
    group.add_argument(
        "--log-file",
        type=Path,
        default=argparse.SUPPRESS if inherited else None,
        help="Also write a debug log to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="buildergen",
        description="Generate wrapper functions for schema builder classes from their type declarations.",
    )
    _add_logging_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate the builder module from the configured declaration files.",
    )
    _add_logging_options(generate_parser, inherited=True)
    generate_parser.add_argument(
        "--config",
        default=".",
        help="Path to .buildergen.yml or the directory holding it (defaults to current directory).",
    )
    generate_parser.add_argument(
        "--output",
        default=None,
        help="Write the generated module here instead of the configured output path.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for buildergen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file)
    logger = get_logger("cli")

    if args.command == "generate":
        try:
            config = load_config(Path(args.config))
            logger.info("Initializing the program generator...")
            generator = ProgramGenerator(config)
            logger.debug("%d builder classes found.", len(generator.builders))
            logger.debug("%d methods found.", len(generator.methods))
            logger.info("Creating builder file...")
            output = asyncio.run(generator.write_to_file(args.output))
        except (ConfigError, GeneratorError) as exc:
            parser.exit(1, f"buildergen generate failed: {exc}\n")
        print(f"Builder module written to {_relativize(output)}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
