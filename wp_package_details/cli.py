"""CLI entrypoints for wp-package-details commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from . import SCRIPT_NAME, __version__
from .commands import CreateRequest, create_details_file
from .config import CONFIG_FILENAME, ConfigError, load_config
from .logging import configure_logging, get_logger
from .models import InvalidResourceError

SYNTAX_ERROR = 1
INVALID_ARGUMENT = 2

logger = get_logger("cli")


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser reporting syntax errors with the help text."""

    def error(self, message: str) -> NoReturn:
        self.exit(SYNTAX_ERROR, f"Error: {message}\n\n{self.format_help()}")


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress_default else False,
        help="Increase log verbosity for troubleshooting.",
    )


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    _add_verbose_option(parser, suppress_default=True)
    parser.add_argument(
        "-p",
        "--pretty-print",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Prettify the JSON formatting in the output file (overrides the config file).",
    )
    parser.add_argument(
        "-r",
        dest="readme",
        metavar="readme-file",
        help=(
            "Path to a readme file adhering to the WordPress readme standard. "
            'Used for the "sections" (plugins) or "description" (themes) field.'
        ),
    )
    parser.add_argument(
        "-u",
        dest="url",
        metavar="download-url",
        help='Url to the package location. Used for the "download_link" field.',
    )
    parser.add_argument(
        "--date-format",
        help="strftime format for the last_updated field (defaults to RFC 7231).",
    )


def _add_output_operand(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help='Path to the output file (defaults to "package-details.json").',
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="wp-package-details",
        description="Create a package-details JSON file from WordPress plugin and theme files.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--version",
        action="version",
        version=f"{SCRIPT_NAME}: v{__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to a {CONFIG_FILENAME} file or its directory (defaults to the current directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    plugin_parser = subparsers.add_parser(
        "plugin",
        help="Create a package-details file for a plugin release.",
        description=(
            "Create a package-details file from plugin source files. A plugin source "
            "file is required to read headers from; a readme and download url are optional."
        ),
    )
    _add_common_options(plugin_parser)
    plugin_parser.add_argument(
        "source",
        help='Plugin file to extract headers from, usually "plugin-name.php".',
    )
    _add_output_operand(plugin_parser)
    plugin_parser.set_defaults(command_help=plugin_parser.format_help)

    theme_parser = subparsers.add_parser(
        "theme",
        help="Create a package-details file for a theme release.",
        description=(
            "Create a package-details file from theme source files. A theme stylesheet "
            "and slug are required; a readme and download url are optional."
        ),
    )
    _add_common_options(theme_parser)
    theme_parser.add_argument(
        "source",
        help='Theme file to extract headers from, usually "style.css".',
    )
    theme_parser.add_argument("slug", help="Unique slug for the theme.")
    _add_output_operand(theme_parser)
    theme_parser.set_defaults(command_help=theme_parser.format_help)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for wp-package-details commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(args.config if args.config is not None else Path.cwd())
    except ConfigError as exc:
        parser.exit(SYNTAX_ERROR, f"Error: {exc}\n")

    pretty_print = args.pretty_print if args.pretty_print is not None else config.pretty_print
    request = CreateRequest(
        kind=args.command,
        source=args.source,
        output=args.output or str(config.output_file),
        readme=args.readme,
        url=args.url,
        slug=getattr(args, "slug", None),
        pretty_print=pretty_print,
        date_format=args.date_format or config.date_format,
    )

    print(f"Writing file to {request.output}")
    try:
        create_details_file(request)
    except InvalidResourceError as exc:
        parser.exit(INVALID_ARGUMENT, f"Error: {exc}\n\n{args.command_help()}")
    except OSError as exc:
        logger.debug("Write failed", exc_info=True)
        parser.exit(SYNTAX_ERROR, f"Failed to write {request.output}: {exc}\n")


if __name__ == "__main__":
    main(sys.argv[1:])
