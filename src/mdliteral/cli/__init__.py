"""Command-line interface for mdliteral.

Reads markdown from a file or standard input, runs it through the
literal-character pipeline and writes the result to standard output or a
file.

Environment Variable Support
----------------------------
Every option can take its default from an environment variable named
MDLITERAL_<OPTION_NAME>, with the option name upper-cased and hyphens
replaced by underscores. Command-line arguments always override
environment variables, which override configuration files.

Examples
--------
Rewrite a file in place of the default escaping::

    $ mdliteral notes.md -o notes.out.md

Filter standard input, keeping wiki links intact::

    $ cat page.md | mdliteral --wiki-links

Protect only brackets and asterisks::

    $ mdliteral notes.md --minimal

Use environment variables for defaults::

    $ export MDLITERAL_WIKI_LINKS=true
    $ export MDLITERAL_ALIAS_DIVIDER=":"
    $ mdliteral page.md

"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from mdliteral.cli.actions import EnvironmentAwareAction, EnvironmentAwareAppendAction, EnvironmentAwareBooleanAction
from mdliteral.cli.config import discover_config_file, load_config_file
from mdliteral.constants import (
    DEFAULT_ALIAS_DIVIDER,
    DEFAULT_RESOURCE_LINK,
    DEFAULT_TITLE_QUOTE,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from mdliteral.exceptions import MdLiteralError, PluginError, ValidationError
from mdliteral.logging_utils import configure_logging

logger = logging.getLogger(__name__)

_BUILTIN_DEFAULTS: dict[str, Any] = {
    "minimal": False,
    "wiki_links": False,
    "alias_divider": DEFAULT_ALIAS_DIVIDER,
    "resource_link": DEFAULT_RESOURCE_LINK,
    "quote": DEFAULT_TITLE_QUOTE,
    "plugins": [],
    "log_level": "WARNING",
}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Options that may come from a configuration file default to None, so
    that :func:`resolve_settings` can tell an unset option from one given on
    the command line or in the environment.
    """
    from mdliteral import __version__

    parser = argparse.ArgumentParser(
        prog="mdliteral",
        description="Rewrite markdown so that markup characters in prose are written without backslash escapes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs="?", help="Markdown file to process (default: standard input)")
    parser.add_argument("-o", "--output", help="Write the result to this file instead of standard output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    group = parser.add_argument_group("escaping")
    group.add_argument(
        "--minimal",
        action=EnvironmentAwareBooleanAction,
        default=None,
        help="Protect only '[' and '*' instead of the full character set",
    )
    group.add_argument(
        "--wiki-links",
        action=EnvironmentAwareBooleanAction,
        default=None,
        help="Parse [[target]] and [[target|alias]] wiki links",
    )
    group.add_argument(
        "--alias-divider",
        action=EnvironmentAwareAction,
        default=None,
        help="Divider between wiki link target and alias (default: '|')",
    )
    group.add_argument(
        "--resource-link",
        action=EnvironmentAwareBooleanAction,
        default=None,
        help="Always write links as [text](url), never as <url>",
    )
    group.add_argument(
        "--quote",
        action=EnvironmentAwareAction,
        choices=['"', "'"],
        default=None,
        help="Quote character for link and image titles (default: '\"')",
    )
    group.add_argument(
        "--plugin",
        dest="plugins",
        action=EnvironmentAwareAppendAction,
        default=None,
        metavar="NAME",
        help="Apply an additional registered plugin (repeatable)",
    )
    group.add_argument("--list-plugins", action="store_true", help="List available plugins and exit")

    group = parser.add_argument_group("configuration")
    group.add_argument("--config", action=EnvironmentAwareAction, help="Load option defaults from this file")
    group.add_argument(
        "--no-config", action="store_true", help="Do not discover a configuration file in the working directory"
    )

    group = parser.add_argument_group("logging")
    group.add_argument(
        "--log-level",
        action=EnvironmentAwareAction,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help="Logging level (default: WARNING)",
    )
    group.add_argument("--log-file", action=EnvironmentAwareAction, help="Also write log messages to this file")
    group.add_argument(
        "--trace", action="store_true", help="Debug logging with timestamps and logger names"
    )
    return parser


def resolve_settings(parsed_args: argparse.Namespace) -> dict[str, Any]:
    """Merge command line, configuration file and built-in defaults.

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration file cannot be loaded

    """
    config: dict[str, Any] = {}
    config_path: Optional[Path] = None
    if parsed_args.config:
        config_path = Path(parsed_args.config)
    elif not parsed_args.no_config:
        config_path = discover_config_file()
    if config_path is not None:
        config = load_config_file(config_path)

    settings: dict[str, Any] = {}
    for key, default in _BUILTIN_DEFAULTS.items():
        value = getattr(parsed_args, key, None)
        if value is None:
            value = config.get(key)
        settings[key] = default if value is None else value

    if isinstance(settings["plugins"], str):
        settings["plugins"] = [settings["plugins"]]
    return settings


def build_processor(settings: dict[str, Any]) -> Any:
    """Create a :class:`~mdliteral.pipeline.Processor` configured from ``settings``.

    Raises
    ------
    ValidationError
        If an option value is invalid
    PluginError
        If an unknown plugin is requested

    """
    from mdliteral.options import DisableTextEscapeOptions, MarkdownRendererOptions, WikiLinkOptions
    from mdliteral.pipeline import Processor
    from mdliteral.transforms import plugin_registry

    try:
        renderer_options = MarkdownRendererOptions(
            resource_link=bool(settings["resource_link"]),
            quote=settings["quote"],
        )
    except ValueError as e:
        raise ValidationError(str(e), parameter_name="quote", parameter_value=settings["quote"]) from e

    alias_divider = str(settings["alias_divider"])
    processor = Processor(renderer_options=renderer_options)

    if settings["wiki_links"]:
        plugin_registry.apply(processor, "wiki-link", WikiLinkOptions(alias_divider=alias_divider))

    for name in settings["plugins"]:
        plugin_registry.apply(processor, name)

    # Applied last so its link, image and wiki link handlers replace any installed above
    escape_plugin = "disable-bracket-escape" if settings["minimal"] else "disable-text-escape"
    plugin_registry.apply(processor, escape_plugin, DisableTextEscapeOptions(alias_divider=alias_divider))

    return processor


def _list_plugins() -> int:
    from mdliteral.transforms import plugin_registry

    for name in plugin_registry.list_plugins():
        metadata = plugin_registry.get_metadata(name)
        print(f"{name:<26} {metadata.description}")
    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Run the command line.

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.list_plugins:
        return _list_plugins()

    try:
        settings = resolve_settings(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    log_level = "DEBUG" if parsed_args.trace else settings["log_level"]
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        processor = build_processor(settings)
    except (ValidationError, PluginError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        if parsed_args.input:
            input_path = Path(parsed_args.input)
            if not input_path.is_file():
                print(f"Error: Input file not found: {input_path}", file=sys.stderr)
                return EXIT_FILE_ERROR
            result = processor.process(input_path)
        else:
            result = processor.process(sys.stdin.buffer)

        if parsed_args.output:
            from mdliteral.utils.io_utils import write_content

            write_content(result + "\n", parsed_args.output)
            logger.info(f"Wrote {parsed_args.output}")
        else:
            sys.stdout.write(result + "\n")
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except MdLiteralError as e:
        logger.debug("Processing failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
