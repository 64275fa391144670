#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Localize - Main Entry Point

Command-line access to the language selector: list, inspect and change the
persisted language, and look up translated strings.

License: GPL-3.0
"""

import sys
import argparse
from loguru import logger

from .core.config import ConfigManager
from .core.logger import setup_logging, setup_logging_from_config
from .core.bootstrap import init_localization
from .utils.version import get_version_string, check_python_version


def setup_argument_parser() -> argparse.ArgumentParser:
    """
    Setup the main argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="localize",
        description="Inspect and change the application language"
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=get_version_string()
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to custom configuration file"
    )

    parser.add_argument(
        "--locales-dir",
        type=str,
        help="Directory containing the <language>.yaml locale files"
    )

    parser.add_argument(
        "--preferences", "-p",
        type=str,
        help="Preferences file where the selected language is stored"
    )

    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug mode with verbose logging"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        metavar="COMMAND"
    )

    list_parser = subparsers.add_parser(
        "list",
        help="List available languages"
    )
    list_parser.add_argument(
        "--exclude-base",
        action="store_true",
        help="Leave the Base localization out of the list"
    )

    subparsers.add_parser("current", help="Show the current language")
    subparsers.add_parser("default", help="Show the default language")
    subparsers.add_parser("reset", help="Reset the current language to the default")

    set_parser = subparsers.add_parser(
        "set",
        help="Set the current language"
    )
    set_parser.add_argument("language", help="Language identifier (e.g. en, pt-BR)")

    name_parser = subparsers.add_parser(
        "name",
        help="Show a language's display name in the current language"
    )
    name_parser.add_argument("language", help="Language identifier")

    translate_parser = subparsers.add_parser(
        "translate",
        help="Look up a string in the current language"
    )
    translate_parser.add_argument("key", help="Translation key (dotted path)")
    translate_parser.add_argument(
        "--count", "-n",
        type=int,
        help="Count used to pick the plural form"
    )
    translate_parser.add_argument(
        "--arg", "-a",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Interpolation argument (repeatable)"
    )

    return parser


def _parse_format_args(pairs) -> dict:
    """Converte argumentos NAME=VALUE em dicionário."""
    result = {}
    for pair in pairs:
        name, sep, value = pair.partition('=')
        if not sep or not name:
            raise ValueError(f"Invalid argument (expected NAME=VALUE): {pair}")
        result[name] = value
    return result


def initialize_application(args):
    """
    Initialize configuration, logging and the localizer.

    Args:
        args: Parsed command line arguments

    Returns:
        Installed Localizer (its selector is available as .selector)
    """
    config_manager = ConfigManager(args.config)

    if args.locales_dir:
        config_manager.set("localization", "locales_dir", args.locales_dir)
    if args.preferences:
        config_manager.set("preferences", "path", args.preferences)

    if args.debug:
        config_manager.set("logging", "level", "DEBUG")
        setup_logging(level="DEBUG")
    else:
        setup_logging_from_config(config_manager)

    logger.debug(f"Localize iniciado - {get_version_string()}")

    return init_localization(config_manager)


def run_command(args, localizer) -> int:
    """
    Execute a parsed command.

    Returns:
        Process exit code
    """
    selector = localizer.selector

    if args.command == "list":
        languages = selector.available_languages(exclude_base=args.exclude_base)
        if not languages:
            print(localizer.localized("cli.no_languages"))
            return 0
        for language in languages:
            name = selector.display_name_for_language(language)
            marker = "*" if language == selector.current_language else " "
            print(f"{marker} {language}" + (f"\t{name}" if name else ""))
        print(localizer.localized_plural("cli.languages", len(languages)))

    elif args.command == "current":
        print(localizer.localized_format("cli.current", language=selector.current_language))

    elif args.command == "default":
        print(localizer.localized_format("cli.default", language=selector.default_language))

    elif args.command == "set":
        previous = selector.current_language
        selector.set_current_language(args.language)
        current = selector.current_language
        key = "cli.unchanged" if current == previous else "cli.changed"
        print(localizer.localized_format(key, language=current))

    elif args.command == "reset":
        selector.reset_current_language_to_default()
        print(localizer.localized_format("cli.reset", language=selector.current_language))

    elif args.command == "name":
        name = selector.display_name_for_language(args.language)
        if not name:
            print(localizer.localized_format("cli.unknown_name", language=args.language))
            return 1
        print(name)

    elif args.command == "translate":
        kwargs = _parse_format_args(args.arg)
        if args.count is not None:
            print(localizer.localized_plural(args.key, args.count, **kwargs))
        else:
            print(localizer.localized_format(args.key, **kwargs))

    return 0


def main(argv=None) -> int:
    """
    Main entry point of the application.
    """
    try:
        check_python_version()
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        localizer = initialize_application(args)
        return run_command(args, localizer)

    except KeyboardInterrupt:
        print()
        return 130

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
