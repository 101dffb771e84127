"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from urlsource.config.config import Config
from urlsource.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from urlsource.ui.cli.args.options import CLIArgs, DecodeArgs, InitConfigArgs, ResolveArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="urlsource",
            description="urlsource - resolve class path strings into directory and archive locators.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="Configuration file to use instead of the default location",
            metavar="CONFIG_PATH",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        resolve_parser = subparsers.add_parser(
            "resolve",
            help="Resolve configuration origins into locators",
        )
        _ = resolve_parser.add_argument(
            "--origin",
            action="append",
            default=[],
            dest="origins",
            help="Environment variable to read (repeatable; defaults to configured origins)",
            metavar="NAME",
        )
        _ = resolve_parser.add_argument(
            "--classpath",
            action="append",
            default=[],
            dest="class_paths",
            help="Literal class path string resolved after the named origins (repeatable)",
            metavar="CLASSPATH",
        )
        _ = resolve_parser.add_argument(
            "--json",
            action="store_true",
            dest="output_json",
            help="Print locators as a JSON array",
        )
        verbosity = resolve_parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Log every resolved entry",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )

        decode_parser = subparsers.add_parser(
            "decode",
            help="Decode locators back into filesystem paths",
        )
        _ = decode_parser.add_argument(
            "locators",
            nargs="+",
            help="Locator URLs such as file:/opt/classes/ or jar:file:/opt/lib.jar!/",
            metavar="LOCATOR",
        )

        init_parser = subparsers.add_parser(
            "init-config",
            help="Write a configuration file populated with defaults",
        )
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if bool(getattr(parsed_args, "quiet", False)):
            log_level = logging.ERROR
        elif bool(getattr(parsed_args, "verbose", False)):
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        config_path = Path(parsed_args.config) if parsed_args.config else None
        configuration = Config.load(config_path)
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "resolve":
            return ArgumentParser._process_resolve(parsed_args, configuration)

        if command == "decode":
            return DecodeArgs(command="decode", locators=list(parsed_args.locators))

        if command == "init-config":
            return InitConfigArgs(
                command="init-config",
                path=config_path,
                force=parsed_args.force,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_resolve(parsed_args: argparse.Namespace, configuration: Config) -> ResolveArgs:
        origins = [name.strip() for name in parsed_args.origins if name.strip()]
        class_paths: list[str] = list(parsed_args.class_paths)
        # Literal class paths alone mean "resolve just these".
        if not origins and not class_paths:
            origins = list(configuration.origins)

        return ResolveArgs(
            command="resolve",
            origins=origins,
            class_paths=class_paths,
            output_json=parsed_args.output_json,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
