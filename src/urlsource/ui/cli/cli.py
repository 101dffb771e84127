"""Command line interface for urlsource."""

import sys
from typing import final

from urlsource.features.location import InvalidLocatorError, UnencodablePathError
from urlsource.platform.logging import logger
from urlsource.ui.cli.args import ArgumentParser
from urlsource.ui.cli.args.options import CLIArgs, DecodeArgs, InitConfigArgs, ResolveArgs
from urlsource.ui.cli.commands import DecodeCommand, InitConfigCommand, ResolveCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ResolveArgs):
                _ = ResolveCommand(args).execute()
                return

            if isinstance(args, DecodeArgs):
                _ = DecodeCommand(args).execute()
                return

            assert isinstance(args, InitConfigArgs)
            if InitConfigCommand(args).execute() is None:
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except (UnencodablePathError, InvalidLocatorError) as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
