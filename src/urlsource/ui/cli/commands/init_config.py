"""Init-config command implementation."""

from pathlib import Path
from typing import final, override

from urlsource.config.config import Config
from urlsource.config.paths import default_config_path
from urlsource.platform.logging import logger
from urlsource.ui.cli.args.options import InitConfigArgs
from urlsource.ui.cli.commands.executor import CommandExecutor


@final
class InitConfigCommand(CommandExecutor[InitConfigArgs, Path | None]):
    """Write a default configuration file."""

    @override
    def execute(self) -> Path | None:
        target = (self.args.path or default_config_path()).expanduser().resolve()
        if target.exists() and not self.args.force:
            logger.warning("Configuration already exists at %s (use --force to overwrite)", target)
            return None
        return Config().save(target)
