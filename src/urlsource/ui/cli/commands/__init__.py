"""CLI command implementations."""

from .decode import DecodeCommand
from .executor import CommandExecutor
from .init_config import InitConfigCommand
from .resolve import ResolveCommand

__all__ = ["CommandExecutor", "DecodeCommand", "InitConfigCommand", "ResolveCommand"]
