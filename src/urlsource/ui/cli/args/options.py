"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ResolveArgs:
    """Command line arguments for the ``resolve`` subcommand."""

    command: Literal["resolve"]
    origins: list[str]
    class_paths: list[str]
    output_json: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class DecodeArgs:
    """Command line arguments for the ``decode`` subcommand."""

    command: Literal["decode"]
    locators: list[str]


@final
@dataclass(slots=True)
class InitConfigArgs:
    """Command line arguments for the ``init-config`` subcommand."""

    command: Literal["init-config"]
    path: Path | None
    force: bool


CLIArgs = ResolveArgs | DecodeArgs | InitConfigArgs

__all__ = ["CLIArgs", "DecodeArgs", "InitConfigArgs", "ResolveArgs"]
