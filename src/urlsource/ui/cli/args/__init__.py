"""Command line argument handling."""

from .options import CLIArgs, DecodeArgs, InitConfigArgs, ResolveArgs
from .parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "DecodeArgs", "InitConfigArgs", "ResolveArgs"]
