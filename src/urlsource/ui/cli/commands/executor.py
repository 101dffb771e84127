"""src/urlsource/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse the service and display helpers across commands.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from urlsource.application.services import ResolutionService
from urlsource.ui.cli.display import LocatorDisplay

ArgsT = TypeVar("ArgsT")
ResultT = TypeVar("ResultT")


class CommandExecutor(ABC, Generic[ArgsT, ResultT]):
    """Base class for command execution."""

    args: ArgsT
    service: ResolutionService
    display: LocatorDisplay

    def __init__(
        self,
        args: ArgsT,
        service: ResolutionService | None = None,
        display: LocatorDisplay | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            service: Resolution service; wired to the process environment when omitted.
            display: Output renderer; writes to stdout when omitted.
        """
        self.args = args
        self.service = service or ResolutionService()
        self.display = display or LocatorDisplay()

    @abstractmethod
    def execute(self) -> ResultT:
        """Execute the command."""
        pass
