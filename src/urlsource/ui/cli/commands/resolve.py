"""Resolve command implementation."""

from typing import final, override

from urlsource.application.services import ResolutionRequest
from urlsource.features.location import LocationSource
from urlsource.ui.cli.args.options import ResolveArgs
from urlsource.ui.cli.commands.executor import CommandExecutor


@final
class ResolveCommand(CommandExecutor[ResolveArgs, LocationSource]):
    """Resolve configuration origins and print the locators."""

    @override
    def execute(self) -> LocationSource:
        request = ResolutionRequest(
            origins=tuple(self.args.origins),
            class_paths=tuple(self.args.class_paths),
        )
        source = self.service.resolve(request)
        if self.args.output_json:
            self.display.show_json(source)
        else:
            self.display.show_source(source)
        return source
