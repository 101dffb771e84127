"""Application services coordinating feature use cases."""

from .resolution_service import (
    ResolutionRequest,
    ResolutionService,
    from_class_path_origins,
    from_configuration_origins,
    from_locators,
)

__all__ = [
    "ResolutionRequest",
    "ResolutionService",
    "from_class_path_origins",
    "from_configuration_origins",
    "from_locators",
]
