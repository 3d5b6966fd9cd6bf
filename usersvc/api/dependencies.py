"""Request Dependencies: per-request objects resolved from settings.

Design Decisions:
    - ErrorPolicy built from settings on each request: cheap frozen dataclass,
      overridable in tests via dependency_overrides
"""

from fastapi import Depends

from usersvc.config import Settings, get_settings
from usersvc.core.domain_types import ErrorMapping
from usersvc.core.error_policy import ErrorPolicy


def get_error_policy(settings: Settings = Depends(get_settings)) -> ErrorPolicy:
    return ErrorPolicy(ErrorMapping(settings.error_mapping))
