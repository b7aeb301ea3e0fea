"""BaseService — abstract foundation for all vetted services.

Every service receives the resolved :class:`VettedSettings` at
construction time and derives whatever domain rules it needs from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vetted.config.settings import VettedSettings


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class PersonService(BaseService):
            def validate(self, name: str, age: int) -> ServiceResult:
                ...
    """

    def __init__(self, settings: VettedSettings) -> None:
        self._settings = settings
