"""BaseService — shared foundation for fdm services.

Every service receives the resolved :class:`FdmSettings` at construction
time and logs through a structlog logger named after its module.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fdm.config.logging import get_logger

if TYPE_CHECKING:
    import structlog

    from fdm.config.settings import FdmSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ModelingService(BaseService):
            def validate(self, tag: str, raw: str) -> ServiceResult:
                ...
    """

    def __init__(self, settings: FdmSettings) -> None:
        self._settings = settings
        self._log: structlog.stdlib.BoundLogger = get_logger(type(self).__module__)
