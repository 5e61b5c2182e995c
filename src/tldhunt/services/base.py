"""BaseService — shared foundation for tldhunt services.

Every service receives the frozen :class:`TldhuntSettings` at
construction time and reads its section of the config from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tldhunt.config.settings import TldhuntSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class TldService(BaseService):
            def load(self, ...) -> ServiceResult:
                cfg = self._settings.tlds
                ...
    """

    def __init__(self, settings: TldhuntSettings) -> None:
        self._settings = settings
