"""BaseService — foundation for the services bound to a session's AppState."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rangectl.infrastructure.app_state import AppState


class BaseService:
    """Base for service-layer classes.

    Every service receives the session's :class:`AppState` at construction
    time and reads or mutates it only through AppState's own methods.

    Usage::

        class ExportService(BaseService):
            def export_document(self) -> ServiceResult:
                config = self._state.config
                ...
    """

    def __init__(self, state: AppState) -> None:
        self._state = state
