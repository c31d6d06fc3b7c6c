"""ImportEditor — view model for the editable import/export text region.

Holds the text the user edits, the single error currently shown, and the
success acknowledgment. A UI layer binds its widgets to these attributes.
The editor subscribes to ``state_changed`` and regenerates its text from
the live state on every change; a regeneration overwrites an in-progress
edit (last write wins).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rangectl.plugins.hookspecs import hookimpl
from rangectl.services.export import ExportService
from rangectl.services.importer import ImportService

if TYPE_CHECKING:
    from rangectl.infrastructure.app_state import AppState
    from rangectl.services.result import ServiceResult


class ImportEditor:
    """Editable document text plus its validation feedback.

    Attributes:
        text: Current contents of the text region.
        error: Message of the failure shown to the user, or None.
        succeeded: True right after a successful import, until the next edit.
    """

    def __init__(self, state: AppState) -> None:
        self._state = state
        self._exporter = ExportService(state)
        self._importer = ImportService(state)
        self.text = self._render()
        self.error: str | None = None
        self.succeeded = False
        state.subscribe(self)

    def _render(self) -> str:
        return self._exporter.export_document().data["text"]

    @hookimpl
    def state_changed(self, state: AppState, fields: list[str]) -> None:
        self.text = self._render()

    def edit(self, text: str) -> ServiceResult:
        """Replace the text, drop any success acknowledgment, and re-validate."""
        self.text = text
        self.succeeded = False
        return self.validate()

    def validate(self) -> ServiceResult:
        """Validate the current text, showing or clearing the error."""
        result = self._importer.validate_only(self.text)
        self.error = None if result.ok else _message(result)
        return result

    async def submit(self) -> ServiceResult:
        """Import the current text into the live state."""
        result = await self._importer.import_text(self.text)
        if result.ok:
            self.error = None
            self.succeeded = True
        else:
            self.error = _message(result)
            self.succeeded = False
        return result

    def close(self) -> None:
        """Stop following state changes."""
        self._state.unsubscribe(self)


def _message(result: ServiceResult) -> str:
    return result.error.message if result.error else "Unknown error"
