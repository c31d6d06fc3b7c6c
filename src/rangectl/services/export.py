"""ExportService — render the live session state as an editable JSON document.

The source is the session's own state, so nothing is validated here.
"""

from __future__ import annotations

import json
from typing import Any

from rangectl.domain.cards import cards_text
from rangectl.domain.schema import CONFIG_KEY, EDITABLE_KEYS, RANGE_KEYS
from rangectl.domain.types import Seat
from rangectl.services.base import BaseService
from rangectl.services.result import ServiceResult


def render_document(document: dict[str, Any]) -> str:
    """Pretty-print a document the way the editor shows it."""
    return json.dumps(document, indent=2, ensure_ascii=False)


class ExportService(BaseService):
    """Builds ``{oopRange, ipRange, config}`` from AppState."""

    def build_document(self) -> dict[str, Any]:
        live = self._state.config.to_document()
        config = {key: live[key] for key in EDITABLE_KEYS}
        config["board"] = cards_text(self._state.config.board)
        return {
            RANGE_KEYS[Seat.OOP]: self._state.range_text(Seat.OOP),
            RANGE_KEYS[Seat.IP]: self._state.range_text(Seat.IP),
            CONFIG_KEY: config,
        }

    def export_document(self) -> ServiceResult:
        """Serialize the live state.

        ``data["document"]`` is the tree, ``data["text"]`` its rendering.
        """
        document = self.build_document()
        return ServiceResult.success(
            "export_document", document=document, text=render_document(document)
        )
