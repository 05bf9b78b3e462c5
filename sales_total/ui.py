"""
UI boundary: the single element that shows the total.

The element starts in the loading state and is settled exactly once, either
with the formatted total (success) or with the fixed error text (error).
"""

from __future__ import annotations

from html import escape

from .models import ElementState, SalesElementSnapshot
from .rules import ELEMENT_ID, ERROR_TEXT, LOADING_TEXT


class SalesElement:
    def __init__(self, element_id: str = ELEMENT_ID, error_text: str = ERROR_TEXT):
        self.element_id = element_id
        self.error_text = error_text
        self.text = LOADING_TEXT
        self.state = ElementState.LOADING

    @property
    def settled(self) -> bool:
        return self.state is not ElementState.LOADING

    def _settle(self, text: str, state: ElementState) -> None:
        if self.settled:
            raise RuntimeError(f"Element {self.element_id!r} already settled as {self.state.value}")
        self.text = text
        self.state = state

    def show_total(self, display: str) -> None:
        self._settle(display, ElementState.SUCCESS)

    def show_error(self) -> None:
        self._settle(self.error_text, ElementState.ERROR)

    def snapshot(self) -> SalesElementSnapshot:
        return SalesElementSnapshot(element_id=self.element_id, text=self.text, state=self.state)

    def to_html(self) -> str:
        return (
            f'<span id="{escape(self.element_id)}" class="{self.state.value}">'
            f"{escape(self.text)}</span>"
        )
