"""Read-only rendering of the chat history.

``build_history_view`` turns history entries into display models (pure,
testable); ``render_history`` draws them with NiceGUI.
"""

from collections.abc import Iterable

from nicegui import ui
from pydantic import BaseModel, ConfigDict

from src.models.schemas import ChatEntry

ERROR_ANSWER_CLASSES = "bg-red-50 border border-red-200 text-red-700"
OK_ANSWER_CLASSES = "bg-gray-100 border border-gray-200 text-gray-800"
ERROR_LABEL_CLASSES = "text-red-500"
OK_LABEL_CLASSES = "text-green-600"


class HistoryItemView(BaseModel):
    """Display model for one history entry."""

    model_config = ConfigDict(frozen=True)

    entry_id: int
    question: str
    timestamp: str
    answer: str
    is_error: bool
    answer_classes: str
    answer_label_classes: str


def answer_classes(is_error: bool) -> str:
    return ERROR_ANSWER_CLASSES if is_error else OK_ANSWER_CLASSES


def answer_label_classes(is_error: bool) -> str:
    return ERROR_LABEL_CLASSES if is_error else OK_LABEL_CLASSES


def build_history_view(history: Iterable[ChatEntry]) -> list[HistoryItemView]:
    """Build display models, keeping the history's newest-first order."""
    return [
        HistoryItemView(
            entry_id=entry.id,
            question=entry.question,
            timestamp=entry.timestamp,
            answer=entry.answer,
            is_error=entry.is_error,
            answer_classes=answer_classes(entry.is_error),
            answer_label_classes=answer_label_classes(entry.is_error),
        )
        for entry in history
    ]


def render_history(history: Iterable[ChatEntry]) -> None:
    """Draw the history inside the current NiceGUI container."""
    for item in build_history_view(history):
        with ui.column().classes("w-full gap-1 p-4 rounded-xl border border-gray-200 bg-white"):
            with ui.row().classes("w-full justify-between items-start"):
                ui.label("Q:").classes("font-medium text-indigo-500")
                ui.label(item.timestamp).classes("text-xs text-gray-400")
            ui.label(item.question).classes("text-gray-800 mb-2 whitespace-pre-wrap")
            ui.label("A:").classes(f"font-medium {item.answer_label_classes}")
            with ui.element("div").classes(f"w-full p-3 rounded-lg {item.answer_classes}"):
                ui.label(item.answer).classes("text-sm whitespace-pre-wrap")
