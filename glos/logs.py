"""Helpers for presenting the event log."""

from __future__ import annotations

from datetime import datetime, timezone

from glos.state import AppState

Color = tuple[int, int, int]

ERROR_COLOR: Color = (255, 100, 100)
WARNING_COLOR: Color = (255, 200, 100)
SUCCESS_COLOR: Color = (100, 255, 100)
PLAIN_COLOR: Color = (220, 220, 220)
TIME_COLOR: Color = (150, 150, 150)

_RULES: tuple[tuple[tuple[str, ...], Color], ...] = (
    (("error", "Error"), ERROR_COLOR),
    (("warning", "Warning"), WARNING_COLOR),
    (("started", "acquired"), SUCCESS_COLOR),
)


def log_color(message: str) -> Color:
    """Highlight colour for a log message, chosen by the words it contains."""
    for words, color in _RULES:
        if any(word in message for word in words):
            return color
    return PLAIN_COLOR


def format_log_time(timestamp: datetime) -> str:
    """Format a log time as ``HH:MM:SS.mmm`` in UTC; naive times are taken as UTC."""
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(timezone.utc)
    return f"{timestamp:%H:%M:%S}.{timestamp.microsecond // 1000:03d}"


def newest_first(state: AppState) -> list[tuple[datetime, str]]:
    """Snapshot of the log entries, most recent first."""
    with state.lock:
        return list(reversed(state.log_messages))