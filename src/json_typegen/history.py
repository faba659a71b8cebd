"""Persistent history of successful conversions."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

import ujson as json

MAX_HISTORY_SIZE = 50
PREVIEW_LENGTH = 50


@dataclass
class HistoryEntry:
    """A recorded ``(input, output)`` pair."""

    ident: str
    input: str
    output: str
    timestamp: int

    @classmethod
    def create(cls, input_text: str, output: str, timestamp: int | None = None) -> HistoryEntry:
        if timestamp is None:
            timestamp = int(time.time() * 1000)
        return cls(ident=uuid.uuid4().hex[:8], input=input_text, output=output, timestamp=timestamp)

    def preview(self, max_length: int = PREVIEW_LENGTH) -> str:
        if len(self.input) <= max_length:
            return self.input
        return self.input[:max_length] + "..."

    def formatted_time(self) -> str:
        return datetime.fromtimestamp(self.timestamp / 1000).strftime("%b %d, %I:%M %p")

    def serialize(self) -> dict[str, Any]:
        return {
            "id": self.ident,
            "input": self.input,
            "output": self.output,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> HistoryEntry:
        if not data.get("id") or "input" not in data or "output" not in data:
            raise ValueError("History entry missing id/input/output.")
        return cls(
            ident=str(data["id"]),
            input=str(data["input"]),
            output=str(data["output"]),
            timestamp=int(data.get("timestamp", 0)),
        )


class ConversionHistory:
    """Newest-first list of conversions, capped at ``max_size`` entries."""

    def __init__(self, max_size: int = MAX_HISTORY_SIZE) -> None:
        self.max_size = max_size
        self._entries: list[HistoryEntry] = []

    @property
    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, input_text: str, output: str) -> HistoryEntry:
        """Add a conversion at the front, replacing any entry with the same input."""
        entry = HistoryEntry.create(input_text, output)
        self._entries = [e for e in self._entries if e.input != input_text]
        self._entries.insert(0, entry)
        del self._entries[self.max_size :]
        return entry

    def find(self, ident: str) -> HistoryEntry | None:
        return next((e for e in self._entries if e.ident == ident), None)

    def clear(self) -> None:
        self._entries.clear()

    def to_json(self) -> list[dict[str, Any]]:
        return [entry.serialize() for entry in self._entries]

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_json(), indent=2))

    @classmethod
    def load(cls, path: Path, max_size: int = MAX_HISTORY_SIZE) -> ConversionHistory:
        """Read a history file; a missing file yields an empty history."""
        history = cls(max_size=max_size)
        if not path.exists():
            return history
        data = json.loads(path.read_text())
        if not isinstance(data, list):
            raise ValueError(f"History file {path} must contain a list.")
        for item in data[:max_size]:
            if not isinstance(item, dict):
                raise ValueError(f"History file {path} contains a non-object entry.")
            history._entries.append(HistoryEntry.from_json(item))
        return history
