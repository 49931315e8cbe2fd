"""Domain entity — one immutable note written against a client or customer."""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any

DEFAULT_AUTHOR = "Benutzer"


def format_entry_date(moment: datetime) -> str:
    """Short German date as shown in the journal, e.g. ``5.3.2026``."""
    return f"{moment.day}.{moment.month}.{moment.year}"


@dataclass(frozen=True)
class JournalEntry:
    """A single journal entry.

    ``id`` is the creation time in epoch milliseconds and doubles as the
    unique key within an entry log.
    """

    id: int
    date: str
    author: str
    content: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "JournalEntry":
        """Build an entry from stored JSON, raising ValueError on a bad shape."""
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        try:
            entry_id = data["id"]
            date = data["date"]
            author = data["author"]
            content = data["content"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from exc
        if isinstance(entry_id, bool) or not isinstance(entry_id, int):
            raise ValueError("id must be an integer")
        if not all(isinstance(v, str) for v in (date, author, content)):
            raise ValueError("date, author and content must be strings")
        return cls(id=entry_id, date=date, author=author, content=content)
