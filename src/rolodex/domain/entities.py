"""Domain entity: Contact."""

import time
import uuid
from dataclasses import dataclass, field, fields
from typing import Any

# Fields the owner may edit. id and created_at are assigned once by the repository.
EDITABLE_FIELDS = ("first", "last", "avatar", "twitter", "notes", "favorite")


def now_ms() -> int:
    """Current time as integer milliseconds since the epoch."""
    return int(time.time() * 1000)


def new_contact_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Contact:
    """
    A person in the address book.
    Every field except id and created_at is optional; favorite absent means False.
    """

    id: str = field(default_factory=new_contact_id)
    first: str | None = None
    last: str | None = None
    avatar: str | None = None
    twitter: str | None = None
    notes: str | None = None
    favorite: bool | None = None
    created_at: int = field(default_factory=now_ms)

    def __post_init__(self):
        if not self.id:
            raise ValueError("Contact id must be non-empty.")

    @property
    def is_favorite(self) -> bool:
        return bool(self.favorite)

    def to_record(self) -> dict[str, Any]:
        """Plain dict as stored under the "contacts" key. Absent fields are omitted."""
        record: dict[str, Any] = {"id": self.id, "createdAt": self.created_at}
        for name in EDITABLE_FIELDS:
            value = getattr(self, name)
            if value is not None:
                record[name] = value
        return record

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Contact":
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in record.items() if k in known and k != "created_at"}
        # Missing createdAt reads as 0.
        created_at = record.get("createdAt")
        kwargs["created_at"] = 0 if created_at is None else created_at
        return cls(**kwargs)
