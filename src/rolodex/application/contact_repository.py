"""Contact CRUD and search over a KeyValueStore.

Every call re-reads the whole collection, changes it and writes it back.
Nothing is cached here, so overlapping writes race and the last one wins.
"""

import logging
from typing import Any

from rolodex.application.errors import ContactNotFound
from rolodex.application.ports import KeyValueStore, NetworkDelay
from rolodex.application.search import match_contacts
from rolodex.domain import EDITABLE_FIELDS, Contact
from rolodex.domain.entities import new_contact_id, now_ms

logger = logging.getLogger(__name__)

CONTACTS_KEY = "contacts"


async def _no_delay(key: str | None = None) -> None:
    return None


def sort_key(contact: Contact) -> tuple[str, int]:
    """Order by last name, then creation time. Missing last name sorts first."""
    last = "" if contact.last is None else str(contact.last)
    return (last, contact.created_at)


class ContactRepository:
    """Create, list/search, get, update and delete contacts."""

    def __init__(self, store: KeyValueStore, *, delay: NetworkDelay | None = None) -> None:
        self._store = store
        self._delay = delay or _no_delay

    async def _read(self) -> list[dict[str, Any]]:
        records = await self._store.get_item(CONTACTS_KEY)
        return list(records or [])

    async def _write(self, records: list[dict[str, Any]]) -> None:
        await self._store.set_item(CONTACTS_KEY, records)

    async def list(self, query: str | None = None) -> list[Contact]:
        """Return contacts matching query (all when empty), sorted by last name then createdAt."""
        await self._delay(f"getContacts:{query or ''}")
        contacts = [Contact.from_record(r) for r in await self._read()]
        if query:
            contacts = match_contacts(contacts, query)
        return sorted(contacts, key=sort_key)

    async def create(self) -> Contact:
        """Store a new empty contact at the front of the list and return it."""
        await self._delay()
        existing = await self.list()
        taken = {c.id for c in existing}
        contact_id = new_contact_id()
        while contact_id in taken:
            contact_id = new_contact_id()
        contact = Contact(id=contact_id, created_at=now_ms())
        position = {c.id: i for i, c in enumerate(existing)}
        raw = await self._read()
        raw.sort(key=lambda r: position.get(r.get("id"), len(position)))
        records = [contact.to_record()] + raw
        await self._write(records)
        logger.info("Created contact %s", contact.id)
        return contact

    async def get(self, contact_id: str) -> Contact | None:
        """Return the contact with the given id, or None."""
        await self._delay(f"contact:{contact_id}")
        for record in await self._read():
            if record.get("id") == contact_id:
                return Contact.from_record(record)
        return None

    async def update(self, contact_id: str, fields: dict[str, Any]) -> Contact:
        """Merge the given fields into the contact. Raises ContactNotFound."""
        await self._delay()
        records = await self._read()
        for index, record in enumerate(records):
            if record.get("id") != contact_id:
                continue
            changes = {k: v for k, v in fields.items() if k in EDITABLE_FIELDS}
            ignored = set(fields) - set(changes)
            if ignored:
                logger.debug("Ignoring non-editable fields %s for %s", sorted(ignored), contact_id)
            updated = {**record, **changes}
            records[index] = updated
            await self._write(records)
            return Contact.from_record(updated)
        raise ContactNotFound(contact_id)

    async def delete(self, contact_id: str) -> bool:
        """Remove the contact. Returns True if removed, False if not found."""
        await self._delay()
        records = await self._read()
        remaining = [r for r in records if r.get("id") != contact_id]
        if len(remaining) == len(records):
            return False
        await self._write(remaining)
        logger.info("Deleted contact %s", contact_id)
        return True
