"""Application layer: repository, ports, search. Depends only on domain."""

from rolodex.application.contact_repository import CONTACTS_KEY, ContactRepository
from rolodex.application.errors import ContactNotFound
from rolodex.application.ports import KeyValueStore, NetworkDelay
from rolodex.application.search import MatchRank, match_contacts, rank

__all__ = [
    "CONTACTS_KEY",
    "ContactNotFound",
    "ContactRepository",
    "KeyValueStore",
    "MatchRank",
    "NetworkDelay",
    "match_contacts",
    "rank",
]
