"""Errors raised by the application layer."""


class ContactNotFound(LookupError):
    """Raised by ContactRepository.update when no contact has the given id."""

    def __init__(self, contact_id: str) -> None:
        super().__init__(f"No contact found for id: {contact_id}")
        self.contact_id = contact_id
