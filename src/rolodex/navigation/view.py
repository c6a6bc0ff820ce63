"""What the view layer shows for a contact. Pure functions, no rendering."""

from dataclasses import dataclass

from rolodex.domain import Contact

NO_NAME = "No Name"


def display_name(contact: Contact) -> str:
    """First and last name joined, or "No Name" when both are empty."""
    if not contact.first and not contact.last:
        return NO_NAME
    return f"{contact.first or ''} {contact.last or ''}".strip()


def avatar_url(contact: Contact) -> str:
    return contact.avatar or f"https://robohash.org/{contact.id}.png?size=200x200"


def twitter_url(contact: Contact) -> str | None:
    if not contact.twitter:
        return None
    return f"https://twitter.com/{contact.twitter}"


@dataclass(frozen=True)
class FavoriteButton:
    star: str
    label: str
    # Value the button submits: the opposite of what is shown.
    value: str


def favorite_button(favorite: bool) -> FavoriteButton:
    if favorite:
        return FavoriteButton(star="★", label="Remove from favorites", value="false")
    return FavoriteButton(star="☆", label="Add to favorites", value="true")
