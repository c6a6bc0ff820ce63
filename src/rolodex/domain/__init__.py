"""Domain layer: entities. No dependencies on outer layers."""

from rolodex.domain.entities import EDITABLE_FIELDS, Contact

__all__ = ["Contact", "EDITABLE_FIELDS"]
