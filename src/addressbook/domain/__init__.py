"""Domain layer: value objects and the Person record. No dependencies on outer layers."""

from addressbook.domain.entities import (
    Address,
    Email,
    IllegalValueError,
    Name,
    Person,
    Phone,
    Tag,
)

__all__ = ["Address", "Email", "IllegalValueError", "Name", "Person", "Phone", "Tag"]
