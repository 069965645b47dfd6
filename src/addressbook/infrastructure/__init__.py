"""Infrastructure layer: concrete implementations of application ports."""

from addressbook.infrastructure.memory_repository import UniquePersonList
from addressbook.infrastructure.phone import comparable_phone, normalize_phone

__all__ = ["UniquePersonList", "comparable_phone", "normalize_phone"]
