"""In-memory implementation of PersonRepository: an ordered list that rejects duplicates."""

from collections.abc import Iterable, Iterator

from addressbook.application.ports import DuplicatePersonError, PersonNotFoundError
from addressbook.domain import Person
from addressbook.infrastructure.phone import comparable_phone


class UniquePersonList:
    """Stores persons in memory. Order preserved by insertion; replace keeps position.
    Two persons are duplicates when name, phone, email and address match, with phone
    numbers compared in E.164 form when they parse (so "+65 9123 4567" and "91234567"
    under region SG are the same number).
    """

    def __init__(
        self,
        persons: Iterable[Person] = (),
        *,
        phone_region: str | None = None,
    ) -> None:
        self._persons: list[Person] = []
        self._phone_region = phone_region
        for person in persons:
            self.add(person)

    def _identity(self, person: Person) -> tuple:
        phone = comparable_phone(person.phone.value, default_region=self._phone_region)
        return (person.name, phone, person.email, person.address)

    def _index_of(self, person: Person) -> int | None:
        key = self._identity(person)
        for i, existing in enumerate(self._persons):
            if self._identity(existing) == key:
                return i
        return None

    def contains(self, person: Person) -> bool:
        return self._index_of(person) is not None

    def add(self, person: Person) -> None:
        if self.contains(person):
            raise DuplicatePersonError(person)
        self._persons.append(person)

    def remove(self, person: Person) -> None:
        index = self._index_of(person)
        if index is None:
            raise PersonNotFoundError(person)
        del self._persons[index]

    def replace(self, target: Person, replacement: Person) -> None:
        index = self._index_of(target)
        if index is None:
            raise PersonNotFoundError(target)
        key = self._identity(replacement)
        for i, existing in enumerate(self._persons):
            if i != index and self._identity(existing) == key:
                raise DuplicatePersonError(replacement)
        self._persons[index] = replacement

    def clear(self) -> None:
        self._persons.clear()

    def list_all(self) -> list[Person]:
        return list(self._persons)

    def __iter__(self) -> Iterator[Person]:
        return iter(list(self._persons))

    def __len__(self) -> int:
        return len(self._persons)

    def __contains__(self, person: object) -> bool:
        return isinstance(person, Person) and self.contains(person)
