"""AddressBook: the shared state every command executes against."""

from collections.abc import Iterable, Iterator

from addressbook.application.ports import PersonRepository
from addressbook.domain import Person, Tag


class UniqueTagList:
    """Ordered set of tags. Adding a tag that is already present is a no-op."""

    def __init__(self, tags: Iterable[Tag] = ()) -> None:
        self._tags: dict[Tag, None] = dict.fromkeys(tags)

    def add(self, tag: Tag) -> None:
        self._tags.setdefault(tag, None)

    def merge(self, tags: Iterable[Tag]) -> None:
        for tag in tags:
            self.add(tag)

    def contains(self, tag: Tag) -> bool:
        return tag in self._tags

    def clear(self) -> None:
        self._tags.clear()

    def __iter__(self) -> Iterator[Tag]:
        return iter(list(self._tags))

    def __len__(self) -> int:
        return len(self._tags)


class AddressBook:
    """Persons plus the master list of every tag that has been attached to one of them."""

    def __init__(self, repository: PersonRepository) -> None:
        self._persons = repository
        self._tags = UniqueTagList()
        for person in repository.list_all():
            self._tags.merge(person.tags)

    @property
    def tags(self) -> list[Tag]:
        return list(self._tags)

    def add_person(self, person: Person) -> None:
        self._persons.add(person)
        self._tags.merge(person.tags)

    def remove_person(self, person: Person) -> None:
        self._persons.remove(person)

    def replace_person(self, target: Person, replacement: Person) -> None:
        self._persons.replace(target, replacement)
        self._tags.merge(replacement.tags)

    def contains_person(self, person: Person) -> bool:
        return self._persons.contains(person)

    def clear(self) -> None:
        self._persons.clear()
        self._tags.clear()

    def all_persons(self) -> list[Person]:
        return self._persons.list_all()
