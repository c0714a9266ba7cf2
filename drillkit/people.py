"""A bounded registry of people, each with a name and an age."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from operator import attrgetter
from typing import Optional

__all__ = ["Person", "PeopleRegistry", "parse_person", "format_person"]

DEFAULT_CAPACITY = 10


@dataclass
class Person:
    """A person's name and age."""

    name: str
    age: int


def parse_person(text: str) -> Person:
    """Read a person from text holding a name and an age separated by whitespace.

    The name is the first whitespace-free token; anything after the age is ignored.
    """
    fields = text.split()
    if len(fields) < 2:
        raise ValueError(f"expected a name and an age, got {text!r}")
    name, age_text = fields[0], fields[1]
    try:
        age = int(age_text)
    except ValueError as exc:
        raise ValueError(f"age must be an integer, got {age_text!r}") from exc
    return Person(name, age)


def format_person(person: Person) -> str:
    """Render a person as ``Name: <name>, Age: <age>``."""
    return f"Name: {person.name}, Age: {person.age}"


class PeopleRegistry:
    """An ordered collection of people that holds at most ``capacity`` entries."""

    def __init__(self, people: Iterable[Person] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._people: list[Person] = list(people)
        if len(self._people) > capacity:
            raise ValueError(
                f"{len(self._people)} people do not fit in a registry of capacity {capacity}"
            )

    def add(self, name: str, age: int) -> Person:
        """Append a new person and return it; fails when the registry is full."""
        if len(self._people) >= self.capacity:
            raise ValueError("registry is full, cannot add more people")
        person = Person(name, age)
        self._people.append(person)
        return person

    def edit(self, index: int, name: str, age: int) -> None:
        """Replace the name and age of the person at ``index``."""
        if not 0 <= index < len(self._people):
            raise IndexError(f"no person at index {index}")
        self._people[index] = Person(name, age)

    def find(self, name: str) -> Optional[int]:
        """Return the index of the first person with this name, or None."""
        return next(
            (i for i, person in enumerate(self._people) if person.name == name), None
        )

    def sort_by_age(self) -> None:
        """Order the people by ascending age, keeping equal ages in their order."""
        self._people.sort(key=attrgetter("age"))

    def __iter__(self) -> Iterator[Person]:
        return iter(self._people)

    def __len__(self) -> int:
        return len(self._people)