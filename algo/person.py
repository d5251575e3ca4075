"""The Person record used by the sorting functions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    """A person with an age and a name."""

    age: int
    first_name: str
    last_name: str

    def sort_key(self) -> tuple[int, str, str]:
        """Return the key that orders people by age, then last name, then first name."""
        return (self.age, self.last_name, self.first_name)