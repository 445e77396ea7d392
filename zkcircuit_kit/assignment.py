"""Dense numbering of hashable keys, with optional reverse lookup."""

from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)


class AssignmentError(Exception):
    """Raised when the inverse map is enabled after keys were assigned."""


class Assignment(Generic[K]):
    """Gives each new key the next integer, starting from ``offset``."""

    def __init__(self, offset: int = 0):
        self.offset = offset
        self._assignment: dict[K, int] = {}
        self._inverse: list[K] | None = None

    def enable_inverse(self) -> None:
        """Keep the reverse map; only allowed before any key is assigned."""
        if self._assignment:
            raise AssignmentError("inverse enabled after assignment")
        self._inverse = []

    def __len__(self) -> int:
        return len(self._assignment)

    def get_assignment(self, key: K) -> int:
        """Return the number of ``key``, assigning the next one if it is new."""
        number = self._assignment.get(key)
        if number is None:
            number = len(self._assignment) + self.offset
            self._assignment[key] = number
            if self._inverse is not None:
                self._inverse.append(key)
        return number

    def get_inv_assignment(self, index: int) -> K | None:
        """Return the key with number ``index``, or None if the inverse is disabled."""
        if self._inverse is None:
            return None
        position = index - self.offset
        if not 0 <= position < len(self._inverse):
            raise IndexError(f"no key assigned to {index}")
        return self._inverse[position]