"""Identifier generation for record stores."""

from typing import Optional

from ..core.exceptions import ConfigurationError
from ..models.record import RecordId


class IdGenerator:
    """Monotonic id source, either plain integers or ``<prefix>-<n>`` strings.

    ``peek`` shows the next id without consuming it; ``advance`` consumes it.
    Ids are never handed out twice for the lifetime of the generator.
    """

    def __init__(self, prefix: Optional[str] = None, start: int = 1, separator: str = "-") -> None:
        if start < 0:
            raise ConfigurationError("Id counter cannot start below zero", "id_start")
        if prefix is not None and not prefix.strip():
            raise ConfigurationError("Id prefix cannot be blank", "id_prefix")
        self.prefix = prefix
        self.separator = separator
        self.start = start
        self._counter = start

    def __repr__(self) -> str:
        return f"IdGenerator(prefix={self.prefix!r}, next={self.peek()!r})"

    def _format(self, n: int) -> RecordId:
        if self.prefix is None:
            return n
        return f"{self.prefix}{self.separator}{n}"

    def peek(self) -> RecordId:
        return self._format(self._counter)

    def advance(self) -> RecordId:
        """Consume and return the next id."""
        allocated = self._format(self._counter)
        self._counter += 1
        return allocated

    @property
    def issued(self) -> int:
        """Number of ids handed out so far."""
        return self._counter - self.start
