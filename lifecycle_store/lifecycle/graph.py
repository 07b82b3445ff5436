"""Transition graphs: the fixed set of allowed status moves for a domain."""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type, Union

from pydantic import ConfigDict, Field

from ..core.exceptions import ConfigurationError, InvalidStatusError
from ..models.base import StoreBaseModel


class Transition(StoreBaseModel):
    """An allowed ``source -> target`` move and its timestamp effects."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(description="Status the record must currently be in")
    target: str = Field(description="Status the record moves to")
    stamp: Optional[str] = Field(
        default=None,
        description="Name of the timestamp written when the move happens"
    )
    clears: Tuple[str, ...] = Field(
        default=(),
        description="Names of timestamps removed when the move happens"
    )

    @classmethod
    def of(
        cls,
        source: Union[str, Enum],
        target: Union[str, Enum],
        stamp: Optional[str] = None,
        clears: Iterable[str] = (),
    ) -> "Transition":
        """Build a transition from enum members or raw status strings."""
        return cls(
            source=_value(source),
            target=_value(target),
            stamp=stamp,
            clears=tuple(clears),
        )


def _value(status: Any) -> str:
    return status.value if isinstance(status, Enum) else status


class TransitionGraph:
    """Directed graph of statuses for one record domain.

    Construction validates the table; a graph that names an unknown state,
    repeats an edge, or loops a state onto itself raises ``ConfigurationError``.
    """

    def __init__(
        self,
        name: str,
        states: Union[Type[Enum], Iterable[Union[str, Enum]]],
        initial: Union[str, Enum],
        transitions: Iterable[Transition],
    ) -> None:
        self.name = name
        self.states: Tuple[str, ...] = tuple(_value(s) for s in states)
        self.initial = _value(initial)
        self._edges: Dict[Tuple[str, str], Transition] = {}

        if not self.states:
            raise ConfigurationError(f"Graph '{name}' has no states", "states")
        if len(set(self.states)) != len(self.states):
            raise ConfigurationError(f"Graph '{name}' repeats a state", "states")
        if self.initial not in self.states:
            raise ConfigurationError(
                f"Initial state '{self.initial}' is not a state of graph '{name}'",
                "initial",
            )

        for transition in transitions:
            for endpoint in (transition.source, transition.target):
                if endpoint not in self.states:
                    raise ConfigurationError(
                        f"Transition endpoint '{endpoint}' is not a state of graph '{name}'",
                        "transitions",
                    )
            if transition.source == transition.target:
                raise ConfigurationError(
                    f"Self-loop on '{transition.source}' in graph '{name}'",
                    "transitions",
                )
            edge = (transition.source, transition.target)
            if edge in self._edges:
                raise ConfigurationError(
                    f"Duplicate transition {edge[0]} -> {edge[1]} in graph '{name}'",
                    "transitions",
                )
            self._edges[edge] = transition

    def __repr__(self) -> str:
        return f"TransitionGraph(name={self.name!r}, states={list(self.states)}, initial={self.initial!r})"

    def __contains__(self, status: Any) -> bool:
        return _value(status) in self.states

    @property
    def transitions(self) -> List[Transition]:
        return list(self._edges.values())

    @property
    def terminal_states(self) -> Tuple[str, ...]:
        """States with no outgoing transitions, in declaration order."""
        return tuple(s for s in self.states if self.is_terminal(s))

    def coerce(self, status: Any) -> str:
        """Normalize an enum member or string to a state of this graph."""
        value = _value(status)
        if not isinstance(value, str) or value not in self.states:
            raise InvalidStatusError(status, self.name)
        return value

    def get(self, source: Any, target: Any) -> Optional[Transition]:
        """Return the transition for ``source -> target``, or None if not allowed."""
        return self._edges.get((_value(source), _value(target)))

    def can_transition(self, source: Any, target: Any) -> bool:
        return self.get(source, target) is not None

    def targets_from(self, state: Any) -> Tuple[str, ...]:
        """States reachable from ``state`` in one move."""
        state = self.coerce(state)
        return tuple(t for (s, t) in self._edges if s == state)

    def is_terminal(self, state: Any) -> bool:
        state = self.coerce(state)
        return not any(s == state for (s, _) in self._edges)
