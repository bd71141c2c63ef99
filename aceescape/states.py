"""Game states, state transitions and a minimal entity registry."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Hashable, Iterator
from enum import Enum, auto
from itertools import count


class GameState(Enum):
    """Top-level screens of the game."""

    SPLASH = auto()
    MAIN_MENU = auto()
    GAME = auto()
    GAME_MENU = auto()
    GAME_OVER = auto()


Callback = Callable[[], None]


class StateMachine:
    """Holds a current state and runs enter/exit callbacks on transitions.

    A requested state is queued by :meth:`set` and takes effect on the next
    :meth:`apply`. The first :meth:`apply` also enters the initial state.
    Setting the current state again runs its exit and enter callbacks.
    """

    def __init__(self, initial: Enum) -> None:
        self._current = initial
        self._pending: Enum | None = None
        self._started = False
        self._enter: dict[Enum, list[Callback]] = defaultdict(list)
        self._exit: dict[Enum, list[Callback]] = defaultdict(list)

    @property
    def current(self) -> Enum:
        return self._current

    @property
    def pending(self) -> Enum | None:
        return self._pending

    def on_enter(self, state: Enum, callback: Callback) -> None:
        """Run ``callback`` whenever ``state`` is entered."""
        self._enter[state].append(callback)

    def on_exit(self, state: Enum, callback: Callback) -> None:
        """Run ``callback`` whenever ``state`` is left."""
        self._exit[state].append(callback)

    def set(self, state: Enum) -> None:
        """Queue a transition to ``state``."""
        self._pending = state

    def apply(self) -> bool:
        """Carry out the queued transition; return True if any state was entered."""
        changed = False
        if not self._started:
            self._started = True
            self._run(self._enter, self._current)
            changed = True
        if self._pending is not None:
            target, self._pending = self._pending, None
            self._run(self._exit, self._current)
            self._current = target
            self._run(self._enter, target)
            changed = True
        return changed

    def in_state(self, *args: Enum) -> bool:
        """Return True if the current state is one of ``args``."""
        return self._current in args

    @staticmethod
    def _run(table: dict[Enum, list[Callback]], state: Enum) -> None:
        for callback in list(table.get(state, ())):
            callback()


class World:
    """A registry of entities, each carrying a set of tags."""

    def __init__(self) -> None:
        self._ids = count()
        self._entities: dict[int, frozenset[Hashable]] = {}

    def spawn(self, *args: Hashable) -> int:
        """Create an entity tagged with ``args`` and return its id."""
        entity = next(self._ids)
        self._entities[entity] = frozenset(args)
        return entity

    def despawn(self, entity: int) -> None:
        """Remove an entity; raise KeyError if it does not exist."""
        try:
            del self._entities[entity]
        except KeyError:
            raise KeyError(f"entity {entity} does not exist") from None

    def with_tag(self, tag: Hashable) -> list[int]:
        """Return the ids of all entities carrying ``tag``, oldest first."""
        return [entity for entity, tags in self._entities.items() if tag in tags]

    def tags(self, entity: int) -> frozenset[Hashable]:
        return self._entities[entity]

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._entities))


def despawn_screen(world: World, tag: Hashable) -> int:
    """Despawn every entity carrying ``tag``; return how many were removed."""
    doomed = world.with_tag(tag)
    for entity in doomed:
        world.despawn(entity)
    return len(doomed)