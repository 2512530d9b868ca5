"""
Fixed-capacity entity storage.
NO UI DEPENDENCIES.

Every entity kind has a fixed array of slots. Allocation is a linear scan
for the first inactive slot, so allocation order is deterministic:
the lowest free index always wins. A full array is not an error; the
caller simply gets None back and drops whatever it wanted to create.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Generic, Iterator, List, Optional, Tuple, TypeVar, Union

from .constants import (
    LANE_COUNT, MAX_ROBOTS, MAX_PROJECTILES, TURRET_PARK_X, lane_y,
)
from .entities import Turret, Robot, Projectile

T = TypeVar('T', Turret, Robot, Projectile)
Entity = Union[Turret, Robot, Projectile]


class EntityKind(Enum):
    """The three kinds of slot the store manages."""
    TURRET = auto()
    ROBOT = auto()
    PROJECTILE = auto()


@dataclass(frozen=True)
class SlotHandle:
    """Identifies one slot: which array, and which index in it."""
    kind: EntityKind
    index: int


class SlotArray(Generic[T]):
    """A fixed number of reusable slots of one entity type."""

    def __init__(self, capacity: int, factory: Callable[[], T]):
        self._slots: List[T] = [factory() for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def allocate(self) -> Optional[int]:
        """
        Claim the first inactive slot.
        Returns its index, or None if every slot is active.
        """
        for index, entity in enumerate(self._slots):
            if not entity.active:
                entity.active = True
                return index
        return None

    def release(self, index: int) -> None:
        """Mark a slot inactive. Takes effect immediately."""
        self._slots[index].active = False

    def iter_active(self) -> Iterator[Tuple[int, T]]:
        """Yield (index, entity) for every active slot in index order."""
        for index, entity in enumerate(self._slots):
            if entity.active:
                yield index, entity

    def count_active(self) -> int:
        return sum(1 for entity in self._slots if entity.active)

    def clear(self) -> None:
        for entity in self._slots:
            entity.active = False

    def __getitem__(self, index: int) -> T:
        return self._slots[index]

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[T]:
        return iter(self._slots)


class EntityStore:
    """
    Owns the slot arrays for turrets, robots and projectiles.

    Turret slots double as lane slots: slot i belongs to lane i.

    Usage:
        store = EntityStore()
        handle = store.allocate(EntityKind.ROBOT)
        if handle is not None:
            store.get(handle).spawn(800, 50, 1.0)
        ...
        store.release(handle)
    """

    def __init__(
        self,
        turret_slots: int = LANE_COUNT,
        robot_slots: int = MAX_ROBOTS,
        projectile_slots: int = MAX_PROJECTILES,
    ):
        self.turrets: SlotArray[Turret] = SlotArray(turret_slots, Turret)
        self.robots: SlotArray[Robot] = SlotArray(robot_slots, Robot)
        self.projectiles: SlotArray[Projectile] = SlotArray(projectile_slots, Projectile)
        self._park_turrets()

    def _array(self, kind: EntityKind) -> SlotArray:
        if kind == EntityKind.TURRET:
            return self.turrets
        if kind == EntityKind.ROBOT:
            return self.robots
        if kind == EntityKind.PROJECTILE:
            return self.projectiles
        raise ValueError(f"Unknown entity kind: {kind!r}")

    def allocate(self, kind: EntityKind) -> Optional[SlotHandle]:
        """
        Claim the first free slot of the given kind.
        Returns a handle, or None when the array is saturated.
        """
        index = self._array(kind).allocate()
        if index is None:
            return None
        return SlotHandle(kind, index)

    def release(self, handle: SlotHandle) -> None:
        """Free a slot immediately. No compaction, no deferred cleanup."""
        self._array(handle.kind).release(handle.index)

    def get(self, handle: SlotHandle) -> Entity:
        """Get the entity record behind a handle."""
        return self._array(handle.kind)[handle.index]

    def iter_active(self, kind: EntityKind) -> Iterator[Tuple[int, Entity]]:
        return self._array(kind).iter_active()

    def count_active(self, kind: EntityKind) -> int:
        return self._array(kind).count_active()

    def capacity(self, kind: EntityKind) -> int:
        return self._array(kind).capacity

    def reset(self) -> None:
        """Deactivate every slot and park the turrets off-screen."""
        self.turrets.clear()
        self.robots.clear()
        self.projectiles.clear()
        self._park_turrets()

    def _park_turrets(self) -> None:
        for lane, turret in enumerate(self.turrets):
            turret.x = float(TURRET_PARK_X)
            turret.y = lane_y(lane)
            turret.shoot_timer = 0

    def __repr__(self) -> str:
        return (
            f"EntityStore(turrets={self.turrets.count_active()}/{self.turrets.capacity}, "
            f"robots={self.robots.count_active()}/{self.robots.capacity}, "
            f"projectiles={self.projectiles.count_active()}/{self.projectiles.capacity})"
        )
