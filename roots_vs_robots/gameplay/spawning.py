"""
Robot spawning and turret placement.
NO UI DEPENDENCIES.
"""
from typing import Optional

from .constants import (
    SCREEN_WIDTH, LANE_COUNT, MAX_TURRETS, SPAWN_ROLL_MAX, SPAWN_CHANCE, lane_y,
)
from .ports import RandomSource
from .store import EntityStore, EntityKind, SlotHandle


class SpawnController:
    """
    Creates robots and turrets, subject to slot capacity.

    Robots appear at random: one roll per frame, independent of every
    other frame. Turrets appear where the player clicks, up to
    MAX_TURRETS per match.
    """

    def __init__(self, store: EntityStore, rng: RandomSource):
        self.store = store
        self.rng = rng
        self.turrets_placed = 0

    def reset(self) -> None:
        self.turrets_placed = 0

    def maybe_spawn_robot(self, speed: float) -> Optional[SlotHandle]:
        """
        Roll for a spawn this frame.

        On a hit, claims a robot slot and drops the robot at the right edge
        of a random lane. Returns the new robot's handle, or None if the
        roll missed or every robot slot is busy.
        """
        if self.rng.randint(0, SPAWN_ROLL_MAX) >= SPAWN_CHANCE:
            return None
        return self.spawn_robot(speed)

    def spawn_robot(self, speed: float, lane: Optional[int] = None) -> Optional[SlotHandle]:
        """Spawn a robot unconditionally (lane picked at random if not given)."""
        handle = self.store.allocate(EntityKind.ROBOT)
        if handle is None:
            return None
        if lane is None:
            lane = self.rng.randint(0, LANE_COUNT - 1)
        self.store.get(handle).spawn(float(SCREEN_WIDTH), lane_y(lane), speed)
        return handle

    def place_turret(self, x: float, y: float) -> Optional[SlotHandle]:
        """
        Place a turret at exactly (x, y).

        The turret takes the first free lane slot, whatever lane (x, y)
        happens to fall in. Returns None once MAX_TURRETS have been placed
        this match or every lane slot is taken.
        """
        if self.turrets_placed >= MAX_TURRETS:
            return None
        handle = self.store.allocate(EntityKind.TURRET)
        if handle is None:
            return None
        self.store.get(handle).place(x, y)
        self.turrets_placed += 1
        return handle
