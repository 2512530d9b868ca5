"""
Slot records for turrets, robots and projectiles.
NO UI DEPENDENCIES.

Each record lives in a fixed slot of the EntityStore for the whole session.
Spawning or placing an entity re-arms an inactive record in place; it is
never reallocated.
"""
from dataclasses import dataclass

from .constants import (
    ROBOT_HEALTH, ROBOT_SIZE, PROJECTILE_RADIUS, TURRET_FIRE_INTERVAL,
    TURRET_RADIUS, MUZZLE_OFFSET,
)


@dataclass
class Turret:
    """
    A defensive turret. One slot per lane.

    The position is wherever the player clicked; it is not snapped to
    the lane row the slot belongs to.
    """
    x: float = 0.0
    y: float = 0.0
    active: bool = False
    shoot_timer: int = 0

    radius = TURRET_RADIUS

    def place(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self.active = True
        self.shoot_timer = TURRET_FIRE_INTERVAL

    def tick(self) -> bool:
        """
        Count down one frame.
        Returns True when the timer expired (and has been re-armed).
        """
        self.shoot_timer -= 1
        if self.shoot_timer <= 0:
            self.shoot_timer = TURRET_FIRE_INTERVAL
            return True
        return False

    @property
    def muzzle(self) -> tuple:
        """Where this turret's projectiles appear."""
        return (self.x + MUZZLE_OFFSET, self.y)


@dataclass
class Robot:
    """An enemy walking right to left along a lane."""
    x: float = 0.0
    y: float = 0.0
    active: bool = False
    health: int = 0
    speed: float = 0.0

    size = ROBOT_SIZE

    def spawn(self, x: float, y: float, speed: float) -> None:
        self.x = x
        self.y = y
        self.active = True
        self.health = ROBOT_HEALTH
        self.speed = speed

    def advance(self) -> None:
        self.x -= self.speed

    def take_hit(self) -> bool:
        """Lose one health. Returns True if this destroyed the robot."""
        self.health -= 1
        return self.health <= 0

    @property
    def breached(self) -> bool:
        """True once the robot has crossed the left edge."""
        return self.x < 0

    @property
    def rect(self) -> tuple:
        """(x, y, width, height) of the robot's body."""
        return (self.x, self.y, self.size, self.size)


@dataclass
class Projectile:
    """A shot travelling left to right."""
    x: float = 0.0
    y: float = 0.0
    active: bool = False
    lane: int = 0

    radius = PROJECTILE_RADIUS

    def launch(self, x: float, y: float, lane: int) -> None:
        self.x = x
        self.y = y
        self.active = True
        self.lane = lane
