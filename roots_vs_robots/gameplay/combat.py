"""
Motion, auto-fire and collision resolution.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from .constants import SCREEN_WIDTH, PROJECTILE_SPEED
from .geometry import circle_rect_overlap
from .match import MatchState
from .store import EntityStore, EntityKind, SlotHandle


@dataclass
class Shot:
    """A turret fired and its projectile got a slot."""
    turret_index: int
    projectile_index: int


@dataclass
class Hit:
    """A projectile struck a robot."""
    projectile_index: int
    robot_index: int
    destroyed: bool


@dataclass
class CombatReport:
    """Everything that happened during one combat step."""
    breaches: List[int] = field(default_factory=list)  # robot slot indices
    shots: List[Shot] = field(default_factory=list)
    hits: List[Hit] = field(default_factory=list)
    expired_projectiles: List[int] = field(default_factory=list)
    match_lost: bool = False


class CombatSystem:
    """
    Advances every entity by one frame.

    Order within a frame:
    1. robots walk left; a robot past the left edge costs base health
    2. turrets count down and fire when their timer expires
    3. projectiles fly right and expire past the right edge
    4. projectiles that overlap a robot damage it

    Turrets fire on their timer whether or not anything is in their lane.
    """

    def __init__(self, store: EntityStore, match: MatchState):
        self.store = store
        self.match = match

    def step(self) -> CombatReport:
        """Run one frame of motion and combat."""
        report = CombatReport()
        self.move_robots(report)
        self.update_turrets(report)
        self.move_projectiles(report)
        self.resolve_collisions(report)
        return report

    def move_robots(self, report: CombatReport) -> None:
        for index, robot in self.store.robots.iter_active():
            robot.advance()
            if robot.breached:
                self.store.robots.release(index)
                report.breaches.append(index)
                if self.match.record_breach():
                    report.match_lost = True

    def update_turrets(self, report: CombatReport) -> None:
        for index, turret in self.store.turrets.iter_active():
            if turret.tick():
                projectile = self.fire(index)
                if projectile is not None:
                    report.shots.append(Shot(index, projectile.index))

    def fire(self, turret_index: int) -> Optional[SlotHandle]:
        """
        Launch a projectile from a turret's muzzle.
        Returns None (and the shot is lost) if every projectile slot is busy.
        """
        handle = self.store.allocate(EntityKind.PROJECTILE)
        if handle is None:
            return None
        x, y = self.store.turrets[turret_index].muzzle
        self.store.get(handle).launch(x, y, turret_index)
        self.match.stats.shots_fired += 1
        return handle

    def move_projectiles(self, report: CombatReport) -> None:
        for index, projectile in self.store.projectiles.iter_active():
            projectile.x += PROJECTILE_SPEED
            if projectile.x > SCREEN_WIDTH:
                self.store.projectiles.release(index)
                report.expired_projectiles.append(index)

    def resolve_collisions(self, report: CombatReport) -> None:
        """
        Each projectile damages at most one robot: the lowest-index
        active robot it overlaps.
        """
        robots = self.store.robots
        for p_index, projectile in self.store.projectiles.iter_active():
            for r_index, robot in robots.iter_active():
                if not circle_rect_overlap(
                    projectile.x, projectile.y, projectile.radius, *robot.rect
                ):
                    continue

                self.store.projectiles.release(p_index)
                destroyed = robot.take_hit()
                if destroyed:
                    robots.release(r_index)
                    self.match.award_kill()
                report.hits.append(Hit(p_index, r_index, destroyed))
                break
