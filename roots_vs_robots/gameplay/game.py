"""
Main Game class - orchestrates all gameplay systems.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework.
"""
import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .combat import CombatSystem, CombatReport
from .entities import Turret, Robot, Projectile
from .match import MatchState, GamePhase, Difficulty, MatchOutcome
from .ports import RandomSource
from .spawning import SpawnController
from .store import EntityStore, EntityKind

logger = logging.getLogger(__name__)


@dataclass
class GameEvent:
    """An event that occurred during gameplay (for UI to react to)."""
    pass


@dataclass
class PhaseChangedEvent(GameEvent):
    """Game phase changed."""
    old_phase: GamePhase
    new_phase: GamePhase


@dataclass
class RobotSpawnedEvent(GameEvent):
    slot: int
    x: float
    y: float


@dataclass
class TurretPlacedEvent(GameEvent):
    slot: int
    x: float
    y: float


@dataclass
class ProjectileFiredEvent(GameEvent):
    turret_slot: int
    projectile_slot: int


@dataclass
class RobotHitEvent(GameEvent):
    """A projectile damaged a robot that survived."""
    robot_slot: int
    health_left: int


@dataclass
class RobotDestroyedEvent(GameEvent):
    robot_slot: int
    score: int


@dataclass
class BaseBreachedEvent(GameEvent):
    """A robot walked off the left edge."""
    robot_slot: int
    base_health: int


@dataclass
class MatchEndedEvent(GameEvent):
    outcome: MatchOutcome
    score: int


class Game:
    """
    The main game class that orchestrates all gameplay.

    This class is COMPLETELY DECOUPLED from UI.
    It exposes state as plain data and accepts commands as method calls.

    Usage:
        game = Game(rng=random.Random(42))
        game.press_start()
        game.choose_difficulty(Difficulty.EASY)
        game.place_turret(120, 250)
        while game.phase == GamePhase.PLAYING:
            events = game.update(dt)
            # UI reads game state and renders
    """

    def __init__(self, rng: Optional[RandomSource] = None, store: Optional[EntityStore] = None):
        self.rng = rng if rng is not None else random.Random()
        self.store = store if store is not None else EntityStore()
        self.match = MatchState()

        self.spawner = SpawnController(self.store, self.rng)
        self.combat = CombatSystem(self.store, self.match)

        # Event queue for UI notifications
        self._events: List[GameEvent] = []

    @property
    def phase(self) -> GamePhase:
        return self.match.phase

    # =========================================================================
    # FLOW COMMANDS
    # =========================================================================

    def press_start(self) -> bool:
        """Leave the title screen for difficulty selection."""
        return self._transition(self.match.open_difficulty_select)

    def choose_difficulty(self, difficulty: Difficulty) -> bool:
        """Pick a difficulty and start a fresh match."""
        if self.match.phase != GamePhase.DIFFICULTY_SELECT:
            return False
        self._reset_entities()
        self._transition(self.match.begin, difficulty)
        logger.info(f"Match started on {difficulty.name} ({difficulty.duration}s)")
        return True

    def restart(self) -> bool:
        """Start over after game over, keeping the last difficulty."""
        if not self.match.is_over:
            return False
        self._reset_entities()
        self._transition(self.match.restart)
        logger.info(f"Match restarted on {self.match.difficulty.name}")
        return True

    def _transition(self, command, *args) -> bool:
        old_phase = self.match.phase
        changed = command(*args)
        if changed:
            self._events.append(PhaseChangedEvent(old_phase, self.match.phase))
            logger.info(f"Phase {old_phase.name} -> {self.match.phase.name}")
        return changed

    def _reset_entities(self) -> None:
        """Callers check the phase first."""
        self.store.reset()
        self.spawner.reset()

    # =========================================================================
    # BUILDING COMMANDS
    # =========================================================================

    def place_turret(self, x: float, y: float) -> bool:
        """
        Place a turret where the player clicked.
        Returns False if not playing or no placement is available.
        """
        if not self.match.is_playing:
            return False
        handle = self.spawner.place_turret(x, y)
        if handle is None:
            logger.debug(f"Turret placement at ({x}, {y}) refused")
            return False
        self._events.append(TurretPlacedEvent(handle.index, x, y))
        logger.debug(f"Turret placed in slot {handle.index} at ({x}, {y})")
        return True

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def update(self, dt: float) -> List[GameEvent]:
        """
        Update game state by dt seconds (one frame).
        Returns list of events that occurred since the last update,
        including those raised by commands in between.
        """
        if self.match.is_playing:
            self._update_playing(dt)
        # MENU, DIFFICULTY_SELECT and GAME_OVER don't update

        events = self._events
        self._events = []
        return events

    def _update_playing(self, dt: float) -> None:
        """One frame of play. The frame runs to the end even if the clock expires."""
        if self.match.advance_clock(dt):
            self._on_match_ended()

        handle = self.spawner.maybe_spawn_robot(self.match.robot_speed)
        if handle is not None:
            robot = self.store.get(handle)
            self._events.append(RobotSpawnedEvent(handle.index, robot.x, robot.y))
            logger.debug(f"Robot spawned in slot {handle.index} at y={robot.y}")

        report = self.combat.step()
        self._record_combat(report)

    def _record_combat(self, report: CombatReport) -> None:
        for shot in report.shots:
            self._events.append(ProjectileFiredEvent(shot.turret_index, shot.projectile_index))

        for hit in report.hits:
            if hit.destroyed:
                self._events.append(RobotDestroyedEvent(hit.robot_index, self.match.score))
            else:
                robot = self.store.robots[hit.robot_index]
                self._events.append(RobotHitEvent(hit.robot_index, robot.health))

        for slot in report.breaches:
            self._events.append(BaseBreachedEvent(slot, self.match.base_health))

        if report.match_lost:
            self._on_match_ended()

    def _on_match_ended(self) -> None:
        outcome = self.match.outcome
        already_ended = any(isinstance(e, MatchEndedEvent) for e in self._events)
        if not already_ended:
            self._events.append(PhaseChangedEvent(GamePhase.PLAYING, GamePhase.GAME_OVER))
        self._events.append(MatchEndedEvent(outcome, self.match.score))
        logger.info(f"Match over: {outcome.message} (score {self.match.score})")

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    def active_turrets(self) -> List[Turret]:
        return [t for _, t in self.store.iter_active(EntityKind.TURRET)]

    def active_robots(self) -> List[Robot]:
        return [r for _, r in self.store.iter_active(EntityKind.ROBOT)]

    def active_projectiles(self) -> List[Projectile]:
        return [p for _, p in self.store.iter_active(EntityKind.PROJECTILE)]

    def get_hud(self) -> Tuple[int, int, int]:
        """Get (score, seconds_left, base_health) for the HUD."""
        return (self.match.score, self.match.seconds_left, self.match.base_health)

    def get_end_message(self) -> Optional[str]:
        """Get the game-over banner, or None while the match is undecided."""
        if self.match.outcome is None:
            return None
        return self.match.outcome.message

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def simulate(self, seconds: float, dt: float = 1 / 60) -> List[GameEvent]:
        """
        Simulate play for a number of seconds.
        Stops early if the match ends. Returns all events that occurred.
        """
        all_events = []
        elapsed = 0.0
        while elapsed < seconds and self.match.is_playing:
            all_events.extend(self.update(dt))
            elapsed += dt
        return all_events

    def step_frames(self, frames: int, dt: float = 1 / 60) -> List[GameEvent]:
        """Run a fixed number of frames (stops early if the match ends)."""
        all_events = []
        for _ in range(frames):
            if not self.match.is_playing:
                break
            all_events.extend(self.update(dt))
        return all_events
