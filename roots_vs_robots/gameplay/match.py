"""
Match state: phase machine, countdown clock, base health and score.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass, fields
from enum import Enum, auto
from typing import Optional

from .constants import (
    BASE_HEALTH, KILL_SCORE, CLOCK_STEP,
    EASY_TIME, HARD_TIME, EASY_ROBOT_SPEED, HARD_ROBOT_SPEED,
)


class GamePhase(Enum):
    """Which screen the game is on."""
    MENU = auto()
    DIFFICULTY_SELECT = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class Difficulty(Enum):
    """Match difficulty: (duration in seconds, robot speed in pixels per frame)."""
    EASY = (EASY_TIME, EASY_ROBOT_SPEED)
    HARD = (HARD_TIME, HARD_ROBOT_SPEED)

    @property
    def duration(self) -> int:
        return self.value[0]

    @property
    def robot_speed(self) -> float:
        return self.value[1]


class MatchOutcome(Enum):
    """How a match ended. The value is the game-over banner."""
    WON = "YOU WON!"
    LOST = "YOU LOST!"

    @property
    def message(self) -> str:
        return self.value


@dataclass
class MatchStats:
    """Per-match counters for the game-over screen."""
    robots_destroyed: int = 0
    shots_fired: int = 0

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, 0)


class MatchState:
    """
    The win/lose state machine around the clock and the base.

    MENU -> DIFFICULTY_SELECT -> PLAYING -> GAME_OVER -> PLAYING ...

    Restarting from GAME_OVER goes straight back to PLAYING with the
    difficulty chosen last time. Transition methods return False and do
    nothing when called from the wrong phase.
    """

    def __init__(self):
        self.phase = GamePhase.MENU
        self.difficulty = Difficulty.EASY
        self.outcome: Optional[MatchOutcome] = None

        self.score = 0
        self.base_health = BASE_HEALTH
        self.remaining_time = float(self.difficulty.duration)
        self.time_accumulator = 0.0

        self.stats = MatchStats()

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def open_difficulty_select(self) -> bool:
        """MENU -> DIFFICULTY_SELECT."""
        if self.phase != GamePhase.MENU:
            return False
        self.phase = GamePhase.DIFFICULTY_SELECT
        return True

    def begin(self, difficulty: Difficulty) -> bool:
        """DIFFICULTY_SELECT -> PLAYING with a fresh match."""
        if self.phase != GamePhase.DIFFICULTY_SELECT:
            return False
        self.difficulty = difficulty
        self._start_match()
        return True

    def restart(self) -> bool:
        """GAME_OVER -> PLAYING with a fresh match at the same difficulty."""
        if self.phase != GamePhase.GAME_OVER:
            return False
        self._start_match()
        return True

    def end(self, outcome: MatchOutcome) -> None:
        """
        Enter GAME_OVER.
        A later call in the same frame overwrites the outcome.
        """
        self.phase = GamePhase.GAME_OVER
        self.outcome = outcome

    def _start_match(self) -> None:
        self.phase = GamePhase.PLAYING
        self.outcome = None
        self.score = 0
        self.base_health = BASE_HEALTH
        self.remaining_time = float(self.difficulty.duration)
        self.time_accumulator = 0.0
        self.stats.reset()

    # =========================================================================
    # PER-FRAME UPDATES
    # =========================================================================

    def advance_clock(self, dt: float) -> bool:
        """
        Accumulate dt seconds of play.

        Remaining time drops by a whole second each time a full second has
        accumulated; the accumulator then restarts from zero (any overshoot
        is discarded). Returns True if the clock ran out and the match
        was won.
        """
        self.time_accumulator += dt
        if self.time_accumulator >= CLOCK_STEP:
            self.remaining_time -= CLOCK_STEP
            self.time_accumulator = 0.0

        if self.remaining_time <= 0:
            self.end(MatchOutcome.WON)
            return True
        return False

    def record_breach(self) -> bool:
        """
        A robot reached the base.
        Returns True if that exhausted base health and lost the match.
        """
        self.base_health -= 1
        if self.base_health <= 0:
            self.end(MatchOutcome.LOST)
            return True
        return False

    def award_kill(self) -> None:
        self.score += KILL_SCORE
        self.stats.robots_destroyed += 1

    # =========================================================================
    # QUERIES
    # =========================================================================

    @property
    def is_playing(self) -> bool:
        return self.phase == GamePhase.PLAYING

    @property
    def is_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def robot_speed(self) -> float:
        return self.difficulty.robot_speed

    @property
    def seconds_left(self) -> int:
        """Remaining time as shown on the HUD."""
        return int(self.remaining_time)

    def __repr__(self) -> str:
        return (
            f"MatchState(phase={self.phase.name}, difficulty={self.difficulty.name}, "
            f"score={self.score}, base_health={self.base_health}, "
            f"remaining_time={self.remaining_time})"
        )
