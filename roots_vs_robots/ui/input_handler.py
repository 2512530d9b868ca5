"""
Input Handler - Translates key presses and clicks to gameplay commands.
This is a THIN ADAPTER - no game logic here.
"""
import pygame

from roots_vs_robots.gameplay.game import Game
from roots_vs_robots.gameplay.match import GamePhase, Difficulty


CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)

DIFFICULTY_KEYS = {
    pygame.K_1: Difficulty.EASY,
    pygame.K_KP1: Difficulty.EASY,
    pygame.K_2: Difficulty.HARD,
    pygame.K_KP2: Difficulty.HARD,
}

PRIMARY_BUTTON = 1


class InputHandler:
    """
    Handles keyboard and mouse input and translates to game commands.

    Which keys do anything depends on the current screen:
    - Menu: ENTER opens difficulty selection
    - Difficulty select: 1 / 2 start an Easy / Hard match
    - Playing: left click places a turret
    - Game over: ENTER restarts at the same difficulty
    ESC quits from anywhere.
    """

    def __init__(self, game: Game):
        self.game = game

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Dispatch one pygame event.
        Returns True if the game should quit.
        """
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN:
            return self.handle_key(event.key)
        if event.type == pygame.MOUSEBUTTONDOWN:
            self.handle_click(event.pos, event.button)
        return False

    def handle_key(self, key: int) -> bool:
        """
        Handle a single key press.
        Returns True if the game should quit.
        """
        if key == pygame.K_ESCAPE:
            return True

        phase = self.game.phase
        if phase == GamePhase.MENU:
            if key in CONFIRM_KEYS:
                self.game.press_start()

        elif phase == GamePhase.DIFFICULTY_SELECT:
            difficulty = DIFFICULTY_KEYS.get(key)
            if difficulty is not None:
                self.game.choose_difficulty(difficulty)

        elif phase == GamePhase.GAME_OVER:
            if key in CONFIRM_KEYS:
                self.game.restart()

        return False

    def handle_click(self, pos, button: int = PRIMARY_BUTTON) -> None:
        """Place a turret at the clicked position."""
        if button != PRIMARY_BUTTON:
            return
        if self.game.phase == GamePhase.PLAYING:
            x, y = pos
            self.game.place_turret(float(x), float(y))
