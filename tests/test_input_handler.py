"""
Tests for translating pygame input into game commands.
No display is opened; only pygame's constants and event objects are used.
"""
import pygame

from roots_vs_robots.gameplay.game import Game
from roots_vs_robots.gameplay.match import GamePhase, Difficulty, MatchOutcome
from roots_vs_robots.ui.input_handler import InputHandler

from conftest import ScriptedRandom, start_game


def handler_for(game=None):
    game = game if game is not None else Game(rng=ScriptedRandom())
    return InputHandler(game), game


class TestKeys:

    def test_enter_on_menu_opens_difficulty(self):
        handler, game = handler_for()
        assert not handler.handle_key(pygame.K_RETURN)
        assert game.phase == GamePhase.DIFFICULTY_SELECT

    def test_other_keys_on_menu_do_nothing(self):
        handler, game = handler_for()
        handler.handle_key(pygame.K_1)
        handler.handle_key(pygame.K_SPACE)
        assert game.phase == GamePhase.MENU

    def test_number_keys_pick_difficulty(self):
        handler, game = handler_for()
        handler.handle_key(pygame.K_RETURN)
        handler.handle_key(pygame.K_2)
        assert game.phase == GamePhase.PLAYING
        assert game.match.difficulty == Difficulty.HARD

    def test_enter_restarts_after_game_over(self):
        handler, game = handler_for(start_game(Difficulty.HARD))
        game.match.end(MatchOutcome.LOST)
        handler.handle_key(pygame.K_RETURN)
        assert game.phase == GamePhase.PLAYING
        assert game.match.difficulty == Difficulty.HARD

    def test_enter_while_playing_does_nothing(self):
        handler, game = handler_for(start_game())
        handler.handle_key(pygame.K_RETURN)
        assert game.phase == GamePhase.PLAYING

    def test_escape_quits(self):
        handler, _ = handler_for()
        assert handler.handle_key(pygame.K_ESCAPE)


class TestMouse:

    def test_left_click_places_turret(self):
        handler, game = handler_for(start_game())
        handler.handle_click((123, 456), 1)
        turret = game.active_turrets()[0]
        assert (turret.x, turret.y) == (123.0, 456.0)

    def test_other_buttons_ignored(self):
        handler, game = handler_for(start_game())
        handler.handle_click((123, 456), 3)
        assert game.active_turrets() == []

    def test_click_outside_play_ignored(self):
        handler, game = handler_for()
        handler.handle_click((123, 456), 1)
        assert game.active_turrets() == []


class TestEvents:

    def test_quit_event(self):
        handler, _ = handler_for()
        assert handler.handle_event(pygame.event.Event(pygame.QUIT))

    def test_keydown_event(self):
        handler, game = handler_for()
        handler.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
        assert game.phase == GamePhase.DIFFICULTY_SELECT

    def test_mouse_event(self):
        handler, game = handler_for(start_game())
        quit_requested = handler.handle_event(
            pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(40, 240), button=1)
        )
        assert not quit_requested
        assert len(game.active_turrets()) == 1
