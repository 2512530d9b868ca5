"""
Renderer - Reads gameplay state and draws it through a Canvas.
This is a THIN ADAPTER - no game logic here.
"""
from roots_vs_robots.gameplay.constants import (
    SCREEN_WIDTH, LANE_COUNT, LANE_HEIGHT,
)
from roots_vs_robots.gameplay.game import Game
from roots_vs_robots.gameplay.match import GamePhase
from roots_vs_robots.gameplay.ports import Canvas


# Colors
COLOR_MENU_BG = (200, 122, 255)
COLOR_DIFFICULTY_BG = (255, 109, 194)
COLOR_PLAY_BG = (245, 245, 245)
COLOR_GAME_OVER_BG = (102, 191, 255)
COLOR_TITLE = (80, 80, 80)
COLOR_LANE = (0, 228, 48)
COLOR_LANE_ALT = (0, 208, 44)
COLOR_TURRET = (0, 117, 44)
COLOR_ROBOT = (0, 121, 241)
COLOR_PROJECTILE = (230, 41, 55)
COLOR_HUD = (0, 0, 0)

HUD_X = SCREEN_WIDTH - 150

HOW_TO_PLAY = [
    "How to Play:",
    "- Click to place turrets at any position",
    "- Prevent robots from reaching the left!",
]


class Renderer:
    """
    Draws the current screen.

    This class reads from Game but never modifies it.
    """

    def __init__(self, game: Game, canvas: Canvas):
        self.game = game
        self.canvas = canvas

    def render(self):
        """Render whichever screen the game is on."""
        phase = self.game.phase
        if phase == GamePhase.MENU:
            self.render_menu()
        elif phase == GamePhase.DIFFICULTY_SELECT:
            self.render_difficulty_select()
        elif phase == GamePhase.PLAYING:
            self.render_field()
            self.render_hud()
        else:
            self.render_game_over()

    def render_menu(self):
        c = self.canvas
        c.clear(COLOR_MENU_BG)
        c.draw_text("ROOTS VS ROBOTS", 200, 150, 40, COLOR_TITLE)
        c.draw_text("Press ENTER to Start", 250, 300, 20, COLOR_TITLE)
        for i, line in enumerate(HOW_TO_PLAY):
            c.draw_text(line, 50, 400 + i * 30, 20, COLOR_TITLE)

    def render_difficulty_select(self):
        c = self.canvas
        c.clear(COLOR_DIFFICULTY_BG)
        c.draw_text("Select Difficulty:", 250, 150, 40, COLOR_TITLE)
        c.draw_text("Press 1 for Easy", 250, 200, 20, COLOR_TITLE)
        c.draw_text("Press 2 for Hard", 250, 230, 20, COLOR_TITLE)

    def render_field(self):
        """Render lanes and every active entity."""
        c = self.canvas
        c.clear(COLOR_PLAY_BG)

        for lane in range(LANE_COUNT):
            color = COLOR_LANE if lane % 2 == 0 else COLOR_LANE_ALT
            c.fill_rect(0, lane * LANE_HEIGHT, SCREEN_WIDTH, LANE_HEIGHT, color)

        for turret in self.game.active_turrets():
            c.fill_circle(turret.x, turret.y, turret.radius, COLOR_TURRET)

        for robot in self.game.active_robots():
            c.fill_rect(robot.x, robot.y, robot.size, robot.size, COLOR_ROBOT)

        for projectile in self.game.active_projectiles():
            c.fill_circle(projectile.x, projectile.y, projectile.radius, COLOR_PROJECTILE)

    def render_hud(self):
        score, seconds_left, health = self.game.get_hud()
        self.canvas.draw_text(f"Score: {score}", HUD_X, 20, 20, COLOR_HUD)
        self.canvas.draw_text(f"Time: {seconds_left}", HUD_X, 50, 20, COLOR_HUD)
        self.canvas.draw_text(f"Health: {health}", HUD_X, 80, 20, COLOR_HUD)

    def render_game_over(self):
        c = self.canvas
        stats = self.game.match.stats
        c.clear(COLOR_GAME_OVER_BG)
        c.draw_text(self.game.get_end_message() or "", 250, 200, 40, COLOR_TITLE)
        c.draw_text(f"Final score: {self.game.match.score}", 250, 250, 20, COLOR_TITLE)
        c.draw_text("Press ENTER to Restart", 250, 300, 20, COLOR_TITLE)
        c.draw_text(
            f"Robots destroyed: {stats.robots_destroyed}   Shots fired: {stats.shots_fired}",
            250, 340, 20, COLOR_TITLE
        )
