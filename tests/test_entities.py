"""
Tests for turret, robot and projectile records.
"""
from roots_vs_robots.gameplay.constants import (
    ROBOT_HEALTH, TURRET_FIRE_INTERVAL, MUZZLE_OFFSET,
)
from roots_vs_robots.gameplay.entities import Turret, Robot, Projectile


class TestTurret:

    def test_place_arms_timer(self):
        turret = Turret()
        turret.place(150.0, 275.0)
        assert turret.active
        assert (turret.x, turret.y) == (150.0, 275.0)
        assert turret.shoot_timer == TURRET_FIRE_INTERVAL

    def test_tick_fires_on_expiry(self):
        """The timer expires on the 60th tick and re-arms."""
        turret = Turret()
        turret.place(0.0, 0.0)
        fired = [turret.tick() for _ in range(TURRET_FIRE_INTERVAL)]
        assert fired[-1]
        assert not any(fired[:-1])
        assert turret.shoot_timer == TURRET_FIRE_INTERVAL

    def test_muzzle(self):
        turret = Turret()
        turret.place(100.0, 250.0)
        assert turret.muzzle == (100.0 + MUZZLE_OFFSET, 250.0)


class TestRobot:

    def test_spawn(self):
        robot = Robot()
        robot.spawn(800.0, 150.0, 3.0)
        assert robot.active
        assert robot.health == ROBOT_HEALTH
        assert robot.speed == 3.0

    def test_advance_moves_left(self):
        robot = Robot()
        robot.spawn(800.0, 50.0, 1.0)
        robot.advance()
        assert robot.x == 799.0

    def test_breached_only_below_zero(self):
        robot = Robot()
        robot.spawn(0.0, 50.0, 1.0)
        assert not robot.breached
        robot.advance()
        assert robot.breached

    def test_take_hit(self):
        """Three hits destroy a fresh robot."""
        robot = Robot()
        robot.spawn(400.0, 50.0, 1.0)
        assert not robot.take_hit()
        assert not robot.take_hit()
        assert robot.take_hit()
        assert robot.health == 0

    def test_rect(self):
        robot = Robot()
        robot.spawn(400.0, 50.0, 1.0)
        assert robot.rect == (400.0, 50.0, 40, 40)


class TestProjectile:

    def test_launch(self):
        projectile = Projectile()
        projectile.launch(120.0, 250.0, 2)
        assert projectile.active
        assert (projectile.x, projectile.y, projectile.lane) == (120.0, 250.0, 2)
