"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# FIELD
# =============================================================================
SCREEN_WIDTH = 800    # pixels
SCREEN_HEIGHT = 600   # pixels
LANE_COUNT = 5
LANE_HEIGHT = 100     # pixels per lane band
LANE_CENTER_OFFSET = 50

# =============================================================================
# CAPACITIES
# =============================================================================
MAX_ROBOTS = 10
MAX_PROJECTILES = 50
MAX_TURRETS = 7       # placements per match, independent of free lane slots

# =============================================================================
# ROBOTS
# =============================================================================
ROBOT_HEALTH = 3
ROBOT_SIZE = 40       # square side, position is the top-left corner
SPAWN_ROLL_MAX = 100  # inclusive upper bound of the per-frame spawn roll
SPAWN_CHANCE = 2      # roll must be below this to spawn

# =============================================================================
# TURRETS AND PROJECTILES (timings in frames)
# =============================================================================
TURRET_RADIUS = 20
TURRET_FIRE_INTERVAL = 60
TURRET_PARK_X = -100  # off-screen x for unplaced turret slots
MUZZLE_OFFSET = 20    # projectile spawns this far right of the turret
PROJECTILE_RADIUS = 5
PROJECTILE_SPEED = 5  # pixels per frame

# =============================================================================
# MATCH (timings in seconds)
# =============================================================================
BASE_HEALTH = 5
KILL_SCORE = 10
CLOCK_STEP = 1.0      # remaining time ticks down once per accumulated second

EASY_TIME = 60
HARD_TIME = 30
EASY_ROBOT_SPEED = 1.0  # pixels per frame
HARD_ROBOT_SPEED = 3.0


def lane_y(lane: int) -> float:
    """Vertical centre of a lane."""
    return float(lane * LANE_HEIGHT + LANE_CENTER_OFFSET)
