"""
Tuning constants for the bullet hell simulation.

Positions are in play-area pixels with the origin at the top-left corner,
times are in seconds and speeds in pixels per second.
"""

# Play area
PLAY_AREA_WIDTH = 400
PLAY_AREA_HEIGHT = 500

# Entity sizes (side of the square sprite; hitboxes are inscribed circles)
PLAYER_SIZE = 32
ENEMY_SIZE = 64
PLAYER_BULLET_SIZE = 12
ENEMY_BULLET_SIZE = 18

# Player
PLAYER_SPEED_NORMAL = 300.0
PLAYER_SPEED_FOCUS = 150.0
PLAYER_START = (200.0, 400.0)
PLAYER_START_LIVES = 5
PLAYER_INVULN_TIME = 3.0
PLAYER_SHOOT_INTERVAL = 0.2
PLAYER_SHOOT_COUNT = 5
PLAYER_SHOOT_SPEED = 400.0
SCORE_PER_HIT = 100

# Enemy
ENEMY_HEALTH_BASE = 10
ENEMY_HEALTH_PER_LEVEL = 50
ENEMY_START = (200.0, 25.0)
ENEMY_MIN_Y = 50.0
ENEMY_MAX_Y = 200.0
ENEMY_RETARGET_TIME = 5.0
ENEMY_DEFAULT_THINK_INTERVAL = 1.0

# attack id -> (duration, think interval, movement speed)
ATTACK_TABLE = {
    0: (10.0, 2.0, 50.0),
    1: (6.0, 0.6, 300.0),
    2: (8.0, 1.5, 150.0),
    3: (6.0, 2.0, 200.0),
}

# Pattern 0: sweeping walls
WALL_SPEED = 100.0
WALL_ACCEL = 20.0
WALL_JITTER = 16.0
WALL_EDGE_INSET = 18.0

# Pattern 1: aimed fan
FAN_SPEED = 150.0
FAN_AIM_WEIGHT = 6.0

# Pattern 2: radial burst
BURST_SPEED = 200.0
BURST_ACCEL = 500.0

# Pattern 3: chaos aim
CHAOS_SPEED = 200.0
CHAOS_MAX_ACCEL = 600.0

# Style bonuses
ENEMY_BULLET_SHRINK_SCALE = 0.75
ENEMY_GROW_SCALE = 1.5
PLAYER_BULLET_GROW_SCALE = 2.0
PLAY_AREA_GROW_SCALE = 1.5
