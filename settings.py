"""
settings.py - Game constants for Battle Arena.

All configurable values live here so they're easy to tweak
and easy to reference from any module.
"""

# ── Screen ────────────────────────────────────────────────
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 720
FPS = 60
TITLE = "Battle Arena"
BG_COLOR = (4, 6, 19)

# Radial gradient (centre → edge) drawn behind the arena
ARENA_GRADIENT_INNER = (15, 25, 49)
ARENA_GRADIENT_OUTER = (4, 6, 19)

# ── Arena ─────────────────────────────────────────────────
SPAWN_MARGIN = 50              # enemies spawn this far outside an edge
PROJECTILE_CULL_MARGIN = 50    # projectiles die this far outside the arena
MOBILE_CONTROLS_MAX_WIDTH = 768

# ── Colors (R, G, B) ─────────────────────────────────────
WHITE = (255, 255, 255)
GRAY = (60, 60, 60)
GREEN = (0, 230, 118)          # player fallback circle
RED = (229, 57, 53)            # enemy fallback circle
YELLOW = (255, 202, 40)        # player projectile
SOFT_RED = (239, 83, 80)       # enemy projectile
OUTLINE_BLUE = (66, 165, 245)  # ring around the player
GOLD_COLOR = (255, 213, 79)

# ── Player settings ───────────────────────────────────────
PLAYER_RADIUS = 32
PLAYER_START_GOLD = 100
PLAYER_MOVE_SCALE = 100        # speed stat → pixels/sec
PLAYER_ATTACK_COOLDOWN = 0.5   # seconds between shots

# ── Enemy settings ────────────────────────────────────────
ENEMY_COUNT = 1
ENEMY_RADIUS = 30
ENEMY_SPEED_FACTOR = 0.4       # fraction of archetype speed
ENEMY_DAMAGE_FACTOR = 0.2      # fraction of archetype attack damage
ENEMY_MOVE_SCALE = 80          # speed stat → pixels/sec
ENEMY_ENGAGE_RANGE = 400       # pixels
ENEMY_ATTACK_COOLDOWN = 1.2    # seconds between shots

# ── Projectile settings ───────────────────────────────────
PROJECTILE_SPEED = 350.0       # pixels/sec
PROJECTILE_LIFETIME = 2.0      # seconds before self-destruct
PROJECTILE_DRAW_RADIUS = 5     # visual only; collisions ignore it
PLAYER_AIM_FALLBACK_DY = -100  # aim straight up with no pointer

# ── Economy ───────────────────────────────────────────────
GOLD_PER_SECOND = 10.0
KILL_BOUNTY = 50

# ── Shop ──────────────────────────────────────────────────
ITEM_ATK_COST = 100
ITEM_ATK_BONUS = 8
ITEM_DEF_COST = 120
ITEM_DEF_BONUS = 50
ITEM_SPD_COST = 80
ITEM_SPD_BONUS = 0.5

# ── HUD display ───────────────────────────────────────────
HEALTHBAR_WIDTH = 220
HEALTHBAR_HEIGHT = 18
HEALTHBAR_X = 20
HEALTHBAR_Y = 20
HUD_FILL_COLOR = (102, 187, 106)

# ── Touch controls ────────────────────────────────────────
TOUCH_BUTTON_SIZE = 56
TOUCH_BUTTON_PAD = 10
TOUCH_BUTTON_COLOR = (255, 255, 255)
TOUCH_BUTTON_ALPHA = 60

# ── Assets ────────────────────────────────────────────────
ASSETS_DIR = "assets"

# ── Font ──────────────────────────────────────────────────
FONT_SIZE = 22
SMALL_FONT_SIZE = 18

# ── Match statistics ──────────────────────────────────────
STATS_SNAPSHOT_INTERVAL = 5.0  # seconds between health snapshots
STATS_CHART_FILE = "health_trend.png"

# ── Headless simulation ───────────────────────────────────
SIM_STEP = 1.0 / 60.0
SIM_MAX_SECONDS = 180.0
