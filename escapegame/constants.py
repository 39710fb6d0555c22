"""Game-wide constants for EscapE.

Grid and tile dimensions, colors, font sizes, tuning knobs for monsters,
pickups and leveling, asset paths, and logging configuration.
"""
import os

GRID_WIDTH, GRID_HEIGHT = 25, 18   # tiles
TILE_SIZE = 32                     # pixels per tile
HUD_HEIGHT = 40                    # strip under the map
WIDTH, HEIGHT = GRID_WIDTH * TILE_SIZE, GRID_HEIGHT * TILE_SIZE + HUD_HEIGHT
FPS = 30
BG_COLOR = (25, 28, 33)
TEXT_COLOR = (235, 235, 235)
HUD_PADDING = 8
HEALTH_BAR_HEIGHT = 3
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 14
FONT_SIZE_MEDIUM = 16
FONT_SIZE_LARGE = 22

# Fallback tile colors when sprites are missing
TILE_COLORS = {
    "CAR": (200, 40, 40),
    "DIRT": (120, 85, 50),
    "NEST": (105, 75, 45),
    "GRASS": (60, 140, 60),
    "ROAD": (90, 90, 90),
    "WALL": (40, 40, 48),
}
PLAYER_COLOR = (80, 160, 255)
SEEKER_COLOR = (230, 60, 60)
CHASER_COLOR = (240, 150, 30)
FUEL_COLOR = (255, 220, 60)
POTION_COLOR = (220, 70, 200)
GHOST_COLOR = (220, 220, 255)

# Level generation
CAR_MIN_ROW = 9                    # car is placed in the lower half
MAX_WALLS = 100                    # wall draws beyond this use the fallback tile
MAX_ROADS = 1

# Player
PLAYER_MAX_HEALTH = 100
LEVEL_ARRIVAL_HEAL = 30            # not capped at max health
POTION_HEAL = 20                   # capped at max health

# Monsters
MAX_SEEKERS = 5
MAX_CHASERS = 50
SEEKER_DAMAGE = 10
CHASER_DAMAGE = 20
SEEKER_MOVE_EVERY = 5              # turns
CHASER_MOVE_EVERY = 2              # turns
GHOST_EVERY_LEVELS = 3             # ghost power-up appears when cleared % 3 == 0

# Log file settings
LOG_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "log.md")
ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")
LEVEL_MUSIC_PATHS = [
    os.path.join(ASSETS_DIR, "level_music.wav"),
    os.path.join(ASSETS_DIR, "desi_journey.wav"),
]
HIT_SFX_PATH = os.path.join(ASSETS_DIR, "hit.wav")
TILE_SPRITE_DIR = os.path.join(ASSETS_DIR, "tiles")
