"""Game-wide constants: window, grid and physics settings."""

TITLE = "Mario Bros"
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FRAMERATE = 60

CELL_SIZE = 30
CELL_WIDTH = SCREEN_WIDTH // CELL_SIZE
CELL_HEIGHT = SCREEN_HEIGHT // CELL_SIZE

GRAVITY = 981.0

BACKGROUND_COLOR = (0, 219, 255)

MAP_FILES = (
    "images/Map/TestMap.png",
    "images/Map/Level1.png",
)