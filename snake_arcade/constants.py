"""Game constants."""

WINDOW_W, WINDOW_H = 1280, 720
CELL_SIZE = 20
GRID_W, GRID_H = WINDOW_W // CELL_SIZE, WINDOW_H // CELL_SIZE

REFRESH_RATE_MS = 150
SCORE_PER_FOOD = 10
FOOD_SPAWN_ATTEMPTS = 500

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8765

DIRECTIONS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}
OPPOSITES = {"up": "down", "down": "up", "left": "right", "right": "left"}

# Browser KeyboardEvent.key values
KEY_BINDINGS = {
    "ArrowUp": "up",
    "ArrowDown": "down",
    "ArrowLeft": "left",
    "ArrowRight": "right",
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "W": "up",
    "S": "down",
    "A": "left",
    "D": "right",
    "r": "restart",
    "R": "restart",
    "Escape": "quit",
}
