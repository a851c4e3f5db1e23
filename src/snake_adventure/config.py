from dataclasses import dataclass

# ----- Window & grid -----
WIDTH, HEIGHT = 400, 400
CELL_SIZE = 20
GRID_W, GRID_H = WIDTH // CELL_SIZE, HEIGHT // CELL_SIZE
HUD_HEIGHT = 56

# ----- Colors -----
BG        = (26, 26, 26)
GRID_LINE = (51, 51, 51)
HEAD      = (74, 222, 128)
BODY      = (34, 197, 94)
APPLE     = (239, 68, 68)
TEXT      = (220, 220, 230)
MUTED     = (150, 160, 175)
ACCENT    = (74, 222, 128)
PAUSED    = (250, 204, 21)
PANEL     = (31, 41, 55)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Rules -----
MAX_APPLES = 10
SCORE_PER_APPLE = 10
INITIAL_SNAKE = ((10, 10),)
INITIAL_DIRECTION = RIGHT
INITIAL_APPLE = (15, 15)

# ----- Tunables -----
@dataclass
class Config:
    seed: int | None = None
    tick_ms: int = 150            # simulation step interval
    fps: int = 60                 # render rate, decoupled from tick_ms
    controls_hint_ms: int = 5000  # how long the controls guide stays up

CFG = Config()
