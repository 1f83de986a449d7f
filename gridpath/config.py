# Search settings
# Cost of one orthogonal step between adjacent cells
STEP_COST = 1

# Input settings
# Grids smaller than this on either axis are rejected by the console layer
MIN_GRID_SIZE = 2
# Number of random wall rectangles when none is requested
DEFAULT_WALL_COUNT = 4

# Process exit codes
EXIT_OK = 0
# Width or height below MIN_GRID_SIZE
EXIT_GRID_TOO_SMALL = 1
# Start and goal coordinates are the same cell
EXIT_SAME_ENDPOINTS = 2

# Text rendering
# Field width of every column in the console view
COLUMN_WIDTH = 4
FREE_GLYPH = "[ ]"
WALL_GLYPH = "[X]"
TRACK_GLYPH = "[@]"

# Viewer window settings
# Size of a single grid cell in pixels
CELL_SIZE = 24
FPS = 30
WINDOW_CAPTION = "A* Grid Search"

# Colors
FREE_COLOR = (235, 235, 235)
WALL_COLOR = (40, 40, 40)
PATH_COLOR = (230, 180, 40)
START_COLOR = (60, 170, 75)
GOAL_COLOR = (200, 60, 60)
GRID_LINE_COLOR = (150, 150, 150)
