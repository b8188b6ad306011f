# Nonogram Grid Style Definitions

# Board
COLOR_BOARD = (255, 255, 255)
COLOR_GRID_LINES = (20, 26, 158)
GRID_LINE_THICKNESS = 1
GRID_LINE_THICKNESS_MAJOR = 3  # every 5th line

# Cell marks
COLOR_FILLED = (25, 25, 25)
COLOR_CROSS = (120, 120, 120)

# Text
COLOR_TEXT_CLUE = (255, 255, 255)
COLOR_TEXT_TITLE = (255, 255, 255)
COLOR_TEXT_SOLVED = (120, 230, 120)

# Application
COLOR_BG = (20, 26, 82)
