"""Window, timing, colour and grid constants shared by the game."""

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
WINDOW_TITLE = "SnakeGame"

FPS = 60
FRAME_DELAY = 1000 // 60

# Milliseconds between two steps of the snake.
MOVE_DELAY = 70

TEXT_COLOR = (255, 255, 255)
HIGHLIGHT_COLOR = (255, 0, 0)

GRID = 20
HEAD_SIZE = 20
BODY_SIZE = 20
TAIL_SIZE = 20
APPLE_SIZE = 20

HIGHSCORE_FILE = "highscore.txt"