"""
constants.py: Centralized configuration for the game world, physics and display.
"""

# -------- Game World Config --------
SCREEN_WIDTH = 500
SCREEN_HEIGHT = 500
BIRD_SIZE = 20
BIRD_CENTER_X = SCREEN_WIDTH / 2    # Fixed bird X position (horizontal center)
RESPAWN_Y = SCREEN_HEIGHT / 2
FLOOR_Y = SCREEN_HEIGHT - BIRD_SIZE  # Lowest legal top edge of the bird

# -------- Physics Config (Pixels / Frame) --------
# One simulation step per frame, no delta time
GRAVITY = 0.5                   # Velocity gained every frame
JUMP_STRENGTH = -6.0            # Velocity set (not added) by a jump

# -------- Pipe Config --------
PIPE_WIDTH = 50
PIPE_GAP = 150
PIPE_SPEED = 2                  # Horizontal speed (pixels/frame)
PIPE_SPACING = 250              # Horizontal distance between spawns

# -------- Display Config --------
FPS = 60
WINDOW_TITLE = "Python Flappy Bird Clone"

COLOR_BACKGROUND = (120, 200, 240)  # Sky blue
COLOR_BIRD = (255, 255, 0)          # Yellow
COLOR_PIPE = (40, 140, 40)          # Green
COLOR_TEXT = (255, 255, 255)
FONT_SIZE = 20

# -------- Text Config --------
TEXT_START_MESSAGE = "Press SPACE to start and for jump"
TEXT_GAME_OVER = "Game Over! Press R to restart"
TEXT_SCORE_PREFIX = "Score: "

SCORE_POS = (10, 10)
START_MESSAGE_POS = (SCREEN_WIDTH / 2 - 110, SCREEN_HEIGHT / 2 - 30)
GAME_OVER_MESSAGE_POS = (SCREEN_WIDTH / 2 - 100, SCREEN_HEIGHT / 2)
