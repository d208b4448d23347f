"""
Constants for the game.
"""

from __future__ import annotations

GAME_WIDTH = 80
GAME_HEIGHT = 24

PLAYER_SHIP_ART = "║_||_║"
PLAYER_WIDTH = 6
# Rows between the ship and the bottom of the screen
PLAYER_Y_OFFSET = 2

ALIEN_WIDTH = 2
ALIEN_HEIGHT = 2

# [top-left, top-right, bottom-left, bottom-right]
ALIEN_DESIGNS: tuple[tuple[str, str, str, str], ...] = (
    ("▓", "▓", "░", "░"),
    ("█", "█", "▀", "▀"),
    ("▄", "▄", "▄", "▄"),
    ("Ω", "Ω", "─", "─"),
)

BLAST_CHAR = "*"

# Cells replaced by BLAST_CHAR for explosion stages 1..4
EXPLOSION_STAGES: tuple[tuple[int, int, int, int], ...] = (
    (1, 0, 0, 0),
    (1, 1, 0, 0),
    (1, 1, 1, 0),
    (1, 1, 1, 1),
)
EXPLOSION_DONE = 5

ALIEN_GRID_COLUMNS = 10
ALIEN_GRID_ROWS = 3
ALIEN_GRID_X = 10
ALIEN_GRID_Y = 3
ALIEN_SPACING_X = 6
ALIEN_SPACING_Y = 3

# Aliens move down every N frames
ALIEN_MOVE_DOWN_FREQ = 10

INITIAL_SCORE = 100
ACTION_COST = 1
DESTRUCTION_BONUS = 250
SCORE_MIN = -(2**31)
SCORE_MAX = 2**31 - 1

FPS = 30
CELL_SIZE = (12, 24)
WINDOW_SIZE = (GAME_WIDTH * CELL_SIZE[0], GAME_HEIGHT * CELL_SIZE[1])
FONT_NAME = "dejavusansmono"
FONT_SIZE = 20
BACKGROUND_COLOR = (0, 0, 0)
TEXT_COLOR = (200, 200, 200)

INTRO_TITLE_ART = (
    "╔══════════════════════════════════════════════════════════════════════════════╗",
    "║                      ASCII + Aliens = ASCIIliens                             ║",
    "╠══════════════════════════════════════════════════════════════════════════════╣",
    "║                  -- The ASCII Invasion Begins! --                            ║",
    "╚══════════════════════════════════════════════════════════════════════════════╝",
)

INSTRUCTIONS_TEXT = (
    "Navigate your ship (║_||_║) using LEFT/RIGHT arrow keys.",
    "Press SPACE to fire blasts (*).",
    "Each action (move or fire) advances one game frame.",
    "Strategic action is key - you cannot move and fire in the same 'turn'!",
)

SCORING_TEXT = (
    "Scoring:",
    "- Start with 100 points.",
    "-1 point for each action (move or fire).",
    "+250 points for destroying an ASCIIlien.",
)

TAUNT_PHRASES = (
    "Now is not the time for the timid, step up!",
    "Do you fear the ASCIIliens, cadet?",
    "Your pixelated courage is lacking! Try again.",
    "The fate of the terminal rests on your bold choice!",
    "A true hero would not hesitate. Are you a hero?",
)

READY_PROMPT = "Ready? [Y/n] "
PLAY_AGAIN_PROMPT = "Play again? [Y/n] "

WIN_ART = (
    "╔══════════════════════════════════════════════════════════════════════════════╗",
    "║                       CONGRATULATIONS, COMMANDER!                            ║",
    "║                 YOU HAVE REPELLED THE ASCII INVASION!                        ║",
    "╚══════════════════════════════════════════════════════════════════════════════╝",
    "VICTORY IS YOURS!",
)

LOSE_ART = (
    "╔══════════════════════════════════════════════════════════════════════════════╗",
    "║                         MISSION FAILED!                                      ║",
    "║                  THE ASCII INVASION OVERWHELMED US!                          ║",
    "╚══════════════════════════════════════════════════════════════════════════════╝",
    "GAME OVER",
)

FINAL_SCORE_LABEL = "Score:"

STATUS_PLAYING = (
    "Press 'q' to quit, 'left/right' arrows to move, 'space' to fire. "
    "Hit any key to advance."
)
STATUS_WIN = "YOU WON! :) "
STATUS_GAME_OVER = "YOU LOST :( "
STATUS_QUIT = "Quitting..."
