"""
ASCIIliens game
"""

from __future__ import annotations

from enum import Enum

import pygame

from asciiliens.constants import (
    BACKGROUND_COLOR,
    CELL_SIZE,
    FONT_NAME,
    FONT_SIZE,
    FPS,
    TAUNT_PHRASES,
    WINDOW_SIZE,
)
from asciiliens.display import draw_lines, end_lines, frame_lines, intro_lines
from asciiliens.simulation import Command, Engine, GameState, RandomSource
from asciiliens.utils import configure_logging, logger

KEY_COMMANDS = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_SPACE: Command.FIRE,
    pygame.K_q: Command.QUIT,
    pygame.K_ESCAPE: Command.QUIT,
}


def command_for_key(key: int) -> Command:
    """
    Translate a key press into a game command. Unmapped keys just advance
    the game one frame.

    :param key: pygame key code
    :type key: int

    :return: The command
    :rtype: Command
    """
    return KEY_COMMANDS.get(key, Command.NOOP)


class Screen(str, Enum):
    INTRO = "intro"
    PLAYING = "playing"
    END = "end"


class Game:
    """
    Game class
    """

    _carry_on = True

    def __init__(self, name: str):
        """
        :param name: Name of the game
        :type name: str
        """
        logger.debug(f"Initializing {name}")
        self._name = name
        pygame.init()

    def _set_screen(self, width: int, height: int) -> pygame.Surface:
        """
        Set the screen

        :param width: Width of the screen
        :type width: int

        :param height: Height of the screen
        :type height: int

        :return: pygame.Surface
        :rtype: pygame.Surface
        """
        logger.debug("Setting screen")

        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(self._name)
        return screen

    def _load_font(self, name: str, size: int) -> pygame.font.Font:
        """
        Load a monospace font

        :raise pygame.error: If no font can be loaded
        """
        logger.debug(f"Loading font {name}")

        try:
            return pygame.font.SysFont(name, size)
        except pygame.error as e:
            logger.error(f"Failed to load font {name}: {e}")
            raise

    def handle_events(self):
        """
        Handle the events

        :raise NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError("Subclasses must implement this method")

    def draw_stuff(self):
        """
        Draw the stuff

        :raise NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError("Subclasses must implement this method")


class Asciiliens(Game):
    """
    Turn based session: intro screen, the game itself, then the end screen
    with the option to play again. The game only advances on a key press.
    """

    def __init__(self, rng: RandomSource | None = None):
        super().__init__("ASCIIliens")

        self._rng = rng
        self._clock = pygame.time.Clock()
        self._screen = self._set_screen(*WINDOW_SIZE)
        self._font = self._load_font(FONT_NAME, FONT_SIZE)

        self.current = Screen.INTRO
        self.taunt_index: int | None = None
        self.engine: Engine | None = None

    def new_game(self):
        logger.info("Starting a new game")
        self.engine = Engine(rng=self._rng)
        self.current = Screen.PLAYING

    def handle_key(self, key: int):
        """
        React to a single key press on the current screen

        :param key: pygame key code
        :type key: int
        """
        if self.current is Screen.INTRO:
            if key == pygame.K_y:
                self.new_game()
            elif key == pygame.K_n:
                if self.taunt_index is None:
                    self.taunt_index = 0
                else:
                    self.taunt_index = (self.taunt_index + 1) % len(TAUNT_PHRASES)

        elif self.current is Screen.PLAYING:
            self.engine.step(command_for_key(key))
            if self.engine.state is not GameState.PLAYING:
                self.current = Screen.END

        elif key == pygame.K_y:
            self.new_game()
        elif key in (pygame.K_n, pygame.K_ESCAPE):
            logger.debug("Leaving the game")
            self._carry_on = False

    def handle_events(self):
        """
        Handle the events
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.debug("Quitting the game")
                self._carry_on = False
            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)

    def draw_stuff(self):
        """
        Draw the stuff
        """
        if self.current is Screen.INTRO:
            lines = intro_lines(self.taunt_index)
        elif self.current is Screen.PLAYING:
            lines = frame_lines(self.engine)
        else:
            lines = end_lines(self.engine.state, self.engine.score)

        self._screen.fill(BACKGROUND_COLOR)
        draw_lines(self._screen, self._font, lines, CELL_SIZE)
        pygame.display.flip()

    def run(self):
        """
        Run the game
        """
        logger.info("Running ASCIIliens")

        while self._carry_on:
            self._clock.tick(FPS)
            self.handle_events()
            self.draw_stuff()

        pygame.quit()


def run():
    """
    Main entry point for ASCIIliens.
    """
    configure_logging()
    game = Asciiliens()
    game.run()


if __name__ == "__main__":
    run()
