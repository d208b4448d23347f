"""
ASCIIliens display

Screens are built as lists of ``GAME_WIDTH``-wide text lines and then
blitted cell by cell with a monospace font.
"""

from __future__ import annotations

import pygame

from asciiliens.constants import (
    BLAST_CHAR,
    FINAL_SCORE_LABEL,
    GAME_HEIGHT,
    GAME_WIDTH,
    INSTRUCTIONS_TEXT,
    INTRO_TITLE_ART,
    LOSE_ART,
    PLAY_AGAIN_PROMPT,
    READY_PROMPT,
    SCORING_TEXT,
    STATUS_GAME_OVER,
    STATUS_PLAYING,
    STATUS_QUIT,
    STATUS_WIN,
    TAUNT_PHRASES,
    TEXT_COLOR,
    WIN_ART,
)
from asciiliens.simulation import Engine, GameState
from asciiliens.utils import center_text

STATUS_MESSAGES = {
    GameState.PLAYING: STATUS_PLAYING,
    GameState.WIN: STATUS_WIN,
    GameState.GAME_OVER: STATUS_GAME_OVER,
    GameState.QUIT: STATUS_QUIT,
}
STATUS_COLUMN = 12


def _put(grid: list[list[str]], x: int, y: int, text: str) -> None:
    if not 0 <= y < len(grid):
        return
    for offset, char in enumerate(text):
        col = x + offset
        if 0 <= col < GAME_WIDTH:
            grid[y][col] = char


def frame_lines(engine: Engine) -> list[str]:
    """
    Render the playfield and status line.

    :param engine: The running game
    :type engine: Engine

    :return: ``GAME_HEIGHT`` lines of ``GAME_WIDTH`` characters
    :rtype: list[str]
    """
    grid = [[" "] * GAME_WIDTH for _ in range(GAME_HEIGHT)]

    defender = engine.defender
    _put(grid, defender.left, defender.y, defender.visual())

    for p in engine.projectiles:
        _put(grid, p.x, p.y, BLAST_CHAR)

    for e in engine.enemies:
        if e.alive or e.explosion_stage > 0:
            top, bottom = e.visual()
            _put(grid, e.x, e.y, top)
            _put(grid, e.x, e.y + 1, bottom)

    status_row = GAME_HEIGHT - 1
    _put(grid, 0, status_row, f"Score: {engine.score} ")
    _put(grid, STATUS_COLUMN, status_row, STATUS_MESSAGES[engine.state])

    return ["".join(row) for row in grid]


def _screen(art, body, prompt: str) -> list[str]:
    lines = [center_text(line, GAME_WIDTH) for line in art]
    lines.append("")
    lines.extend(center_text(line, GAME_WIDTH) for line in body)
    while len(lines) < GAME_HEIGHT - 1:
        lines.append("")
    lines.append(center_text(prompt, GAME_WIDTH))
    return [line.ljust(GAME_WIDTH) for line in lines]


def intro_lines(taunt_index: int | None = None) -> list[str]:
    """
    Title screen. A taunt is shown once the player has declined to start.

    :param taunt_index: Index into the taunts, or None for no taunt
    :type taunt_index: int | None
    """
    body: list[str] = list(INSTRUCTIONS_TEXT)
    body.append("")
    body.extend(SCORING_TEXT)
    body.append("")
    if taunt_index is None:
        body.extend(["", "", ""])
    else:
        body.append((">>>>>" * (GAME_WIDTH // 5 + 1))[:GAME_WIDTH])
        body.append(TAUNT_PHRASES[taunt_index % len(TAUNT_PHRASES)])
        body.append(("<<<<<" * (GAME_WIDTH // 5 + 1))[:GAME_WIDTH])
    return _screen(INTRO_TITLE_ART, body, READY_PROMPT)


def end_lines(state: GameState, score: int) -> list[str]:
    """Final screen with the outcome and the score."""
    if state is GameState.GAME_OVER:
        art, message = LOSE_ART, STATUS_GAME_OVER
    elif state is GameState.WIN:
        art, message = WIN_ART, STATUS_WIN
    else:
        art, message = WIN_ART, "GAME ENDED"
    body = [message, f"{FINAL_SCORE_LABEL} {score}", ""]
    return _screen(art, body, PLAY_AGAIN_PROMPT)


def draw_lines(
    surface: pygame.Surface,
    font: pygame.font.Font,
    lines: list[str],
    cell_size: tuple[int, int],
) -> None:
    """
    Blit text lines onto the surface, one cell per character.

    :param surface: Target surface
    :type surface: pygame.Surface

    :param font: Monospace font
    :type font: pygame.font.Font

    :param lines: Lines to draw
    :type lines: list[str]

    :param cell_size: Width and height of one character cell in pixels
    :type cell_size: tuple[int, int]
    """
    cell_w, cell_h = cell_size
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if char == " ":
                continue
            glyph = font.render(char, True, TEXT_COLOR)
            surface.blit(glyph, (col * cell_w, row * cell_h))
