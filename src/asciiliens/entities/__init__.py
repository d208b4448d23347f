"""
Entities for ASCIIliens: the defender, its blasts and the aliens.

All coordinates are integer cells on the playfield, with ``(0, 0)`` at the
top-left corner and ``y`` growing downwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pygame

from asciiliens.constants import (
    ALIEN_DESIGNS,
    ALIEN_HEIGHT,
    ALIEN_WIDTH,
    BLAST_CHAR,
    EXPLOSION_DONE,
    EXPLOSION_STAGES,
    GAME_HEIGHT,
    GAME_WIDTH,
    PLAYER_SHIP_ART,
    PLAYER_WIDTH,
    PLAYER_Y_OFFSET,
)

Direction = Literal["left", "right"]


@dataclass
class Projectile:
    """
    Blast fired by the defender. Travels one row up per tick.
    """

    x: int
    y: int

    @property
    def in_bounds(self) -> bool:
        return self.y > 0

    def advance(self) -> bool:
        """
        Move one row up.

        :return: True while the blast is still on the playfield
        :rtype: bool
        """
        if self.y > 0:
            self.y -= 1
        return self.in_bounds


@dataclass
class Enemy:
    """
    Alien entity

    ``explosion_stage`` is 0 while intact, 1..4 while the explosion is
    playing and 5 once it is over, at which point ``alive`` is False.
    """

    x: int
    y: int
    alive: bool = True
    pattern: tuple[str, str, str, str] = ALIEN_DESIGNS[0]
    explosion_stage: int = 0

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, ALIEN_WIDTH, ALIEN_HEIGHT)

    @property
    def active(self) -> bool:
        """Alive and not exploding: the only state that moves or threatens."""
        return self.alive and self.explosion_stage == 0

    @property
    def finished(self) -> bool:
        return not self.alive and self.explosion_stage >= EXPLOSION_DONE

    @property
    def bottom(self) -> int:
        return self.y + ALIEN_HEIGHT - 1

    def move_horizontal(self, direction: Direction) -> None:
        """
        Shift one column, keeping the whole alien on the playfield.

        :param direction: "left" or "right"
        :type direction: Direction
        """
        if direction == "left":
            if self.x > 0:
                self.x -= 1
        elif self.x < GAME_WIDTH - ALIEN_WIDTH:
            self.x += 1

    def move_vertical_down(self) -> None:
        self.y += 1

    def overlaps(self, projectile: Projectile) -> bool:
        """
        Check whether a blast hits this alien.

        Exploding and dead aliens cannot be hit.

        :param projectile: The blast to test
        :type projectile: Projectile

        :return: True on a hit
        :rtype: bool
        """
        if not self.active:
            return False
        return bool(self.rect.collidepoint(projectile.x, projectile.y))

    def ignite(self) -> None:
        """Start the explosion. Has no effect once it has started."""
        if self.explosion_stage == 0:
            self.explosion_stage = 1

    def advance_explosion(self) -> bool:
        """
        Play the next explosion stage.

        :return: True when this call finished the explosion
        :rtype: bool
        """
        if not 1 <= self.explosion_stage < EXPLOSION_DONE:
            return False
        self.explosion_stage += 1
        if self.explosion_stage == EXPLOSION_DONE:
            self.alive = False
            return True
        return False

    def visual(self) -> tuple[str, str]:
        """
        Return the two display rows of the alien.
        """
        cells = list(self.pattern)
        if self.explosion_stage > 0:
            mask = EXPLOSION_STAGES[min(self.explosion_stage, 4) - 1]
            cells = [
                BLAST_CHAR if hit else cell for cell, hit in zip(cells, mask)
            ]
        return cells[0] + cells[1], cells[2] + cells[3]


@dataclass
class Defender:
    """
    Ship entity. ``x`` is the center column; the row never changes.
    """

    x: int = GAME_WIDTH // 2

    @property
    def y(self) -> int:
        return GAME_HEIGHT - PLAYER_Y_OFFSET

    @property
    def left(self) -> int:
        return max(self.x - PLAYER_WIDTH // 2, 0)

    @property
    def right(self) -> int:
        return self.x + PLAYER_WIDTH // 2 - 1

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.left, self.y, self.right - self.left + 1, 1)

    def move_left(self) -> None:
        if self.x > PLAYER_WIDTH // 2:
            self.x -= 1

    def move_right(self) -> None:
        if self.x < GAME_WIDTH - PLAYER_WIDTH // 2 - 1:
            self.x += 1

    def overlaps(self, enemy: Enemy) -> bool:
        """
        Pure bounding-box test against an alien, whatever its state.
        """
        return bool(self.rect.colliderect(enemy.rect))

    def visual(self) -> str:
        return PLAYER_SHIP_ART
