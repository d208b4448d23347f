"""
ASCIIliens simulation

The world advances one discrete tick per command. Each tick runs a fixed
pipeline of systems, ordered by their ``order`` attribute:

- Frame counter
- Command (move / fire / quit)
- Blast movement and culling
- Blast vs alien collisions
- Alien explosions and scoring
- Alien movement
- End of game checks
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from asciiliens.constants import (
    ACTION_COST,
    ALIEN_DESIGNS,
    ALIEN_GRID_COLUMNS,
    ALIEN_GRID_ROWS,
    ALIEN_GRID_X,
    ALIEN_GRID_Y,
    ALIEN_MOVE_DOWN_FREQ,
    ALIEN_SPACING_X,
    ALIEN_SPACING_Y,
    DESTRUCTION_BONUS,
    INITIAL_SCORE,
)
from asciiliens.entities import Defender, Enemy, Projectile
from asciiliens.utils import logger, saturating_add


class Command(str, Enum):
    """Abstract player input, already decoded from the keyboard."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    FIRE = "fire"
    QUIT = "quit"
    NOOP = "noop"


class GameState(str, Enum):
    PLAYING = "playing"
    WIN = "win"
    GAME_OVER = "game_over"
    QUIT = "quit"


class RandomSource(Protocol):
    """Anything that picks an integer uniformly from ``range(stop)``."""

    def randrange(self, stop: int) -> int: ...


def spawn_aliens(rng: RandomSource) -> list[Enemy]:
    """
    Build the starting formation, row by row.

    :param rng: Source used to pick each alien's design
    :type rng: RandomSource

    :return: The aliens
    :rtype: list[Enemy]
    """
    aliens: list[Enemy] = []
    for row in range(ALIEN_GRID_ROWS):
        for col in range(ALIEN_GRID_COLUMNS):
            aliens.append(
                Enemy(
                    x=ALIEN_GRID_X + col * ALIEN_SPACING_X,
                    y=ALIEN_GRID_Y + row * ALIEN_SPACING_Y,
                    pattern=ALIEN_DESIGNS[rng.randrange(len(ALIEN_DESIGNS))],
                )
            )
    return aliens


@dataclass
class World:
    """
    ASCIIliens World
    """

    defender: Defender = field(default_factory=Defender)
    projectiles: list[Projectile] = field(default_factory=list)
    enemies: list[Enemy] = field(default_factory=list)
    frame_counter: int = 0
    score: int = INITIAL_SCORE
    state: GameState = GameState.PLAYING


@dataclass
class TickContext:
    """
    Everything a system needs for one tick.
    """

    world: World
    command: Command
    rng: RandomSource
    # aliens hit during this tick; their explosion starts playing next tick
    struck: list[Enemy] = field(default_factory=list)
    halted: bool = False


@dataclass
class FrameCounterSystem:
    name: str = "asciiliens_frame_counter"
    order: int = 10

    def step(self, ctx: TickContext):
        ctx.world.frame_counter += 1


@dataclass
class CommandSystem:
    """
    Apply the player command. Every move or shot costs points.
    """

    name: str = "asciiliens_command"
    order: int = 20

    def step(self, ctx: TickContext):
        w = ctx.world
        command = ctx.command

        if command is Command.MOVE_LEFT:
            w.defender.move_left()
        elif command is Command.MOVE_RIGHT:
            w.defender.move_right()
        elif command is Command.FIRE:
            w.projectiles.append(Projectile(w.defender.x, w.defender.y - 1))
            logger.debug(f"Shooting blast at {w.defender.x}, {w.defender.y - 1}")
        elif command is Command.QUIT:
            logger.debug("Quitting the game")
            w.state = GameState.QUIT
            ctx.halted = True
            return
        else:
            return

        w.score = saturating_add(w.score, -ACTION_COST)


@dataclass
class ProjectileMoveSystem:
    """Moves all blasts up and drops the ones leaving the screen."""

    name: str = "asciiliens_projectile_move"
    order: int = 30

    def step(self, ctx: TickContext):
        w = ctx.world
        w.projectiles = [p for p in w.projectiles if p.advance()]


@dataclass
class CollisionSystem:
    """Ignites the first alien each blast hits and consumes the blast."""

    name: str = "asciiliens_collision"
    order: int = 40

    def step(self, ctx: TickContext):
        w = ctx.world
        if not w.projectiles or not w.enemies:
            return

        remaining: list[Projectile] = []
        for p in w.projectiles:
            target = next((e for e in w.enemies if e.overlaps(p)), None)
            if target is None:
                remaining.append(p)
                continue

            target.ignite()
            ctx.struck.append(target)
            logger.debug(f"Hit! Alien at {target.x}, {target.y}")

        w.projectiles = remaining


@dataclass
class ExplosionSystem:
    name: str = "asciiliens_explosions"
    order: int = 50

    def step(self, ctx: TickContext):
        w = ctx.world
        for e in w.enemies:
            if any(e is s for s in ctx.struck):
                continue
            if e.advance_explosion():
                w.score = saturating_add(w.score, DESTRUCTION_BONUS)
                logger.debug(f"Alien destroyed, score: {w.score}")


@dataclass
class AlienMoveSystem:
    """
    One random alien steps towards the ship each tick, and the whole
    formation drops a row every ``ALIEN_MOVE_DOWN_FREQ`` ticks.
    """

    name: str = "asciiliens_alien_move"
    order: int = 60

    def step(self, ctx: TickContext):
        w = ctx.world
        movable = [e for e in w.enemies if e.active]
        if not movable:
            return

        alien = movable[ctx.rng.randrange(len(movable))]
        if alien.x < w.defender.left:
            alien.move_horizontal("right")
        elif alien.x > w.defender.right:
            alien.move_horizontal("left")

        if w.frame_counter % ALIEN_MOVE_DOWN_FREQ == 0:
            for e in movable:
                e.move_vertical_down()
            logger.debug(f"Aliens moving down at frame {w.frame_counter}")


@dataclass
class EndCheckSystem:
    """
    Drop fully exploded aliens, then check win before either loss.
    """

    name: str = "asciiliens_end_check"
    order: int = 70

    def step(self, ctx: TickContext):
        w = ctx.world
        w.enemies = [e for e in w.enemies if not e.finished]

        if not any(e.alive for e in w.enemies):
            logger.debug("You won!")
            w.state = GameState.WIN
            return

        threats = [e for e in w.enemies if e.active]
        if any(e.bottom >= w.defender.y for e in threats):
            logger.debug("You lost! The aliens have landed")
            w.state = GameState.GAME_OVER
            return

        if any(w.defender.overlaps(e) for e in threats):
            logger.debug("You lost! An alien rammed the ship")
            w.state = GameState.GAME_OVER


def default_systems() -> list:
    return [
        FrameCounterSystem(),
        CommandSystem(),
        ProjectileMoveSystem(),
        CollisionSystem(),
        ExplosionSystem(),
        AlienMoveSystem(),
        EndCheckSystem(),
    ]


class Engine:
    """
    Owns the world and advances it one tick per command.

    :param rng: Random source for alien designs and movement; defaults to
        a fresh ``random.Random``
    :type rng: RandomSource | None
    """

    def __init__(self, rng: RandomSource | None = None):
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self.world = World(enemies=spawn_aliens(self._rng))
        self.systems = sorted(default_systems(), key=lambda s: s.order)
        logger.debug(f"New game with {len(self.world.enemies)} aliens")

    @property
    def state(self) -> GameState:
        return self.world.state

    @property
    def score(self) -> int:
        return self.world.score

    @property
    def frame_counter(self) -> int:
        return self.world.frame_counter

    @property
    def defender(self) -> Defender:
        return self.world.defender

    @property
    def projectiles(self) -> tuple[Projectile, ...]:
        return tuple(self.world.projectiles)

    @property
    def enemies(self) -> tuple[Enemy, ...]:
        return tuple(self.world.enemies)

    def step(self, command: Command) -> None:
        """
        Advance the world by one tick.

        Once the game has ended every call is ignored.

        :param command: Player input for this tick
        :type command: Command
        """
        if self.world.state is not GameState.PLAYING:
            return

        ctx = TickContext(world=self.world, command=command, rng=self._rng)
        for system in self.systems:
            system.step(ctx)
            if ctx.halted:
                break

        if self.world.state is not GameState.PLAYING:
            logger.info(
                f"Game ended: {self.world.state.value}, score {self.world.score}"
            )
