import pytest

from asciiliens.constants import (
    ALIEN_MOVE_DOWN_FREQ,
    DESTRUCTION_BONUS,
    GAME_WIDTH,
    INITIAL_SCORE,
    SCORE_MAX,
    SCORE_MIN,
)
from asciiliens.entities import Enemy, Projectile
from asciiliens.simulation import Command, Engine, GameState


def snapshot(engine):
    return (
        engine.score,
        engine.frame_counter,
        engine.defender.x,
        [(p.x, p.y) for p in engine.projectiles],
        [(e.x, e.y, e.alive, e.explosion_stage) for e in engine.enemies],
    )


def test_new_engine(engine):
    assert engine.state is GameState.PLAYING
    assert engine.score == INITIAL_SCORE
    assert engine.frame_counter == 0
    assert engine.defender.x == GAME_WIDTH // 2
    assert engine.projectiles == ()

    positions = {(e.x, e.y) for e in engine.enemies}
    assert len(engine.enemies) == 30
    assert positions == {
        (x, y) for x in range(10, 65, 6) for y in (3, 6, 9)
    }
    assert all(e.alive and e.explosion_stage == 0 for e in engine.enemies)


def test_views_are_immutable(engine):
    assert isinstance(engine.enemies, tuple)
    assert isinstance(engine.projectiles, tuple)


def test_fire_spawns_projectile(engine):
    engine.step(Command.FIRE)

    assert len(engine.projectiles) == 1
    blast = engine.projectiles[0]
    assert (blast.x, blast.y) == (engine.defender.x, engine.defender.y - 2)
    assert engine.score == INITIAL_SCORE - 1
    assert engine.frame_counter == 1


@pytest.mark.parametrize(
    "command, dx", [(Command.MOVE_LEFT, -1), (Command.MOVE_RIGHT, 1)]
)
def test_move_costs_a_point(engine, command, dx):
    x = engine.defender.x
    engine.step(command)
    assert engine.defender.x == x + dx
    assert engine.score == INITIAL_SCORE - 1


def test_noop_is_free(engine):
    engine.step(Command.NOOP)
    assert engine.score == INITIAL_SCORE
    assert engine.frame_counter == 1


def test_hit_explode_and_score(engine):
    target = next(e for e in engine.enemies if (e.x, e.y) == (40, 9))

    engine.step(Command.FIRE)
    for _ in range(20):
        if target.explosion_stage:
            break
        engine.step(Command.NOOP)

    assert target.explosion_stage == 1
    assert engine.projectiles == ()
    assert target.alive
    before = engine.score
    assert before == INITIAL_SCORE - 1

    for expected in (2, 3, 4):
        engine.step(Command.NOOP)
        assert target.explosion_stage == expected
        assert target.alive
        assert engine.score == before

    engine.step(Command.NOOP)
    assert target.explosion_stage == 5
    assert not target.alive
    assert engine.score == before + DESTRUCTION_BONUS
    assert all(e is not target for e in engine.enemies)
    assert len(engine.enemies) == 29

    for _ in range(5):
        engine.step(Command.NOOP)
    assert engine.score == before + DESTRUCTION_BONUS


def test_projectile_hits_only_one_enemy(engine):
    first, second = Enemy(40, 10), Enemy(40, 10)
    engine.world.enemies = [first, second]
    engine.world.projectiles = [Projectile(40, 11)]

    engine.step(Command.NOOP)

    assert first.explosion_stage == 1
    assert second.explosion_stage == 0
    assert engine.projectiles == ()


def test_exploding_enemy_lets_blasts_through(engine):
    shield = Enemy(40, 10, explosion_stage=1)
    behind = Enemy(40, 8)
    engine.world.enemies = [shield, behind]
    engine.world.projectiles = [Projectile(40, 11)]

    engine.step(Command.NOOP)
    assert shield.explosion_stage == 2
    assert engine.projectiles[0].y == 10

    engine.step(Command.NOOP)
    assert behind.explosion_stage == 1
    assert engine.projectiles == ()


def test_projectile_expires_at_top(engine):
    engine.world.projectiles = [Projectile(5, 1), Projectile(6, 2)]
    engine.step(Command.NOOP)
    assert [(p.x, p.y) for p in engine.projectiles] == [(6, 1)]


@pytest.mark.parametrize("x, expected", [(10, 11), (70, 69), (39, 39), (42, 42)])
def test_random_alien_moves_towards_ship(engine, x, expected):
    alien = Enemy(x, 3)
    engine.world.enemies = [alien]

    engine.step(Command.NOOP)

    assert alien.x == expected


def test_one_random_pick_per_step(make_rng):
    rng = make_rng(1)
    engine = Engine(rng=rng)
    calls = rng.calls

    engine.step(Command.NOOP)
    assert rng.calls == calls + 1

    moved = [e for e in engine.enemies if e.x not in range(10, 65, 6)]
    assert len(moved) == 1
    assert moved[0] is engine.enemies[1]


def test_aliens_descend_together(engine):
    active = Enemy(40, 3)
    dead = Enemy(60, 3, alive=False)
    engine.world.enemies = [active, dead]

    for _ in range(ALIEN_MOVE_DOWN_FREQ - 1):
        engine.step(Command.NOOP)
    assert active.y == 3

    engine.step(Command.NOOP)
    assert active.y == 4
    assert dead.y == 3


def test_exploding_alien_does_not_move(engine):
    alien = Enemy(10, 3, explosion_stage=1)
    engine.world.enemies = [alien, Enemy(40, 3)]
    engine.world.frame_counter = ALIEN_MOVE_DOWN_FREQ - 1

    engine.step(Command.NOOP)

    assert (alien.x, alien.y) == (10, 3)


def test_all_dead_is_a_win(engine):
    for e in engine.world.enemies:
        e.alive = False

    engine.step(Command.NOOP)

    assert engine.state is GameState.WIN


def test_invasion_is_a_loss(engine):
    engine.world.enemies[0].y = engine.defender.y - 1

    engine.step(Command.NOOP)

    assert engine.state is GameState.GAME_OVER


def test_ramming_the_ship_is_a_loss(engine):
    engine.world.enemies.append(Enemy(engine.defender.left, engine.defender.y))

    engine.step(Command.NOOP)

    assert engine.state is GameState.GAME_OVER


def test_exploding_alien_does_not_invade(engine):
    alien = engine.world.enemies[0]
    alien.y = engine.defender.y - 1
    alien.explosion_stage = 2

    engine.step(Command.NOOP)

    assert engine.state is GameState.PLAYING


def test_win_beats_invasion(engine):
    last = Enemy(engine.defender.x, engine.defender.y - 1, explosion_stage=4)
    engine.world.enemies = [last]

    engine.step(Command.NOOP)

    assert engine.state is GameState.WIN
    assert engine.score == INITIAL_SCORE + DESTRUCTION_BONUS
    assert engine.enemies == ()


def test_ended_game_is_frozen(engine):
    for e in engine.world.enemies:
        e.alive = False
    engine.step(Command.NOOP)
    assert engine.state is GameState.WIN

    before = snapshot(engine)
    for command in Command:
        engine.step(command)
    assert snapshot(engine) == before
    assert engine.state is GameState.WIN


def test_quit_ends_the_tick(engine):
    engine.step(Command.FIRE)
    blast = engine.projectiles[0]
    y = blast.y
    aliens = [(e.x, e.y) for e in engine.enemies]

    engine.step(Command.QUIT)

    assert engine.state is GameState.QUIT
    assert engine.frame_counter == 2
    assert engine.score == INITIAL_SCORE - 1
    assert blast.y == y
    assert [(e.x, e.y) for e in engine.enemies] == aliens

    engine.step(Command.FIRE)
    assert len(engine.projectiles) == 1


def test_score_saturates(engine):
    engine.world.score = SCORE_MIN
    engine.step(Command.MOVE_LEFT)
    assert engine.score == SCORE_MIN

    engine.world.score = SCORE_MAX - 1
    engine.world.enemies.append(Enemy(0, 3, explosion_stage=4))
    engine.step(Command.NOOP)
    assert engine.score == SCORE_MAX
