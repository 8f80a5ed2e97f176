import random

import pytest

from doubledodge.consts import CREATURE_COLORS, PLAYER_COLOR
from doubledodge.game import (
    Body,
    ColliderKind,
    Creature,
    CreatureType,
    Direction,
    Game,
    GameState,
    collide,
    creature_type_from_index,
    spawn_position,
)


def _running_game(seed=1):
    game = Game(1000.0, 600.0, random.Random(seed))
    game.play()
    return game


def test_creature_type_round_trip():
    for kind in CreatureType:
        assert creature_type_from_index(kind.value) is kind


@pytest.mark.parametrize("value", [-1, 3, 99])
def test_creature_type_unknown_index(value):
    with pytest.raises(ValueError):
        creature_type_from_index(value)


def test_collide_overlap_and_separation():
    assert collide((0, 0), (50, 50), (10, 10), (25, 25)) is True
    assert collide((0, 0), (50, 50), (200, 0), (25, 25)) is False


def test_collide_touching_edges_is_not_a_hit():
    assert collide((0, 0), (10, 10), (10, 0), (10, 10)) is False


def test_collide_is_symmetric():
    cases = [((0, 0), (50, 50), (30, 5), (25, 25)), ((0, 0), (5, 800), (-100, 0), (50, 50))]
    for a_pos, a_size, b_pos, b_size in cases:
        assert collide(a_pos, a_size, b_pos, b_size) == collide(b_pos, b_size, a_pos, a_size)


def test_spawn_up_and_down_mirror():
    up = spawn_position(Direction.UP, 0.3, 1000.0, 600.0)
    down = spawn_position(Direction.DOWN, 0.3, 1000.0, 600.0)
    assert up[0] == down[0]
    assert up[1] == -down[1]
    assert up[1] < 0


def test_spawn_left_and_right_mirror():
    left = spawn_position(Direction.LEFT, 0.0, 1000.0, 600.0)
    right = spawn_position(Direction.RIGHT, 0.0, 1000.0, 600.0)
    assert left[0] == -right[0]
    assert left[0] > 0
    assert left[1] == 0.0 and right[1] == 0.0


def test_spawn_flip_zero_centres_vertical_entries():
    assert spawn_position(Direction.UP, 0.0, 1000.0, 600.0)[0] == 0.0


def test_creature_advance_up():
    body = Body(0.0, 0.0, 25.0, 25.0, CREATURE_COLORS[0], ColliderKind.CREATURE)
    creature = Creature(body=body, direction=Direction.UP)
    creature.advance()
    assert creature.body.y == pytest.approx(1.05)
    assert creature.body.x == 0.0


def test_creature_left_and_right_cancel():
    body = Body(3.0, 4.0, 25.0, 25.0, CREATURE_COLORS[0], ColliderKind.CREATURE)
    creature = Creature(body=body, direction=Direction.LEFT)
    creature.advance()
    creature.direction = Direction.RIGHT
    creature.advance()
    assert creature.body.x == pytest.approx(3.0)
    assert creature.body.y == 4.0


def test_new_game_is_at_menu():
    game = Game(1000.0, 600.0)
    assert game.state is GameState.MENU
    assert game.players == []


def test_play_places_players_and_wall():
    game = _running_game()
    assert game.state is GameState.IN_GAME
    assert len(game.players) == 2
    assert len(game.walls) == 1
    first, second = game.players
    assert (first.body.x, first.body.y) == (-215.0, -215.0)
    assert (second.body.x, second.body.y) == (215.0, -215.0)
    assert first.body.color == PLAYER_COLOR[0]
    assert second.body.color == PLAYER_COLOR[2]
    assert first.speed == 500.0


def test_play_twice_raises():
    game = _running_game()
    with pytest.raises(RuntimeError):
        game.play()


def test_player_left_and_right_are_symmetric():
    game = _running_game()
    player = game.players[0]
    start = player.body.x
    player.move({"d"})
    right_step = player.body.x - start
    player.move({"a"})
    assert right_step > 0
    assert player.body.x == pytest.approx(start)


def test_player_opposite_keys_match_first_key_alone():
    a = _running_game()
    b = _running_game()
    a.players[0].move({"a", "d"})
    b.players[0].move({"a"})
    assert a.players[0].body.x == pytest.approx(b.players[0].body.x)


def test_player_ignores_other_players_keys():
    game = _running_game()
    game.players[0].move({"left", "up"})
    assert (game.players[0].body.x, game.players[0].body.y) == (-215.0, -215.0)


def test_player_limits():
    game = _running_game()
    first, second = game.players
    first.body.x, first.body.y = 10_000.0, 10_000.0
    second.body.x, second.body.y = -10_000.0, -10_000.0
    first.move(set())
    second.move(set())
    assert (first.body.x, first.body.y) == (550.0, 350.0)
    assert (second.body.x, second.body.y) == (-550.0, -450.0)


def test_spawn_only_in_game():
    game = Game(1000.0, 600.0, random.Random(3))
    assert game.spawn_creature() is None
    game.play()
    creature = game.spawn_creature()
    assert creature in game.creatures
    assert creature.body.color in CREATURE_COLORS
    assert creature.body.size == (25.0, 25.0)
    assert creature.body.kind is ColliderKind.CREATURE


def test_spawn_is_deterministic_for_a_seed():
    a = _running_game(seed=7)
    b = _running_game(seed=7)
    for _ in range(5):
        ca, cb = a.spawn_creature(), b.spawn_creature()
        assert ca == cb


def test_tick_score_only_in_game():
    game = Game(1000.0, 600.0)
    game.tick_score()
    assert game.scoreboard.score == 0
    game.play()
    game.tick_score()
    game.tick_score()
    assert game.scoreboard.score == 2


def test_walking_into_wall_ends_game():
    game = _running_game()
    for _ in range(200):
        game.update({"d"})
        if game.state is GameState.GAME_OVER:
            break
    assert game.state is GameState.GAME_OVER
    assert game.players[0].body.x < 0


def test_creature_hit_ends_game():
    game = _running_game()
    creature = game.spawn_creature()
    creature.body.x, creature.body.y = game.players[1].body.position
    assert game.check_collisions() is True
    assert game.state is GameState.GAME_OVER


def test_no_collision_keeps_playing():
    game = _running_game()
    assert game.check_collisions() is False
    assert game.state is GameState.IN_GAME


def test_update_does_nothing_after_game_over():
    game = _running_game()
    game.state = GameState.GAME_OVER
    before = game.players[0].body.position
    game.update({"w"})
    assert game.players[0].body.position == before


def test_restart_resets_round():
    game = _running_game()
    game.spawn_creature()
    game.tick_score()
    game.state = GameState.GAME_OVER
    game.play()
    assert game.state is GameState.IN_GAME
    assert game.creatures == []
    assert game.scoreboard.score == 0
    assert len(game.players) == 2


def test_teardown_clears_everything():
    game = _running_game()
    game.spawn_creature()
    game.tick_score()
    game.teardown()
    assert list(game.bodies()) == []
    assert game.scoreboard.score == 0