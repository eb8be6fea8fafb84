# tests/test_rules.py
import pytest

from termsnake.core.constants import Difficulty, Direction
from termsnake.core.placement import NoSpaceError

def _place(rules, cells, direction=Direction.RIGHT, food=(0, 0), obstacles=()):
    """Put the game into a hand-built position."""
    rules.snake.reset(list(cells), direction)
    rules.food = food
    rules.obstacles = list(obstacles)

def test_setup_centres_snake_heading_right(rules_factory):
    r = rules_factory()
    snap = r.setup()
    assert snap.snake == ((15, 10), (14, 10), (13, 10))
    assert snap.dir is Direction.RIGHT
    assert snap.score == 0 and not snap.game_over
    assert snap.food not in snap.snake
    assert snap.obstacles == ()

def test_plain_tick_moves_right(rules_factory):
    r = rules_factory()
    r.setup()
    _place(r, [(14, 10), (13, 10), (12, 10)], food=(0, 0))
    snap = r.step()
    assert snap.snake == ((15, 10), (14, 10), (13, 10))
    assert not snap.game_over
    assert snap.step_count == 1

def test_wall_is_fatal_without_wrap(rules_factory):
    r = rules_factory()
    r.setup()
    body = [(29, 10), (28, 10), (27, 10)]
    _place(r, body, food=(0, 0))
    snap = r.step()
    assert snap.game_over
    assert snap.reason == "wall"
    assert list(snap.snake) == body
    assert snap.step_count == 0

@pytest.mark.parametrize("cells,direction,expected_head", [
    ([(29, 10), (28, 10), (27, 10)], Direction.RIGHT, (0, 10)),
    ([(0, 10), (1, 10), (2, 10)], Direction.LEFT, (29, 10)),
    ([(7, 0), (7, 1), (7, 2)], Direction.UP, (7, 19)),
    ([(7, 19), (7, 18), (7, 17)], Direction.DOWN, (7, 0)),
])
def test_wrap_reappears_on_opposite_edge(rules_factory, cells, direction, expected_head):
    r = rules_factory(wrap=True)
    r.setup()
    _place(r, cells, direction=direction, food=(15, 15))
    snap = r.step()
    assert not snap.game_over
    assert snap.head == expected_head
    assert snap.snake[1] == cells[0]

def test_reverse_turn_is_ignored(rules_factory):
    r = rules_factory()
    r.setup()
    _place(r, [(10, 5), (9, 5), (8, 5)], food=(0, 0))
    assert r.turn(Direction.LEFT) is False
    snap = r.step()
    assert snap.dir is Direction.RIGHT
    assert snap.head == (11, 5)

def test_perpendicular_then_reverse(rules_factory):
    r = rules_factory()
    r.setup()
    _place(r, [(10, 5), (9, 5), (8, 5)], food=(0, 0))
    assert r.turn(Direction.UP)
    r.step()
    assert r.turn(Direction.LEFT)
    snap = r.step()
    assert snap.head == (9, 4)
    assert not snap.game_over

def test_eating_grows_scores_and_respawns_food(rules_factory):
    r = rules_factory(difficulty=Difficulty.HARD)
    r.setup()
    obstacles = list(r.obstacles)
    _place(r, [(15, 10), (14, 10), (13, 10)], food=(16, 10),
           obstacles=[o for o in obstacles if o[1] != 10])
    snap = r.step()
    assert snap.score == 1
    assert snap.snake == ((16, 10), (15, 10), (14, 10), (13, 10))
    assert snap.food is not None
    assert snap.food not in snap.snake
    assert snap.food not in snap.obstacles

def test_body_collision_is_fatal(rules_factory):
    r = rules_factory()
    r.setup()
    body = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)]
    _place(r, body, direction=Direction.DOWN, food=(0, 0))
    snap = r.step()
    assert snap.game_over and snap.reason == "self"
    assert list(snap.snake) == body

def test_moving_into_vacating_tail_is_safe(rules_factory):
    r = rules_factory()
    r.setup()
    _place(r, [(5, 5), (6, 5), (6, 6), (5, 6)], direction=Direction.DOWN, food=(0, 0))
    snap = r.step()
    assert not snap.game_over
    assert snap.snake == ((5, 6), (5, 5), (6, 5), (6, 6))

def test_tail_counts_when_growing(rules_factory):
    r = rules_factory()
    r.setup()
    # food forced onto the tail: growth keeps the tail in place, so this is fatal
    _place(r, [(5, 5), (6, 5), (6, 6), (5, 6)], direction=Direction.DOWN, food=(5, 6))
    snap = r.step()
    assert snap.game_over and snap.reason == "self"
    assert snap.score == 0

def test_obstacle_is_fatal(rules_factory):
    r = rules_factory()
    r.setup()
    body = [(15, 10), (14, 10), (13, 10)]
    _place(r, body, food=(0, 0), obstacles=[(16, 10)])
    snap = r.step()
    assert snap.game_over and snap.reason == "obstacle"
    assert list(snap.snake) == body

def test_obstacle_beats_food_on_same_cell(rules_factory):
    r = rules_factory()
    r.setup()
    _place(r, [(15, 10), (14, 10), (13, 10)], food=(16, 10), obstacles=[(16, 10)])
    snap = r.step()
    assert snap.game_over and snap.reason == "obstacle"
    assert snap.score == 0
    assert len(snap.snake) == 3

@pytest.mark.parametrize("difficulty,count", [
    (Difficulty.EASY, 0), (Difficulty.MEDIUM, 6), (Difficulty.HARD, 12),
])
def test_obstacle_count_per_difficulty(rules_factory, difficulty, count):
    for seed in range(5):
        r = rules_factory(seed=seed, difficulty=difficulty)
        snap = r.setup()
        assert len(snap.obstacles) == count
        assert len(set(snap.obstacles)) == count
        assert not set(snap.obstacles) & set(snap.snake)
        assert snap.food not in snap.obstacles
        assert snap.food not in snap.snake

def test_restart_matches_fresh_setup(rules_factory):
    r = rules_factory(wrap=False, difficulty=Difficulty.MEDIUM)
    fresh = r.setup()
    buf = r.snake._body
    r.turn(Direction.UP)
    while not r.game_over:
        r.step()
    again = r.restart()
    assert again.snake == fresh.snake
    assert again.dir is Direction.RIGHT
    assert again.score == 0
    assert not again.game_over and again.reason is None
    assert again.step_count == 0
    assert len(again.obstacles) == 6 and r.obstacle_count == 6
    assert again.difficulty is Difficulty.MEDIUM and again.wrap is False
    assert r.snake._body is buf

def test_step_after_game_over_is_noop(rules_factory):
    r = rules_factory()
    r.setup()
    _place(r, [(29, 3), (28, 3), (27, 3)], food=(0, 0))
    first = r.step()
    second = r.step()
    assert first == second

def test_filling_the_board_ends_the_game(rules_factory):
    r = rules_factory(grid_w=4, grid_h=1)
    snap = r.setup()
    assert snap.snake == ((2, 0), (1, 0), (0, 0))
    assert snap.food == (3, 0)
    snap = r.step()
    assert snap.score == 1
    assert len(snap.snake) == 4
    assert snap.game_over and snap.reason == "board_full"
    assert snap.food is None

def test_setup_without_room_for_obstacles_raises(rules_factory):
    r = rules_factory(grid_w=4, grid_h=1, difficulty=Difficulty.HARD)
    with pytest.raises(NoSpaceError):
        r.setup()

def test_invalid_config_is_rejected(rules_factory):
    with pytest.raises(ValueError):
        rules_factory(grid_w=3, start_len=3)
    with pytest.raises(ValueError):
        rules_factory(difficulty=Difficulty.HARD, max_obstacles=4)
