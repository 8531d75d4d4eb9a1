"""Tests for the game loop controller state machine."""
import random

import pytest

from config import OVERLAY_RESULTS, OVERLAY_SCOREBOARD_BG, OVERLAY_SCOREBOARD_FG, SCORE_FG_POS
from engine import RESTART, Game
from entities import NUM_ENEMIES, WIN_BONUS
from tile_grid import ENEMY_LANES, NUM_COLUMNS, NUM_ROWS, TILE_WIDTH


class RecordingRenderer:
    """Collects draw calls instead of touching a window."""

    def __init__(self):
        self.calls = []

    def draw_sprite(self, image_key, x, y):
        self.calls.append(("sprite", image_key, x, y))

    def draw_overlay(self, name, x, y, value):
        self.calls.append(("overlay", name, x, y, value))


@pytest.fixture
def game():
    g = Game(high_score=53, rng=random.Random(7))
    g.start()
    return g


def park_enemies(game):
    """Stop every enemy off the left edge so nothing can collide."""
    for enemy in game.enemies:
        enemy.x = float(-TILE_WIDTH)
        enemy.speed = 0.0


def walk_to_water(game):
    for _ in range(NUM_ROWS - 1):
        game.handle_input("up")


class TestStartup:
    def test_creates_four_enemies_on_enemy_lanes(self):
        g = Game(high_score=53, rng=random.Random(3))
        assert len(g.enemies) == NUM_ENEMIES
        assert all(enemy.lane in ENEMY_LANES for enemy in g.enemies)

    def test_no_ticks_before_start(self):
        g = Game(high_score=53, rng=random.Random(3))
        before = [enemy.x for enemy in g.enemies]
        g.update(0.5)
        assert [enemy.x for enemy in g.enemies] == before
        assert g.elapsed == 0.0

    def test_no_moves_before_start(self):
        g = Game(high_score=53, rng=random.Random(3))
        assert not g.handle_input("up")
        assert g.player.row == 5
        assert g.current_score == 0

    def test_start_enables_ticking(self, game):
        assert game.started
        assert game.state == "running"

    def test_default_high_score_comes_from_config(self, monkeypatch):
        monkeypatch.setenv("BUG_CROSSING_HIGH_SCORE", "120")
        assert Game(rng=random.Random(1)).high_score == 120

    def test_many_enemies_still_spawn(self):
        """Lane selection terminates even with more enemies than lane slots."""
        g = Game(high_score=0, rng=random.Random(11), num_enemies=12)
        g.start()
        assert all(enemy.lane in ENEMY_LANES for enemy in g.enemies)


class TestRunningTick:
    def test_every_enemy_advances_by_same_dt(self, game):
        start = [(enemy.x, enemy.speed) for enemy in game.enemies]
        game.update(0.1)
        for enemy, (x, speed) in zip(game.enemies, start):
            assert enemy.x == pytest.approx(x + speed * 0.1)
        assert game.elapsed == pytest.approx(0.1)

    def test_player_does_not_drift(self, game):
        game.update(0.25)
        assert (game.player.row, game.player.column) == (5, 2)

    def test_collision_ends_game(self, game):
        park_enemies(game)
        game.handle_input("up")
        bug = game.enemies[0]
        bug.lane = game.player.row
        bug.x = float(game.player.x)
        game.update(0.016)
        assert game.player.lost_game
        assert game.state == "show_result"
        assert game.result_message() == "Smushed!"

    def test_reaching_water_ends_game(self, game):
        park_enemies(game)
        walk_to_water(game)
        assert game.player.won_game
        assert game.state == "running"
        game.update(0.016)
        assert game.state == "show_result"

    def test_win_beats_collision_on_same_tick(self, game):
        park_enemies(game)
        walk_to_water(game)
        bug = game.enemies[0]
        bug.lane = game.player.row
        bug.x = float(game.player.x)
        game.update(0.016)
        assert game.player.won_game
        assert not game.player.lost_game
        assert game.state == "show_result"

    def test_nothing_moves_while_showing_result(self, game):
        park_enemies(game)
        walk_to_water(game)
        game.update(0.016)
        for enemy in game.enemies:
            enemy.speed = 50.0
        before = [enemy.x for enemy in game.enemies]
        game.update(1.0)
        assert [enemy.x for enemy in game.enemies] == before


class TestInput:
    def test_moves_score_points(self, game):
        assert game.handle_input("left")
        assert game.handle_input("left")
        assert game.current_score == 2
        # column 0: clamped, no points
        game.handle_input("left")
        assert game.player.column == 0
        assert game.current_score == 2

    def test_clamped_move_reports_no_change(self, game):
        game.handle_input("left")
        game.handle_input("left")
        assert not game.handle_input("left")
        assert not game.handle_input("down")
        assert game.current_score == 2

    def test_move_after_win_before_tick_reports_no_change(self, game):
        park_enemies(game)
        walk_to_water(game)
        assert game.state == "running"
        score = game.current_score
        assert not game.handle_input("left")
        assert game.current_score == score

    def test_win_scores_bonus(self, game):
        park_enemies(game)
        walk_to_water(game)
        assert game.current_score == (NUM_ROWS - 1) + WIN_BONUS

    def test_directions_ignored_while_showing_result(self, game):
        park_enemies(game)
        walk_to_water(game)
        game.update(0.016)
        score = game.current_score
        assert not game.handle_input("down")
        assert game.current_score == score
        assert game.player.row == 0

    @pytest.mark.parametrize("value", [None, "", "jump", "space", "UP"])
    def test_unknown_inputs_ignored(self, game, value):
        assert not game.handle_input(value)
        assert game.current_score == 0

    def test_restart_while_running_changes_nothing(self, game):
        game.handle_input("right")
        game.update(0.05)
        before = (
            game.state,
            game.current_score,
            game.high_score,
            game.elapsed,
            game.player.row,
            game.player.column,
            [(e.x, e.lane, e.speed) for e in game.enemies],
        )
        assert not game.handle_input(RESTART)
        after = (
            game.state,
            game.current_score,
            game.high_score,
            game.elapsed,
            game.player.row,
            game.player.column,
            [(e.x, e.lane, e.speed) for e in game.enemies],
        )
        assert after == before


class TestRestart:
    def test_restart_banks_high_score_and_resets(self, game):
        game.handle_input("up")
        game.update(0.2)
        game.current_score = 80
        game.state = "show_result"

        assert game.handle_input(RESTART)

        assert game.high_score == 80
        assert game.current_score == 0
        assert game.state == "running"
        assert game.elapsed == 0.0
        assert (game.player.row, game.player.column) == (5, 2)
        assert not game.player.won_game and not game.player.lost_game
        for enemy in game.enemies:
            assert enemy.x == -TILE_WIDTH
            assert enemy.lane in ENEMY_LANES

    def test_lower_score_keeps_high_score(self, game):
        game.current_score = 10
        game.state = "show_result"
        game.handle_input(RESTART)
        assert game.high_score == 53
        assert game.current_score == 0


class TestResultMessage:
    def test_new_high_score_wins_over_made_it(self, game):
        park_enemies(game)
        walk_to_water(game)
        assert game.result_message() == f"NEW HIGH SCORE:  {game.current_score}"

    def test_made_it_without_record(self):
        g = Game(high_score=1000, rng=random.Random(5))
        g.start()
        park_enemies(g)
        walk_to_water(g)
        assert g.result_message() == "You Made It!"

    def test_smushed_by_default(self, game):
        assert game.result_message() == "Smushed!"


class TestRender:
    def test_draw_order_while_running(self, game):
        renderer = RecordingRenderer()
        game.render(renderer)
        calls = renderer.calls
        tiles = NUM_ROWS * NUM_COLUMNS

        assert all(call[0] == "sprite" for call in calls[:tiles])
        assert calls[tiles] == ("overlay", OVERLAY_SCOREBOARD_BG, 0, 0, 53)
        assert calls[tiles + 1] == ("overlay", OVERLAY_SCOREBOARD_FG, *SCORE_FG_POS, 0)
        sprites = calls[tiles + 2:]
        assert [c[1] for c in sprites] == ["enemy-bug.png"] * NUM_ENEMIES + ["char-boy.png"]
        assert sprites[-1][2:] == (game.player.x, game.player.y)

    def test_results_overlay_drawn_last_when_over(self, game):
        park_enemies(game)
        walk_to_water(game)
        game.update(0.016)
        renderer = RecordingRenderer()
        game.render(renderer)
        assert renderer.calls[-1] == ("overlay", OVERLAY_RESULTS, 0, 0, game.result_message())
