import random

from honkpet.canvas import Canvas, Color
from honkpet.pong import (
    PET_WINS_MESSAGE,
    PLAYER_WINS_MESSAGE,
    Pong,
    level_up,
)


def make_game(level=1, seed=3):
    return Pong(level, random.Random(seed))


def test_level_up_crosses_threshold():
    xp, level = level_up(3, 4, 1)
    assert level == 2
    assert xp == 3 + 4 - 5


def test_level_up_needs_more_than_threshold():
    assert level_up(4, 1, 1) == (5, 1)


def test_level_up_keeps_level_below_threshold():
    assert level_up(2, 3, 3) == (5, 3)


def test_step_ball_forward_at_base_speed():
    game = make_game()
    game.step_ball_forward()
    assert game.ball_x == 12
    assert game.ball_y == 32


def test_re_energize_adds_level_tens():
    game = make_game(level=10)
    game.re_energize(1.0)
    assert game.ball_vx == 4.0
    assert game.ball_vy == 4.0


def test_re_energize_low_level_uses_amount_only():
    game = make_game(level=3)
    game.re_energize(1.0)
    assert game.ball_vx == 2.0


def test_low_level_enemy_tracks_ball():
    game = make_game(level=1)
    game.ball_y = 0.0
    game.enemy_ai()
    assert game.enemy_speed == 1.5
    assert game.enemy_paddle_y < 30


def test_mid_level_enemy_waits_for_ball():
    game = make_game(level=5)
    game.ball_x = 10.0
    game.ball_y = 0.0
    game.enemy_ai()
    assert game.enemy_paddle_y == 30
    game.ball_x = 100.0
    game.enemy_ai()
    assert game.enemy_paddle_y < 30


def test_high_level_enemy_stands_still():
    game = make_game(level=11)
    game.ball_x = 100.0
    game.ball_y = 0.0
    game.enemy_ai()
    assert game.enemy_paddle_y == 30


def test_enemy_paddle_clamped_to_screen():
    game = make_game(level=1)
    game.enemy_paddle_y = 0.0
    game.ball_y = 0.0
    game.enemy_ai()
    assert game.enemy_paddle_y == 0
    game.enemy_paddle_y = 200.0
    game.ball_y = 127.0
    game.enemy_ai()
    assert game.enemy_paddle_y == 128 - 20


def test_player_paddle_moves_toward_tilt():
    game = make_game()
    game.step(100)
    assert game.paddle_y > 0
    assert game.paddle_y == int(game.paddle_y)


def test_ball_past_right_edge_scores_for_player():
    game = make_game()
    game.ball_x = 127.0
    game.ball_y = 60.0
    game.step(0)
    assert game.score == 1
    assert game.enemy_score == 0


def test_ball_past_left_edge_scores_for_pet():
    game = make_game()
    game.paddle_y = 100
    game.ball_x = 1.0
    game.ball_y = 30.0
    game.ball_vx = -2.0
    game.step(100)
    assert game.enemy_score == 1


def test_fifth_point_ends_match():
    game = make_game()
    game.score = 4
    game.ball_x = 127.0
    game.ball_y = 60.0
    assert game.step(0) is False
    assert game.score == 5
    assert game.message == PLAYER_WINS_MESSAGE
    assert game.step(0) is False


def test_right_button_quits():
    game = make_game()
    assert game.step(0, right_held=True) is False
    assert game.message == PET_WINS_MESSAGE


def test_ball_stays_on_screen_vertically():
    rng = random.Random(7)
    game = Pong(2, rng)
    for _ in range(1000):
        if not game.step(rng.uniform(0, 126)):
            game = Pong(2, rng)
        assert 0 <= game.ball_y <= 127
        assert 0 <= game.enemy_paddle_y <= 108


def test_rewards_and_xp():
    game = make_game()
    game.score = 3
    game.enemy_score = 2
    assert game.rewards() == (5, 1)
    assert game.gained_xp() == 3


def test_draw_shows_paddles_and_ball():
    game = make_game()
    canvas = Canvas(128, 128)
    game.draw(canvas)
    assert canvas.get_pixel(125, 30) is Color.WHITE
    assert canvas.get_pixel(0, 0) is Color.WHITE
    assert canvas.get_pixel(10, 30) is Color.WHITE
    assert canvas.get_pixel(64, 100) is Color.BLACK