from honkpet.canvas import Canvas
from honkpet.flappybird import (
    JUMP_VELOCITY,
    PIPE_GAP,
    PIPE_INTERVAL,
    PIPE_SPEED,
    PIPE_WIDTH,
    SCREEN_W,
    START_Y,
    FlappyBird,
)


class _FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return self.value


def test_reset_state():
    game = FlappyBird(_FixedRng(20))
    assert game.bird_y == START_Y
    assert game.score == 0
    assert not any(p.active for p in game.pipes)


def test_falls_without_jump():
    game = FlappyBird(_FixedRng(20))
    assert game.step(False)
    assert game.bird_y > START_Y
    assert game.bird_vy > 0


def test_jump_rises_once_per_press():
    game = FlappyBird(_FixedRng(20))
    game.step(True)
    assert game.bird_y < START_Y
    first_vy = game.bird_vy
    game.step(True)
    assert game.bird_vy > first_vy
    assert game.already_jumped
    game.step(False)
    assert not game.already_jumped
    game.step(True)
    assert game.bird_vy < 0


def test_spawn_pipe_scores_and_uses_rng():
    rng = _FixedRng(30)
    game = FlappyBird(rng)
    game.spawn_pipe()
    pipe = game.pipes[0]
    assert pipe.active and pipe.x == SCREEN_W and pipe.y == 30
    assert game.score == 1
    assert rng.calls == [(0, 128 - PIPE_GAP)]


def test_spawn_when_full_does_nothing():
    game = FlappyBird(_FixedRng(30))
    game.spawn_pipe()
    game.spawn_pipe()
    game.spawn_pipe()
    assert game.score == 2


def test_update_pipes_moves_and_retires():
    game = FlappyBird(_FixedRng(30))
    game.spawn_pipe()
    game.update_pipes()
    assert game.pipes[0].x == SCREEN_W - PIPE_SPEED
    game.pipes[0].x = -PIPE_WIDTH + 1
    game.update_pipes()
    assert not game.pipes[0].active


def test_collision_with_screen_edges():
    game = FlappyBird(_FixedRng(30))
    game.bird_y = -1
    assert game.check_collision()
    game.bird_y = 129
    assert game.check_collision()
    game.bird_y = 64
    assert not game.check_collision()


def test_collision_with_pipe():
    game = FlappyBird(_FixedRng(0))
    game.spawn_pipe()
    game.pipes[0].x = 10
    game.bird_y = 20
    assert not game.check_collision()
    game.bird_y = 50
    assert game.check_collision()


def test_falling_ends_in_crash():
    game = FlappyBird(_FixedRng(40))
    frames = 0
    while game.step(False):
        frames += 1
        assert frames < 1000
    assert game.crashed
    assert not game.step(True)


def test_quit_ends_without_crash():
    game = FlappyBird(_FixedRng(40))
    assert not game.step(False, True)
    assert game.finished and not game.crashed


def test_rewards_cap_fun():
    game = FlappyBird(_FixedRng(40))
    game.score = 30
    assert game.rewards() == (20, 15)
    game.score = 5
    assert game.rewards() == (5, 2)


def test_draw_lights_bird():
    game = FlappyBird(_FixedRng(40))
    canvas = Canvas(128, 128)
    game.draw(canvas)
    assert canvas.get_pixel(10, int(START_Y)) == 1
    assert canvas.lit_count() > 0
    assert JUMP_VELOCITY < 0