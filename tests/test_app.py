from cubengine.app import game_loop, main
from cubengine.entities import Game, init_player
from cubengine.keys import Key
from cubengine.systems import Context


def make_ctx():
    game = Game()
    player = init_player(game)
    return Context(game=game, frame_delay=0), player


def test_game_loop_moves_player_up():
    ctx, player = make_ctx()
    ctx.keys.keydown(Key.W)
    assert game_loop(ctx) == 0
    assert player.transform.pos_y == -2
    assert player.transform.pos_x == 0


def test_game_loop_accumulates_over_frames():
    ctx, player = make_ctx()
    ctx.keys.keydown(Key.D)
    game_loop(ctx)
    one = player.transform.pos_x
    game_loop(ctx)
    game_loop(ctx)
    assert player.transform.pos_x == 3 * one


def test_game_loop_stops_after_release():
    ctx, player = make_ctx()
    ctx.keys.keydown(Key.S)
    game_loop(ctx)
    moved = player.transform.pos_y
    ctx.keys.keyup(Key.S)
    game_loop(ctx)
    assert player.transform.pos_y == moved
    assert player.velocity.vel_y == 0


def test_game_loop_presents_each_frame():
    shown = []
    game = Game()
    init_player(game)
    ctx = Context(game=game, frame_delay=0, present=shown.append)
    game_loop(ctx)
    game_loop(ctx)
    assert len(shown) == 2
    assert all(frame is ctx.frame for frame in shown)


def test_main_fails_without_resources(tmp_path, capsys):
    assert main(["--res", str(tmp_path)]) == 1
    assert "cannot load image" in capsys.readouterr().err