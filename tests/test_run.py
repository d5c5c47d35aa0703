"""Tests for the headless drivers and command line."""

from game.subboom.run import main, parse_script, run_headless, run_random_game
from game.subboom.sim import InputCommand, SubBoomSim


def test_parse_script():
    assert parse_script("L,L,B+R,-") == [
        [InputCommand.MOVE_LEFT],
        [InputCommand.MOVE_LEFT],
        [InputCommand.DROP_BOMB, InputCommand.MOVE_RIGHT],
        [InputCommand.NONE],
    ]


def test_scripted_run_moves_destroyer():
    sim = SubBoomSim(seed=0)
    x = sim.state.destroyer.rect.x

    summary = run_headless(sim, 10, script=parse_script("L,L,L,B"))

    assert sim.state.destroyer.rect.x == x - 6
    assert summary["tick"] == 10
    assert summary["num_bombs"] == 1


def test_script_quit_stops_early():
    sim = SubBoomSim(seed=0)

    summary = run_headless(sim, 10, script=parse_script("-,-,Q"))

    assert summary["round_state"] == "exit"
    assert summary["tick"] == 3


def test_random_game_summary():
    summary = run_random_game(frames=300, seed=5)

    assert summary["round"] >= 1
    assert summary["rounds_lost"] in (summary["round"] - 1, summary["round"])


def test_cli_headless_dumps_frame(tmp_path, capsys):
    out = tmp_path / "frame.png"

    main(["--headless", "--frames", "30", "--seed", "1", "--dump-frame", str(out)])

    assert out.exists()
    assert "Saved frame" in capsys.readouterr().out
