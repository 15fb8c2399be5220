import io
import threading
import time

import pytest

from sim.config import build_config
from sim.runner import run
from gol.render import CLEAR_SCREEN
from scripts import run_life, run_from_config


def test_runs_max_generations():
    out = io.StringIO()
    cfg = build_config({"width": 8, "height": 6, "delay": 0, "max_generations": 3,
                        "patterns": ["blinker@3,2"]})
    sim = run(cfg, out=out)
    assert sim.generation == 3
    text = out.getvalue()
    assert text.count("#" * 10 + "\n") == 6
    assert "generation=0 population=3" in text
    assert "generation=2 population=3" in text
    assert "generation=3" not in text


def test_zero_generations_renders_nothing():
    out = io.StringIO()
    sim = run(build_config({"delay": 0, "max_generations": 0}), out=out)
    assert sim.generation == 0
    assert out.getvalue() == ""


def test_stop_event_already_set():
    out = io.StringIO()
    stop = threading.Event()
    stop.set()
    sim = run(build_config({"delay": 0}), out=out, stop_event=stop)
    assert sim.generation == 0
    assert out.getvalue() == ""


def test_stop_event_interrupts_delay():
    stop = threading.Event()
    timer = threading.Timer(0.05, stop.set)
    cfg = build_config({"width": 8, "height": 8, "delay": 5.0})
    t0 = time.monotonic()
    timer.start()
    try:
        sim = run(cfg, out=io.StringIO(), stop_event=stop)
    finally:
        timer.cancel()
    assert time.monotonic() - t0 < 4.0
    assert sim.generation <= 1


def test_clear_and_no_stats():
    out = io.StringIO()
    cfg = build_config({"width": 4, "height": 3, "delay": 0, "max_generations": 1,
                        "clear_screen": True, "stats": False, "patterns": []})
    run(cfg, out=out)
    assert out.getvalue() == CLEAR_SCREEN + "######\n#    #\n#    #\n#    #\n######\n"


def test_csv_log(tmp_path):
    log = tmp_path / "logs" / "run.csv"
    cfg = build_config({"width": 16, "height": 16, "delay": 0, "max_generations": 2,
                        "log_csv": str(log)})
    run(cfg, out=io.StringIO())
    rows = log.read_text().splitlines()
    assert rows[0] == "generation,population"
    assert rows[1] == "0,5"
    assert [r.split(",")[0] for r in rows[1:]] == ["0", "1", "2"]


def test_cli_runs(capsys):
    code = run_life.main(["--width", "8", "--height", "6", "--delay", "0", "--max-generations", "2",
                          "--pattern", "square@1,1", "--alive", "@", "--no-stats"])
    assert code == 0
    out = capsys.readouterr().out
    assert out.count("#" * 10) == 4
    assert "# @@     #" in out
    assert "generation=" not in out


def test_cli_rejects_bad_config(capsys):
    with pytest.raises(SystemExit) as exc:
        run_life.main(["--width", "0"])
    assert exc.value.code == 2
    assert "width must be positive" in capsys.readouterr().err

    with pytest.raises(SystemExit):
        run_life.main(["--pattern", "unicorn"])

    with pytest.raises(SystemExit) as exc:
        run_life.main(["--seed", "-1", "--max-generations", "1", "--delay", "0"])
    assert exc.value.code == 2
    assert "seed must be >= 0" in capsys.readouterr().err


def test_cli_list_patterns(capsys):
    assert run_life.main(["--list-patterns"]) == 0
    out = capsys.readouterr().out
    assert "glider: 5 cells" in out
    assert "r-pentomino: 5 cells" in out


def test_run_from_config(tmp_path, capsys):
    p = tmp_path / "cfg.yaml"
    p.write_text("width: 10\nheight: 5\ndelay: 1.0\npatterns: ['blinker@4,1']\n")
    assert run_from_config.main(["--config", str(p), "--max-generations", "1", "--delay", "0"]) == 0
    out = capsys.readouterr().out
    assert "generation=0 population=3" in out


def test_run_from_config_missing_file(tmp_path):
    with pytest.raises(SystemExit):
        run_from_config.main(["--config", str(tmp_path / "nope.yaml")])
