import io
import time

import pytest

from altro.timer import Stopwatch, Timer, build_profile


def sample_profile():
    return {
        "al": 43088,
        "al/convergence_check": 0,
        "al/dual_update": 36,
        "al/ilqr": 41558,
        "al/ilqr/backward_pass": 2024,
        "al/ilqr/convergence_check": 0,
        "al/ilqr/cost": 247,
        "al/ilqr/expansions": 29548,
        "al/ilqr/forward_pass": 8750,
        "al/ilqr/forward_pass/cost": 2860,
        "al/ilqr/forward_pass/rollout": 5743,
        "al/ilqr/init": 0,
        "al/ilqr/stats": 274,
        "al/init": 257,
        "al/init/cost": 150,
        "al/penalty_update": 4,
        "al/stats": 25,
    }


def test_build_profile_links_parents():
    entries = build_profile(sample_profile())
    assert entries[1].parent is entries[0]
    assert entries[0].time == entries[1].time
    assert entries[2].parent is entries[1]
    for entry in entries[1:]:
        entry.calc_stats()
    assert entries[1].percent_total == 100
    assert entries[5].percent_total == 100 * 2024 // 43088
    assert entries[5].percent_parent == 100 * 2024 // 41558


def test_print_summary_layout():
    timer = Timer()
    out = io.StringIO()
    timer.set_output(out)
    timer.print_summary(sample_profile())
    lines = out.getvalue().splitlines()
    assert len(lines) == 2 + 17
    assert lines[0].startswith("Description")
    assert lines[1].startswith("------")
    assert lines[2].startswith("al")
    assert lines[3].startswith("  convergence_check")


def test_print_summary_to_file(tmp_path):
    path = tmp_path / "profiler_test.out"
    timer = Timer()
    timer.set_output(str(path))
    timer.print_summary(sample_profile())
    timer.close()
    lines = path.read_text().splitlines()
    assert lines[0].startswith("Description")
    assert lines[1].startswith("------")
    assert lines[2].startswith("al")
    assert lines[3].startswith("  convergence_check")


def test_set_output_bad_path_raises(tmp_path):
    timer = Timer()
    with pytest.raises(RuntimeError, match="Error opening profiler file"):
        timer.set_output(str(tmp_path / "missing" / "out.txt"))


def test_inactive_timer_records_nothing():
    timer = Timer()
    assert timer.is_active() is False
    with timer.start("base"):
        with timer.start("inner"):
            pass
    assert timer.times == {}


def test_active_timer_nests_names():
    timer = Timer()
    timer.activate()
    assert timer.is_active() is True
    with timer.start("base"):
        for _ in range(3):
            with timer.start("inner"):
                pass
    times = timer.times
    assert set(times) == {"base", "base/inner"}
    assert times["base"] >= times["base/inner"]


def test_times_accumulate():
    timer = Timer()
    timer.activate()
    for _ in range(2):
        with timer.start("x"):
            time.sleep(0.002)
    assert timer.times["x"] >= 3000


def test_stopwatch_stops_once():
    timer = Timer()
    timer.activate()
    sw = timer.start("a")
    first = sw.stop()
    recorded = timer.times["a"]
    assert first == recorded
    assert sw.stop() is None
    assert timer.times["a"] == recorded


def test_stopwatch_without_timer_returns_none():
    assert Stopwatch().stop() is None


def test_close_prints_summary_when_active():
    timer = Timer()
    timer.activate()
    out = io.StringIO()
    timer.set_output(out)
    with timer.start("al"):
        pass
    timer.close()
    text = out.getvalue()
    assert text.startswith("Description")
    assert "al" in text.splitlines()[2]


def test_close_inactive_prints_nothing():
    timer = Timer()
    out = io.StringIO()
    timer.set_output(out)
    timer.close()
    assert out.getvalue() == ""