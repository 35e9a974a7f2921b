from __future__ import annotations

import pytest

from ict_logmaker.controller import LogMakerController
from ict_logmaker.identifiers import decode_dmc
from ict_logmaker.services.export_scheduler import SchedulerState


@pytest.fixture
def controller(settings, rng, clock):
    return LogMakerController(settings, rng=rng, clock=clock)


def test_nothing_happens_before_interval(controller, clock, settings):
    clock.advance(30)

    assert controller.scheduler.tick() == []
    assert controller.scheduler.state is SchedulerState.IDLE
    assert not settings.output_directory.exists()


def test_disabled_scheduler_never_fires(controller, clock, settings):
    settings.enabled = False
    clock.advance(3600)

    assert controller.scheduler.evaluate(clock()) is SchedulerState.IDLE
    assert controller.scheduler.tick() == []


def test_export_writes_one_file_per_board(controller, clock, settings):
    clock.advance(31)

    written = controller.scheduler.tick()

    assert [path.name for path in written] == [
        f"{position}-240201120031I3070CE0101BZ01" for position in range(1, 6)
    ]
    assert sorted(p.name for p in settings.output_directory.iterdir()) == sorted(p.name for p in written)
    content = written[0].read_text(encoding="utf-8")
    assert content.startswith("{@BATCH|DUMMY||0101|1||btest|240201120000|")
    assert "|240201120031||01|" in content.split("\n")[1]
    assert content.endswith("\n}}")
    assert controller.scheduler.state is SchedulerState.IDLE


def test_counters_advance_by_panel_count(controller, clock):
    clock.advance(31)
    controller.scheduler.tick()

    assert controller.run_state.next_sequence == 6
    assert controller.run_state.last_export_time == clock()

    clock.advance(10)
    assert controller.scheduler.tick() == []

    clock.advance(25)
    controller.scheduler.tick()
    panel = controller.scheduler.panel

    assert decode_dmc(panel.identifier).sequence == 6
    assert [decode_dmc(board.identifier).sequence for board in panel.boards] == [7, 8, 9, 10, 11]
    assert controller.run_state.next_sequence == 11


def test_batch_start_is_constant_across_cycles(controller, clock, settings):
    clock.advance(31)
    first = controller.scheduler.tick()
    clock.advance(31)
    second = controller.scheduler.tick()

    for path in first + second:
        assert path.read_text(encoding="utf-8").split("\n")[0].split("|")[7] == "240201120000"


def test_write_failure_propagates_and_keeps_counters(controller, clock, settings):
    settings.output_directory.parent.mkdir(parents=True, exist_ok=True)
    settings.output_directory.write_text("not a directory", encoding="utf-8")
    clock.advance(31)

    with pytest.raises(OSError):
        controller.scheduler.tick()

    assert controller.run_state.next_sequence == 1
    assert controller.scheduler.state is SchedulerState.IDLE


def test_ticker_stops_process_on_write_failure(controller, clock, settings):
    settings.output_directory.parent.mkdir(parents=True, exist_ok=True)
    settings.output_directory.write_text("not a directory", encoding="utf-8")
    clock.advance(31)

    with pytest.raises(SystemExit):
        controller.ticker.tick()


def test_status_reports_current_panel(controller, clock):
    assert controller.status()["panel"] is None

    clock.advance(31)
    controller.scheduler.tick()
    status = controller.status()

    assert status["next_sequence"] == 6
    assert status["last_export"] == "240201120031"
    assert status["batch_start_time"] == "240201120000"
    assert [board["position"] for board in status["panel"]["boards"]] == [1, 2, 3, 4, 5]
    assert status["ticker_running"] is False
