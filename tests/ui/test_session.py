import gc

from core.models.progress_state import RunState
from core.models.watch_config import WatchRewardsConfig
from ui.dashboard.session import WatchSession


def test_close_tears_down_controller_and_loop():
    session = WatchSession(WatchRewardsConfig(interval_ms=1))
    runner, controller = session.runner, session.controller
    assert controller.run_state is RunState.RUNNING

    session.close()
    session.close()
    print("🧪 TEST: closing a watch session")
    print("➡️ EXPECTED: controller torn down, loop closed, second close harmless")
    print(f"✅ ACTUAL: torn_down = {controller.is_torn_down}, loop_closed = {runner.loop.is_closed()}")
    assert session.closed
    assert controller.is_torn_down
    assert controller.run_state is RunState.STOPPED
    assert runner.loop.is_closed()


def test_abandoned_session_is_cleaned_up():
    session = WatchSession(WatchRewardsConfig(interval_ms=1))
    runner, controller = session.runner, session.controller

    del session
    gc.collect()
    print("🧪 TEST: session dropped without close()")
    print("➡️ EXPECTED: finalizer releases the tick source and the loop thread")
    print(f"✅ ACTUAL: torn_down = {controller.is_torn_down}, loop_closed = {runner.loop.is_closed()}")
    assert controller.is_torn_down
    assert runner.loop.is_closed()
    assert not runner.is_running


def test_commands_and_taps_run_on_loop():
    session = WatchSession(WatchRewardsConfig(interval_ms=1, auto_start=False))
    try:
        assert session.controller.run_state is RunState.STOPPED
        session.command("start")
        assert session.controller.run_state is RunState.RUNNING
        session.command("pause")
        assert session.controller.run_state is RunState.PAUSED
        session.command("stop")
        assert session.controller.run_state is RunState.STOPPED

        session.tap()
        session.runner.run_sync(lambda: None)
        assert session.taps == [True]
    finally:
        session.close()
