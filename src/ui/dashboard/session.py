import weakref

from core.decorators.decorators import inject_logger
from rewards.controller import RewardProgressController
from rewards.handle import WatchRewardsHandle
from ui.dashboard.loop_runner import BackgroundLoop


def _shutdown(runner, controller):
    # Must not reference the session itself, or the finalizer keeps it alive
    if runner.is_running:
        runner.run_sync(controller.teardown)
    else:
        controller.teardown()
    runner.stop()


@inject_logger()
class WatchSession:
    """
    One browser session's controller plus the loop it ticks on.

    The controller is torn down and the loop stopped when `close()` is
    called, when the session is garbage collected (Streamlit drops its
    session_state), or at interpreter exit, whichever comes first.
    """
    log_level = "INFO"

    def __init__(self, watch_config, runner=None, tick_source_factory=None):
        self.runner = runner or BackgroundLoop()
        self.handle = WatchRewardsHandle()
        self.history = []
        self.taps = []

        self.controller = RewardProgressController.mount(
            watch_config,
            handle=self.handle,
            tick_source_factory=tick_source_factory,
            on_value_changed=self.history.append,
            on_tap=lambda taps=self.taps: taps.append(True),
        )
        self._finalizer = weakref.finalize(self, _shutdown, self.runner, self.controller)

        if watch_config.auto_start:
            self.runner.run_sync(self.handle.start)

    @property
    def closed(self):
        return not self._finalizer.alive

    def command(self, name):
        """Run start/stop/pause on the loop thread and wait for it."""
        self.runner.run_sync(getattr(self.handle, name))

    def tap(self):
        self.runner.call(self.controller.tap)

    def close(self):
        if self._finalizer.alive:
            self._finalizer()
            self.logger.info("🧹 Watch session closed")
