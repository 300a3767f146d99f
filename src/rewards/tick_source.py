import asyncio

from core.decorators.decorators import inject_logger


@inject_logger()
class AsyncioTickSource:
    """
    Periodic timer on the running asyncio loop.

    `pause()` keeps the task alive and only gates delivery, so a later
    `resume()` continues on the same task. `cancel()` releases the task
    for good; call `start()` again to get a fresh one.
    """

    def __init__(self, interval_ms, callback):
        if interval_ms <= 0:
            raise ValueError(f"❌ interval_ms must be > 0, got {interval_ms}")
        self.interval_secs = interval_ms / 1000.0
        self.callback = callback
        self._task = None
        self._resumed = None

    @property
    def is_active(self):
        return self._task is not None and not self._task.done()

    def start(self):
        if self.is_active:
            self.logger.debug("⏭️ Tick source already active, ignoring start()")
            return
        loop = asyncio.get_running_loop()
        self._resumed = asyncio.Event()
        self._resumed.set()
        self._task = loop.create_task(self._run())
        self.logger.debug(f"⏱️ Tick source started every {self.interval_secs * 1000:.0f}ms")

    def pause(self):
        if self.is_active:
            self._resumed.clear()

    def resume(self):
        if self.is_active:
            self._resumed.set()

    def cancel(self):
        if self._task is not None:
            self._task.cancel()
            self._task = None
            self.logger.debug("🛑 Tick source cancelled")

    async def _run(self):
        while True:
            await self._resumed.wait()
            await asyncio.sleep(self.interval_secs)
            # Paused while sleeping: drop this tick
            if not self._resumed.is_set():
                continue
            try:
                self.callback()
            except Exception as e:
                self.logger.exception(f"⚠️ Tick callback failed: {e}")
