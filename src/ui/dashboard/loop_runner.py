import asyncio
import threading

from core.decorators.decorators import inject_logger


@inject_logger()
class BackgroundLoop:
    """
    Owns an asyncio loop on a daemon thread so controllers keep ticking
    between Streamlit reruns. Everything that mutates a controller is
    posted onto this loop; the script thread only reads snapshots.
    """
    log_level = "INFO"

    def __init__(self, name="watch-rewards-loop"):
        self.loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._thread.start()
        self.logger.info(f"🧵 Background loop '{name}' started")

    @property
    def is_running(self):
        return self._thread.is_alive() and self.loop.is_running()

    def _run(self):
        asyncio.set_event_loop(self.loop)
        self.loop.run_forever()

    def call(self, fn, *args):
        """Fire-and-forget: schedule `fn(*args)` on the loop thread."""
        self.loop.call_soon_threadsafe(fn, *args)

    def run_sync(self, fn, *args, timeout=5.0):
        """Run `fn(*args)` on the loop thread and wait for its result."""
        async def _invoke():
            return fn(*args)

        future = asyncio.run_coroutine_threadsafe(_invoke(), self.loop)
        return future.result(timeout=timeout)

    def stop(self, timeout=5.0):
        if self.loop.is_closed():
            return
        if self._thread.is_alive():
            self.loop.call_soon_threadsafe(self.loop.stop)
            self._thread.join(timeout=timeout)
        self.loop.close()
        self.logger.info("🛑 Background loop stopped")
