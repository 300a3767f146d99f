from core.decorators.decorators import inject_logger


@inject_logger()
class EventHook:
    """
    Minimal observer list. Listeners are called in subscription order;
    one that raises is logged and the rest still run.
    """

    def __init__(self, name="event"):
        self.name = name
        self._listeners = []

    def subscribe(self, listener):
        if not callable(listener):
            raise TypeError(f"❌ Listener for '{self.name}' must be callable, got {type(listener).__name__}")
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, *args):
        # Copy so a listener may unsubscribe itself mid-emit
        for listener in list(self._listeners):
            try:
                listener(*args)
            except Exception as e:
                self.logger.exception(f"⚠️ Listener for '{self.name}' failed: {e}")

    def clear(self):
        self._listeners.clear()

    def __len__(self):
        return len(self._listeners)
