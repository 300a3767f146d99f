from core.decorators.decorators import inject_logger


@inject_logger()
class WatchRewardsHandle:
    """
    External holder for a controller's start/stop/pause commands.
    Commands issued before a controller is bound are ignored.
    """

    def __init__(self, controller=None):
        self._controller = None
        if controller is not None:
            self.bind(controller)

    @property
    def is_bound(self):
        return self._controller is not None

    def bind(self, controller):
        self._controller = controller

    def unbind(self):
        self._controller = None

    def start(self):
        self._dispatch("start")

    def stop(self):
        self._dispatch("stop")

    def pause(self):
        self._dispatch("pause")

    def _dispatch(self, command):
        if self._controller is None:
            self.logger.debug(f"🔕 {command}() ignored, no controller bound")
            return
        getattr(self._controller, command)()
