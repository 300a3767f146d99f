from core.decorators.decorators import inject_logger
from core.events.event_hook import EventHook
from core.models.progress_state import ProgressState, RunState
from core.models.watch_config import WatchRewardsConfig
from core.utils.number_format import format_currency, format_step
from rewards.handle import WatchRewardsHandle
from rewards.tick_source import AsyncioTickSource


@inject_logger()
class RewardProgressController:
    """
    Drives the progress ring: one tick source advances `tick_count`, and
    every `ticks_per_cycle` ticks the reward grows by `step_value`.

    Commands issued from the wrong run state are ignored rather than
    raised. Events:
        on_state_changed(ProgressState)  after every tick and state change
        on_value_changed(float)          once per completed cycle
        on_tap()                         once per action-button press
    """
    log_level = "INFO"

    def __init__(self, config=None, on_value_changed=None, on_tap=None, tick_source_factory=None):
        self.config = config or WatchRewardsConfig()
        self.tick_source_factory = tick_source_factory or AsyncioTickSource

        self.on_state_changed = EventHook("state_changed")
        self.on_value_changed = EventHook("value_changed")
        self.on_tap = EventHook("tap")
        if on_value_changed is not None:
            self.on_value_changed.subscribe(on_value_changed)
        if on_tap is not None:
            self.on_tap.subscribe(on_tap)

        self._tick_source = None
        self._torn_down = False
        self._state = ProgressState(
            reward_value=float(self.config.initial_value),
            ticks_per_cycle=self.config.ticks_per_cycle,
        )
        self.logger.debug(f"🎛️ Controller ready: {self.config}")

    @classmethod
    def mount(cls, config=None, handle=None, tick_source_factory=None, **callbacks):
        """
        Build a controller the way a host view would: bind it to `handle`
        when one is supplied, otherwise start right away if `auto_start`.
        Starting needs a running asyncio loop unless a custom factory is used.
        """
        controller = cls(config=config, tick_source_factory=tick_source_factory, **callbacks)
        if handle is not None:
            handle.bind(controller)
        elif controller.config.auto_start:
            controller.start()
        return controller

    # ------------------------------------------------------------------ state

    @property
    def state(self) -> ProgressState:
        return self._state

    def snapshot(self) -> ProgressState:
        return self._state

    @property
    def run_state(self) -> RunState:
        return self._state.run_state

    @property
    def tick_count(self) -> int:
        return self._state.tick_count

    @property
    def reward_value(self) -> float:
        return self._state.reward_value

    @property
    def is_torn_down(self) -> bool:
        return self._torn_down

    @property
    def formatted_value(self) -> str:
        return format_currency(self._state.reward_value, self.config.symbol, self.config.decimal_digits)

    @property
    def step_label(self) -> str:
        return format_step(self.config.step_value)

    def handle(self) -> WatchRewardsHandle:
        return WatchRewardsHandle(self)

    # --------------------------------------------------------------- commands

    def start(self):
        if self._torn_down:
            self.logger.debug("🔕 start() after teardown ignored")
            return
        if self._state.run_state is RunState.RUNNING:
            self.logger.debug("⏭️ Already running, start() ignored")
            return

        if self._state.run_state is RunState.PAUSED and self._tick_source is not None:
            self._tick_source.resume()
            self.logger.info(f"▶️ Resumed at tick {self._state.tick_count}/{self.config.ticks_per_cycle}")
        else:
            source = self.tick_source_factory(self.config.interval_ms, self._handle_tick)
            source.start()
            self._tick_source = source
            self.logger.info(f"▶️ Started, tick every {self.config.interval_ms}ms")

        self._update(run_state=RunState.RUNNING)

    def stop(self):
        if self._state.run_state is RunState.STOPPED:
            self.logger.debug("⏭️ Already stopped, stop() ignored")
            return
        self._release_tick_source()
        self._update(run_state=RunState.STOPPED, tick_count=0)
        self.logger.info(f"⏹️ Stopped, reward stays at {self.formatted_value}")

    def pause(self):
        if self._state.run_state is not RunState.RUNNING:
            self.logger.debug(f"⏭️ pause() ignored while {self._state.run_state.value}")
            return
        self._tick_source.pause()
        self._update(run_state=RunState.PAUSED)
        self.logger.info(f"⏸️ Paused at tick {self._state.tick_count}/{self.config.ticks_per_cycle}")

    def tap(self):
        self.logger.debug("👆 Action button tapped")
        self.on_tap.emit()

    def teardown(self):
        """Release the tick source whatever the run state. Safe to call twice."""
        self._release_tick_source()
        if self._torn_down:
            return
        self._torn_down = True
        if self._state.run_state is not RunState.STOPPED:
            self._update(run_state=RunState.STOPPED, tick_count=0)
        self.on_state_changed.clear()
        self.on_value_changed.clear()
        self.on_tap.clear()
        self.logger.info("🧹 Controller torn down")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.teardown()
        return False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.teardown()
        return False

    # --------------------------------------------------------------- internal

    def _handle_tick(self):
        state = self._state
        if state.run_state is not RunState.RUNNING:
            return

        tick_count = state.tick_count + 1
        just_incremented = state.just_incremented
        reward_value = state.reward_value
        completed = False

        if tick_count == self.config.step_visible_ticks:
            just_incremented = False
        if tick_count >= self.config.ticks_per_cycle:
            just_incremented = True
            tick_count = 0
            reward_value = reward_value + self.config.step_value
            completed = True

        self._update(tick_count=tick_count, reward_value=reward_value, just_incremented=just_incremented)

        if completed:
            self.logger.info(f"🎁 Reward {self.step_label} → {self.formatted_value}")
            self.on_value_changed.emit(reward_value)

    def _release_tick_source(self):
        if self._tick_source is not None:
            self._tick_source.cancel()
            self._tick_source = None

    def _update(self, **changes):
        self._state = self._state.evolve(**changes)
        self.on_state_changed.emit(self._state)

    def __repr__(self):
        s = self._state
        return (
            f"RewardProgressController(run_state={s.run_state.value}, "
            f"tick={s.tick_count}/{s.ticks_per_cycle}, value={s.reward_value})"
        )
