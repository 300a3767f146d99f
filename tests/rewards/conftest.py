import pytest
from unittest.mock import MagicMock

from core.models.watch_config import WatchRewardsConfig
from rewards.controller import RewardProgressController


class ManualTickSource:
    """Same interface as AsyncioTickSource, but ticks only when told to."""

    def __init__(self, interval_ms, callback):
        self.interval_ms = interval_ms
        self.callback = callback
        self.started = False
        self.paused = False
        self.cancelled = False

    @property
    def is_active(self):
        return self.started and not self.cancelled

    def start(self):
        self.started = True

    def pause(self):
        self.paused = True

    def resume(self):
        self.paused = False

    def cancel(self):
        self.cancelled = True

    def fire(self, n=1):
        for _ in range(n):
            if self.is_active and not self.paused:
                self.callback()


class ManualTickFactory:
    def __init__(self):
        self.sources = []

    def __call__(self, interval_ms, callback):
        source = ManualTickSource(interval_ms, callback)
        self.sources.append(source)
        return source

    @property
    def active_sources(self):
        return [s for s in self.sources if s.is_active]

    def fire(self, n=1):
        # Every live source fires, so a leaked duplicate shows up as double rate
        for _ in range(n):
            for source in self.active_sources:
                source.fire()


@pytest.fixture
def tick_factory():
    return ManualTickFactory()


@pytest.fixture
def on_value_changed():
    return MagicMock()


@pytest.fixture
def scenario_config():
    return WatchRewardsConfig(interval_ms=50, step_value=0.5, initial_value=100.0, ticks_per_cycle=100)


@pytest.fixture
def make_controller(tick_factory, on_value_changed):
    created = []

    def _make(config=None, **kwargs):
        kwargs.setdefault("on_value_changed", on_value_changed)
        controller = RewardProgressController(
            config=config or WatchRewardsConfig(),
            tick_source_factory=tick_factory,
            **kwargs,
        )
        created.append(controller)
        return controller

    yield _make

    for controller in created:
        controller.teardown()
