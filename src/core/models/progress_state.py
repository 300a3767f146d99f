from dataclasses import dataclass, replace
from enum import Enum


class RunState(str, Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


@dataclass(frozen=True)
class ProgressState:
    """Read-only snapshot handed to the rendering layer after every change."""
    run_state: RunState = RunState.STOPPED
    tick_count: int = 0
    reward_value: float = 0.0
    just_incremented: bool = False
    ticks_per_cycle: int = 100

    @property
    def progress(self) -> float:
        return self.tick_count / self.ticks_per_cycle

    @property
    def is_running(self) -> bool:
        return self.run_state is RunState.RUNNING

    def evolve(self, **changes) -> "ProgressState":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "run_state": self.run_state.value,
            "tick_count": self.tick_count,
            "reward_value": self.reward_value,
            "just_incremented": self.just_incremented,
            "progress": self.progress,
        }
