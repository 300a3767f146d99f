# rewards/__init__.py

from rewards.controller import RewardProgressController
from rewards.handle import WatchRewardsHandle
from rewards.tick_source import AsyncioTickSource

__all__ = ["RewardProgressController", "WatchRewardsHandle", "AsyncioTickSource"]
