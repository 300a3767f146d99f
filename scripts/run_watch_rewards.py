import os
import sys
import asyncio
import argparse

# Setup import path
sys.path.append(os.path.abspath("src"))

from core.decorators.decorators import inject_logger
from core.models.watch_config import WatchRewardsConfig
from core.utils.config_loader import DEFAULT_CONFIG_PATH, load_config
from rewards.controller import RewardProgressController
from rewards.handle import WatchRewardsHandle


@inject_logger()
class ConsoleWatchRunner:
    """Headless driver: ticks a controller until N reward cycles complete."""
    log_level = "INFO"

    def __init__(self, env="local", cycles=1, interval_ms=None, pause_secs=0.0, config_path=DEFAULT_CONFIG_PATH):
        config = load_config(env=env, path=config_path)
        section = dict(config.get("watch_rewards", {}))
        if interval_ms is not None:
            section["interval_ms"] = interval_ms
        section["auto_start"] = False

        if cycles < 1:
            raise ValueError(f"❌ cycles must be >= 1, got {cycles}")

        self.watch_config = WatchRewardsConfig.from_dict(section)
        self.cycles = cycles
        self.pause_secs = pause_secs
        self.logger.info(f"🎛️ Loaded env '{env}': {self.watch_config}")

    def render_bar(self, snapshot, width=30):
        filled = int(snapshot.progress * width)
        return f"[{'#' * filled}{'.' * (width - filled)}] {snapshot.tick_count:3d}/{snapshot.ticks_per_cycle}"

    async def run_async(self):
        done = asyncio.Event()
        completed = []

        def on_value_changed(value):
            completed.append(value)
            print(f"🎁 Cycle {len(completed)}/{self.cycles} → {controller.formatted_value}")
            if len(completed) >= self.cycles:
                done.set()

        def on_state_changed(snapshot):
            if snapshot.is_running and snapshot.tick_count % 10 == 0:
                print(self.render_bar(snapshot), end="\r", flush=True)

        handle = WatchRewardsHandle()
        controller = RewardProgressController.mount(
            self.watch_config, handle=handle, on_value_changed=on_value_changed
        )
        controller.on_state_changed.subscribe(on_state_changed)

        async with controller:
            handle.start()
            if self.pause_secs > 0:
                # Demonstrates that a pause keeps progress
                await asyncio.sleep(self.watch_config.interval_secs * self.watch_config.ticks_per_cycle / 2)
                handle.pause()
                print(f"\n⏸️ Paused at tick {controller.tick_count} for {self.pause_secs}s")
                await asyncio.sleep(self.pause_secs)
                handle.start()
            await done.wait()
            handle.stop()

        print(f"✅ Finished {len(completed)} cycle(s), final value {controller.formatted_value}")
        return completed

    def run(self):
        try:
            return asyncio.run(self.run_async())
        except KeyboardInterrupt:
            self.logger.info("🛑 Graceful shutdown.")
            return []


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the watch-rewards controller in the console")
    parser.add_argument("--env", type=str, default="local", help="Config environment (e.g., local, demo)")
    parser.add_argument("--config", type=str, default=DEFAULT_CONFIG_PATH, help="Path to config.yaml")
    parser.add_argument("--cycles", type=int, default=1, help="Number of reward cycles to run")
    parser.add_argument("--interval-ms", type=float, default=None, help="Override the tick interval in milliseconds")
    parser.add_argument("--pause-secs", type=float, default=0.0, help="Pause halfway through the first cycle")
    args = parser.parse_args(argv)
    if args.cycles < 1:
        parser.error(f"--cycles must be >= 1, got {args.cycles}")
    if args.pause_secs < 0:
        parser.error(f"--pause-secs must be >= 0, got {args.pause_secs}")
    return args


if __name__ == "__main__":
    args = parse_args()

    ConsoleWatchRunner(
        env=args.env,
        cycles=args.cycles,
        interval_ms=args.interval_ms,
        pause_secs=args.pause_secs,
        config_path=args.config,
    ).run()
