import streamlit as st

from core.decorators.decorators import inject_logger
from core.models.watch_config import WatchRewardsConfig
from core.utils.config_loader import DEFAULT_CONFIG_PATH, load_config
from core.utils.number_format import format_currency
from ui.components.reward_ring import render_watch_rewards
from ui.dashboard.session import WatchSession

SESSION_KEY = "watch_rewards_session"


@inject_logger()
class WatchRewardsApp:
    log_level = "INFO"

    def __init__(self, env="local", config_path=DEFAULT_CONFIG_PATH):
        self.config = load_config(env=env, path=config_path)
        self.watch_config = WatchRewardsConfig.from_dict(self.config.get("watch_rewards", {}))
        self.refresh_secs = self.config.get("ui", {}).get("refresh_secs", 0.25)
        self.session = self._get_session()

    def _get_session(self):
        # Streamlit reruns this script on every interaction; the session
        # lives in session_state so ticking survives reruns.
        if SESSION_KEY not in st.session_state:
            st.session_state[SESSION_KEY] = WatchSession(self.watch_config)
            self.logger.info(f"✅ Session created with {self.watch_config}")
        return st.session_state[SESSION_KEY]

    def run(self):
        st.set_page_config(page_title="Watch Rewards", layout="centered")
        st.title("🎁 Watch Rewards")

        session = self.session

        col_start, col_pause, col_stop = st.columns(3)
        if col_start.button("▶️ Start"):
            session.command("start")
        if col_pause.button("⏸️ Pause"):
            session.command("pause")
        if col_stop.button("⏹️ Stop"):
            session.command("stop")

        @st.fragment(run_every=self.refresh_secs)
        def ring():
            render_watch_rewards(session.controller, on_tap=session.tap)
            if session.history:
                latest = format_currency(session.history[-1], self.watch_config.symbol, self.watch_config.decimal_digits)
                st.write(f"Cycles completed: {len(session.history)} · latest value {latest}")
            st.write(f"Taps: {len(session.taps)}")
            with st.expander("State"):
                st.json(session.controller.snapshot().to_dict())

        ring()


if __name__ == "__main__":
    WatchRewardsApp().run()
