from unittest.mock import MagicMock, patch

from core.models.progress_state import ProgressState, RunState
from core.models.watch_config import WatchRewardsConfig
from ui.components.reward_ring import build_ring_figure, render_watch_rewards


def test_ring_figure_reflects_progress_and_value():
    snapshot = ProgressState(run_state=RunState.RUNNING, tick_count=25, reward_value=100.5)
    fig = build_ring_figure(snapshot, WatchRewardsConfig(symbol="$"))
    pie = fig.data[0]
    print("🧪 TEST: ring figure for 25/100 ticks")
    print("➡️ EXPECTED: filled share 0.25, label $100.50")
    print(f"✅ ACTUAL: values = {pie.values}, label = {fig.layout.annotations[0].text}")
    assert list(pie.values) == [0.25, 0.75]
    assert "$100.50" in fig.layout.annotations[0].text


def test_ring_figure_empty_at_cycle_start():
    fig = build_ring_figure(ProgressState(), WatchRewardsConfig())
    assert list(fig.data[0].values) == [0.0, 1.0]


def _controller(snapshot, config):
    controller = MagicMock()
    controller.snapshot.return_value = snapshot
    controller.config = config
    return controller


@patch("ui.components.reward_ring.st")
def test_render_shows_popup_and_forwards_tap(mock_st):
    mock_st.button.return_value = True
    config = WatchRewardsConfig(step_value=0.5, button_title="Claim")
    controller = _controller(ProgressState(just_incremented=True), config)

    render_watch_rewards(controller)

    popup_text = mock_st.markdown.call_args_list[0].args[0]
    assert "+ 0.5" in popup_text
    mock_st.plotly_chart.assert_called_once()
    mock_st.button.assert_called_once_with("Claim", key="watch_rewards_tap")
    controller.tap.assert_called_once_with()


@patch("ui.components.reward_ring.st")
def test_render_hides_popup_and_uses_custom_tap(mock_st):
    mock_st.button.return_value = True
    on_tap = MagicMock()
    controller = _controller(ProgressState(), WatchRewardsConfig())

    render_watch_rewards(controller, on_tap=on_tap)

    popup_text = mock_st.markdown.call_args_list[0].args[0]
    assert "+" not in popup_text
    on_tap.assert_called_once_with()
    controller.tap.assert_not_called()


@patch("ui.components.reward_ring.st")
def test_render_without_press_does_not_tap(mock_st):
    mock_st.button.return_value = False
    controller = _controller(ProgressState(), WatchRewardsConfig())
    render_watch_rewards(controller)
    controller.tap.assert_not_called()
