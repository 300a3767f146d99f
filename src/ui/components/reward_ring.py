import streamlit as st
import plotly.graph_objects as go

from core.utils.number_format import format_currency, format_step

FOREGROUND_COLOR = "#e53935"
BACKGROUND_COLOR = "#fce4ec"


def build_ring_figure(snapshot, config, foreground_color=FOREGROUND_COLOR,
                      background_color=BACKGROUND_COLOR, radius=64):
    filled = min(max(snapshot.progress, 0.0), 1.0)
    label = format_currency(snapshot.reward_value, config.symbol, config.decimal_digits)

    fig = go.Figure(go.Pie(
        values=[filled, 1.0 - filled],
        hole=0.85,
        sort=False,
        direction="clockwise",
        marker=dict(colors=[foreground_color, background_color]),
        textinfo="none",
        hoverinfo="skip",
        showlegend=False,
    ))
    fig.update_layout(
        width=radius * 2,
        height=radius * 2,
        margin=dict(l=0, r=0, t=0, b=0),
        paper_bgcolor="rgba(0,0,0,0)",
        annotations=[dict(
            text=f"<b>{label}</b>",
            x=0.5,
            y=0.5,
            showarrow=False,
            font=dict(color=foreground_color, size=max(10, radius // 5)),
        )],
    )
    return fig


def render_watch_rewards(controller, config=None, on_tap=None, key="watch_rewards"):
    """
    Draw popup, ring and action button for the controller's current
    snapshot. `on_tap` defaults to `controller.tap`.
    """
    config = config or controller.config
    snapshot = controller.snapshot()
    on_tap = on_tap or controller.tap

    if snapshot.just_incremented:
        st.markdown(f"<span style='color:{FOREGROUND_COLOR};font-weight:bold'>{format_step(config.step_value)}</span>",
                    unsafe_allow_html=True)
    else:
        st.markdown("&nbsp;", unsafe_allow_html=True)

    st.plotly_chart(build_ring_figure(snapshot, config), use_container_width=False, key=f"{key}_ring")
    st.caption(f"{snapshot.run_state.value} · tick {snapshot.tick_count}/{snapshot.ticks_per_cycle}")

    if st.button(config.button_title, key=f"{key}_tap"):
        on_tap()
