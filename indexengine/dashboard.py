"""
IndexEngine Dashboard
Interactive index targets & option guesses page.

Run with: streamlit run indexengine/dashboard.py
"""

from dataclasses import replace

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from indexengine.config import get_settings
from indexengine.engine import ScenarioEngine
from indexengine.gauges import build_gauges, format_level
from indexengine.models import DriftTone, LevelType, RiskAppetite, ScenarioInput, ScenarioResult
from indexengine.templates import TemplateCatalog
from indexengine.utils.logging import setup_logging

DRIFT_COLORS = {
    DriftTone.STRONG_BULLISH: "#34d399",
    DriftTone.BULLISH: "#7dd3fc",
    DriftTone.SOFT: "#fcd34d",
    DriftTone.BEARISH: "#fb7185",
}


def build_curve_figure(scenario_input: ScenarioInput, result: ScenarioResult) -> go.Figure:
    """Spot-to-furthest-tenor futures curve."""
    gauges = build_gauges(scenario_input, result)
    labels = ["Spot"] + [t.tenor for t in result.futures_targets]
    low, high = gauges.curve_bounds

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[p.x for p in gauges.curve],
        y=[p.y for p in gauges.curve],
        mode="lines+markers",
        text=labels,
        hovertemplate="%{text}: %{y:,.2f}<extra></extra>",
        line=dict(color="#1b7cff", width=3),
        fill="tozeroy",
        fillcolor="rgba(27,124,255,0.15)",
        name="Futures targets",
    ))
    fig.update_layout(
        height=280,
        margin=dict(l=10, r=10, t=10, b=10),
        showlegend=False,
        xaxis=dict(tickvals=[p.x for p in gauges.curve], ticktext=labels),
        yaxis=dict(range=[low, high]),
    )
    return fig


def get_engine() -> ScenarioEngine:
    if "engine" not in st.session_state:
        settings = get_settings()
        setup_logging(settings)
        st.session_state.engine = ScenarioEngine(settings)
    return st.session_state.engine


def render_controls(catalog: TemplateCatalog) -> tuple:
    st.sidebar.header("Index Setup")
    symbols = catalog.symbols()
    symbol = st.sidebar.selectbox(
        "Index Template",
        symbols,
        format_func=lambda s: f"{s} · {catalog.get(s).name} · {catalog.get(s).region}",
    )
    template = catalog.get(symbol)
    seeded = catalog.seed_input(symbol)

    level = st.sidebar.number_input("Spot Level", min_value=0.01, value=float(seeded.index_level), step=0.01)
    vol_pct = st.sidebar.slider("Annual Volatility (%)", 5, 60, int(round(seeded.annual_volatility * 100)))
    momentum_pct = st.sidebar.slider("Macro Momentum Tilt (%)", -15, 20, int(round(seeded.macro_momentum * 100)))
    appetite = st.sidebar.radio(
        "Risk Appetite",
        list(RiskAppetite),
        index=1,
        format_func=lambda r: r.label,
        horizontal=True,
    )

    scenario_input = replace(
        seeded,
        index_level=level,
        annual_volatility=vol_pct / 100,
        macro_momentum=momentum_pct / 100,
        risk_appetite=appetite,
    )
    return template, scenario_input


def main():
    st.set_page_config(page_title="IndexEngine", page_icon="📈", layout="wide")
    catalog = TemplateCatalog()
    template, scenario_input = render_controls(catalog)

    engine = get_engine()
    result = engine.compute(scenario_input)
    gauges = build_gauges(scenario_input, result)

    st.title("Index Targets & Option Guesses")
    st.caption(f"{template.symbol} template · {template.notes}")

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("30D Implied", format_level(result.thirty_day_move))
    col2.markdown(
        f"**Annual Drift**<br><span style='color:{DRIFT_COLORS[gauges.drift_tone]};font-size:1.6rem'>"
        f"{result.annualized_drift:+.2%}</span>",
        unsafe_allow_html=True,
    )
    col3.metric("Support Cushion", format_level(gauges.support_cushion))
    col4.metric("Breakout Energy", format_level(gauges.breakout_level))
    st.progress(int(gauges.cushion_width_pct), text="Support cushion")
    st.progress(int(gauges.breakout_width_pct), text="Breakout energy")

    st.subheader("Futures Targets")
    st.plotly_chart(build_curve_figure(scenario_input, result), use_container_width=True)
    st.dataframe(pd.DataFrame([
        {
            "Tenor": t.tenor,
            "Target": format_level(t.target),
            "Confidence": f"{t.confidence:.0%}",
            "Narrative": t.narrative,
        }
        for t in result.futures_targets
    ]), hide_index=True, use_container_width=True)

    st.subheader("Option Guesses")
    c1, c2, c3 = st.columns(3)
    c1.metric("Call Target", format_level(result.call_target))
    c1.caption(gauges.convexity_bias)
    c2.metric("Put Target", format_level(result.put_target))
    c2.caption("Anchor for downside hedges and collars around portfolio beta.")
    c3.metric("Gamma Overlay", f"{gauges.gamma_overlay_pct:.1f}%")
    c3.caption("Synthetic gauge of convexity demand relative to realized regime.")

    for col, suggestion in zip(st.columns(len(result.option_suggestions)), result.option_suggestions):
        col.markdown(f"**{suggestion.label}**")
        col.write(suggestion.rationale)
        col.write(f"Call strike · {format_level(suggestion.call_strike)}")
        col.write(f"Put strike · {format_level(suggestion.put_strike)}")

    st.subheader("Technical Anchors")
    for col, lvl in zip(st.columns(len(result.technical_levels)), result.technical_levels):
        if lvl.type == LevelType.SUPPORT:
            col.success(f"{lvl.label}\n\n**{format_level(lvl.level)}**")
        else:
            col.error(f"{lvl.label}\n\n**{format_level(lvl.level)}**")


if __name__ == "__main__":
    main()
