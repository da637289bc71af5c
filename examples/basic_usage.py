#!/usr/bin/env python3
"""
Basic usage example for IndexEngine.

This script demonstrates how to use the IndexEngine programmatically.
"""

from indexengine import (
    InvalidInput, RiskAppetite, ScenarioEngine, ScenarioInput, TemplateCatalog, compute_scenario
)
from indexengine.gauges import build_gauges, format_level


def example_template_scenario():
    """Example: Project a catalog template."""
    print("\n" + "=" * 50)
    print("Example 1: Template Scenario")
    print("=" * 50)

    catalog = TemplateCatalog()
    scenario_input = catalog.seed_input("NDX", RiskAppetite.AGGRESSIVE)
    result = compute_scenario(scenario_input)

    print(f"\n30D Move: {format_level(result.thirty_day_move)}")
    print(f"Annual Drift: {result.annualized_drift:+.2%}")
    print(f"Call Target: {format_level(result.call_target)}")
    print(f"Put Target: {format_level(result.put_target)}")

    print("\nFutures Targets:")
    for target in result.futures_targets:
        print(f"  {target.tenor:>4}: {format_level(target.target)} ({target.confidence:.0%}) {target.narrative}")


def example_custom_input():
    """Example: Custom input with cached engine and gauges."""
    print("\n" + "=" * 50)
    print("Example 2: Custom Input")
    print("=" * 50)

    engine = ScenarioEngine()
    scenario_input = ScenarioInput(
        index_level=4500.0,
        annual_volatility=0.25,
        macro_momentum=0.1,
        risk_appetite=RiskAppetite.AGGRESSIVE,
    )
    result = engine.compute(scenario_input)
    gauges = build_gauges(scenario_input, result)

    print(f"\nSupport Cushion: {format_level(gauges.support_cushion)}")
    print(f"Breakout Energy: {format_level(gauges.breakout_level)}")
    print(f"Gamma Overlay: {gauges.gamma_overlay_pct:.1f}%")

    print("\nOption Suggestions:")
    for s in result.option_suggestions:
        print(f"  {s.label}: call {format_level(s.call_strike)} / put {format_level(s.put_strike)}")

    print("\nTechnical Anchors:")
    for lvl in result.technical_levels:
        print(f"  {lvl.label} ({lvl.type.value}): {format_level(lvl.level)}")


def example_invalid_input():
    """Example: Rejected input."""
    print("\n" + "=" * 50)
    print("Example 3: Invalid Input")
    print("=" * 50)

    try:
        compute_scenario(ScenarioInput(index_level=-1, annual_volatility=0.2, macro_momentum=0.0))
    except InvalidInput as e:
        print(f"\nRejected: {e}")


if __name__ == "__main__":
    example_template_scenario()
    example_custom_input()
    example_invalid_input()
