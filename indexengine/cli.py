"""
CLI Interface for IndexEngine.
Provides command-line access to the scenario projection engine.
"""

import argparse
import json
import sys
from dataclasses import replace
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from indexengine import __version__
from indexengine.config import EngineConfig, Settings, get_settings
from indexengine.engine import ScenarioEngine
from indexengine.gauges import build_gauges, format_level
from indexengine.models import DriftTone, InvalidInput, LevelType, ScenarioInput, ScenarioResult
from indexengine.templates import TemplateCatalog
from indexengine.utils.logging import setup_logging


console = Console()

DRIFT_STYLES = {
    DriftTone.STRONG_BULLISH: "green",
    DriftTone.BULLISH: "cyan",
    DriftTone.SOFT: "yellow",
    DriftTone.BEARISH: "red",
}


def print_banner():
    """Print the engine banner."""
    console.print(
        Panel(
            f"IndexEngine v{__version__} - Index Targets & Option Guesses",
            border_style="blue"
        ),
        style="bold blue"
    )


def print_templates(catalog: TemplateCatalog):
    table = Table(title="Index Templates", show_header=True, header_style="bold magenta")
    table.add_column("Symbol", style="bold", width=8)
    table.add_column("Name")
    table.add_column("Region")
    table.add_column("Level", justify="right")
    table.add_column("Vol", justify="right")
    table.add_column("Momentum", justify="right")
    table.add_column("Notes")

    for t in catalog:
        table.add_row(
            t.symbol,
            t.name,
            t.region,
            format_level(t.baseline_level),
            f"{t.annual_volatility:.1%}",
            f"{t.macro_momentum:+.1%}",
            t.notes
        )

    console.print(table)


def print_scenario(symbol: str, scenario_input: ScenarioInput, result: ScenarioResult):
    """Print a projected scenario as panels and tables."""
    gauges = build_gauges(scenario_input, result)
    drift_style = DRIFT_STYLES[gauges.drift_tone]

    console.print(Panel(f"""
    Template: {symbol}
    Spot Level: {format_level(scenario_input.index_level)}
    Annual Volatility: {scenario_input.annual_volatility:.1%}
    Macro Momentum: {scenario_input.macro_momentum:+.1%}
    Risk Appetite: {scenario_input.risk_appetite.label}
    """, title="Index Setup", border_style="blue"))

    console.print(Panel(f"""
    30D Implied Move: {format_level(result.thirty_day_move)}
    Annual Drift: [{drift_style}]{result.annualized_drift:+.2%}[/{drift_style}]
    Support Cushion: {format_level(gauges.support_cushion)} ({gauges.cushion_width_pct:.0f}%)
    Breakout Energy: {format_level(gauges.breakout_level)} ({gauges.breakout_width_pct:.0f}%)
    """, title="Volatility Signature", border_style="green"))

    targets = Table(title="Futures Targets", show_header=True, header_style="bold magenta")
    targets.add_column("Tenor", style="cyan", width=5)
    targets.add_column("Target", justify="right")
    targets.add_column("Conf", justify="right")
    targets.add_column("Narrative")
    for t in result.futures_targets:
        targets.add_row(t.tenor, format_level(t.target), f"{t.confidence:.0%}", t.narrative)
    console.print(targets)

    console.print(Panel(f"""
    Call Target: {format_level(result.call_target)}
    Put Target: {format_level(result.put_target)}
    Gamma Overlay: {gauges.gamma_overlay_pct:.1f}%
    {gauges.convexity_bias}
    """, title="Option Guesses", border_style="cyan"))

    options = Table(show_header=True, header_style="bold magenta")
    options.add_column("Profile", style="bold")
    options.add_column("Call Strike", justify="right")
    options.add_column("Put Strike", justify="right")
    options.add_column("Rationale")
    for s in result.option_suggestions:
        options.add_row(s.label, format_level(s.call_strike), format_level(s.put_strike), s.rationale)
    console.print(options)

    anchors = Table(title="Technical Anchors", show_header=True, header_style="bold magenta")
    anchors.add_column("Anchor")
    anchors.add_column("Level", justify="right")
    anchors.add_column("Type")
    for lvl in result.technical_levels:
        style = "green" if lvl.type == LevelType.SUPPORT else "red"
        anchors.add_row(lvl.label, format_level(lvl.level), f"[{style}]{lvl.type.value}[/{style}]")
    console.print(anchors)


def project(args: argparse.Namespace, settings: Settings, catalog: TemplateCatalog) -> int:
    symbol = args.symbol or settings.default_template
    if symbol not in catalog:
        console.print(f"[red]Unknown template: {symbol}. Choose from {', '.join(catalog.symbols())}[/red]")
        return 2

    seeded = catalog.seed_input(symbol, args.risk or settings.default_risk_appetite)
    overrides = {
        "index_level": args.level,
        "annual_volatility": args.vol,
        "macro_momentum": args.momentum,
    }
    scenario_input = replace(seeded, **{k: v for k, v in overrides.items() if v is not None})

    engine = ScenarioEngine(settings)
    try:
        normalized = engine.pipeline.normalizer.normalize(scenario_input)
        result = engine.compute(normalized)
    except InvalidInput as e:
        console.print(f"[red]{e}[/red]")
        return 2

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_banner()
        print_scenario(catalog.get(symbol).symbol, normalized, result)
    return 0


def print_status(settings: Settings):
    print_banner()
    console.print(f"""
    Configuration:
    - Log Level: {settings.log_level}
    - Scenario Cache: {'enabled' if settings.scenario_cache_enabled else 'disabled'} (ttl {settings.scenario_cache_ttl}s, max {settings.scenario_cache_max_entries})
    - Default Template: {settings.default_template}
    - Default Risk Appetite: {settings.default_risk_appetite}

    Model Constants:
    - Volatility Range: {EngineConfig.VOLATILITY_FLOOR} to {EngineConfig.VOLATILITY_CEILING}
    - Drift Multipliers: {EngineConfig.DRIFT_MULTIPLIERS}
    - Convexity Multipliers: {EngineConfig.CONVEXITY_MULTIPLIERS}
    - Tenors: {', '.join(EngineConfig.tenor_labels())}
    - Option Profiles: {', '.join(EngineConfig.profile_labels())}
    """)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="IndexEngine - Index Scenario Projection Engine"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("templates", help="List index templates")

    project_parser = subparsers.add_parser("project", help="Project a scenario")
    project_parser.add_argument("symbol", nargs="?", help="Template symbol (default from settings)")
    project_parser.add_argument("--level", type=float, help="Override spot level")
    project_parser.add_argument("--vol", type=float, help="Override annual volatility (0.18 = 18%%)")
    project_parser.add_argument("--momentum", type=float, help="Override macro momentum (0.05 = 5%%)")
    project_parser.add_argument(
        "--risk",
        choices=sorted(EngineConfig.DRIFT_MULTIPLIERS),
        help="Risk appetite"
    )
    project_parser.add_argument("--json", action="store_true", help="Print result as JSON")

    subparsers.add_parser("status", help="Show engine configuration")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    if args.verbose:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    setup_logging(settings)
    catalog = TemplateCatalog()

    if args.command == "templates":
        print_templates(catalog)
    elif args.command == "project":
        return project(args, settings, catalog)
    elif args.command == "status":
        print_status(settings)
    else:
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
