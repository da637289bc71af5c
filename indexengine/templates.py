"""
Index Template Catalog - read-only reference data for seeding scenarios.

Templates carry a baseline level, volatility and momentum per index. They are
only used to build an initial ScenarioInput; the engine never reads them.
"""

from typing import Iterator, List, Optional, Sequence, Tuple, Union
from loguru import logger

from indexengine.models import IndexTemplate, RiskAppetite, ScenarioInput


DEFAULT_TEMPLATES: Tuple[IndexTemplate, ...] = (
    IndexTemplate(
        symbol="SPX",
        name="S&P 500",
        region="US",
        baseline_level=5000.0,
        annual_volatility=0.16,
        macro_momentum=0.06,
        notes="Broad US large-cap benchmark; deep index options market.",
    ),
    IndexTemplate(
        symbol="NDX",
        name="Nasdaq 100",
        region="US",
        baseline_level=17500.0,
        annual_volatility=0.22,
        macro_momentum=0.09,
        notes="Mega-cap growth concentration amplifies rate sensitivity.",
    ),
    IndexTemplate(
        symbol="RUT",
        name="Russell 2000",
        region="US",
        baseline_level=2000.0,
        annual_volatility=0.24,
        macro_momentum=0.02,
        notes="Small caps; most exposed to domestic credit conditions.",
    ),
    IndexTemplate(
        symbol="DJI",
        name="Dow Jones Industrial Average",
        region="US",
        baseline_level=38500.0,
        annual_volatility=0.14,
        macro_momentum=0.04,
        notes="Price-weighted blue chips with a value tilt.",
    ),
    IndexTemplate(
        symbol="SX5E",
        name="Euro Stoxx 50",
        region="Europe",
        baseline_level=4900.0,
        annual_volatility=0.18,
        macro_momentum=0.03,
        notes="Eurozone leaders; banks and industrials drive beta.",
    ),
    IndexTemplate(
        symbol="UKX",
        name="FTSE 100",
        region="UK",
        baseline_level=7900.0,
        annual_volatility=0.13,
        macro_momentum=0.01,
        notes="Commodity and defensive heavy; sterling moves matter.",
    ),
    IndexTemplate(
        symbol="N225",
        name="Nikkei 225",
        region="Japan",
        baseline_level=38000.0,
        annual_volatility=0.21,
        macro_momentum=0.07,
        notes="Exporter heavy; tracks the yen and global cyclicals.",
    ),
    IndexTemplate(
        symbol="HSI",
        name="Hang Seng",
        region="Hong Kong",
        baseline_level=17000.0,
        annual_volatility=0.27,
        macro_momentum=-0.05,
        notes="China property and platform exposure keeps skew heavy.",
    ),
    IndexTemplate(
        symbol="NIFTY",
        name="Nifty 50",
        region="India",
        baseline_level=22500.0,
        annual_volatility=0.15,
        macro_momentum=0.1,
        notes="Domestic flows and earnings growth support the trend.",
    ),
)


class TemplateCatalog:
    """
    Ordered, read-only collection of index templates.

    Pass an instance to whatever seeds ScenarioInput values (CLI, dashboard);
    lookups are case-insensitive on the symbol.
    """

    def __init__(self, templates: Sequence[IndexTemplate] = DEFAULT_TEMPLATES):
        if not templates:
            raise ValueError("Template catalog cannot be empty")
        self._templates: Tuple[IndexTemplate, ...] = tuple(templates)
        self._by_symbol = {t.symbol.upper(): t for t in self._templates}
        if len(self._by_symbol) != len(self._templates):
            raise ValueError("Template symbols must be unique")

    def __iter__(self) -> Iterator[IndexTemplate]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and symbol.upper() in self._by_symbol

    def symbols(self) -> List[str]:
        return [t.symbol for t in self._templates]

    def default(self) -> IndexTemplate:
        """First template in catalog order."""
        return self._templates[0]

    def find(self, symbol: str) -> Optional[IndexTemplate]:
        return self._by_symbol.get(symbol.upper())

    def get(self, symbol: str) -> IndexTemplate:
        template = self.find(symbol)
        if template is None:
            raise KeyError(f"Unknown index template: {symbol}")
        return template

    def seed_input(
        self,
        symbol: Optional[str] = None,
        risk_appetite: Union[RiskAppetite, str] = RiskAppetite.NEUTRAL
    ) -> ScenarioInput:
        """
        Build a ScenarioInput from a template's baselines.

        Args:
            symbol: Template symbol; the catalog default when None
            risk_appetite: Appetite to attach to the seeded input

        Returns:
            ScenarioInput populated from the template
        """
        template = self.default() if symbol is None else self.get(symbol)
        logger.debug(f"Seeding scenario from template {template.symbol}")
        return ScenarioInput(
            index_level=template.baseline_level,
            annual_volatility=template.annual_volatility,
            macro_momentum=template.macro_momentum,
            risk_appetite=risk_appetite,
        )
