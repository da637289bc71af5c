"""
Tests for the dashboard figure builder.
"""

import pytest

from indexengine.dashboard import build_curve_figure
from indexengine.engine import compute_scenario


class TestCurveFigure:
    """Tests for build_curve_figure."""

    def test_curve_starts_at_spot(self, bullish_input):
        result = compute_scenario(bullish_input)
        fig = build_curve_figure(bullish_input, result)

        trace = fig.data[0]
        assert len(trace.y) == len(result.futures_targets) + 1
        assert trace.y[0] == 4500.0
        assert trace.y[-1] == pytest.approx(result.futures_targets[-1].target)
        assert list(fig.layout.xaxis.ticktext) == ["Spot", "1M", "3M", "6M", "12M"]

    def test_axis_range_covers_curve(self, bearish_input):
        result = compute_scenario(bearish_input)
        fig = build_curve_figure(bearish_input, result)

        low, high = fig.layout.yaxis.range
        assert all(low <= y <= high for y in fig.data[0].y)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
