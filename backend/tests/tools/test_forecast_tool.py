import pytest

from sokoconnect.models import Forecast
from sokoconnect.tools.forecast import ForecastTool


def _forecast(county, demand, confidence="high", produce="Maize"):
    return Forecast(
        produce_name=produce,
        county=county,
        period="June 2025",
        expected_production=100,
        expected_demand=demand,
        confidence_level=confidence,
    )


def test_peak_demand_picks_highest_expected_demand():
    tool = ForecastTool([_forecast("Kisumu", 100), _forecast("Nakuru", 200)])
    assert tool.peak_demand("maize").county == "Nakuru"


def test_peak_demand_tie_keeps_first():
    tool = ForecastTool([_forecast("Kisumu", 200), _forecast("Nakuru", 200)])
    assert tool.peak_demand("maize").county == "Kisumu"


def test_peak_demand_none_when_no_forecast():
    tool = ForecastTool([_forecast("Nakuru", 200, produce="Potatoes")])
    assert tool.peak_demand("maize") is None


@pytest.mark.parametrize("level,margin", [
    ("high", "±5%"),
    ("medium", "±10%"),
    ("low", "±20%"),
    ("unknown", "±20%"),
    (None, "±20%"),
])
def test_error_margin_mapping(level, margin):
    assert ForecastTool.error_margin(_forecast("Nakuru", 1, confidence=level)) == margin
