from sokoconnect.models import DomainSnapshot
from sokoconnect.tools.market import MarketTool


def _markets(*rows):
    return DomainSnapshot.from_payload({"markets": list(rows)}).markets


def _market(name, county, *prices):
    return {
        "name": name,
        "county": county,
        "producePrices": [{"produceName": p, "price": v} for p, v in prices],
    }


def test_best_markets_sorted_by_price_descending(market_snapshot):
    tool = MarketTool(market_snapshot.markets)
    ranked = tool.best_markets("maize")
    assert [m.name for m, _ in ranked] == ["Nakuru Market", "Kiambu Market"]
    assert ranked[0][1].price == 50


def test_best_markets_keeps_original_order_on_ties():
    markets = _markets(
        _market("A", "Nairobi", ("Maize", 40)),
        _market("B", "Nakuru", ("Maize", 40)),
        _market("C", "Kisumu", ("Maize", 40)),
    )
    ranked = MarketTool(markets).best_markets("maize")
    assert [m.name for m, _ in ranked] == ["A", "B", "C"]


def test_best_markets_limited_to_three():
    markets = _markets(*[_market(f"M{i}", "Meru", ("Maize", 10 + i)) for i in range(5)])
    ranked = MarketTool(markets).best_markets("maize", limit=3)
    assert [m.name for m, _ in ranked] == ["M4", "M3", "M2"]


def test_markets_for_uses_case_insensitive_substring():
    markets = _markets(
        _market("Wakulima", "Nairobi", ("Tomatoes", 80)),
        _market("Kongowea", "Mombasa", ("Mangoes", 35)),
    )
    tool = MarketTool(markets)
    assert [m.name for m in tool.markets_for("tomato")] == ["Wakulima"]
    assert tool.markets_for("rice") == []


def test_price_for_returns_first_matching_entry():
    markets = _markets(_market("Mixed", "Nakuru", ("Maize flour", 70), ("Maize", 50)))
    price = MarketTool.price_for(markets[0], "maize")
    assert price.produce_name == "Maize flour"
