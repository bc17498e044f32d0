from sokoconnect.tools.buyers import BuyerDirectoryTool


def test_buyers_for_crop_and_location(demo_snapshot):
    tool = BuyerDirectoryTool(demo_snapshot.buyers)
    assert [b.name for b in tool.buyers_for("maize", "nakuru")] == ["Kenya Food Processing"]


def test_buyers_for_unknown_location(demo_snapshot):
    assert BuyerDirectoryTool(demo_snapshot.buyers).buyers_for("maize", "garissa") == []
