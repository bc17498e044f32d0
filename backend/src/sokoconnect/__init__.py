"""SokoConnect — Assistant conseil pour la place de marché agricole."""

__version__ = "1.0.0"
