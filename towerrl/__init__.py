"""Game logic for a tile-based roguelike: entities, coordinates, shapes, gear and templates."""

__version__ = "0.1.0"