"""Model of a tile-grid tank battle: tanks, bullets, bonuses, enemy AI, pathfinding and level editing."""

__version__ = "0.1.0"