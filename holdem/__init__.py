"""Console Texas hold'em: deck handling, dealing, players and hand ranking."""

__version__ = "0.1.0"