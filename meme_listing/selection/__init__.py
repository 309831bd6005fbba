"""Token selection - maps listing entries to canonical Base tokens."""

from .mapper import TokenSelector, map_to_canonical

__all__ = ["TokenSelector", "map_to_canonical"]
