"""
Exploration: resolve one engine configuration under several orderings.

Engines are single-use, so each ordering gets a freshly built engine.
"""

from .runner import Exploration, explore

__all__ = [
    "Exploration",
    "explore",
]
