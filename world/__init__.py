"""
World module: initial level fields for the fluid grid.

Provides:
- Scenario generators (from generation.py)
"""

from world.generation import (
    SCENARIOS,
    generate_level_field,
    generate_random,
    generate_dam_break,
    generate_drop,
    generate_mist,
)

__all__ = [
    "SCENARIOS",
    "generate_level_field",
    "generate_random",
    "generate_dam_break",
    "generate_drop",
    "generate_mist",
]
