from .life import random_table, rollout, run_until_extinct
from .patterns import PATTERNS, place_pattern

__all__ = [
    "random_table",
    "rollout",
    "run_until_extinct",
    "PATTERNS",
    "place_pattern",
]
