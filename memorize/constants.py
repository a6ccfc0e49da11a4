"""
Game constants.

Static defaults for building a deck. No runtime configuration here -
pure constants only.
"""
from typing import Tuple

# 26 vehicles, all distinct so that content and identity stay aligned.
DEFAULT_CONTENT_POOL: Tuple[str, ...] = (
    "🚂", "🚑", "🚔", "🛳", "🛴", "🚕", "🚌", "🏎", "🛻", "🚚", "🚛", "🚜", "✈️",
    "🚀", "🛶", "🚍", "🚁", "⛵️", "🛸", "🚲", "🛵", "🏍", "🚒", "🚐", "🚎", "🚙",
)

# Number of leading cards shown when a new game starts.
DEFAULT_VISIBLE_COUNT: int = 4
