from .aspect import (
    ASPECT_RATIO_PATTERN,
    clamp,
    greatest_common_divisor,
    is_aspect_ratio,
    reduce_ratio,
)
from .types import MAX_DIMENSION, Resolution, compare, sort_key

__all__ = [
    # Value type
    "Resolution",
    "MAX_DIMENSION",
    # Ordering
    "compare",
    "sort_key",
    # Aspect-ratio arithmetic
    "ASPECT_RATIO_PATTERN",
    "is_aspect_ratio",
    "greatest_common_divisor",
    "reduce_ratio",
    "clamp",
]
