"""
Request normalizers for the RMS order endpoints.
"""

from .condition_normalizer import (
    FieldOutcome,
    NormalizationResult,
    SearchOrderConditionNormalizer,
    normalize_search_condition,
)
from .update_normalizer import normalize_memo_update, normalize_shipping_update

__all__ = [
    "FieldOutcome",
    "NormalizationResult",
    "SearchOrderConditionNormalizer",
    "normalize_search_condition",
    "normalize_memo_update",
    "normalize_shipping_update",
]
