"""Custom exception hierarchy for the homecost engine."""

from __future__ import annotations


class HomeCostError(Exception):
    """Base exception for all homecost errors."""


class InvalidInputError(HomeCostError):
    """Raised when an input cannot produce a meaningful estimate."""


class CostConfigError(HomeCostError):
    """Raised when a cost configuration feed is malformed."""


class UpsellEvaluationError(HomeCostError):
    """Raised when a single upsell candidate cannot be priced."""


class RecordVersionError(HomeCostError):
    """Raised when a persisted record carries an unknown schema version."""
