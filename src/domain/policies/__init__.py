"""Domain policies package."""

from .account_filters import has_activity, is_reportable

__all__ = ["has_activity", "is_reportable"]
