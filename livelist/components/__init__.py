"""Reusable widgets for the live list screens."""

from .error_feedback import ErrorFeedbackView
from .loading_indicator import LoadingMoreIndicator, LoadingView

__all__ = ["ErrorFeedbackView", "LoadingMoreIndicator", "LoadingView"]
