from .analytics import LinkAnalytics

__all__ = ["LinkAnalytics"]
