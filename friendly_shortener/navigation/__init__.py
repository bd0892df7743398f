from .navigator import (
    NOT_FOUND_ROUTE,
    BaseNavigator,
    RecordingNavigator,
    ResponseNavigator,
    follow_redirect,
)

__all__ = [
    "NOT_FOUND_ROUTE",
    "BaseNavigator",
    "RecordingNavigator",
    "ResponseNavigator",
    "follow_redirect",
]
