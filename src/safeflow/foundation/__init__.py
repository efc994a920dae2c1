"""Foundation: error taxonomy and configuration shared by every layer."""

from .config import SafeflowSettings, clear_settings_cache, get_settings
from .errors import (
    ErrorCode,
    InvalidContainer,
    NoValuePresent,
    NullPayload,
    SafeflowError,
    UncheckedFault,
)

__all__ = [
    "ErrorCode", "SafeflowError", "NoValuePresent", "NullPayload", "InvalidContainer", "UncheckedFault",
    "SafeflowSettings", "get_settings", "clear_settings_cache",
]
