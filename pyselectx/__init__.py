"""
PySelectX: 可組合、可記憶化、支援非同步值的狀態選擇器。
"""
from .errors import PySelectXError, SelectorError, ValidationError
from .async_value import (
    AsyncValue, AsyncAwaitingValue, AsyncCommand, AsyncValueReceived,
    awaiting, command, received, is_async_value, match_async_value,
    combine_async_values
)
from .equality import are_same_reference, are_equal
from .tracked import TrackedInput, TrackedSelector, create_tracked_selector, some_has_changed
from .async_selector_result import (
    AsyncSelectorResult, make_async_selector_result, async_selector_result
)
from .async_selectors import AsyncSelector, CacheInfo, create_async_selector
from .props import NONE, merge_props, unwrap_result
from .streams import select_async

__version__ = "0.1.0"

# 匯出所有公開 API
__all__ = [
    # Errors
    "PySelectXError", "SelectorError", "ValidationError",

    # AsyncValue
    "AsyncValue", "AsyncAwaitingValue", "AsyncCommand", "AsyncValueReceived",
    "awaiting", "command", "received", "is_async_value", "match_async_value",
    "combine_async_values",

    # Equality
    "are_same_reference", "are_equal",

    # Tracked
    "TrackedInput", "TrackedSelector", "create_tracked_selector", "some_has_changed",

    # Results
    "AsyncSelectorResult", "make_async_selector_result", "async_selector_result",

    # Selectors
    "AsyncSelector", "CacheInfo", "create_async_selector",

    # Props
    "NONE", "merge_props", "unwrap_result",

    # Streams
    "select_async",
]
