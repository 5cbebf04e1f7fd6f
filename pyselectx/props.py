"""
將非同步選擇器結果攤平成單一 props 字典的工具。

已取得的值會被解包；其他狀態一律以共用的 NONE 哨兵表示。
"""
from typing import Any, Dict, Mapping, Optional

from .async_selector_result import AsyncSelectorResult
from .async_value import match_async_value


class _NoneType:
    """表示 "尚無值" 的哨兵類型，全域只有一個實例。"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "NONE"

    def __reduce__(self):
        return (_NoneType, ())


NONE = _NoneType()


def unwrap_result(result: AsyncSelectorResult) -> Any:
    """返回已取得的值，其他狀態返回 NONE。"""
    return match_async_value(
        result.async_value,
        on_awaiting=lambda: NONE,
        on_command=lambda commands: NONE,
        on_received=lambda value: value,
    )


def merge_props(
    async_props: Mapping[str, AsyncSelectorResult],
    sync_props: Optional[Mapping[str, Any]] = None,
    dispatch_props: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    合併非同步、同步與 dispatch props。

    Args:
        async_props: prop 名稱到 AsyncSelectorResult 的映射
        sync_props: 同步 props，鍵衝突時覆蓋非同步 props
        dispatch_props: dispatch 綁定的 props，鍵衝突時覆蓋前兩者

    Returns:
        淺層合併後的新字典
    """
    props = {key: unwrap_result(result) for key, result in async_props.items()}
    props.update(sync_props or {})
    props.update(dispatch_props or {})
    return props
