from typing import Any

from .async_value import AsyncCommand, AsyncValueReceived


def are_same_reference(a: Any, b: Any) -> bool:
    """以物件身分 (is) 比較。"""
    return a is b


def are_equal(a: Any, b: Any) -> bool:
    """
    記憶化比較鍵的預設相等性：類型必須相同，容器與 AsyncValue 負載逐層比較。

    1 與 True、1 與 1.0 視為不相等；比較本身出錯時視為不相等。
    """
    try:
        if a is b:
            return True
        if type(a) is not type(b):
            return False
        if isinstance(a, AsyncValueReceived):
            return are_equal(a.value, b.value)
        if isinstance(a, AsyncCommand):
            return are_equal(a.commands, b.commands)
        if isinstance(a, dict):
            if len(a) != len(b):
                return False
            return all(key in b and are_equal(value, b[key]) for key, value in a.items())
        if isinstance(a, (list, tuple)):
            if len(a) != len(b):
                return False
            return all(are_equal(x, y) for x, y in zip(a, b))
        return bool(a == b)
    except Exception:
        return False
