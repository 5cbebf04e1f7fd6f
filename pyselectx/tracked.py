"""
基於 PySelectX 的追蹤選擇器模組。

追蹤選擇器在返回值的同時記錄 (選擇器, 當時的值, 相等性函數)，
使用者之後可以用 some_has_changed 針對新狀態判斷組合結果是否可能改變，
而不必重新執行整棵選擇器樹。

注意：只有被追蹤的葉節點選擇器會留下紀錄，未追蹤的輸入對 some_has_changed 不可見。
"""
from typing import Any, Callable, Generic, Iterable

from pydantic import BaseModel, ConfigDict

from .errors import ValidationError
from .types import S, T


class TrackedInput(BaseModel):
    """
    單一葉節點選擇器的追蹤紀錄，建立後不可變。

    屬性:
        selector: 原始的選擇器函數
        value: 擷取當下選擇器產生的值
        equality_fn: 比較新舊值時使用的相等性函數
    """
    model_config = ConfigDict(frozen=True)

    selector: Callable[[Any], Any]
    value: Any
    equality_fn: Callable[[Any, Any], bool]

    def has_changed(self, state: Any) -> bool:
        """以新狀態重新執行選擇器，並與記錄的值比較。"""
        return not self.equality_fn(self.selector(state), self.value)


class TrackedSelector(Generic[S, T]):
    """
    包裝一個普通選擇器，使其可被 create_async_selector 追蹤。

    直接呼叫時行為與原選擇器相同；track(state) 則額外返回追蹤紀錄。
    """
    def __init__(self, selector: Callable[[S], T], equality_fn: Callable[[Any, Any], bool]):
        self.selector = selector
        self.equality_fn = equality_fn
        self.__name__ = getattr(selector, "__name__", type(self).__name__)

    def __call__(self, state: S) -> T:
        return self.selector(state)

    def track(self, state: S) -> TrackedInput:
        """執行選擇器並記錄結果。"""
        return TrackedInput(
            selector=self.selector,
            value=self.selector(state),
            equality_fn=self.equality_fn,
        )

    def __repr__(self):
        return f"TrackedSelector({self.__name__})"


def create_tracked_selector(
    selector: Callable[[S], T], equality_fn: Callable[[Any, Any], bool]
) -> TrackedSelector[S, T]:
    """
    創建一個追蹤選擇器。

    Args:
        selector: 要包裝的普通選擇器
        equality_fn: 純粹、對稱的相等性函數，通常為 are_same_reference

    Returns:
        TrackedSelector 實例

    Raises:
        ValidationError: selector 或 equality_fn 不可呼叫時

    範例:
        >>> get_num = create_tracked_selector(lambda state: state["num"], are_same_reference)
        >>> get_num({"num": 2})
        2
    """
    if not callable(selector):
        raise ValidationError("selector 必須可呼叫", field="selector", value=selector, expected_type="Callable")
    if not callable(equality_fn):
        raise ValidationError(
            "equality_fn 必須可呼叫", field="equality_fn", value=equality_fn, expected_type="Callable"
        )
    return TrackedSelector(selector, equality_fn)


def some_has_changed(tracked_inputs: Iterable[TrackedInput], state: Any) -> bool:
    """
    判斷任一追蹤輸入在新狀態下是否已改變。

    依序檢查，遇到第一個不相等的紀錄即返回 True；全部相等 (或沒有紀錄) 時返回 False。

    Args:
        tracked_inputs: 先前計算結果中的 tracked_user_input
        state: 候選的新狀態

    Returns:
        是否有任何輸入改變
    """
    return any(tracked.has_changed(state) for tracked in tracked_inputs)
