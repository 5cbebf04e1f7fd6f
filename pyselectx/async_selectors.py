"""
基於 PySelectX 的非同步選擇器組合模組。

create_async_selector 將多個輸入選擇器 (普通或非同步) 與一個組合函數結合成新的選擇器：
依 AsyncValue 的優先規則合併輸入，只有在所有輸入都已取得值時才執行組合函數，
並以單一快取槽位記憶最近一次的輸入與結果。
"""
import logging
from typing import Any, Callable, List, NamedTuple, Optional, Sequence, Tuple

from .async_selector_result import AsyncSelectorResult, make_async_selector_result
from .async_value import AsyncValue, combine_async_values, received
from .equality import are_equal
from .errors import SelectorError, ValidationError
from .tracked import TrackedInput, TrackedSelector
from .types import Combinator, ComparisonKeys, EqualityFn, StateSelector

logger = logging.getLogger(__name__)


class CacheInfo(NamedTuple):
    hits: int
    misses: int
    maxsize: int
    currsize: int


class SelectorCache:
    """
    單槽位快取：只保存最近一次的比較鍵與對應結果，新結果直接取代舊結果。
    """

    def __init__(self):
        self.keys: Optional[ComparisonKeys] = None
        self.result: Optional[AsyncSelectorResult] = None
        self.hits = 0
        self.misses = 0

    def matches(self, keys: ComparisonKeys, equality_fns: Sequence[EqualityFn]) -> bool:
        """逐槽位比較新舊比較鍵；槽位數不同或尚無快取時視為不相符。"""
        if self.keys is None or len(self.keys) != len(keys):
            return False
        return all(
            equal(new_key, old_key)
            for equal, new_key, old_key in zip(equality_fns, keys, self.keys)
        )

    def store(self, keys: ComparisonKeys, result: AsyncSelectorResult) -> None:
        self.keys = keys
        self.result = result

    def clear(self) -> None:
        self.keys = None
        self.result = None
        self.hits = 0
        self.misses = 0


class _Slot(NamedTuple):
    # 記憶化用的比較鍵：普通選擇器為原始值，非同步選擇器為其 AsyncValue
    key: Any
    async_value: AsyncValue
    tracked: Tuple[TrackedInput, ...]
    equality_fn: EqualityFn


class AsyncSelector:
    """
    由 create_async_selector 產生的組合選擇器。

    呼叫時返回 AsyncSelectorResult；同一組比較鍵下返回同一個快取物件。

    屬性:
        selectors: 依宣告順序排列的輸入選擇器
        combinator: 所有輸入都已取得值時執行的組合函數
        name: 用於日誌與錯誤訊息的名稱
    """

    def __init__(
        self,
        selectors: Sequence[StateSelector[Any, Any]],
        combinator: Combinator,
        equality_fn: EqualityFn = are_equal,
        name: Optional[str] = None,
    ):
        self.selectors = tuple(selectors)
        self.combinator = combinator
        self.equality_fn = equality_fn
        self.name = name or getattr(combinator, "__name__", "async_selector")
        self.__name__ = self.name
        self._cache = SelectorCache()

    def _read_slot(self, select: Callable[[Any], Any], state: Any) -> _Slot:
        """執行單一輸入選擇器並整理出比較鍵、AsyncValue 與追蹤紀錄。"""
        if isinstance(select, TrackedSelector):
            entry = select.track(state)
            output, own_tracked, equality_fn = entry.value, (entry,), select.equality_fn
        else:
            output, own_tracked, equality_fn = select(state), (), self.equality_fn

        if isinstance(output, AsyncSelectorResult):
            return _Slot(
                output.async_value,
                output.async_value,
                output.tracked_user_input + own_tracked,
                equality_fn,
            )
        return _Slot(output, received(output), own_tracked, equality_fn)

    def __call__(self, state: Any) -> AsyncSelectorResult:
        slots = [self._read_slot(select, state) for select in self.selectors]
        keys = tuple(slot.key for slot in slots)

        if self._cache.matches(keys, [slot.equality_fn for slot in slots]):
            self._cache.hits += 1
            logger.debug("[%s] 快取命中", self.name)
            return self._cache.result

        # 組合函數出錯時直接向上拋出，快取保持不變
        async_value = combine_async_values([slot.async_value for slot in slots], self.combinator)
        tracked: List[TrackedInput] = []
        for slot in slots:
            tracked.extend(slot.tracked)
        result = make_async_selector_result(async_value, tracked)

        self._cache.store(keys, result)
        self._cache.misses += 1
        logger.debug("[%s] 重新計算，結果為 %s", self.name, type(async_value).__name__)
        return result

    def cache_info(self) -> CacheInfo:
        """返回快取統計 (hits, misses, maxsize, currsize)。"""
        currsize = 0 if self._cache.result is None else 1
        return CacheInfo(self._cache.hits, self._cache.misses, 1, currsize)

    def cache_clear(self) -> None:
        """清除快取與統計。"""
        self._cache.clear()

    def __repr__(self):
        return f"AsyncSelector(name={self.name!r}, inputs={len(self.selectors)})"


def create_async_selector(
    *selectors: Callable[[Any], Any],
    combinator: Optional[Combinator] = None,
    equality_fn: EqualityFn = are_equal,
    name: Optional[str] = None,
) -> AsyncSelector:
    """
    創建一個可處理非同步值的複合選擇器，支援單槽位記憶化

    Args:
        *selectors: 多個輸入選擇器；未以關鍵字提供 combinator 時，最後一個位置參數即為組合函數
        combinator: 組合函數，接收所有輸入選擇器解包後的值；可返回普通值或 AsyncValue
        equality_fn: 比較非追蹤槽位比較鍵的函數，預設為 are_equal
        name: 選擇器名稱，用於日誌，預設取組合函數的名稱

    Returns:
        AsyncSelector 實例

    Raises:
        SelectorError: 沒有輸入選擇器、選擇器或組合函數不可呼叫時
        ValidationError: equality_fn 不可呼叫時

    範例:
        >>> get_total = create_async_selector(
        ...     lambda state: state["str"],
        ...     lambda state: state["num"],
        ...     lambda s, n: len(s) + n,
        ... )
        >>> get_total({"num": 2, "str": "one"}).async_value
        AsyncValueReceived(value=5)
    """
    if combinator is None:
        if not selectors:
            raise SelectorError("必須提供組合函數", selector_name=name)
        *selectors, combinator = selectors

    if not callable(combinator):
        raise SelectorError("組合函數必須可呼叫", selector_name=name, combinator=combinator)
    if not selectors:
        raise SelectorError("至少需要一個輸入選擇器", selector_name=name)
    for index, select in enumerate(selectors):
        if not callable(select):
            raise SelectorError("輸入選擇器必須可呼叫", selector_name=name, index=index, selector=select)
    if not callable(equality_fn):
        raise ValidationError(
            "equality_fn 必須可呼叫", field="equality_fn", value=equality_fn, expected_type="Callable"
        )

    return AsyncSelector(selectors, combinator, equality_fn=equality_fn, name=name)
