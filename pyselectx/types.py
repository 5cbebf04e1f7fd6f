"""
PySelectX 共用類型定義。

集中存放選擇器、組合函數與相等性函數的類型別名與協議，
供其他模組與類型存根文件引用。
"""
from typing import Any, Callable, Tuple, TypeVar

from typing_extensions import Protocol

# 狀態類型
S = TypeVar("S")
S_contra = TypeVar("S_contra", contravariant=True)
# 選擇器輸出類型
T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
# 組合結果類型
R = TypeVar("R")


class StateSelector(Protocol[S_contra, T_co]):
    """從應用狀態中提取值的純函數。"""

    def __call__(self, state: S_contra) -> T_co: ...


class EqualityFn(Protocol):
    """純粹、完整且對稱的相等性比較函數 (a, b) -> bool。"""

    def __call__(self, a: Any, b: Any) -> bool: ...


# 組合函數：接收所有輸入選擇器解包後的值
Combinator = Callable[..., Any]

# 記憶化比較鍵：每個輸入槽位一個
ComparisonKeys = Tuple[Any, ...]
