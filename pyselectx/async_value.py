"""
基於 PySelectX 的 AsyncValue 定義模組。

AsyncValue 描述一個衍生值目前所處的狀態，只有三種互斥的變體：

- AsyncAwaitingValue: 尚無法取得值。
- AsyncCommand: 必須先由外部執行的一串指令 (可為空列表)。
- AsyncValueReceived: 已取得的值。

此處的 "async" 只是資料標記，本模組不執行任何非同步工作。
"""
from collections.abc import Iterable, Mapping
from typing import Any, Callable, List, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict
from typing_extensions import assert_never

from .errors import ValidationError


class AsyncAwaitingValue(BaseModel):
    """值尚未可用，沒有負載。"""
    model_config = ConfigDict(frozen=True, extra="forbid")


class AsyncCommand(BaseModel):
    """
    需要外部先行處理的指令序列。

    屬性:
        commands: 依序排列的指令，原樣保存 (只凍結容器本身)
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    commands: Tuple[Any, ...] = ()

    def __init__(self, commands: Sequence[Any] = (), **data: Any):
        super().__init__(commands=commands, **data)


class AsyncValueReceived(BaseModel):
    """
    已完整解析的值。

    屬性:
        value: 負載，原樣保存 (不複製、不轉換)
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    value: Any

    def __init__(self, value: Any, **data: Any):
        super().__init__(value=value, **data)


AsyncValue = Union[AsyncAwaitingValue, AsyncCommand, AsyncValueReceived]

_ASYNC_VALUE_TYPES = (AsyncAwaitingValue, AsyncCommand, AsyncValueReceived)

# 無負載，可共用同一個實例
_AWAITING = AsyncAwaitingValue()


def awaiting() -> AsyncAwaitingValue:
    """建立一個 AsyncAwaitingValue。"""
    return _AWAITING


def command(commands: Iterable[Any]) -> AsyncCommand:
    """
    建立一個 AsyncCommand。

    Args:
        commands: 指令序列，可為空；空列表仍代表 "有待處理的工作"

    Returns:
        AsyncCommand 實例

    Raises:
        ValidationError: commands 不是指令序列時
    """
    if isinstance(commands, (str, bytes, Mapping)) or not isinstance(commands, Iterable):
        raise ValidationError(
            "commands 必須是指令序列",
            field="commands",
            value=commands,
            expected_type="Sequence",
        )
    return AsyncCommand(tuple(commands))


def received(value: Any) -> AsyncValueReceived:
    """建立一個 AsyncValueReceived。"""
    return AsyncValueReceived(value)


def is_async_value(obj: Any) -> bool:
    """判斷物件是否為三種 AsyncValue 變體之一。"""
    return isinstance(obj, _ASYNC_VALUE_TYPES)


def match_async_value(
    value: AsyncValue,
    on_awaiting: Callable[[], Any],
    on_command: Callable[[Tuple[Any, ...]], Any],
    on_received: Callable[[Any], Any],
) -> Any:
    """
    對 AsyncValue 進行窮舉分派，每個變體對應一個處理函數。

    Args:
        value: 要分派的 AsyncValue
        on_awaiting: 處理 AsyncAwaitingValue
        on_command: 處理 AsyncCommand，接收指令元組
        on_received: 處理 AsyncValueReceived，接收負載

    Returns:
        被呼叫的處理函數的返回值
    """
    if isinstance(value, AsyncAwaitingValue):
        return on_awaiting()
    elif isinstance(value, AsyncCommand):
        return on_command(value.commands)
    elif isinstance(value, AsyncValueReceived):
        return on_received(value.value)
    else:
        assert_never(value)


def combine_async_values(values: Sequence[AsyncValue], combinator: Callable[..., Any]) -> AsyncValue:
    """
    依優先順序合併多個 AsyncValue。

    規則 (嚴格優先級 AsyncCommand > AsyncAwaitingValue > AsyncValueReceived)：
    1. 任一輸入為 AsyncCommand：依輸入順序串接所有指令，不執行 combinator。
    2. 否則任一輸入為 AsyncAwaitingValue：結果為 AsyncAwaitingValue，不執行 combinator。
    3. 否則以解包後的值依序呼叫 combinator 一次；若其返回 AsyncValue 則原樣返回，
       否則包裝為 AsyncValueReceived。

    Args:
        values: 依宣告順序排列的 AsyncValue
        combinator: 接收所有已解析值的組合函數

    Returns:
        合併後的 AsyncValue
    """
    values = list(values)
    commands: List[Any] = []
    has_command = False
    has_awaiting = False

    for value in values:
        if isinstance(value, AsyncCommand):
            has_command = True
            commands.extend(value.commands)
        elif isinstance(value, AsyncAwaitingValue):
            has_awaiting = True
        elif isinstance(value, AsyncValueReceived):
            pass
        else:
            assert_never(value)

    if has_command:
        return AsyncCommand(tuple(commands))
    if has_awaiting:
        return awaiting()

    result = combinator(*(value.value for value in values))
    if is_async_value(result):
        return result
    return received(result)
