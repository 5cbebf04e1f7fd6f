from typing import Iterable, Tuple, Union

from pydantic import BaseModel, ConfigDict, InstanceOf

from .async_value import AsyncAwaitingValue, AsyncCommand, AsyncValue, AsyncValueReceived, is_async_value
from .errors import ValidationError
from .tracked import TrackedInput


class AsyncSelectorResult(BaseModel):
    """
    非同步選擇器的輸出：合併後的 AsyncValue 加上其下所有追蹤葉節點的紀錄。

    屬性:
        async_value: 合併後的 AsyncValue，只接受三種變體的實例
        tracked_user_input: 依宣告順序攤平的 TrackedInput
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    async_value: Union[
        InstanceOf[AsyncAwaitingValue], InstanceOf[AsyncCommand], InstanceOf[AsyncValueReceived]
    ]
    tracked_user_input: Tuple[InstanceOf[TrackedInput], ...] = ()


def make_async_selector_result(
    async_value: AsyncValue, tracked_inputs: Iterable[TrackedInput] = ()
) -> AsyncSelectorResult:
    """
    建立一個 AsyncSelectorResult。

    Raises:
        ValidationError: async_value 不是 AsyncValue 變體時 (例如直接傳入原始負載)
    """
    if not is_async_value(async_value):
        raise ValidationError(
            "async_value 必須是 AsyncValue 變體",
            field="async_value",
            value=async_value,
            expected_type="AsyncValue",
        )
    return AsyncSelectorResult(async_value=async_value, tracked_user_input=tuple(tracked_inputs))


async_selector_result = make_async_selector_result
