"""
將非同步選擇器接上 reactivex 狀態流的運算子。
"""
from typing import Any, Callable, Optional

import reactivex
from reactivex import Observable, operators as ops
from reactivex.abc import SchedulerBase

from .async_selector_result import AsyncSelectorResult
from .equality import are_equal
from .tracked import some_has_changed


def select_async(
    selector: Callable[[Any], AsyncSelectorResult], use_tracking: bool = False
) -> Callable[[Observable], Observable]:
    """
    創建一個運算子，將狀態流映射為 AsyncSelectorResult 流。

    只有在合併後的 AsyncValue 與上一次發出的不同時才發出新結果。

    Args:
        selector: create_async_selector 創建的選擇器
        use_tracking: 為 True 時，若上次結果帶有追蹤紀錄且 some_has_changed 判定未改變，
            則直接略過該狀態而不執行選擇器。呼叫方須確保所有葉節點都已被追蹤。

    Returns:
        可用於 Observable.pipe 的運算子

    範例:
        >>> store_states.pipe(select_async(get_total)).subscribe(print)
    """
    def _select_async(source: Observable) -> Observable:
        def factory(scheduler: Optional[SchedulerBase] = None) -> Observable:
            # 每個訂閱各自保存最近一次結果
            last_result: Optional[AsyncSelectorResult] = None

            def needs_recompute(state: Any) -> bool:
                if last_result is None or not last_result.tracked_user_input:
                    return True
                return some_has_changed(last_result.tracked_user_input, state)

            def select(state: Any) -> AsyncSelectorResult:
                nonlocal last_result
                last_result = selector(state)
                return last_result

            pipeline = [ops.map(select)]
            if use_tracking:
                pipeline.insert(0, ops.filter(needs_recompute))
            return source.pipe(
                *pipeline,
                ops.distinct_until_changed(lambda result: result.async_value, comparer=are_equal),
            )

        return reactivex.defer(factory)

    return _select_async
