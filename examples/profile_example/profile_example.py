from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

import logging
from typing import Optional
from typing_extensions import TypedDict

from reactivex import Subject

from pyselectx import (
    AsyncValue, AsyncCommand, awaiting, command, received,
    async_selector_result, create_async_selector, create_tracked_selector,
    are_same_reference, merge_props, select_async
)

# ====== 1. 定義狀態 ======
class AppState(TypedDict):
    version: int
    user_id: Optional[int]
    profile: AsyncValue
    theme: str


# ====== 2. 定義 Selectors ======
# 未選擇使用者時視為等待中，否則依 profile 的狀態返回
def get_profile(state: AppState):
    if state["user_id"] is None:
        return async_selector_result(awaiting())
    return async_selector_result(state["profile"])


get_theme = create_tracked_selector(lambda state: state["theme"], are_same_reference)

get_greeting = create_async_selector(
    get_profile,
    get_theme,
    lambda profile, theme: f"[{theme}] 你好，{profile['name']}",
    name="get_greeting",
)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    states = Subject()

    def on_result(result):
        if isinstance(result.async_value, AsyncCommand):
            # 指令交由外部執行，這裡只是印出
            print(f"待執行指令: {list(result.async_value.commands)}")
        print(f"props: {merge_props({'greeting': result}, {'theme_toggle': 'toggle'})}")

    states.pipe(select_async(get_greeting)).subscribe(on_next=on_result)

    print("\n==== 尚未選擇使用者 ====")
    states.on_next(AppState(version=1, user_id=None, profile=awaiting(), theme="light"))

    print("\n==== 需要載入 profile ====")
    states.on_next(AppState(version=2, user_id=7, profile=command([{"type": "fetch_profile", "id": 7}]), theme="light"))

    print("\n==== profile 已載入 ====")
    states.on_next(AppState(version=3, user_id=7, profile=received({"name": "Ada"}), theme="light"))

    print("\n==== 無關欄位變更 (不會重新計算) ====")
    states.on_next(AppState(version=4, user_id=7, profile=received({"name": "Ada"}), theme="light"))

    print("\n==== 主題變更 ====")
    states.on_next(AppState(version=5, user_id=7, profile=received({"name": "Ada"}), theme="dark"))
