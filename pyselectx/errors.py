"""
PySelectX 錯誤定義模組。

只在建立選擇器時檢查呼叫方的組裝錯誤；
組合函數在執行期間拋出的異常一律原樣向上傳遞，不會被包裝。
"""
import traceback
from typing import Any, Dict, Optional


class PySelectXError(Exception):
    """所有 PySelectX 異常的基礎類。"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.traceback = traceback.format_exc()

    def to_dict(self) -> Dict[str, Any]:
        """將錯誤轉為可序列化的字典。"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        if not self.details:
            return self.message
        detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({detail_str})"


class SelectorError(PySelectXError):
    """與 Selector 組裝相關的錯誤。"""

    def __init__(self, message: str, selector_name: Optional[str] = None, **kwargs: Any):
        details = {"selector_name": selector_name}
        details.update(kwargs)
        super().__init__(message, details)


class ValidationError(PySelectXError):
    """參數驗證錯誤。"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        expected_type: Optional[str] = None,
        **kwargs: Any,
    ):
        details = {"field": field, "value": value, "expected_type": expected_type}
        details.update(kwargs)
        super().__init__(message, details)
