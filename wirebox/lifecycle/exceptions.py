"""
생명주기 관련 예외
"""

from typing import Any, Optional

from wirebox.exceptions import ErrorCategory, WireboxException


class LifecycleException(WireboxException):
    """생명주기 관련 기본 예외"""

    def __init__(self, message: str, instance: Optional[Any] = None, **kwargs):
        kwargs.setdefault('category', ErrorCategory.LIFECYCLE)
        super().__init__(message, **kwargs)
        if instance is not None:
            self.context['instance'] = type(instance).__name__


class ResetInProgressError(LifecycleException):
    """재설정 도중 다시 재설정을 요청한 경우"""

    def __init__(self, message: str = "Reset already in progress", **kwargs):
        super().__init__(message, error_code="LIFECYCLE_RESET_IN_PROGRESS", **kwargs)


class InitializationError(LifecycleException):
    """Initializable.initialize() 실패"""

    def __init__(self, message: str, instance: Optional[Any] = None, **kwargs):
        super().__init__(
            message,
            instance=instance,
            error_code="LIFECYCLE_INIT_FAILED",
            **kwargs
        )
