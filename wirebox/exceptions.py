"""
wirebox 통합 예외 클래스 정의

이 모듈은 프로젝트 전체에서 사용하는 예외 클래스 계층을 정의합니다.
의존성 주입(di), 라이프사이클(lifecycle), 설정(config) 예외는 모두
WireboxException을 상속받습니다.
"""

import traceback
from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any


class ErrorSeverity(Enum):
    """에러 심각도"""
    DEBUG = "DEBUG"          # 디버그 정보
    INFO = "INFO"            # 정보성 에러
    WARNING = "WARNING"      # 경고
    ERROR = "ERROR"          # 일반 에러
    CRITICAL = "CRITICAL"    # 치명적 에러


class ErrorCategory(Enum):
    """에러 카테고리"""
    INJECTION = "INJECTION"    # 바인딩/주입 관련
    LIFECYCLE = "LIFECYCLE"    # 초기화/리셋 관련
    CONFIG = "CONFIG"          # 설정 관련
    SYSTEM = "SYSTEM"          # 시스템 관련
    UNKNOWN = "UNKNOWN"        # 알 수 없음


class WireboxException(Exception):
    """
    wirebox 기본 예외 클래스

    모든 커스텀 예외의 기본 클래스입니다.
    error_code와 context 필드를 포함하여 에러 추적을 지원합니다.

    Attributes:
        error_code: 에러 식별 코드 (예: "INJECTION_BINDING_NOT_FOUND")
        context: 에러 발생 컨텍스트 정보
        severity: 에러 심각도
        category: 에러 카테고리
        timestamp: 에러 발생 시각
        original_error: 원본 예외 (있는 경우)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category  # category must be set before _generate_error_code()
        self.severity = severity
        self.error_code = error_code or self._generate_error_code()
        self.context = context or {}
        self.timestamp = datetime.now()
        self.original_error = original_error
        self._traceback = traceback.format_exc() if original_error else None

    def _generate_error_code(self) -> str:
        """클래스명 기반 기본 에러 코드 생성"""
        return f"{self.category.value}_{self.__class__.__name__.upper()}"

    def to_dict(self) -> Dict[str, Any]:
        """에러 정보를 딕셔너리로 변환"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "original_error": str(self.original_error) if self.original_error else None,
            "traceback": self._traceback,
        }

    def with_context(self, **kwargs) -> "WireboxException":
        """추가 컨텍스트 정보 추가"""
        self.context.update(kwargs)
        return self

    def __str__(self) -> str:
        parts = [f"[{self.error_code}] {self.message}"]
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f" (context: {context_str})")
        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"severity={self.severity.value})"
        )


class ConfigurationError(WireboxException):
    """설정 값이 유효하지 않을 때 발생하는 예외"""

    def __init__(self, message: str, setting: Optional[str] = None, **kwargs):
        super().__init__(
            message,
            error_code="CONFIG_INVALID",
            category=ErrorCategory.CONFIG,
            **kwargs
        )
        self.setting = setting
        if setting:
            self.context["setting"] = setting
