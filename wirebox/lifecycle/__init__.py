"""
생명주기 패키지

- LifecycleAware / Initializable: 생명주기 인터페이스
- LifecycleController: LifecycleAware 인스턴스 추적 및 일괄 재설정
- Initializer: Initializable 인스턴스 병렬/연쇄 초기화
"""

from .interfaces import InitializedCallback, Initializable, LifecycleAware
from .exceptions import InitializationError, LifecycleException, ResetInProgressError
from .controller import LifecycleController
from .initializer import Initializer

__all__ = [
    'LifecycleAware',
    'Initializable',
    'InitializedCallback',
    'LifecycleController',
    'Initializer',
    'LifecycleException',
    'InitializationError',
    'ResetInProgressError',
]
