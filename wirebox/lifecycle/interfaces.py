"""
생명주기 인터페이스 모듈
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

# 초기화 완료 시 인스턴스가 자기 자신을 인자로 호출하는 콜백
InitializedCallback = Callable[['Initializable'], None]


class LifecycleAware(ABC):
    """재시작 시 내부 상태를 초기 상태로 되돌릴 수 있는 객체"""

    @abstractmethod
    def reset(self) -> None:
        """내부 상태 초기화"""
        pass


class Initializable(ABC):
    """비동기 완료 통지를 지원하는 초기화 대상

    initialize()는 즉시 반환할 수 있으며, 초기화가 끝나면 callback(self)를
    호출해야 합니다.
    """

    @abstractmethod
    def initialize(self, callback: Optional[InitializedCallback] = None) -> None:
        pass


def instance_name(instance: object) -> str:
    return type(instance).__name__
