"""
의존성 주입 인터페이스 정의

인젝터와 인스턴스 생성기는 자기 자신을 이 인터페이스로 바인딩하므로
(InjectorModule 참조) 필드 선언에서는 구현이 아닌 인터페이스를 사용합니다.

    class Controller:
        _injector: IInjector = inject()
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Type, TypeVar

T = TypeVar('T')


class IInjector(ABC):
    """의존성 주입 시스템의 공개 API"""

    @abstractmethod
    def get(self, service_type: Type[T], name: Optional[str] = None,
            object_name: Optional[str] = None) -> T:
        """바인딩된 인스턴스 요청 (필요하면 이 호출에서 생성)"""
        pass

    @abstractmethod
    def inject(self, target: Any) -> None:
        """외부에서 생성된 객체에 필드 주입 및 post-construct 실행"""
        pass

    @abstractmethod
    def reset(self) -> None:
        """모든 바인딩 제거"""
        pass

    @abstractmethod
    def info(self) -> None:
        """등록된 모든 바인딩을 로그로 출력"""
        pass


class IInstantiator(ABC):
    """인스턴스 생성 전략"""

    @abstractmethod
    def new(self, service_type: Type[T], object_name: Optional[str] = None) -> Optional[T]:
        """새 인스턴스 생성 (실패 시 None)"""
        pass

    @abstractmethod
    def subscribe(self, handler: Callable) -> None:
        """생성 이벤트 구독 (중복 구독은 무시)"""
        pass

    @abstractmethod
    def unsubscribe(self, handler: Callable) -> None:
        """생성 이벤트 구독 해제"""
        pass

    @abstractmethod
    def assert_concrete(self, service_type: Type, invert: bool = False) -> None:
        """구체 타입 여부 검증"""
        pass

    @abstractmethod
    def set_reset_in_progress(self, value: bool) -> None:
        """리셋 중 인스턴스 생성 차단 여부 설정"""
        pass
