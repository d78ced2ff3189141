"""
Provider 모듈

Provider[T]는 T의 해결을 소유 객체의 주입 시점이 아니라 명시적인 get() 호출
시점으로 미룹니다. PROTOTYPE 바인딩이면 get()마다 새 인스턴스를 받습니다.

    class Spawner:
        _pieces: Provider[IPiece] = inject()

        def spawn(self):
            return self._pieces.get()
"""

from typing import Generic, Optional, Type, TypeVar

from wirebox.logging import get_logger

from .interfaces import IInjector
from .markers import inject

logger = get_logger(__name__)

T = TypeVar('T')


class Provider(Generic[T]):
    """지연 해결 핸들"""

    _injector: IInjector = inject()

    def __init__(self, service_type: Type[T], name: Optional[str] = None,
                 object_name: Optional[str] = None):
        self._v_service_type = service_type
        self._v_name = name
        self._v_object_name = object_name

    @property
    def service_type(self) -> Type[T]:
        return self._v_service_type

    def get(self, name: Optional[str] = None, object_name: Optional[str] = None) -> T:
        """인젝터를 통해 T 해결 (인자가 없으면 생성 시 지정한 이름 사용)"""
        logger.debug(f"get({self._v_service_type.__name__})")
        return self._injector.get(
            self._v_service_type,
            name if name is not None else self._v_name,
            object_name if object_name is not None else self._v_object_name,
        )

    def __repr__(self) -> str:
        return f"Provider[{self._v_service_type.__name__}](name={self._v_name!r})"
