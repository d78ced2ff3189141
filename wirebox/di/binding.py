"""
바인딩 모듈

바인딩은 요청 키(타입 또는 이름)에서 구현 타입, 스코프, rank,
캐시된 인스턴스, 오브젝트 이름 힌트로의 매핑 하나를 나타냅니다.
"""

import inspect
from dataclasses import dataclass, field
from typing import Any, Optional, Type

from .scope import Scope


@dataclass(eq=False)
class Binding:
    """바인딩 설명자

    Attributes:
        key_type: 요청 타입 (인터페이스)
        name: 이름 바인딩의 이름 (없으면 타입 바인딩)
        implementation_type: 생성할 구현 타입 (기본값은 key_type)
        scope: 생명주기 스코프
        rank: EAGER_SINGLETON 생성 순서 (오름차순)
        instance: 캐시된(또는 고정된) 인스턴스
        object_name: 컨텍스트 생성 시 사용할 컨테이너 이름 힌트
    """
    key_type: Optional[Type]
    name: Optional[str] = None
    implementation_type: Optional[Type] = None
    scope: Scope = Scope.SINGLETON
    rank: int = 0
    instance: Any = field(default=None, repr=False)
    object_name: Optional[str] = None

    def __post_init__(self):
        if self.implementation_type is None:
            self.implementation_type = self.key_type

    @property
    def is_named(self) -> bool:
        return self.name is not None

    @property
    def has_instance(self) -> bool:
        return self.instance is not None

    def describe(self) -> str:
        """진단용 한 줄 요약"""
        _v_key = self.name if self.is_named else _qualname(self.key_type)
        _v_instance = '' if self.instance is None else repr(self.instance)
        return (
            f"{_v_key} -> {_qualname(self.implementation_type)}, "
            f"scope: {self.scope.name}, instance: {_v_instance}"
        )


def _qualname(value) -> str:
    if value is None:
        return 'None'
    return getattr(value, '__qualname__', None) or getattr(value, '__name__', str(value))


def is_abstract_type(service_type) -> bool:
    """인스턴스화할 수 없는 타입(추상 클래스, 프로토콜)인지 여부"""
    if getattr(service_type, '_is_protocol', False):
        return True
    return inspect.isabstract(service_type)
