"""
주입 마커 모듈

필드 주입 마커(inject)와 post-construct 마커를 정의합니다. inject()가 반환하는
InjectionPoint는 클래스 생성 시점(__set_name__)에 (소유 클래스, 속성 이름,
선언 타입, 이름, 오브젝트 이름) 정보를 기록하고, Injection은 MRO를 따라
이 정보를 MemberContext 목록으로 수집합니다.

    class GameController:
        _audio: IAudio = inject()
        _music: IAudio = inject(name="music")
        _boards: Provider[IBoard] = inject()

        @post_construct
        def _ready(self):
            self._audio.play("boot")
"""

import inspect
import types
import typing
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from wirebox.logging import get_logger

logger = get_logger(__name__)

F = TypeVar('F', bound=Callable[..., Any])

POST_CONSTRUCT_ATTR = '__wirebox_post_construct__'


class InjectionPoint:
    """필드 주입 마커 (non-data descriptor)

    인스턴스에 값이 주입되기 전에는 default를 반환합니다. 주입은 setattr로
    인스턴스 __dict__에 저장되므로 이후 접근은 디스크립터를 거치지 않습니다.

    default 객체는 모든 인스턴스가 공유합니다. 리스트처럼 변경 가능한 기본값은
    default_factory로 지정하면 인스턴스마다 처음 읽을 때 새로 만들어
    인스턴스 __dict__에 저장합니다.
    """

    def __init__(self, service_type: Optional[Type] = None, name: Optional[str] = None,
                 object_name: Optional[str] = None, default: Any = None,
                 default_factory: Optional[Callable[[], Any]] = None):
        if default is not None and default_factory is not None:
            raise ValueError("cannot specify both default and default_factory")
        self.service_type = service_type
        self.name = name
        self.object_name = object_name
        self.default = default
        self.default_factory = default_factory
        self.owner: Optional[type] = None
        self.attr: Optional[str] = None

    def __set_name__(self, owner: type, attr: str) -> None:
        self.owner = owner
        self.attr = attr

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        if self.default_factory is None:
            return self.default
        _v_value = self.default_factory()
        instance.__dict__[self.attr] = _v_value
        return _v_value

    def __repr__(self) -> str:
        _v_owner = self.owner.__name__ if self.owner else '?'
        return f"InjectionPoint({_v_owner}.{self.attr}, name={self.name!r})"


def inject(service_type: Optional[Type] = None, *, name: Optional[str] = None,
           object_name: Optional[str] = None, default: Any = None,
           default_factory: Optional[Callable[[], Any]] = None) -> Any:
    """주입 필드 선언

    Args:
        service_type: 요청 타입 (생략하면 클래스 어노테이션 사용)
        name: 이름 바인딩 이름
        object_name: 컨텍스트 생성 시 사용할 컨테이너 이름
        default: 주입 전(또는 바인딩이 없을 때) 필드 값, 모든 인스턴스가 공유
        default_factory: 인스턴스별 기본값 생성 함수 (default와 함께 쓸 수 없음)
    """
    return InjectionPoint(service_type, name, object_name, default, default_factory)


def post_construct(func: F) -> F:
    """필드 주입 후 한 번 호출될 인자 없는 메서드 표시"""
    setattr(func, POST_CONSTRUCT_ATTR, True)
    return func


def is_post_construct(member: Any) -> bool:
    return getattr(member, POST_CONSTRUCT_ATTR, False) is True


@dataclass(frozen=True)
class MemberContext:
    """주입 대상 멤버 정보"""
    owner: type
    attr: str
    service_type: Optional[Any]
    name: Optional[str] = None
    object_name: Optional[str] = None


def get_injection_points(target_type: type) -> List[InjectionPoint]:
    """클래스와 모든 부모 클래스의 주입 마커 수집 (부모 먼저, 선언 순서)"""
    _v_points: Dict[str, InjectionPoint] = {}
    for klass in reversed(target_type.__mro__):
        for attr, value in vars(klass).items():
            if isinstance(value, InjectionPoint):
                _v_points[attr] = value
    return list(_v_points.values())


def get_injectable_members(target_type: type) -> List[MemberContext]:
    """주입 마커를 선언 타입이 결정된 MemberContext 목록으로 변환"""
    _v_members = []
    for point in get_injection_points(target_type):
        _v_type = point.service_type
        if _v_type is None:
            _v_type = resolve_annotation(point.owner, point.attr)
        _v_members.append(MemberContext(
            owner=point.owner,
            attr=point.attr,
            service_type=unwrap_optional(_v_type),
            name=point.name,
            object_name=point.object_name,
        ))
    return _v_members


def get_post_construct_names(target_type: type) -> List[str]:
    """post-construct 메서드 이름 목록 (부모 먼저, 선언 순서, 중복 제거)"""
    _v_names: List[str] = []
    for klass in reversed(target_type.__mro__):
        for attr, value in vars(klass).items():
            if attr in _v_names:
                continue
            if is_post_construct(value):
                _v_names.append(attr)
    # 하위 클래스가 마커 없이 재정의한 메서드는 제외
    return [n for n in _v_names if is_post_construct(getattr(target_type, n, None))]


def resolve_annotation(owner: Optional[type], attr: Optional[str]) -> Optional[Any]:
    """클래스 어노테이션에서 필드 타입 결정 (실패 시 None)

    문자열 어노테이션(from __future__ import annotations, 전방 참조)은 소유
    클래스의 모듈 전역과 클래스 네임스페이스에서 해석됩니다.
    """
    if owner is None or attr is None:
        return None

    try:
        return inspect.get_annotations(owner, eval_str=True).get(attr)
    except (NameError, SyntaxError) as e:
        logger.warning(f"Cannot resolve annotation of {owner.__name__}.{attr}: {e}")
        return None


def unwrap_optional(service_type: Any) -> Any:
    """Optional[X] -> X"""
    if typing.get_origin(service_type) in (typing.Union, types.UnionType):
        _v_args = [a for a in typing.get_args(service_type) if a is not type(None)]
        if len(_v_args) == 1:
            return _v_args[0]
    return service_type
