"""
인스턴스 생성기 모듈

두 가지 생성 전략을 제공합니다.

- 일반 생성: 인자 없는 생성자 호출
- 컨텍스트 생성: Contextual을 상속한 타입은 ObjectRegistry에서 이름으로
  ObjectContainer를 찾거나 만들고, 그 안에서 같은 타입의 인스턴스를 찾거나
  새로 붙입니다.

새 인스턴스가 만들어질 때마다 구독자에게 InstantiateEvent를 한 번 전달합니다.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Type, TypeVar

from wirebox.logging import get_logger

from .binding import is_abstract_type
from .exceptions import TypeNotAbstractException, TypeNotConcreteException
from .interfaces import IInstantiator

logger = get_logger(__name__)

T = TypeVar('T')

OBJECT_NAME_PREFIX = "_"
INTERFACE_PREFIX = "I"
AD_HOC_SETUP_METHOD = "awake"


class Contextual:
    """컨텍스트 생성 대상 표시용 기본 클래스

    인스턴스는 이름 있는 ObjectContainer에 붙으며, 붙은 직후 awake()가
    정의되어 있으면 호출됩니다 (필드 주입 이전).
    """

    container: Optional['ObjectContainer'] = None


class ObjectContainer:
    """이름 있는 인스턴스 컨테이너"""

    def __init__(self, name: str):
        self.name = name
        self._v_components: List[Any] = []

    def get_component(self, component_type: Type[T]) -> Optional[T]:
        """타입이 일치하는 첫 인스턴스 조회"""
        for component in self._v_components:
            if isinstance(component, component_type):
                return component
        return None

    def add_component(self, component_type: Type[T]) -> T:
        """새 인스턴스 생성 후 부착"""
        _v_component = component_type()
        self.attach(_v_component)
        return _v_component

    def attach(self, component: Any) -> None:
        if isinstance(component, Contextual):
            component.container = self
        self._v_components.append(component)
        _v_awake = getattr(component, AD_HOC_SETUP_METHOD, None)
        if callable(_v_awake):
            _v_awake()

    @property
    def components(self) -> List[Any]:
        return list(self._v_components)

    def __repr__(self) -> str:
        return f"ObjectContainer({self.name!r}, components={len(self._v_components)})"


class ObjectRegistry:
    """ObjectContainer 이름 레지스트리"""

    def __init__(self):
        self._v_containers: Dict[str, ObjectContainer] = {}

    def find(self, name: str) -> Optional[ObjectContainer]:
        return self._v_containers.get(name)

    def find_or_create(self, name: str) -> ObjectContainer:
        _v_container = self._v_containers.get(name)
        if _v_container is None:
            _v_container = ObjectContainer(name)
            self._v_containers[name] = _v_container
        return _v_container

    def remove(self, name: str) -> bool:
        return self._v_containers.pop(name, None) is not None

    def clear(self) -> None:
        self._v_containers.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._v_containers

    def __iter__(self) -> Iterator[ObjectContainer]:
        return iter(list(self._v_containers.values()))

    def __len__(self) -> int:
        return len(self._v_containers)


@dataclass(frozen=True)
class InstantiateEvent:
    """인스턴스 생성 이벤트"""
    sender: 'Instantiator'
    instance: Any


class Instantiator(IInstantiator):
    """기본 인스턴스 생성기"""

    def __init__(self, registry: Optional[ObjectRegistry] = None):
        self._v_registry = registry if registry is not None else ObjectRegistry()
        self._v_handlers: List[Callable[[InstantiateEvent], None]] = []
        self._v_reset_in_progress = False

    @property
    def registry(self) -> ObjectRegistry:
        return self._v_registry

    @property
    def reset_in_progress(self) -> bool:
        return self._v_reset_in_progress

    def new(self, service_type: Type[T], object_name: Optional[str] = None) -> Optional[T]:
        """새 인스턴스 생성

        Raises:
            TypeNotConcreteException: 추상 타입인 경우
        """
        if self._v_reset_in_progress:
            return None

        self.assert_concrete(service_type)

        if issubclass(service_type, Contextual):
            _v_instance, _v_created = self._new_contextual(service_type, object_name)
        else:
            _v_instance = self._new_object(service_type)
            _v_created = _v_instance is not None

        # 기존 컨테이너에서 찾은 인스턴스는 새로 만든 것이 아니므로 이벤트 없음
        if _v_created:
            self._fire_instantiate_event(_v_instance)
        return _v_instance

    def _new_object(self, service_type: Type[T]) -> Optional[T]:
        try:
            return service_type()
        except Exception:
            logger.exception(f"Exception creating instance of type '{service_type.__name__}'")
        return None

    def _new_contextual(self, service_type: Type[T],
                        object_name: Optional[str] = None) -> Tuple[Optional[T], bool]:
        _v_container = self._v_registry.find_or_create(
            object_name or self.object_name_for_type(service_type)
        )
        _v_existing = _v_container.get_component(service_type)
        if _v_existing is not None:
            return _v_existing, False
        try:
            return _v_container.add_component(service_type), True
        except Exception:
            logger.exception(
                f"Exception attaching instance of type '{service_type.__name__}' "
                f"to '{_v_container.name}'"
            )
        return None, False

    @staticmethod
    def object_name_for_type(service_type: Type) -> str:
        """컨테이너 이름 유도: '_' + 대표 인터페이스 이름"""
        return OBJECT_NAME_PREFIX + Instantiator.get_primary_interface(service_type).__name__

    @staticmethod
    def get_primary_interface(service_type: Type) -> Type:
        """타입 이름이 (앞의 'I'를 뗀) 이름으로 시작하는 첫 부모 타입, 없으면 자기 자신

        AudioSystem(IAudio, Contextual) -> IAudio
        """
        for base in service_type.__mro__[1:]:
            if base is object or base is Contextual:
                continue
            if service_type.__name__.startswith(_interface_name_base(base)):
                return base
        return service_type

    def set_reset_in_progress(self, value: bool) -> None:
        self._v_reset_in_progress = value

    def subscribe(self, handler: Callable[[InstantiateEvent], None]) -> None:
        # 같은 핸들러를 다시 구독해도 한 번만 전달
        self.unsubscribe(handler)
        self._v_handlers.append(handler)

    def unsubscribe(self, handler: Callable[[InstantiateEvent], None]) -> None:
        if handler in self._v_handlers:
            self._v_handlers.remove(handler)

    def _fire_instantiate_event(self, instance: Any) -> None:
        if not self._v_handlers:
            return
        _v_event = InstantiateEvent(self, instance)
        for handler in list(self._v_handlers):
            handler(_v_event)

    def assert_concrete(self, service_type: Type, invert: bool = False) -> None:
        """구체 타입 검증

        Raises:
            TypeNotConcreteException: 추상 타입인 경우
            TypeNotAbstractException: invert=True 이고 구체 타입인 경우
        """
        _v_abstract = is_abstract_type(service_type)
        if invert:
            if not _v_abstract:
                raise TypeNotAbstractException(service_type)
        elif _v_abstract:
            raise TypeNotConcreteException(service_type)


def _interface_name_base(base: Type) -> str:
    _v_name = base.__name__
    if not _v_name.startswith(INTERFACE_PREFIX):
        return _v_name
    return _v_name[len(INTERFACE_PREFIX):]
