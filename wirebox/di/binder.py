"""
바인더 모듈

바인더는 바인딩 레지스트리(타입 맵, 이름 맵)를 관리하고 모듈을 설치/설정합니다.
이름이 주어진 조회는 이름 맵에서만 찾으며 타입 맵으로 대체되지 않습니다.
"""

from collections import deque
from typing import Any, Deque, Dict, Iterable, List, Optional, Type, Union, TYPE_CHECKING

from wirebox.logging import get_logger

from .binding import Binding, is_abstract_type
from .exceptions import BindingTypeMismatchException
from .scope import Scope

if TYPE_CHECKING:
    from .builder import BindingBuilder
    from .module import Module

logger = get_logger(__name__)

_BANNER = "*" * 50


class Binder:
    """바인딩 레지스트리"""

    def __init__(self, debug: bool = False):
        # configure() 순회 중에도 뒤에 추가할 수 있는 작업 큐
        self._v_modules: Deque['Module'] = deque()
        self._v_configured_count = 0
        self._v_type_map: Dict[Type, Binding] = {}
        self._v_name_map: Dict[str, Binding] = {}
        self._v_debug = debug

    @property
    def debug(self) -> bool:
        return self._v_debug

    def install(self, modules: Union['Module', Iterable['Module']]) -> 'Binder':
        """모듈 설치 (configure() 중 호출 가능)"""
        if isinstance(modules, Iterable):
            for module in modules:
                self._v_modules.append(module)
        else:
            self._v_modules.append(modules)
        return self

    def configure(self) -> None:
        """설치된 모듈을 설치 순서대로 설정

        모듈의 configure()가 다른 모듈을 설치할 수 있으므로 큐 길이를 매번
        다시 확인합니다. 이미 설정된 모듈은 다시 설정하지 않습니다.
        """
        while self._v_configured_count < len(self._v_modules):
            _v_module = self._v_modules[self._v_configured_count]
            self._v_configured_count += 1
            if self._v_debug:
                logger.debug(f"Configuring module: {type(_v_module).__name__}")
            _v_module.configure(self)

    def reset(self) -> None:
        """모듈과 모든 바인딩 제거"""
        self._v_modules.clear()
        self._v_configured_count = 0
        self._v_type_map.clear()
        self._v_name_map.clear()

    @property
    def modules(self) -> List['Module']:
        return list(self._v_modules)

    def bind(self, interface: Type, name: Optional[str] = None) -> 'BindingBuilder':
        """인터페이스 바인딩 빌더 생성"""
        from .builder import BindingBuilder

        if self._v_debug:
            logger.debug(f"bind({interface.__name__}){_name_suffix(name)}")
        return BindingBuilder(self, interface, name)

    def bind_to(self, interface: Type, implementation: Type, name: Optional[str] = None) -> Binding:
        """인터페이스 -> 구현 타입 바인딩

        Raises:
            BindingTypeMismatchException: 구현 타입이 인터페이스를 구현하지 않는 경우
        """
        self._assert_assignable(interface, implementation)

        if self._v_debug:
            logger.debug(f"bind_to({interface.__name__}, {implementation.__name__}){_name_suffix(name)}")

        _v_binding = self.get_or_create_binding(interface, name)

        # 구현이 구체 타입일 때만 매핑을 갱신
        if not is_abstract_type(implementation):
            _v_binding.implementation_type = implementation

        return _v_binding

    def bind_instance(self, interface: Type, instance: Any, name: Optional[str] = None) -> Binding:
        """인터페이스 -> 주어진 인스턴스 바인딩"""
        if self._v_debug:
            logger.debug(f"bind_instance({interface.__name__}, {instance!r}){_name_suffix(name)}")

        _v_binding = self.get_or_create_binding(interface, name)
        _v_binding.implementation_type = interface
        _v_binding.instance = instance
        return _v_binding

    def get_binding(self, service_type: Type, name: Optional[str] = None) -> Optional[Binding]:
        """바인딩 조회 (이름이 있으면 이름 맵만 조회)"""
        if name is not None:
            return self._v_name_map.get(name)
        return self._v_type_map.get(service_type)

    def get_or_create_binding(self, service_type: Type, name: Optional[str] = None) -> Binding:
        """바인딩 조회, 없으면 생성"""
        _v_binding = self.get_binding(service_type, name)
        if _v_binding is not None:
            return _v_binding

        _v_binding = Binding(service_type, name)
        if name is not None:
            self._v_name_map[name] = _v_binding
        else:
            self._v_type_map[service_type] = _v_binding
        return _v_binding

    def get_bindings_by_scope(self, scope: Scope) -> List[Binding]:
        """스코프가 일치하는 바인딩을 rank 오름차순으로 반환"""
        _v_result = [b for b in self._v_name_map.values() if b.scope is scope]
        _v_result.extend(b for b in self._v_type_map.values() if b.scope is scope)
        # sort()는 안정 정렬이므로 같은 rank는 등록 순서를 유지
        _v_result.sort(key=lambda b: b.rank)
        return _v_result

    def get_all_bindings(self) -> List[Binding]:
        """모든 바인딩 조회 (이름 바인딩 먼저)"""
        return list(self._v_name_map.values()) + list(self._v_type_map.values())

    def describe(self) -> List[str]:
        """진단 출력 라인 목록"""
        _v_lines = [f"Begin Named Bindings {_BANNER}"]
        _v_lines.extend(b.describe() for b in self._v_name_map.values())
        _v_lines.append(f"End Named Bindings {_BANNER}")
        _v_lines.append(f"Begin Type Bindings {_BANNER}")
        _v_lines.extend(b.describe() for b in self._v_type_map.values())
        _v_lines.append(f"End Type Bindings {_BANNER}")
        return _v_lines

    def info(self) -> None:
        """등록된 모든 바인딩을 로그로 출력"""
        for line in self.describe():
            logger.info(line)

    def _assert_assignable(self, interface: Type, implementation: Type) -> None:
        """바인딩 시점 타입 검증"""
        try:
            _v_assignable = issubclass(implementation, interface)
        except TypeError as e:
            raise BindingTypeMismatchException(interface, implementation, str(e)) from e

        if not _v_assignable:
            raise BindingTypeMismatchException(interface, implementation)

    def __len__(self) -> int:
        return len(self._v_type_map) + len(self._v_name_map)

    def __str__(self) -> str:
        return f"Binder(bindings={len(self)}, modules={len(self._v_modules)})"

    def __repr__(self) -> str:
        return self.__str__()


def _name_suffix(name: Optional[str]) -> str:
    return f" name: {name}" if name is not None else ""
