"""
바인딩 빌더 모듈

바인딩 하나를 연쇄 호출로 설정합니다.

    binder.bind(IAudio).to(AudioSystem).in_scope(Scope.EAGER_SINGLETON).rank(10)
"""

from typing import Any, Optional, Type, TYPE_CHECKING

from .binding import Binding
from .scope import Scope

if TYPE_CHECKING:
    from .binder import Binder


class BindingBuilder:
    """바인딩 빌더"""

    def __init__(self, binder: 'Binder', interface: Type, name: Optional[str] = None):
        self._v_binder = binder
        self._v_interface = interface
        self._v_name = name
        self._v_instance: Any = None
        self._v_binding = binder.bind_to(interface, interface, name)

    @property
    def binding(self) -> Binding:
        """현재 설정 중인 바인딩"""
        return self._v_binding

    def to(self, implementation: Type, name: Optional[str] = None) -> 'BindingBuilder':
        """구현 타입 지정 (이름이 주어지면 해당 이름 바인딩으로 전환)"""
        if name is not None:
            self._v_name = name
        self._v_binding = self._v_binder.bind_to(self._v_interface, implementation, self._v_name)
        return self

    def to_instance(self, instance: Any, name: Optional[str] = None) -> 'BindingBuilder':
        """고정 인스턴스 지정"""
        if instance is not None:
            self._v_instance = instance
        if name is not None:
            self._v_name = name
        self._v_binding = self._v_binder.bind_instance(self._v_interface, self._v_instance, self._v_name)
        return self

    def in_scope(self, scope: Scope) -> 'BindingBuilder':
        self._v_binding.scope = scope
        return self

    def rank(self, rank: int) -> 'BindingBuilder':
        self._v_binding.rank = rank
        return self

    def object_name(self, object_name: str) -> 'BindingBuilder':
        self._v_binding.object_name = object_name
        return self

    def __repr__(self) -> str:
        return f"BindingBuilder({self._v_binding!r})"
