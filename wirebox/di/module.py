"""
모듈 정의

모듈은 바인더에 바인딩을 선언적으로 등록하는 단위입니다. 바인더는
configure(binder) 호출 동안에만 보관되며 끝나면 해제됩니다.

    class AudioModule(Module):
        def configure_bindings(self):
            self.bind(IAudio).to(AudioSystem).in_scope(Scope.EAGER_SINGLETON)
            self.install(SoundBankModule())
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Type, Union, TYPE_CHECKING

from .exceptions import ModuleNotConfiguringException
from .interfaces import IInjector, IInstantiator

if TYPE_CHECKING:
    from .binder import Binder
    from .builder import BindingBuilder


class Module(ABC):
    """바인딩 모듈 기본 클래스"""

    _v_binder: Optional['Binder'] = None

    def configure(self, binder: 'Binder') -> None:
        """바인더에 이 모듈의 바인딩 등록"""
        self._v_binder = binder
        try:
            self.configure_bindings()
        finally:
            self._v_binder = None

    @abstractmethod
    def configure_bindings(self) -> None:
        """하위 클래스에서 바인딩 선언"""
        pass

    def install(self, modules: Union['Module', Iterable['Module']]) -> None:
        self._require_binder().install(modules)

    def bind(self, interface: Type, name: Optional[str] = None) -> 'BindingBuilder':
        return self._require_binder().bind(interface, name)

    def _require_binder(self) -> 'Binder':
        if self._v_binder is None:
            raise ModuleNotConfiguringException(type(self).__name__)
        return self._v_binder


class InjectorModule(Module):
    """인젝터와 인스턴스 생성기 자신을 주입 가능하게 하는 모듈"""

    def __init__(self, injector: IInjector, instantiator: IInstantiator):
        self._injector = injector
        self._instantiator = instantiator

    def configure_bindings(self) -> None:
        self.bind(IInjector).to_instance(self._injector)
        self.bind(IInstantiator).to_instance(self._instantiator)

