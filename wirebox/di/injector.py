"""
의존성 주입기 모듈

Injector는 바인더로 바인딩을 찾고, 인스턴스 생성기와 Injection으로 인스턴스를
만들며, 생성 시점에 EAGER_SINGLETON 바인딩을 rank 오름차순으로 미리 생성합니다.

순환 참조 처리: 캐시되는 스코프의 인스턴스는 필드 주입 *전에* 바인딩에
기록됩니다. A -> B -> A 순환에서 B는 아직 주입이 끝나지 않은 A를 받습니다.
순환은 금지되지 않으며 검출하지도 않습니다 (디버그 모드에서는 로그만 남김).

    injector = Injector.builder().module(BootModule()).build()
    audio = injector.get(IAudio)
"""

from typing import Any, Iterable, List, Optional, Set, Type, TypeVar

from wirebox.config import ContainerSettings, load_settings
from wirebox.lifecycle.interfaces import LifecycleAware
from wirebox.logging import get_logger

from .binder import Binder
from .binding import Binding
from .exceptions import BindingNotFoundException
from .injection import Injection
from .instantiator import Instantiator
from .interfaces import IInjector, IInstantiator
from .module import InjectorModule, Module
from .scope import Scope

logger = get_logger(__name__)

T = TypeVar('T')

_BANNER = "*" * 50


class Injector(IInjector, LifecycleAware):
    """기본 인젝터 구현"""

    def __init__(self,
                 instantiator: Optional[IInstantiator] = None,
                 modules: Optional[Iterable[Module]] = None,
                 debug: Optional[bool] = None,
                 settings: Optional[ContainerSettings] = None):
        """
        인젝터 초기화

        Args:
            instantiator: 인스턴스 생성기 (기본값: Instantiator())
            modules: 바인딩 모듈 목록
            debug: 디버그 모드 (기본값: settings.debug)
            settings: 컨테이너 설정 (기본값: load_settings())

        Raises:
            ConfigurationError: settings가 없고 환경변수 설정이 유효하지 않은 경우
        """
        self._v_settings = settings if settings is not None else load_settings()
        set_global_injector(self)
        self._v_debug = self._v_settings.debug if debug is None else debug
        self._v_instantiator = instantiator if instantiator is not None else Instantiator()
        self._v_binder = Binder(self._v_debug)
        self._v_constructing: Set[int] = set()

        # 인젝터와 인스턴스 생성기 자신도 주입 가능하도록 먼저 설치
        self._v_binder.install(InjectorModule(self, self._v_instantiator))
        self._v_binder.install(list(modules or []))
        self._v_binder.configure()
        self._construct_eager_singletons()

    @staticmethod
    def builder() -> 'InjectorBuilder':
        return InjectorBuilder()

    @property
    def binder(self) -> Binder:
        return self._v_binder

    @property
    def instantiator(self) -> IInstantiator:
        return self._v_instantiator

    @property
    def debug(self) -> bool:
        return self._v_debug

    @property
    def settings(self) -> ContainerSettings:
        return self._v_settings

    def get(self, service_type: Type[T], name: Optional[str] = None,
            object_name: Optional[str] = None) -> T:
        """바인딩된 인스턴스 요청

        Raises:
            BindingNotFoundException: 바인딩이 없는 경우
        """
        _v_binding = self._v_binder.get_binding(service_type, name)

        if _v_binding is None:
            raise BindingNotFoundException(service_type, name)

        if _v_binding.instance is not None:
            if self._v_debug and id(_v_binding) in self._v_constructing:
                logger.debug(
                    f"Cyclic reference: returning {_v_binding.implementation_type.__name__} "
                    f"before its injection has completed"
                )
            return _v_binding.instance

        return self._construct(_v_binding, object_name)

    def _construct(self, binding: Binding, object_name: Optional[str] = None) -> Any:
        """바인딩의 인스턴스 생성, 주입, post-construct 실행

        PROTOTYPE이 아니면 주입 전에 인스턴스를 바인딩에 기록합니다.
        """
        _v_impl_type = binding.implementation_type
        _v_instance = self._v_instantiator.new(_v_impl_type, object_name)

        if binding.scope.is_cached and _v_instance is not None:
            binding.instance = _v_instance

        self._v_constructing.add(id(binding))
        try:
            Injection(self, self._v_binder, _v_instance, self._v_debug).execute()
        finally:
            self._v_constructing.discard(id(binding))

        return _v_instance

    def inject(self, target: Any) -> None:
        """외부에서 생성된 객체에 필드 주입 및 post-construct 실행"""
        Injection(self, self._v_binder, target, self._v_debug).execute()

    def _construct_eager_singletons(self) -> None:
        """EAGER_SINGLETON 바인딩을 rank 오름차순으로 생성

        하나의 실패가 나머지 생성을 중단시키지 않습니다. 이미 인스턴스가 있는
        바인딩(다른 eager singleton의 의존성으로 생성된 경우 등)은 건너뜁니다.
        """
        for binding in self._v_binder.get_bindings_by_scope(Scope.EAGER_SINGLETON):
            if binding.instance is not None:
                continue
            try:
                if self._v_debug:
                    logger.debug(
                        f"Constructing eager singleton: {binding.implementation_type.__name__}, "
                        f"rank: {binding.rank}"
                    )
                self._construct(binding)
            except Exception:
                logger.exception(
                    f"Exception constructing eager singleton "
                    f"'{binding.implementation_type.__name__}'",
                    extra={'binding': binding.describe(), 'rank': binding.rank},
                )

    def reset(self) -> None:
        """모든 바인딩과 전역 핸들 제거"""
        self._v_binder.reset()
        if _global_injector is self:
            set_global_injector(None)

    def info(self) -> None:
        logger.info(f"info() start {_BANNER}")
        self._v_binder.info()
        logger.info(f"info() end {_BANNER}")

    def log_static_warning(self) -> None:
        if self._v_debug and self._v_settings.global_access_warning:
            logger.warning(
                "Detected use of the global injector. Consider refactoring the calling code "
                "to receive its dependencies through injection."
            )

    def __repr__(self) -> str:
        return f"Injector(bindings={len(self._v_binder)}, debug={self._v_debug})"


class InjectorBuilder:
    """인젝터 단계별 구성 빌더"""

    def __init__(self):
        self._instantiator: Optional[IInstantiator] = None
        self._modules: List[Module] = []
        self._debug: Optional[bool] = None
        self._settings: Optional[ContainerSettings] = None

    def instantiator(self, instantiator: IInstantiator) -> 'InjectorBuilder':
        self._instantiator = instantiator
        return self

    def module(self, module: Module) -> 'InjectorBuilder':
        self._modules.append(module)
        return self

    def modules(self, modules: Iterable[Module]) -> 'InjectorBuilder':
        self._modules.extend(modules)
        return self

    def debug(self, debug: bool) -> 'InjectorBuilder':
        self._debug = debug
        return self

    def settings(self, settings: Optional[ContainerSettings]) -> 'InjectorBuilder':
        self._settings = settings
        return self

    def build(self) -> Injector:
        return Injector(self._instantiator, self._modules, self._debug, self._settings)


# 전역 인젝터 핸들 (레거시 코드 이전용, 새 코드는 주입을 사용)
_global_injector: Optional[Injector] = None


def set_global_injector(injector: Optional[Injector]) -> None:
    """전역 인젝터 설정"""
    global _global_injector
    _global_injector = injector


def get_global_injector() -> Optional[Injector]:
    """전역 인젝터 조회 (디버그 모드에서는 사용할 때마다 경고)"""
    if _global_injector is not None:
        _global_injector.log_static_warning()
    return _global_injector


def reset_global_injector() -> None:
    """전역 인젝터 초기화 (테스트용)"""
    set_global_injector(None)


def verify_inject(target: Any, attr: str, service_type: Type[T]) -> T:
    """target.attr이 None이면 전역 인젝터로 채움"""
    _v_value = getattr(target, attr, None)
    if _v_value is None:
        _v_injector = get_global_injector()
        if _v_injector is None:
            raise BindingNotFoundException(service_type)
        _v_value = _v_injector.get(service_type)
        setattr(target, attr, _v_value)
    return _v_value
