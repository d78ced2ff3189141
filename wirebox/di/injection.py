"""
주입 처리 모듈

대상 인스턴스 하나에 대해 순서대로 다음을 수행합니다.

1. (디버그 모드) Contextual 타입이 awake()를 정의했는지 경고
2. 필드 주입: inject() 마커가 붙은 모든 필드(상속 포함)에 값 할당
3. post-construct: @post_construct 메서드를 선언 순서대로 호출

바인딩이 없는 필드는 경고 후 건너뜁니다. 필드 연결은 부분적일 수 있습니다.
"""

import inspect
import typing
from typing import Any, List, Optional, TYPE_CHECKING

from wirebox.logging import get_logger

from .instantiator import AD_HOC_SETUP_METHOD, Contextual
from .markers import MemberContext, get_injectable_members, get_post_construct_names
from .provider import Provider

if TYPE_CHECKING:
    from .binder import Binder
    from .interfaces import IInjector

logger = get_logger(__name__)


class Injection:
    """대상 인스턴스 하나에 대한 주입 처리기"""

    def __init__(self, injector: 'IInjector', binder: 'Binder', target: Any, debug: bool = False):
        self._v_injector = injector
        self._v_binder = binder
        self._v_target = target
        self._v_target_type = None if target is None else type(target)
        self._v_debug = debug

    @property
    def target(self) -> Any:
        return self._v_target

    @property
    def target_type(self) -> Optional[type]:
        return self._v_target_type

    def execute(self) -> None:
        """awake 검사, 필드 주입, post-construct 순으로 실행"""
        if self._v_target is None:
            logger.warning("execute(): Injection attempted on invalid target, aborting.")
            return
        self._check_for_awake()
        self.inject()
        self.invoke_post_construct()

    def inject(self) -> None:
        """필드 주입"""
        if self._v_debug:
            logger.debug(f"inject<{self._v_target_type.__name__}>()")

        for member in self.get_injectable_fields():
            _v_field_type = member.service_type

            if _v_field_type is None:
                logger.warning(
                    f"Field '{member.attr}' of {self._v_target_type.__name__} has no declared type, skipping"
                )
                continue

            if self._v_debug:
                logger.debug(f"Field: {member.attr}, Type: {_type_name(_v_field_type)}")

            # Provider[T] 필드는 바인딩 대신 Provider를 생성해 할당
            if _is_provider_type(_v_field_type):
                _v_provider = self._construct_provider(member)
                if _v_provider is not None:
                    setattr(self._v_target, member.attr, _v_provider)
                continue

            _v_binding = self._v_binder.get_binding(_v_field_type, member.name)

            if _v_binding is None:
                logger.warning(
                    f"{_type_name(_v_field_type)} has no registered bindings, "
                    f"skipping field '{member.attr}'"
                )
                continue

            # 마커의 object_name 우선, 없으면 바인딩의 object_name
            _v_object_name = member.object_name or _v_binding.object_name

            _v_value = self._v_injector.get(_v_field_type, member.name, _v_object_name)
            setattr(self._v_target, member.attr, _v_value)

            if self._v_debug:
                logger.debug(f"Injected field '{member.attr}' with value: {_v_value!r}")

    def _construct_provider(self, member: MemberContext) -> Optional[Provider]:
        """Provider[T] 생성 후 Provider 자신에게 인젝터 주입"""
        _v_contained_type = typing.get_args(member.service_type)[0]

        _v_binding = self._v_binder.get_binding(_v_contained_type, member.name)
        if _v_binding is None:
            logger.warning(
                f"{_type_name(_v_contained_type)} has no registered bindings, "
                f"skipping provider '{member.attr}'"
            )
            return None

        _v_provider = Provider(_v_contained_type, member.name, member.object_name)
        Injection(self._v_injector, self._v_binder, _v_provider, self._v_debug).execute()
        return _v_provider

    def invoke_post_construct(self) -> None:
        """@post_construct 메서드 호출 (인자 없는 메서드만)"""
        if self._v_debug:
            logger.debug(f"invoke_post_construct() {self._v_target_type.__name__}")

        for name in self.get_post_construct_methods():
            _v_method = getattr(self._v_target, name)
            if _requires_arguments(_v_method):
                logger.warning(
                    f"PostConstruct method {self._v_target_type.__name__}.{name}() "
                    f"requires arguments, skipping"
                )
                continue
            if self._v_debug:
                logger.debug(f"Invoking PostConstruct: {self._v_target_type.__name__}.{name}()")
            _v_method()

    def get_injectable_fields(self) -> List[MemberContext]:
        return get_injectable_members(self._v_target_type)

    def get_post_construct_methods(self) -> List[str]:
        return get_post_construct_names(self._v_target_type)

    def _check_for_awake(self) -> None:
        if not self._v_debug:
            return
        if issubclass(self._v_target_type, Contextual) and \
                callable(getattr(self._v_target_type, AD_HOC_SETUP_METHOD, None)):
            logger.warning(
                f"{self._v_target_type.__name__} is an injected contextual type with a defined "
                f"{AD_HOC_SETUP_METHOD}() method. Use @post_construct instead to avoid issues "
                f"related to instantiation order."
            )


def _is_provider_type(field_type: Any) -> bool:
    return typing.get_origin(field_type) is Provider and bool(typing.get_args(field_type))


def _requires_arguments(method: Any) -> bool:
    try:
        _v_signature = inspect.signature(method)
    except (TypeError, ValueError):
        return False
    return any(
        p.default is inspect.Parameter.empty
        and p.kind in (inspect.Parameter.POSITIONAL_ONLY,
                       inspect.Parameter.POSITIONAL_OR_KEYWORD,
                       inspect.Parameter.KEYWORD_ONLY)
        for p in _v_signature.parameters.values()
    )


def _type_name(service_type: Any) -> str:
    return getattr(service_type, '__name__', None) or str(service_type)
