"""
생명주기 컨트롤러 모듈

인스턴스 생성기의 생성 이벤트를 구독하여 이후 생성되는 LifecycleAware
인스턴스를 등록 순서대로 추적하고, broadcast_reset() 시 등록의 역순으로
reset()을 호출합니다. 인젝터가 가장 먼저 등록되므로 가장 마지막에
초기화됩니다.

생성 이벤트를 놓치지 않도록 컨트롤러는 다른 객체보다 먼저 요청해야 합니다.

    controller = injector.get(LifecycleController)
    ...
    controller.broadcast_reset()
"""

from typing import Callable, Dict, List, TypeVar

from wirebox.di.instantiator import InstantiateEvent
from wirebox.di.interfaces import IInjector, IInstantiator
from wirebox.di.markers import inject, post_construct
from wirebox.logging import get_logger

from .exceptions import ResetInProgressError
from .interfaces import LifecycleAware, instance_name

logger = get_logger(__name__)

T = TypeVar('T')


class LifecycleController:
    """LifecycleAware 인스턴스 추적 및 일괄 재설정"""

    # 생성 이벤트 구독을 위해 인스턴스 생성기와 인젝터만 주입받음
    _instantiator: IInstantiator = inject()
    _injector: IInjector = inject()

    def __init__(self):
        self._v_registered: Dict[int, LifecycleAware] = {}
        self._v_reset_handlers: List[Callable[[], None]] = []
        self._v_reset_in_progress = False

    @post_construct
    def _subscribe(self) -> None:
        self._v_reset_in_progress = False
        self.register(self._injector)
        self._instantiator.subscribe(self._handle_instantiate_event)

    @property
    def reset_in_progress(self) -> bool:
        return self._v_reset_in_progress

    @property
    def registered(self) -> List[LifecycleAware]:
        """등록 순서대로 정렬된 추적 인스턴스 목록"""
        return list(self._v_registered.values())

    def register(self, instance: T) -> T:
        """LifecycleAware 인스턴스 등록 (재설정 중이거나 중복이면 무시)"""
        if self._v_reset_in_progress:
            return instance
        if not isinstance(instance, LifecycleAware):
            return instance
        self._v_registered.setdefault(id(instance), instance)
        return instance

    def subscribe_on_reset(self, handler: Callable[[], None]) -> None:
        self.unsubscribe_on_reset(handler)
        self._v_reset_handlers.append(handler)

    def unsubscribe_on_reset(self, handler: Callable[[], None]) -> None:
        if handler in self._v_reset_handlers:
            self._v_reset_handlers.remove(handler)

    def broadcast_reset(self) -> None:
        """등록된 모든 인스턴스를 등록의 역순으로 재설정

        하나의 reset() 실패는 로그만 남기고 나머지 인스턴스 재설정을 계속합니다.

        Raises:
            ResetInProgressError: 재설정 도중 다시 호출된 경우
        """
        if self._v_reset_in_progress:
            raise ResetInProgressError()

        logger.debug("broadcast_reset() start")

        # 재설정 중 생성/등록 시도 차단
        self._set_reset_in_progress(True)
        try:
            for handler in list(self._v_reset_handlers):
                handler()

            for instance in reversed(self.registered):
                logger.debug(f"reset() {instance_name(instance)}")
                try:
                    instance.reset()
                except Exception:
                    logger.exception(f"Exception in reset() on '{instance_name(instance)}'")
        finally:
            self._set_reset_in_progress(False)

        logger.debug("broadcast_reset() end")

    def reset(self) -> None:
        """구독 핸들러와 추적 인스턴스 모두 제거"""
        self._v_reset_handlers.clear()
        self._v_registered.clear()

    def info(self) -> None:
        for instance in self._v_registered.values():
            logger.info(f"{instance_name(instance)} @ {id(instance):#x}")
        logger.info(f"{len(self._v_registered)} registered instance(s)")

    def _set_reset_in_progress(self, value: bool) -> None:
        self._v_reset_in_progress = value
        self._instantiator.set_reset_in_progress(value)

    def _handle_instantiate_event(self, event: InstantiateEvent) -> None:
        self.register(event.instance)

    def __repr__(self) -> str:
        return f"LifecycleController(registered={len(self._v_registered)})"
