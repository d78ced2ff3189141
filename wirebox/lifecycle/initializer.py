"""
단계별 초기화 모듈

Initializable 인스턴스 목록을 병렬(모두 동시에 시작) 또는 연쇄(이전 인스턴스가
완료를 통지한 뒤 다음 시작) 방식으로 초기화합니다.

- success_callback(): 모든 인스턴스가 완료를 통지한 뒤 한 번 호출
- failed_callback(reason): initialize() 예외 발생 시 호출, 남은 인스턴스는 시작하지 않음
- progress_callback(instance, total, index): 인스턴스 하나가 완료될 때마다 호출
"""

from typing import Callable, Iterable, List, Optional, Sequence, Type

from wirebox.di.interfaces import IInjector
from wirebox.logging import get_logger

from .exceptions import InitializationError
from .interfaces import Initializable, instance_name

logger = get_logger(__name__)

SuccessCallback = Callable[[], None]
FailedCallback = Callable[[str], None]
ProgressCallback = Callable[[Initializable, int, int], None]


class Initializer:
    """Initializable 인스턴스의 병렬/연쇄 초기화 실행기"""

    def __init__(self,
                 instances: Sequence[Initializable],
                 success_callback: Optional[SuccessCallback] = None,
                 failed_callback: Optional[FailedCallback] = None,
                 progress_callback: Optional[ProgressCallback] = None,
                 chained: bool = False,
                 display_name: Optional[str] = None):
        """
        Args:
            instances: 초기화 대상 (연쇄 모드에서는 이 순서대로 실행)
            success_callback: 전체 완료 콜백
            failed_callback: 실패 콜백 (실패 사유 문자열 전달)
            progress_callback: 진행 콜백 (인스턴스, 전체 개수, 완료 인덱스)
            chained: True면 순차 실행
            display_name: 로그 표시 이름
        """
        self._instances: List[Initializable] = list(instances)
        self._success_callback = success_callback
        self._failed_callback = failed_callback
        self._progress_callback = progress_callback
        self._chained = chained
        self._display_name = display_name
        self._completed_count = 0
        self._started = False
        self._finished = False
        self._failure: Optional[InitializationError] = None

    @classmethod
    def from_injector(cls, injector: IInjector, types: Iterable[Type], **kwargs) -> 'Initializer':
        """인젝터로 인스턴스를 조회해 Initializer 생성

        Initializable이 아닌 타입은 경고 후 제외합니다.
        """
        _v_instances = []
        for service_type in types:
            _v_instance = injector.get(service_type)
            if not isinstance(_v_instance, Initializable):
                logger.warning(f"{service_type.__name__} is not Initializable, skipping")
                continue
            _v_instances.append(_v_instance)
        return cls(_v_instances, **kwargs)

    @property
    def total(self) -> int:
        return len(self._instances)

    @property
    def remaining(self) -> int:
        return self.total - self._completed_count

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def failure(self) -> Optional[InitializationError]:
        return self._failure

    def start(self) -> 'Initializer':
        """초기화 시작 (한 번만 실행)"""
        if self._started:
            logger.warning(f"Initializer{self._label()} already started")
            return self
        self._started = True

        logger.debug(f"Start{self._label()}")

        if not self._instances:
            logger.debug("No instances to wait on, continuing.")
            self._success()
            return self

        self._log_progress()

        if self._chained:
            self._initialize(self._instances[0])
        else:
            for instance in self._instances:
                if not self._initialize(instance):
                    break
        return self

    def _initialize(self, instance: Initializable) -> bool:
        """instance.initialize() 호출, 예외 발생 시 실패 처리 후 False 반환"""
        try:
            logger.debug(f"Initializing {instance_name(instance)}")
            instance.initialize(self._instance_initialized)
        except Exception as e:
            self._failure = InitializationError(
                f"Exception initializing {instance_name(instance)}: {e}",
                instance=instance,
                original_error=e,
            )
            logger.error(str(self._failure), exc_info=True)
            self._fail(str(self._failure))
            return False
        return True

    def _instance_initialized(self, instance: Initializable) -> None:
        """인스턴스가 초기화 완료 시 호출하는 콜백"""
        if self._finished:
            logger.warning(
                f"{instance_name(instance)} reported completion after{self._label()} finished, ignoring"
            )
            return

        # 콜백 예외가 initialize() 실패로 처리되지 않도록 여기서 기록
        try:
            if self._progress_callback is not None:
                self._progress_callback(instance, self.total, self._completed_count)

            self._completed_count += 1
            self._log_progress()

            if self.remaining <= 0:
                self._success()
            elif self._chained:
                self._initialize(self._instances[self._completed_count])
        except Exception:
            logger.exception(f"Exception after initialization of {instance_name(instance)}")

    def _fail(self, reason: str) -> None:
        self._complete()
        if self._failed_callback is not None:
            self._failed_callback(reason)
        else:
            logger.error("No failed_callback to invoke, halt.")

    def _success(self) -> None:
        self._complete()
        if self._success_callback is not None:
            self._success_callback()
        else:
            logger.debug("No success_callback to invoke, halt.")

    def _complete(self) -> None:
        self._finished = True
        logger.debug(f"End{self._label()}")

    def _log_progress(self) -> None:
        logger.debug(
            f"{self._display_name or 'Initializer'} waiting on {self.remaining} "
            f"initialization event(s) before completion."
        )

    def _label(self) -> str:
        return f" ( {self._display_name} )" if self._display_name else ""
