"""
Initializer 테스트

- 병렬/연쇄 초기화
- 성공/실패/진행 콜백
- 인젝터 기반 생성
"""

from unittest.mock import Mock

from wirebox.di import Injector, Module, Scope
from wirebox.lifecycle import Initializable, InitializationError, Initializer


class Manual(Initializable):
    """initialize() 호출만 기록하고 완료는 테스트가 직접 통지"""

    def __init__(self, name, log):
        self.name = name
        self.log = log
        self.callback = None

    def initialize(self, callback=None):
        self.log.append(f"start:{self.name}")
        self.callback = callback

    def complete(self):
        self.log.append(f"done:{self.name}")
        self.callback(self)


class Immediate(Initializable):
    """즉시 완료"""

    def initialize(self, callback=None):
        if callback is not None:
            callback(self)


class Broken(Initializable):
    def initialize(self, callback=None):
        raise RuntimeError("cannot start")


class NotInitializable:
    pass


class TestParallelInitializer:
    """병렬 초기화 테스트"""

    def test_starts_all_at_once(self):
        """모든 인스턴스를 즉시 시작하고 전부 완료 후 성공"""
        log = []
        a, b = Manual('a', log), Manual('b', log)
        success = Mock()
        initializer = Initializer([a, b], success_callback=success).start()

        assert log == ['start:a', 'start:b']
        b.complete()
        success.assert_not_called()
        a.complete()
        success.assert_called_once_with()
        assert initializer.finished

    def test_progress_callback(self):
        """완료마다 (인스턴스, 전체, 인덱스)"""
        log = []
        a, b = Manual('a', log), Manual('b', log)
        progress = Mock()
        Initializer([a, b], progress_callback=progress).start()
        b.complete()
        a.complete()
        assert [c.args for c in progress.call_args_list] == [(b, 2, 0), (a, 2, 1)]

    def test_failure_stops_remaining(self):
        """예외 발생 시 실패 콜백, 남은 인스턴스는 시작하지 않음"""
        log = []
        after = Manual('after', log)
        failed = Mock()
        success = Mock()
        initializer = Initializer(
            [Immediate(), Broken(), after],
            success_callback=success,
            failed_callback=failed,
            display_name='boot',
        ).start()

        failed.assert_called_once()
        assert 'cannot start' in failed.call_args.args[0]
        success.assert_not_called()
        assert log == []
        assert isinstance(initializer.failure, InitializationError)
        assert initializer.failure.context['instance'] == 'Broken'

    def test_empty_succeeds_immediately(self):
        success = Mock()
        Initializer([], success_callback=success).start()
        success.assert_called_once_with()

    def test_start_only_once(self):
        """두 번째 start()는 무시"""
        log = []
        a = Manual('a', log)
        initializer = Initializer([a])
        initializer.start()
        initializer.start()
        assert log == ['start:a']


class TestChainedInitializer:
    """연쇄 초기화 테스트"""

    def test_each_starts_after_previous_completes(self):
        """이전 인스턴스 완료 후 다음 시작"""
        log = []
        a, b, c = Manual('a', log), Manual('b', log), Manual('c', log)
        success = Mock()
        Initializer([a, b, c], success_callback=success, chained=True).start()

        assert log == ['start:a']
        a.complete()
        b.complete()
        c.complete()
        assert log == ['start:a', 'done:a', 'start:b', 'done:b', 'start:c', 'done:c']
        success.assert_called_once_with()

    def test_chained_failure(self):
        """연쇄 중 예외는 실패 콜백"""
        failed = Mock()
        success = Mock()
        Initializer([Immediate(), Broken(), Immediate()],
                    success_callback=success, failed_callback=failed, chained=True).start()
        failed.assert_called_once()
        success.assert_not_called()

    def test_late_completion_ignored(self, caplog):
        """완료 후 들어온 통지는 무시"""
        log = []
        a = Manual('a', log)
        success = Mock()
        Initializer([a], success_callback=success, chained=True).start()
        a.complete()
        a.complete()
        success.assert_called_once_with()
        assert any("ignoring" in m for m in caplog.messages)

    def test_success_callback_error_is_logged(self, caplog):
        """성공 콜백 예외는 실패로 처리하지 않고 로그"""
        failed = Mock()
        Initializer([Immediate()],
                    success_callback=Mock(side_effect=ValueError("bad callback")),
                    failed_callback=failed).start()
        failed.assert_not_called()
        assert any(r.levelname == 'ERROR' for r in caplog.records)


class BootModule(Module):
    def configure_bindings(self):
        self.bind(Immediate).in_scope(Scope.EAGER_SINGLETON)
        self.bind(NotInitializable)


class TestInitializerFromInjector:
    """인젝터 기반 생성 테스트"""

    def test_resolves_instances_through_injector(self, caplog):
        """인젝터로 조회, Initializable이 아닌 타입은 제외"""
        injector = Injector(modules=[BootModule()])
        success = Mock()
        initializer = Initializer.from_injector(
            injector, [Immediate, NotInitializable], success_callback=success
        )
        assert initializer.total == 1
        initializer.start()
        success.assert_called_once_with()
        assert any("NotInitializable is not Initializable" in m for m in caplog.messages)
