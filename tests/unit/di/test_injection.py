"""
Injection 테스트

- 필드 주입 / 바인딩 없는 필드
- post-construct 순서와 인자 검사
- 외부 생성 객체 주입
- 컨텍스트 생성 오브젝트 이름 전달
"""

from unittest.mock import Mock

from wirebox.di import (
    Binder,
    Contextual,
    Injection,
    Injector,
    Module,
    inject,
    post_construct,
)


class IClock:
    pass


class SystemClock(IClock):
    pass


class IRenderer:
    pass


class Dashboard:
    clock: IClock = inject()
    renderer: IRenderer = inject(default='no-renderer')

    def __init__(self):
        self.calls = []

    @post_construct
    def _first(self):
        self.calls.append(('first', self.clock))

    @post_construct
    def _second(self):
        self.calls.append('second')


class NeedsArgs:
    @post_construct
    def _setup(self, value):
        raise AssertionError("must not be called")


class Untyped:
    mystery = inject()


class IBoard:
    pass


class Board(IBoard, Contextual):
    pass


class BoardUser:
    board: IBoard = inject()


class OtherBoardUser:
    board: IBoard = inject(object_name='_Other')


class ClockModule(Module):
    def configure_bindings(self):
        self.bind(IClock).to(SystemClock)


class BoardModule(Module):
    def configure_bindings(self):
        self.bind(IBoard).to(Board).object_name('_Main')


class TestFieldInjection:
    """필드 주입 테스트"""

    def test_fields_injected_before_post_construct(self):
        """post-construct 시점에는 필드가 이미 주입됨"""
        injector = Injector(modules=[ClockModule()])
        dashboard = Dashboard()
        injector.inject(dashboard)
        assert isinstance(dashboard.clock, SystemClock)
        assert dashboard.calls == [('first', dashboard.clock), 'second']

    def test_unbound_field_left_at_default_with_warning(self, caplog):
        """바인딩 없는 필드는 기본값 유지, 경고"""
        injector = Injector(modules=[ClockModule()])
        dashboard = Dashboard()
        injector.inject(dashboard)
        assert dashboard.renderer == 'no-renderer'
        assert "IRenderer has no registered bindings, skipping field 'renderer'" in caplog.messages

    def test_untyped_field_skipped(self, caplog):
        """타입이 없는 필드는 경고 후 건너뜀"""
        injector = Injector()
        target = Untyped()
        injector.inject(target)
        assert target.mystery is None
        assert any("'mystery'" in m for m in caplog.messages)

    def test_post_construct_with_arguments_skipped(self, caplog):
        """인자가 필요한 post-construct는 건너뜀"""
        Injector().inject(NeedsArgs())
        assert any("requires arguments" in m for m in caplog.messages)

    def test_none_target_aborts(self, caplog):
        """None 대상은 경고 후 중단"""
        Injection(Mock(), Binder(), None).execute()
        assert "execute(): Injection attempted on invalid target, aborting." in caplog.messages

    def test_injection_properties(self):
        target = Dashboard()
        injection = Injection(Mock(), Binder(), target)
        assert injection.target is target
        assert injection.target_type is Dashboard
        assert [m.attr for m in injection.get_injectable_fields()] == ['clock', 'renderer']
        assert injection.get_post_construct_methods() == ['_first', '_second']


class TestContextualInjection:
    """컨텍스트 생성 필드 테스트"""

    def test_binding_object_name_used_for_field(self):
        """바인딩의 object_name으로 컨테이너 결정"""
        injector = Injector(modules=[BoardModule()])
        user = BoardUser()
        injector.inject(user)
        assert user.board.container.name == '_Main'

    def test_field_object_name_overrides_binding(self):
        """필드의 object_name이 바인딩보다 우선"""
        injector = Injector(modules=[BoardModule()])
        user = OtherBoardUser()
        injector.inject(user)
        assert user.board.container.name == '_Other'
        # 싱글톤이므로 이후 요청은 같은 인스턴스
        assert injector.get(IBoard) is user.board

    def test_awake_warning_in_debug_mode(self, caplog):
        """디버그 모드에서 awake() 정의한 Contextual 타입 경고"""
        class Noisy(Contextual):
            def awake(self):
                pass

        Injection(Mock(), Binder(), Noisy(), debug=True).execute()
        assert any("awake()" in m for m in caplog.messages)
