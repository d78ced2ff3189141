"""
주입 마커 테스트
"""

from __future__ import annotations

from typing import Optional

import pytest

from wirebox.di import Provider, inject, post_construct
from wirebox.di.markers import (
    InjectionPoint,
    get_injectable_members,
    get_post_construct_names,
    unwrap_optional,
)


class IClock:
    pass


class IStore:
    pass


class Base:
    _clock: IClock = inject()

    @post_construct
    def _base_ready(self):
        pass


class Child(Base):
    _store: Optional[IStore] = inject(name='primary', object_name='_Stores')
    _stores: Provider[IStore] = inject()
    _explicit = inject(IClock)
    plain: int = 0

    @post_construct
    def _child_ready(self):
        pass


class Early:
    _late: LateService = inject()


class Outer:
    class Nested:
        pass

    _nested: Nested = inject()


class LateService:
    pass


class Override(Base):
    def _base_ready(self):
        pass


class TestInjectionPoint:
    """InjectionPoint 디스크립터 테스트"""

    def test_records_owner_and_attribute(self):
        """클래스 생성 시 소유 클래스와 속성 이름 기록"""
        point = vars(Base)['_clock']
        assert isinstance(point, InjectionPoint)
        assert point.owner is Base
        assert point.attr == '_clock'

    def test_returns_default_before_injection(self):
        """주입 전에는 기본값 반환"""
        class Holder:
            value: IClock = inject(default='unset')

        assert Holder().value == 'unset'
        assert Base()._clock is None

    def test_instance_value_shadows_marker(self):
        """setattr 후에는 주입된 값 반환"""
        target = Base()
        clock = IClock()
        setattr(target, '_clock', clock)
        assert target._clock is clock

    def test_shared_default_object(self):
        """default 객체는 인스턴스 간 공유"""
        shared = []

        class Holder:
            listeners: IClock = inject(default=shared)

        assert Holder().listeners is Holder().listeners is shared

    def test_default_factory_per_instance(self):
        """default_factory는 인스턴스마다 새 값을 만들고 유지"""
        class Holder:
            listeners: IClock = inject(default_factory=list)

        first, second = Holder(), Holder()
        first.listeners.append('a')
        assert first.listeners == ['a']
        assert second.listeners == []
        assert vars(first)['listeners'] == ['a']

    def test_default_and_factory_are_exclusive(self):
        with pytest.raises(ValueError):
            inject(default=[], default_factory=list)


class TestInjectableMembers:
    """주입 대상 멤버 수집 테스트"""

    def test_collects_inherited_members_parents_first(self):
        """부모 클래스 멤버 먼저, 선언 순서"""
        members = get_injectable_members(Child)
        assert [m.attr for m in members] == ['_clock', '_store', '_stores', '_explicit']

    def test_resolves_string_annotations(self):
        """문자열 어노테이션 해석"""
        members = {m.attr: m for m in get_injectable_members(Child)}
        assert members['_clock'].service_type is IClock
        assert members['_clock'].owner is Base

    def test_optional_is_unwrapped(self):
        """Optional[X] -> X, 이름/오브젝트 이름 보존"""
        members = {m.attr: m for m in get_injectable_members(Child)}
        assert members['_store'].service_type is IStore
        assert members['_store'].name == 'primary'
        assert members['_store'].object_name == '_Stores'

    def test_provider_annotation_kept(self):
        """Provider[T] 어노테이션은 그대로"""
        members = {m.attr: m for m in get_injectable_members(Child)}
        assert members['_stores'].service_type == Provider[IStore]

    def test_explicit_type_wins_without_annotation(self):
        """inject(T)로 지정한 타입 사용"""
        members = {m.attr: m for m in get_injectable_members(Child)}
        assert members['_explicit'].service_type is IClock

    def test_forward_reference_resolved_from_module(self):
        """나중에 정의된 모듈 전역 타입 해석"""
        members = get_injectable_members(Early)
        assert members[0].service_type is LateService

    def test_class_namespace_resolved(self):
        """소유 클래스 네임스페이스의 타입 해석"""
        members = get_injectable_members(Outer)
        assert members[0].service_type is Outer.Nested

    def test_unresolvable_annotation_gives_none(self, caplog):
        """해석할 수 없는 어노테이션은 None과 경고"""
        class Broken:
            missing: DoesNotExist = inject()  # noqa: F821

        members = get_injectable_members(Broken)
        assert members[0].service_type is None
        assert any('DoesNotExist' in m for m in caplog.messages)


class TestPostConstructNames:
    """post-construct 메서드 수집 테스트"""

    def test_parents_first(self):
        """부모 메서드 먼저"""
        assert get_post_construct_names(Child) == ['_base_ready', '_child_ready']

    def test_override_without_marker_is_excluded(self):
        """마커 없이 재정의한 메서드 제외"""
        assert get_post_construct_names(Override) == []


class TestUnwrapOptional:

    def test_pipe_union(self):
        assert unwrap_optional(IClock | None) is IClock

    def test_real_union_untouched(self):
        assert unwrap_optional(IClock | IStore) == (IClock | IStore)

    def test_plain_type(self):
        assert unwrap_optional(IClock) is IClock
