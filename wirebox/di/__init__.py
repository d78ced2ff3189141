"""
의존성 주입 시스템 모듈

이 모듈은 의존성 주입(Dependency Injection) 시스템의 핵심 구성 요소들을 제공합니다.
"""

from .scope import Scope
from .binding import Binding
from .binder import Binder
from .builder import BindingBuilder
from .module import Module, InjectorModule
from .markers import inject, post_construct
from .interfaces import IInjector, IInstantiator
from .instantiator import Contextual, InstantiateEvent, Instantiator, ObjectContainer, ObjectRegistry
from .provider import Provider
from .injection import Injection
from .injector import (
    Injector,
    InjectorBuilder,
    get_global_injector,
    reset_global_injector,
    set_global_injector,
    verify_inject,
)
from .exceptions import (
    DIException,
    BindingNotFoundException,
    BindingTypeMismatchException,
    ModuleNotConfiguringException,
    TypeNotAbstractException,
    TypeNotConcreteException,
)

__all__ = [
    'Scope',
    'Binding',
    'Binder',
    'BindingBuilder',
    'Module',
    'InjectorModule',
    'inject',
    'post_construct',
    'IInjector',
    'IInstantiator',
    'Contextual',
    'InstantiateEvent',
    'Instantiator',
    'ObjectContainer',
    'ObjectRegistry',
    'Provider',
    'Injection',
    'Injector',
    'InjectorBuilder',
    'get_global_injector',
    'set_global_injector',
    'reset_global_injector',
    'verify_inject',
    'DIException',
    'BindingNotFoundException',
    'BindingTypeMismatchException',
    'ModuleNotConfiguringException',
    'TypeNotAbstractException',
    'TypeNotConcreteException',
]
