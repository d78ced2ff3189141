"""
모듈 대상 로더

'package.module:ModuleClass' 형식의 문자열로 Module 클래스를 import하고
인자 없이 인스턴스를 생성합니다.
"""

import importlib
from typing import Iterable, List

from wirebox.di import Module
from wirebox.exceptions import ConfigurationError


def load_module(target: str) -> Module:
    """대상 문자열로 Module 인스턴스 생성

    Raises:
        ConfigurationError: 형식 오류, import 실패, Module이 아닌 경우
    """
    module_path, sep, attr = target.partition(':')
    if not sep or not module_path or not attr:
        raise ConfigurationError(
            f"Invalid target '{target}', expected 'package.module:ModuleClass'",
            setting='target',
        )

    try:
        py_module = importlib.import_module(module_path)
    except ImportError as e:
        raise ConfigurationError(
            f"Cannot import '{module_path}': {e}", setting='target', original_error=e
        ) from e

    module_cls = getattr(py_module, attr, None)
    if not isinstance(module_cls, type) or not issubclass(module_cls, Module):
        raise ConfigurationError(
            f"'{target}' is not a Module subclass", setting='target'
        )
    return module_cls()


def load_modules(targets: Iterable[str]) -> List[Module]:
    return [load_module(t) for t in targets]
