"""
의존성 주입 시스템 예외 클래스들

이 모듈은 의존성 주입 시스템에서 발생할 수 있는 예외들을 정의합니다.
"""

from typing import Optional

from wirebox.exceptions import WireboxException, ErrorCategory, ErrorSeverity


def _type_name(service_type) -> str:
    return getattr(service_type, '__name__', str(service_type))


class DIException(WireboxException):
    """의존성 주입 시스템 기본 예외"""

    def __init__(self, message: str, service_type: Optional[str] = None, **kwargs):
        kwargs.setdefault('category', ErrorCategory.INJECTION)
        super().__init__(message, **kwargs)
        self.service_type = service_type
        if service_type:
            self.context['service_type'] = service_type


class BindingNotFoundException(DIException, LookupError):
    """요청한 타입/이름에 대한 바인딩이 없을 때 발생하는 예외"""

    def __init__(self, service_type, name: Optional[str] = None):
        _v_type_name = _type_name(service_type)
        _v_message = f"'{_v_type_name}' has no registered bindings"
        if name is not None:
            _v_message += f" (name: '{name}')"
        super().__init__(
            _v_message,
            _v_type_name,
            error_code="INJECTION_BINDING_NOT_FOUND",
        )
        self.name = name


class BindingTypeMismatchException(DIException, TypeError):
    """구현 타입이 인터페이스를 구현하지 않을 때 발생하는 예외"""

    def __init__(self, interface, implementation, reason: Optional[str] = None):
        _v_message = f"{_type_name(implementation)} does not implement {_type_name(interface)}"
        if reason:
            _v_message += f": {reason}"
        super().__init__(
            _v_message,
            _type_name(interface),
            error_code="INJECTION_TYPE_MISMATCH",
            severity=ErrorSeverity.CRITICAL,
        )
        self.interface = interface
        self.implementation = implementation


class TypeNotConcreteException(DIException, TypeError):
    """추상 타입을 인스턴스화하려 할 때 발생하는 예외"""

    def __init__(self, service_type):
        super().__init__(
            f"{_type_name(service_type)} is not a concrete type and cannot be instantiated",
            _type_name(service_type),
            error_code="INJECTION_TYPE_NOT_CONCRETE",
        )


class TypeNotAbstractException(DIException, TypeError):
    """추상 타입이어야 하는 곳에 구체 타입이 주어졌을 때 발생하는 예외"""

    def __init__(self, service_type):
        super().__init__(
            f"{_type_name(service_type)} is a concrete type",
            _type_name(service_type),
            error_code="INJECTION_TYPE_NOT_ABSTRACT",
        )


class ModuleNotConfiguringException(DIException, RuntimeError):
    """configure() 밖에서 모듈의 bind/install을 호출했을 때 발생하는 예외"""

    def __init__(self, module_name: str):
        super().__init__(
            f"Module '{module_name}' can only bind or install while it is being configured",
            module_name,
            error_code="INJECTION_MODULE_NOT_CONFIGURING",
        )
