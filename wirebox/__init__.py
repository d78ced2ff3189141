"""
wirebox - 리플렉션 기반 의존성 주입 컨테이너

    from wirebox.di import Injector, Module, Scope, inject, post_construct
"""

__version__ = "1.0.0"
