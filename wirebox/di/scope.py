"""
바인딩 스코프 정의

SINGLETON과 EAGER_SINGLETON은 처음 생성된 인스턴스를 캐시하고,
PROTOTYPE은 요청할 때마다 새 인스턴스를 생성합니다.
"""

from enum import Enum


class Scope(Enum):
    """바인딩 스코프"""
    SINGLETON = "singleton"              # 최초 요청 시 생성, 이후 재사용
    EAGER_SINGLETON = "eager_singleton"  # 인젝터 생성 시 rank 순으로 미리 생성
    PROTOTYPE = "prototype"              # 요청할 때마다 새 인스턴스

    @property
    def is_cached(self) -> bool:
        """인스턴스를 바인딩에 캐시하는 스코프인지 여부"""
        return self is not Scope.PROTOTYPE
