"""
Pytest configuration file.
"""

import logging
import sys
from pathlib import Path

import pytest

# 프로젝트 루트 디렉토리를 Python 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


# 전역 인젝터 핸들 초기화
@pytest.fixture(autouse=True)
def reset_global_injector():
    """테스트 간 전역 인젝터 핸들 격리"""
    from wirebox.di import injector
    injector.reset_global_injector()
    yield
    injector.reset_global_injector()


# 로깅 설정 초기화
@pytest.fixture(autouse=True)
def reset_log_manager():
    """setup_logging()이 추가한 핸들러 제거 및 LogManager 싱글톤 초기화"""
    yield
    from wirebox.logging import manager
    if manager.LogManager._instance is not None:
        root = logging.getLogger()
        for handler in manager.LogManager._instance.handlers.values():
            root.removeHandler(handler)
            handler.close()
        root.setLevel(logging.WARNING)
    manager._manager = None
    manager.LogManager._instance = None
    manager.LogManager._initialized = False
