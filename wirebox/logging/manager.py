"""
로그 관리 모듈

라이브러리 모듈은 get_logger()로 이름 있는 로거만 얻고, 핸들러는 애플리케이션
(또는 CLI)이 setup_logging()으로 한 번 설치합니다. 설정은 검증된
ContainerSettings에서 읽습니다.

    WIREBOX_LOG_LEVEL   콘솔/파일 핸들러 레벨 (debug=True면 DEBUG)
    WIREBOX_LOG_FILE    <log_dir>/<service>.log 회전 파일 기록
    WIREBOX_LOG_JSON    파일 로그를 한 줄 JSON으로 기록 (파일 기록 포함)

    from wirebox.config import load_settings
    from wirebox.logging import setup_logging, get_logger

    setup_logging(load_settings(), service_name='boot')
    logger = get_logger(__name__)
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional

from wirebox.config.settings import ContainerSettings, load_settings

# 컨테이너가 extra로 남기는 필드 (Injector 부트스트랩 실패 등)
CONTAINER_FIELDS = ('binding', 'scope', 'rank', 'target_type')

_TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class JSONFormatter(logging.Formatter):
    """레코드 하나를 JSON 한 줄로 변환"""

    def __init__(self, service_name: str = 'wirebox'):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        _v_entry = {
            'timestamp': datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            'level': record.levelname,
            'service': self.service_name,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f"{record.module}:{record.lineno}",
        }

        for field in CONTAINER_FIELDS:
            if hasattr(record, field):
                _v_entry[field] = getattr(record, field)

        if record.exc_info:
            _v_entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(_v_entry, ensure_ascii=False, default=str)


class ConsoleFormatter(logging.Formatter):
    """터미널이면 레벨 이름에 색을 입히는 텍스트 포매터"""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def __init__(self, stream=None):
        super().__init__(fmt=_TEXT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
        _v_stream = stream if stream is not None else sys.stdout
        self.use_colors = hasattr(_v_stream, 'isatty') and _v_stream.isatty()

    def formatMessage(self, record: logging.LogRecord) -> str:
        _v_color = self.COLORS.get(record.levelname) if self.use_colors else None
        if _v_color is None:
            return super().formatMessage(record)
        _v_plain = record.levelname
        record.levelname = f"{_v_color}{_v_plain}{self.RESET}"
        try:
            return super().formatMessage(record)
        finally:
            record.levelname = _v_plain


class LogManager:
    """루트 로거 핸들러 관리자 (싱글톤)

    setup()을 다시 호출하면 이전에 설치한 핸들러를 제거하고 새로 설치합니다.
    """

    _instance: Optional['LogManager'] = None
    _initialized: bool = False

    MAX_BYTES = 10 * 1024 * 1024
    BACKUP_COUNT = 5

    def __new__(cls) -> 'LogManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._handlers: Dict[str, logging.Handler] = {}
        self._settings: Optional[ContainerSettings] = None
        self._log_file: Optional[Path] = None
        self._initialized = True

    @property
    def handlers(self) -> Dict[str, logging.Handler]:
        return dict(self._handlers)

    @property
    def settings(self) -> Optional[ContainerSettings]:
        return self._settings

    @property
    def log_file(self) -> Optional[Path]:
        """파일 기록 중이면 로그 파일 경로"""
        return self._log_file

    def setup(self, config: ContainerSettings, service_name: str = 'wirebox',
              debug: bool = False, log_file: bool = False) -> None:
        """
        설정에 따라 콘솔/파일 핸들러 설치

        Args:
            config: 검증된 컨테이너 설정
            service_name: JSON 로그 service 필드와 로그 파일 이름
            debug: True면 설정과 무관하게 DEBUG 레벨
            log_file: True면 설정과 무관하게 파일 기록
        """
        self._settings = config
        _v_level = logging.DEBUG if debug else getattr(logging, config.log_level)

        root = logging.getLogger()
        for handler in self._handlers.values():
            root.removeHandler(handler)
            handler.close()
        self._handlers.clear()
        self._log_file = None
        root.setLevel(_v_level)

        console = logging.StreamHandler(sys.stdout)
        console.setLevel(_v_level)
        console.setFormatter(ConsoleFormatter(sys.stdout))
        root.addHandler(console)
        self._handlers['console'] = console

        if log_file or config.writes_file:
            _v_dir = Path(config.log_dir)
            _v_dir.mkdir(parents=True, exist_ok=True)
            self._log_file = _v_dir / f"{service_name}.log"

            file_handler = RotatingFileHandler(
                self._log_file,
                maxBytes=self.MAX_BYTES,
                backupCount=self.BACKUP_COUNT,
                encoding='utf-8',
            )
            file_handler.setLevel(_v_level)
            if config.log_json:
                file_handler.setFormatter(JSONFormatter(service_name))
            else:
                file_handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
            root.addHandler(file_handler)
            self._handlers['file'] = file_handler

        logging.getLogger(__name__).debug(
            f"Logging configured for '{service_name}' at {logging.getLevelName(_v_level)}, "
            f"file: {self._log_file or '-'}"
        )


_manager: Optional[LogManager] = None


def setup_logging(config: Optional[ContainerSettings] = None, service_name: str = 'wirebox',
                  debug: bool = False, log_file: bool = False) -> LogManager:
    """
    로깅 설정

    Args:
        config: 컨테이너 설정 (None이면 load_settings())
        service_name: 서비스 이름
        debug: DEBUG 레벨 강제
        log_file: 파일 기록 강제

    Raises:
        ConfigurationError: config가 없고 환경변수 설정이 유효하지 않은 경우
    """
    global _manager
    _manager = LogManager()
    _manager.setup(
        config if config is not None else load_settings(),
        service_name=service_name,
        debug=debug,
        log_file=log_file,
    )
    return _manager


def get_logger(name: str) -> logging.Logger:
    """이름 있는 로거 반환 (핸들러는 설치하지 않음)"""
    return logging.getLogger(name)
