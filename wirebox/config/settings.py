"""
Configuration management module.

환경변수(.env 포함)에서 컨테이너 설정을 읽어 ContainerSettings로 검증합니다.

    WIREBOX_DEBUG                  디버그 모드 (바인딩/주입 추적 로그, 정적 접근 경고)
    WIREBOX_LOG_LEVEL              로그 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    WIREBOX_LOG_DIR                로그 파일 디렉토리
    WIREBOX_LOG_FILE               로그 파일 기록
    WIREBOX_LOG_JSON               파일 로그를 JSON 형식으로 기록 (파일 기록 포함)
    WIREBOX_GLOBAL_ACCESS_WARNING  전역 인젝터 접근 시 경고 (디버그 모드에서만)
"""

import os
from typing import Literal, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from wirebox.exceptions import ConfigurationError

# .env 파일 로드
load_dotenv()

ENV_MAPPING = {
    'WIREBOX_DEBUG': 'debug',
    'WIREBOX_LOG_LEVEL': 'log_level',
    'WIREBOX_LOG_DIR': 'log_dir',
    'WIREBOX_LOG_FILE': 'log_file',
    'WIREBOX_LOG_JSON': 'log_json',
    'WIREBOX_GLOBAL_ACCESS_WARNING': 'global_access_warning',
}


class ContainerSettings(BaseModel):
    """컨테이너 설정 검증 모델"""
    debug: bool = Field(default=False, description="디버그 모드")
    log_level: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'] = Field(
        default='INFO', description="로그 레벨"
    )
    log_dir: str = Field(default='logs', min_length=1, description="로그 디렉토리")
    log_file: bool = Field(default=False, description="로그 파일 기록")
    log_json: bool = Field(default=False, description="JSON 파일 로그")
    global_access_warning: bool = Field(default=True, description="전역 인젝터 접근 경고")

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        """로그 레벨 대문자 정규화"""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def writes_file(self) -> bool:
        """log_file 또는 log_json이면 파일 기록"""
        return self.log_file or self.log_json


def load_settings(env: Optional[Mapping[str, str]] = None) -> ContainerSettings:
    """환경변수에서 설정 로드

    Args:
        env: 환경변수 매핑 (None이면 os.environ)

    Returns:
        검증된 ContainerSettings

    Raises:
        ConfigurationError: 설정 값이 유효하지 않은 경우
    """
    source = os.environ if env is None else env

    values = {
        field_name: source[env_name]
        for env_name, field_name in ENV_MAPPING.items()
        if env_name in source
    }

    try:
        return ContainerSettings(**values)
    except ValidationError as e:
        first = e.errors()[0]
        setting = str(first['loc'][0]) if first.get('loc') else None
        raise ConfigurationError(
            f"Invalid container settings: {first['msg']}",
            setting=setting,
            original_error=e,
        ) from e
