# app/core/config.py

from typing import List
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',           # .env 파일 인코딩
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Mantenedores FastAPI API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Read-only master data API (plantas, materiales, proveedores, ubicaciones, temporadas)"
    # 애플리케이션 환경 (예: "development", "production", "testing")
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    # 디버그 모드 활성화 여부 (SQL 쿼리 출력)
    DEBUG_MODE: bool = Field(False, description="Enable debug mode for SQL echo")

    # --- 로깅 설정 ---
    LOG_LEVEL: str = Field("INFO", description="Root logging level (DEBUG, INFO, WARNING, ERROR)")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(..., description="Async SQLAlchemy database URL (postgresql+asyncpg://...)")
    DB_POOL_SIZE: int = Field(10, description="Number of pooled connections kept open")
    DB_MAX_OVERFLOW: int = Field(20, description="Extra connections allowed beyond the pool size")
    DB_POOL_RECYCLE: int = Field(3600, description="Seconds before a pooled connection is recycled")

    # --- CORS 설정 ---
    # 개발용 기본값은 모든 출처 허용. 운영 환경에서는 프론트엔드 도메인으로 제한합니다.
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")


settings = Settings()
