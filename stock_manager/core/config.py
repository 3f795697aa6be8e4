from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # 환경변수 파일
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # DB 계정
    DB_USER: str = "root"
    DB_PASSWORD: str = ""

    # DB 접속 정보
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_NAME: str = "stock_manager"

    # 전체 접속 URL 직접 지정 (예: sqlite:///./stock.db)
    DB_URL: Optional[str] = None

    # 서버 설정
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    @property
    def database_url(self) -> str:
        if self.DB_URL:
            return self.DB_URL
        return (
            f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?charset=utf8mb4"
        )


# 전역 설정 인스턴스
settings = Settings()
