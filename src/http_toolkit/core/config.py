from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_FILE_SIZE = 1024 * 1024 * 1024  # 1 GiB
DEFAULT_MAX_JSON_SIZE = 1024 * 1024  # 1 MiB


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_prefix='TOOLKIT_',
        case_sensitive=True,
        extra='ignore',
        frozen=True,
    )
    # 0 means "use the default" for both size limits
    MAX_FILE_SIZE: int = 0
    ALLOWED_FILE_TYPES: list[str] = []
    MAX_JSON_SIZE: int = 0
    ALLOW_UNKNOWN_FIELDS: bool = False
    UPLOAD_DIR: str = 'uploads'
    LOG_LEVEL: str = 'INFO'

    def effective_max_file_size(self) -> int:
        return self.MAX_FILE_SIZE if self.MAX_FILE_SIZE > 0 else DEFAULT_MAX_FILE_SIZE

    def effective_max_json_size(self) -> int:
        return self.MAX_JSON_SIZE if self.MAX_JSON_SIZE > 0 else DEFAULT_MAX_JSON_SIZE


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
