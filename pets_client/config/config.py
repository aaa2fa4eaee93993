from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvSettings(BaseSettings):
    """
    Класс для хранения настроек клиента.
    Настройки загружаются из файла .env и переменных окружения.
    """

    PETS_API_BASE_URL: str = "http://localhost:3000/api"
    PETS_API_TOKEN: str | None = None
    PETS_API_TIMEOUT: float = 10.0  # секунды

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_env_settings() -> EnvSettings:
    """
    Функция для получения единственного экземпляра настроек (Singleton).
    При первом вызове создает объект Settings, при последующих возвращает уже созданный.
    """
    return EnvSettings()
