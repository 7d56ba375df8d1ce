from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    default_expense_name: str = Field("Время, чай, вода", alias="DEFAULT_EXPENSE_NAME")
    default_item_count: Decimal = Field(Decimal("1"), alias="DEFAULT_ITEM_COUNT")
    request_header: str = Field("Посчитайте нас, пожалуйста.", alias="REQUEST_HEADER")
    min_item_count: Decimal = Field(Decimal("1"), alias="MIN_ITEM_COUNT")
    max_item_count: Decimal = Field(Decimal("99"), alias="MAX_ITEM_COUNT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
