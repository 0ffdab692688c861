from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Data Dragon
    ddragon_version: str = "14.10.1"
    locale: str = "en_US"
    cdn_base_url: str = "https://ddragon.leagueoflegends.com/cdn"
    request_timeout: float = 10.0

    # Local persistence
    storage_path: str = ".champ_block/storage.json"
    storage_key: str = "blockedChampions"

    # Search
    search_limit: int = 5
    search_cutoff: int = 70

    # App
    grid_columns: int = 6
    log_level: str = "INFO"

    model_config = {"env_prefix": "CHAMP_BLOCK_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
