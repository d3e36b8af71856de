from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Text analysis
    ngram_max_order: int = 3
    html_parser: str = "lxml"

    # Name index
    max_name_suggestions: int = 20
    name_index_max_users: int = 50000

    # App
    app_name: str = "NameSeek"
    app_version: str = "1.0.0"
    debug: bool = False


settings = Settings()
