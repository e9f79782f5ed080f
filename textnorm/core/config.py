# textnorm/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ENV: str = "local"
    LOG_LEVEL: str = "INFO"

    DEFAULT_LANGUAGE: str = "en"

    # Global base defaults for every tokenizer (lowest configuration layer)
    TOKENIZER_LOWERCASE: bool = True
    TOKENIZER_REMOVE_DIACRITICS: bool = True
    TOKENIZER_REMOVE_STOP_WORDS: bool = True
    TOKENIZER_REMOVE_NUMBERS: bool = False
    TOKENIZER_MIN_LENGTH: int = 2
    TOKENIZER_MAX_LENGTH: int = 50

    NGRAM_SIZE: int = 3

    model_config = SettingsConfigDict(
        env_prefix="TEXTNORM_",
        env_file=None,
        env_file_encoding="utf-8",
    )


settings = Settings()
