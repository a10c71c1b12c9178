from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="RECIPE_OCR_", extra="ignore")

    log_level: str = "INFO"

    # Review gating for import previews
    review_confidence_threshold: float = 0.6
    min_ocr_confidence: float = 0.5

    # Raw text beyond this is cut off before parsing
    max_raw_text_chars: int = 50_000


settings = Settings()
