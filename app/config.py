from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    recognize_api_url: str = "http://localhost:8000"

    # Vision service timeout settings (seconds)
    vision_probe_timeout: float = 5.0  # Availability probe
    vision_extract_timeout: float = 30.0  # Image upload + tagging

    upload_dir: str = "uploads/ingredients"
    log_level: str = "INFO"

    # Confidence scoring
    rank_decay_step: float = 0.1  # Confidence lost per rank position
    min_base_confidence: float = 0.5  # Floor for rank decay
    problematic_penalty: float = 0.7  # Multiplier for false-positive-prone items
    problematic_rank_threshold: int = 3  # Penalty applies to ranks above this

    # Sufficiency gate
    min_confidence: float = 0.6  # Acceptance floor
    high_confidence: float = 0.75  # A lone detection must reach this
    max_results: int = 10

    # Fuzzy matching
    fuzzy_length_slack: int = 3  # Max length difference between tag and catalog name
    fuzzy_min_length: int = 3  # Shorter string must be at least this long

    class Config:
        env_file = ".env"


settings = Settings()
