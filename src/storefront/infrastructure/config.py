"""Application settings, read from the environment (prefix ``STOREFRONT_``)
or from a ``.env`` file in the working directory."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Repo root when installed in editable mode
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    """Application settings from env."""

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Where the JSON stores live
    DATA_DIR: Path = _DEFAULT_DATA_DIR

    # Currency every price and commission amount is expressed in
    CURRENCY: str = "INR"

    # Which variation gives a product its list price: "first" or "lowest"
    PRICE_SELECTION: str = "first"

    LOG_LEVEL: str = "WARNING"

    @field_validator("CURRENCY", mode="before")
    @classmethod
    def currency_upper(cls, v: object) -> str:
        return str(v).strip().upper()

    @field_validator("PRICE_SELECTION", "LOG_LEVEL", mode="before")
    @classmethod
    def strip_value(cls, v: object) -> str:
        return str(v).strip()

    @field_validator("PRICE_SELECTION")
    @classmethod
    def known_policy(cls, v: str) -> str:
        if v.lower() not in ("first", "lowest"):
            raise ValueError("PRICE_SELECTION must be 'first' or 'lowest'")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def known_level(cls, v: str) -> str:
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v.upper()


def get_settings() -> Settings:
    return Settings()
