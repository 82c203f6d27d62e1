"""Settings for the LangChain transformer, loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

FormatName = Literal["toml", "yaml", "json"]


class FrontmatterSettings(BaseSettings):
    """Environment-driven configuration with sensible defaults.

    Fields:
        default_format: Parser used when a transformer is built without
            an explicit format.
        on_error: ``"raise"`` propagates frontmatter errors, ``"skip"`` logs
            them and passes the document through unchanged.
        metadata_key: ``Document.metadata`` key the parsed value is stored
            under.
    """

    default_format: FormatName = Field(default="yaml")
    on_error: Literal["raise", "skip"] = Field(default="raise")
    metadata_key: str = Field(default="frontmatter", min_length=1)

    model_config = SettingsConfigDict(
        env_prefix="FRONTMATTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> FrontmatterSettings:
    """Return a cached FrontmatterSettings instance."""
    return FrontmatterSettings()
