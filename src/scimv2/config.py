from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SCIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field("WARNING", description="Logging level for the scimv2 logger")
    debug: bool = Field(False, description="Show source paths and locals in log output")

    # Encoding
    json_indent: Optional[int] = Field(None, description="Indentation used when encoding JSON, compact when unset")

    # Compatibility
    accept_legacy_enterprise_urn: bool = Field(
        False,
        description="Rewrite the non-standard 'urn:scim:schemas:extension:enterprise:2.0' key to the RFC URN on decode",
    )

    # Validation
    verify_email_syntax: bool = Field(False, description="Reject syntactically invalid email values during validation")

    @field_validator("log_level")
    def validate_log_level(cls, v: str) -> str:
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in allowed:
            raise ValueError(f"Log level must be one of {allowed}")
        return v

    @field_validator("json_indent")
    def validate_json_indent(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError("json_indent cannot be negative")
        return v


# Create a singleton instance
settings = Settings()
