"""Settings for the environment snapshot and its HTTP report"""
from pathlib import Path
from typing import Dict, List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from HOSTENV_* environment variables"""

    model_config = SettingsConfigDict(env_prefix="HOSTENV_", case_sensitive=False)

    # Property sources
    overrides: str = Field(
        default="",
        description="Property overrides, comma-separated name=value pairs"
    )
    denied: str = Field(
        default="",
        description="Properties that may not be read (comma-separated)"
    )

    # Server settings (read-only report)
    server_host: str = Field(default="127.0.0.1", description="Report server host")
    server_port: int = Field(default=9180, ge=1, le=65535, description="Report server port")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Optional log file")

    service_name: str = Field(default="hostenv", description="Service name")
    service_version: str = Field(default="1.0.0", description="Service version")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('log_file')
    @classmethod
    def ensure_log_directory(cls, v):
        if isinstance(v, Path):
            v.parent.mkdir(parents=True, exist_ok=True)
        return v

    @property
    def property_overrides(self) -> Dict[str, str]:
        """Get property overrides as a dict"""
        result = {}
        for pair in self.overrides.split(','):
            if '=' in pair:
                key, value = pair.split('=', 1)
                if key.strip():
                    result[key.strip()] = value.strip()
        return result

    @property
    def denied_properties(self) -> List[str]:
        """Get denied property names as a list"""
        return [item.strip() for item in self.denied.split(',') if item.strip()]
