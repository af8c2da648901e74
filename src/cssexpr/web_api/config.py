"""
Configuration settings for the API.
Environment variables (prefixed ``CSSEXPR_``) override defaults.
"""
import os
from dataclasses import dataclass, field
from typing import List

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass
class Settings:
    """API Configuration"""

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Logging level for the cssexpr logger hierarchy
    LOG_LEVEL: str = "WARNING"

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(f"CSSEXPR_{key}")
            if env_value is not None:
                field_type = self.__dataclass_fields__[key].type
                if field_type == bool:
                    setattr(self, key, env_value.lower() in ("true", "1", "yes"))
                elif field_type == int:
                    setattr(self, key, int(env_value))
                elif field_type == List[str]:
                    setattr(self, key, [o.strip() for o in env_value.split(",") if o.strip()])
                elif key == "LOG_LEVEL":
                    setattr(self, key, env_value.strip().upper())
                else:
                    setattr(self, key, env_value)
        if self.LOG_LEVEL not in _LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {self.LOG_LEVEL!r}"
            )


# Global settings instance
settings = Settings()
