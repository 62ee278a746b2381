from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Dict, List, Optional
from pydantic import field_validator
import json
import logging

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # Application
    app_name: str = "PC Compatibility Engine"
    debug: bool = False
    version: str = "1.0.0"
    api_prefix: str = "/api/v1"

    # Logging
    log_dir: Optional[str] = "logs"

    # CORS
    allowed_origins: list[str] = []
    allowed_origin_regex: Optional[str] = None

    # Compatibility checks
    enable_result_cache: bool = True
    result_cache_ttl: int = 300
    reject_unknown_categories: bool = False
    socket_generation_overrides: Dict[str, List[str]] = {}

    model_config = SettingsConfigDict(env_file=".env.local", case_sensitive=False, extra="ignore")

    def validate_on_startup(self):
        """Validate configuration on application startup"""
        validation_errors = []

        # Validate CORS origins
        for origin in self.allowed_origins:
            if origin != "*" and not origin.startswith(('http://', 'https://')):
                validation_errors.append(f"Invalid CORS origin format: {origin}")

        # Validate API prefix
        if not self.api_prefix.startswith('/'):
            validation_errors.append("API prefix must start with '/'")

        # Validate cache TTL
        if self.result_cache_ttl < 0 or self.result_cache_ttl > 86400:
            validation_errors.append("Result cache TTL must be between 0 and 86400 seconds")

        # Validate socket overrides
        for socket, generations in self.socket_generation_overrides.items():
            if not socket.strip():
                validation_errors.append("Socket override keys must not be empty")
            if not generations or any(not g.strip() for g in generations):
                validation_errors.append(f"Socket override for {socket} must list non-empty generation labels")

        # Log validation results
        if validation_errors:
            logger.error("Configuration validation failed:")
            for error in validation_errors:
                logger.error(f"  - {error}")
            raise ValueError("Configuration validation failed. Please check your environment variables.")

        logger.info("Configuration validation passed")

        if self.debug:
            logger.warning("Running in DEBUG mode - not suitable for production")
        if not self.enable_result_cache:
            logger.info("Compatibility result cache disabled")

    @field_validator('allowed_origins', mode='before')
    @classmethod
    def parse_allowed_origins(cls, v):
        """Parse JSON array for ALLOWED_ORIGINS env var"""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
                if not isinstance(parsed, list):
                    raise ValueError("ALLOWED_ORIGINS must be a JSON array")
                return parsed
            except json.JSONDecodeError:
                raise ValueError("ALLOWED_ORIGINS must be valid JSON")
        return v

    @field_validator('socket_generation_overrides', mode='before')
    @classmethod
    def parse_socket_overrides(cls, v):
        """Parse JSON object for SOCKET_GENERATION_OVERRIDES env var"""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
            except json.JSONDecodeError:
                raise ValueError("SOCKET_GENERATION_OVERRIDES must be valid JSON")
            if not isinstance(parsed, dict):
                raise ValueError("SOCKET_GENERATION_OVERRIDES must be a JSON object")
            return parsed
        return v


# Create settings instance and validate
settings = Settings()

# Validate configuration on import
try:
    settings.validate_on_startup()
except Exception as e:
    logger.error(f"Failed to validate configuration: {e}")
    raise
