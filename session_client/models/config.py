"""Configuration data models"""

from typing import Dict, List
from pydantic import BaseModel, Field, field_validator


class RetryConfig(BaseModel):
    """Retry policy configuration"""
    max_retries: int = Field(default=3, ge=0)
    initial_delay: float = Field(default=1.0, ge=0.0)  # seconds
    max_delay: float = Field(default=10.0, ge=0.0)
    multiplier: float = Field(default=2.0, ge=1.0)
    retry_on_status: List[int] = Field(
        default_factory=lambda: [408, 429, 500, 502, 503, 504]
    )
    retry_on_timeout: bool = True
    retry_on_transport_error: bool = True

    @field_validator('retry_on_status')
    @classmethod
    def validate_status_codes(cls, v: List[int]) -> List[int]:
        """Validate HTTP status codes"""
        for code in v:
            if not 100 <= code <= 599:
                raise ValueError(f'invalid HTTP status code in retry_on_status: {code}')
        return v

    class Config:
        validate_assignment = True


class LoggingConfig(BaseModel):
    """Logging configuration"""
    level: str = "INFO"

    @field_validator('level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f'log level must be one of {valid_levels}')
        return v_upper

    class Config:
        validate_assignment = True


class ClientConfig(BaseModel):
    """Complete client configuration"""
    base_url: str = "http://localhost:4096"
    timeout: float = Field(default=30.0, gt=0)  # seconds, per attempt
    headers: Dict[str, str] = Field(default_factory=dict)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format"""
        if not v.startswith(('http://', 'https://')):
            raise ValueError('base_url must start with http:// or https://')
        return v.rstrip('/')

    class Config:
        validate_assignment = True
