import codecs
import yaml
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..normalization.models import IssueCommentFormat
from ..utils.logger import logger


class ConfigError(Exception):
    """Raised when the configuration file is malformed or invalid"""


class ReaderConfig(BaseModel):
    """Defaults for reading InspectCode reports"""
    encoding: str = "utf-8"
    format: IssueCommentFormat = IssueCommentFormat.PlainText
    output_dir: str = "./results"

    @field_validator('encoding')
    @classmethod
    def validate_encoding(cls, v):
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding '{v}'")
        return v


class AppConfig(BaseModel):
    """Main application configuration"""
    reader: ReaderConfig = Field(default_factory=ReaderConfig)

    model_config = {"extra": "ignore"}


class ConfigLoader:
    """Load and manage application configuration"""

    def __init__(self, config_path: str = "./inspectcode.yaml"):
        self.config_path = Path(config_path)
        self.config: Optional[AppConfig] = None

    def load(self) -> AppConfig:
        """Load configuration from YAML, falling back to defaults when the file is absent"""

        if not self.config_path.exists():
            logger.debug(f"No configuration at {self.config_path}, using defaults")
            self.config = AppConfig()
            return self.config

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse '{self.config_path}': {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"'{self.config_path}' must be a YAML mapping at the top level")

        try:
            self.config = AppConfig(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in '{self.config_path}': {e}") from e

        logger.info(f"Loaded configuration from {self.config_path}")
        return self.config
