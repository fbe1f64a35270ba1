import os
import yaml
from pathlib import Path
from pydantic import BaseModel, Field
from dotenv import load_dotenv

from othello.core.constants import RESEARCH_HORIZON

load_dotenv()

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "engine.yaml"


class SearchConfig(BaseModel):
    default_depth: int = 4
    max_depth: int = 8
    research_horizon: int = RESEARCH_HORIZON


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class EngineSettings(BaseModel):
    search: SearchConfig = Field(default_factory=SearchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_config_path() -> Path:
    """Helper to resolve the YAML path, honouring OTHELLO_CONFIG."""
    return Path(os.getenv("OTHELLO_CONFIG") or DEFAULT_CONFIG_PATH)


def load_settings(path: Path = None) -> EngineSettings:
    path = path or get_config_path()
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    settings = EngineSettings(**data)

    level = os.getenv("OTHELLO_LOG_LEVEL")
    if level:
        settings.logging.level = level.upper()

    return settings


# Singleton instance
settings = load_settings()
