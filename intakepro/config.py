import logging
import os

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Runtime settings read from the environment"""
    data_dir: str = Field(default="data/intakes", description="Root directory for stored intakes")
    log_level: str = Field(default="INFO", description="Logging level name")
    language: str = Field(default="en", description="Label language (en or he)")


def load_settings() -> Settings:
    return Settings(
        data_dir=os.getenv("INTAKEPRO_DATA_DIR", "data/intakes"),
        log_level=os.getenv("INTAKEPRO_LOG_LEVEL", "INFO").upper(),
        language=os.getenv("INTAKEPRO_LANGUAGE", "en"),
    )


def setup_logging(debug: bool = False, level: str = "INFO"):
    """Configure root logging for the command line tool"""
    log_level = logging.DEBUG if debug else getattr(logging, level, logging.INFO)
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
