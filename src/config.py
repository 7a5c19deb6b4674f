"""Configuration management."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application configuration."""
    
    # Store
    CATALOG_CAPACITY = int(os.getenv("CATALOG_CAPACITY", "10"))
    
    # Console
    TABLE_FORMAT = os.getenv("TABLE_FORMAT", "simple")
    PAUSE_AFTER_ACTION = _env_flag("PAUSE_AFTER_ACTION", "true")
    
    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
