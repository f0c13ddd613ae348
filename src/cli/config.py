"""Configuration management for the component audit CLI."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class Config:
    """Configuration loaded from .env file."""

    def __init__(self, env_file: Optional[str] = None):
        """Load configuration from .env file."""
        if env_file:
            load_dotenv(env_file)
        else:
            # Load from project root .env
            project_root = Path(__file__).parent.parent.parent
            env_path = project_root / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        # Analysis
        self.max_schema_depth = int(os.getenv("MAX_SCHEMA_DEPTH", "64"))
        self.response_usage_match = os.getenv("RESPONSE_USAGE_MATCH", "owner").lower()

        # Report output
        self.show_anomalies = os.getenv("SHOW_ANOMALIES", "true").lower() == "true"
        self.show_inline_schemas = os.getenv("SHOW_INLINE_SCHEMAS", "false").lower() == "true"
