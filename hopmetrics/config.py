"""
Connection settings for an ExtraHop appliance.

Settings come from a YAML file or from the environment (a .env file is
honoured via python-dotenv):

    EXTRAHOP_API_URL      base URL of the appliance
    EXTRAHOP_API_KEY      REST API key
    EXTRAHOP_TIMEOUT      request timeout in seconds (optional)
    EXTRAHOP_VERIFY_SSL   "false" to accept self-signed certificates (optional)
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger("hopmetrics.config")

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class ExtraHopConfig:
    """Appliance connection configuration"""
    api_url: str = ""
    api_key: str = ""
    timeout: Optional[float] = None
    verify_ssl: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExtraHopConfig":
        """Create config from dictionary, using defaults for missing values"""
        # Filter only known fields to avoid dataclass errors
        known_fields = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known_fields})

    @classmethod
    def from_file(cls, config_path: Path) -> "ExtraHopConfig":
        """Load configuration from YAML file"""
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
        logger.debug(f"Loaded config from {config_path}")
        return cls.from_dict(data)

    @classmethod
    def from_env(cls) -> "ExtraHopConfig":
        """
        Load configuration from environment variables.

        Raises:
            ValueError: If EXTRAHOP_API_URL or EXTRAHOP_API_KEY is missing
        """
        load_dotenv()

        api_url = os.getenv("EXTRAHOP_API_URL")
        if not api_url:
            raise ValueError("EXTRAHOP_API_URL not found in environment variables")
        api_key = os.getenv("EXTRAHOP_API_KEY")
        if not api_key:
            raise ValueError("EXTRAHOP_API_KEY not found in environment variables")

        timeout = os.getenv("EXTRAHOP_TIMEOUT")
        verify_ssl = os.getenv("EXTRAHOP_VERIFY_SSL", "true").strip().lower() not in _FALSE_VALUES
        return cls(
            api_url=api_url,
            api_key=api_key,
            timeout=float(timeout) if timeout else None,
            verify_ssl=verify_ssl,
        )
