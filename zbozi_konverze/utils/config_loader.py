"""
Configuration loader for the conversion client.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "conversion_config.yml"

# environment variable -> config field
ENV_OVERRIDES: Dict[str, str] = {
    "ZBOZI_SHOP_ID": "shop_id",
    "ZBOZI_PRIVATE_KEY": "private_key",
    "ZBOZI_SANDBOX": "sandbox",
    "ZBOZI_TIMEOUT_SECONDS": "timeout_seconds",
    "ZBOZI_CLIENT": "client",
}


class ConversionConfig(BaseModel):
    """Credentials and transport settings for one shop"""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    shop_id: str = ""
    private_key: str = ""
    sandbox: bool = False
    timeout_seconds: Optional[float] = Field(default=None, gt=0)
    client: Literal["real_http", "mock"] = "real_http"
    mock_output_dir: Optional[str] = None


def load_conversion_config(config_path: Optional[Path] = None) -> ConversionConfig:
    """
    Load and validate conversion configuration from YAML and the environment

    Args:
        config_path: Path to config file. Defaults to config/conversion_config.yml

    Returns:
        Validated ConversionConfig object

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    load_dotenv()

    data: Dict[str, Any] = {}
    if config_path is not None and not Path(config_path).exists():
        raise FileNotFoundError(f"Conversion config file not found: {config_path}")

    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.warning("Conversion config %s not found; using environment only", path)

    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value is not None and value.strip():
            data[field_name] = value.strip()

    try:
        cfg = ConversionConfig(**data)
        logger.info("Loaded conversion config (sandbox=%s, client=%s)", cfg.sandbox, cfg.client)
        return cfg
    except ValidationError as e:
        logger.error("Conversion config validation failed: %s", e)
        raise
