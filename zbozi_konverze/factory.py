"""
Client selection.

The choice between the mock and the real HTTP conversion client is made here
and nowhere else.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from zbozi_konverze.clients.mocks.conversions import MockConversionClient
from zbozi_konverze.clients.real_http.conversions import ConversionClient
from zbozi_konverze.utils.config_loader import ConversionConfig, load_conversion_config

logger = logging.getLogger(__name__)


def get_conversion_client(config: Optional[ConversionConfig] = None) -> ConversionClient:
    cfg = config or load_conversion_config()

    if cfg.client == "mock":
        logger.info("Using mock conversion client for shop %s", cfg.shop_id)
        output_root = Path(cfg.mock_output_dir) if cfg.mock_output_dir else None
        return MockConversionClient(cfg.shop_id, cfg.private_key, cfg.sandbox, output_root=output_root)

    return ConversionClient(cfg.shop_id, cfg.private_key, cfg.sandbox, timeout=cfg.timeout_seconds)
