"""
Utility modules for the conversion client
"""
from .config_loader import ConversionConfig, load_conversion_config

__all__ = [
    'ConversionConfig',
    'load_conversion_config',
]
