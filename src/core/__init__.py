"""
Core layer: 설정, 로깅.

역할:
- default.yaml + 환경 변수 → Settings
- 루트 로거 설정
"""

from .config import Settings, load_config, load_settings
from .logging import configure_logging

__all__ = [
    # config
    "Settings",
    "load_config",
    "load_settings",
    # logging
    "configure_logging",
]
