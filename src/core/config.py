"""
설정 로드: default.yaml + 환경 변수(.env).

우선순위 (높은 순):
1. 환경 변수 (SITE_CONTENT_ROOT, SITE_LOG_LEVEL)
2. default.yaml
3. 코드 기본값
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "default.yaml"

ENV_CONTENT_ROOT = "SITE_CONTENT_ROOT"
ENV_LOG_LEVEL = "SITE_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    """애플리케이션 설정."""
    site_title: str = "Content Site"
    content_root: Path = PROJECT_ROOT / "content"
    articles_dir: str = "posts"
    suffix: str = ".md"
    log_level: str = "INFO"


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """설정 파일 로드. 파일이 없으면 빈 dict."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[str, Any] | None = yaml.safe_load(f)
        return data or {}


def _resolve_root(value: str | Path, base: Path) -> Path:
    """상대 경로는 프로젝트 루트 기준."""
    path = Path(value).expanduser()
    return path if path.is_absolute() else base / path


def load_settings(config_path: Path | None = None) -> Settings:
    """
    default.yaml + 환경 변수로 Settings 생성.

    Args:
        config_path: 설정 파일 경로 (None이면 프로젝트 루트의 default.yaml)

    Returns:
        Settings
    """
    load_dotenv()
    config = load_config(config_path)
    defaults = Settings()

    site = config.get("site") or {}
    content = config.get("content") or {}
    logging_cfg = config.get("logging") or {}

    content_root = os.environ.get(ENV_CONTENT_ROOT) or content.get("root")
    log_level = os.environ.get(ENV_LOG_LEVEL) or logging_cfg.get("level")

    return Settings(
        site_title=site.get("title") or defaults.site_title,
        content_root=(
            _resolve_root(content_root, PROJECT_ROOT)
            if content_root
            else defaults.content_root
        ),
        articles_dir=content.get("articles_dir") or defaults.articles_dir,
        suffix=content.get("suffix") or defaults.suffix,
        log_level=(log_level or defaults.log_level).upper(),
    )
