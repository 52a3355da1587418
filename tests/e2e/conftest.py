"""
E2E 테스트용 FastAPI TestClient 설정.

- SITE_CONTENT_ROOT를 tmp 경로로 지정 → lifespan이 해당 root로 ContentStore 생성
- 샘플 콘텐츠는 store fixture(같은 root)로 미리 생성
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.app.main import app
from src.core.config import ENV_CONTENT_ROOT


@pytest.fixture
def client(
    content_root: Path,
    sample_content: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[TestClient, None, None]:
    """샘플 콘텐츠를 서빙하는 TestClient."""
    monkeypatch.setenv(ENV_CONTENT_ROOT, str(content_root))

    with TestClient(app) as client:
        yield client
