"""
Pytest fixtures for the content site tests.

구성:
- content_root: 테스트용 content 디렉터리 경로 (tmp_path 하위, 미생성)
- store: ContentStore 인스턴스
- sample_content: posts/ 아래 샘플 게시글
"""

from pathlib import Path

import pytest

from src.content.store import ContentStore

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """테스트용 content root (ContentStore가 생성)."""
    return tmp_path / "content"


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def store(content_root: Path) -> ContentStore:
    """ContentStore 인스턴스."""
    return ContentStore(content_root)


@pytest.fixture
def sample_content(store: ContentStore) -> Path:
    """
    샘플 콘텐츠.

    content/
    ├── posts/
    │   ├── post1.md          ("hello", 헤딩 없음)
    │   ├── notes.txt         (게시글 아님)
    │   └── 2024/
    │       └── hello.md      ("# Hello 2024")
    └── pages/
    """
    root = store.root
    (root / "posts" / "2024").mkdir(parents=True)
    (root / "pages").mkdir()

    (root / "posts" / "post1.md").write_text("hello", encoding="utf-8")
    (root / "posts" / "notes.txt").write_text("not an article", encoding="utf-8")
    (root / "posts" / "2024" / "hello.md").write_text(
        "# Hello 2024\n\nFirst post of the year.\n",
        encoding="utf-8",
    )
    return root


@pytest.fixture
def secrets_file(content_root: Path) -> Path:
    """content root 바로 위의 파일 (traversal 대상)."""
    path = content_root.parent / "secrets.txt"
    path.write_text("top secret", encoding="utf-8")
    return path
