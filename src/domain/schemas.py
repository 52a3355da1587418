"""
Data schemas for the content site.

규칙:
- ReadResult: content 또는 error 중 정확히 하나만 설정
- 실패 시 경로 문자열을 content 자리에 넣지 않음
- 경로는 content root 기준 상대 POSIX 문자열
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import ErrorCodes

# =============================================================================
# Error Kind
# =============================================================================

class ContentErrorKind(str, Enum):
    """파일 읽기 실패 종류."""
    UNSAFE_PATH = ErrorCodes.UNSAFE_PATH  # root 밖으로 벗어남
    NOT_FOUND = ErrorCodes.NOT_FOUND      # 존재하지 않음
    NOT_A_FILE = ErrorCodes.NOT_A_FILE    # 디렉터리 등
    READ_ERROR = ErrorCodes.READ_ERROR    # I/O 실패


# =============================================================================
# Read Result
# =============================================================================

@dataclass(frozen=True)
class ReadResult:
    """
    ContentStore.read_file 결과.

    성공: content=파일 바이트, error=None
    실패: content=None, error=ContentErrorKind
    """
    path: str
    content: bytes | None = None
    error: ContentErrorKind | None = None

    def __post_init__(self) -> None:
        if (self.content is None) == (self.error is None):
            raise ValueError("ReadResult requires exactly one of content or error")

    @classmethod
    def success(cls, path: str, content: bytes) -> "ReadResult":
        return cls(path=path, content=content)

    @classmethod
    def failure(cls, path: str, error: ContentErrorKind) -> "ReadResult":
        return cls(path=path, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def text(self, encoding: str = "utf-8") -> str:
        """
        content를 문자열로 디코딩.

        Raises:
            ValueError: 실패 결과에서 호출한 경우
            UnicodeDecodeError: 디코딩 실패
        """
        if self.content is None:
            raise ValueError(f"No content for '{self.path}': {self.error}")
        return self.content.decode(encoding)


# =============================================================================
# Article
# =============================================================================

@dataclass
class Article:
    """
    게시글 (Markdown 파일 1개).

    path: content root 기준 경로 (예: posts/2024/hello.md)
    slug: articles_dir 기준, 확장자 제외 (예: 2024/hello)
    category: 상위 디렉터리 이름 (articles_dir 바로 아래면 "")
    """
    path: str
    slug: str
    title: str
    category: str = ""
    html: str | None = None  # 단건 조회 시에만 채움

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "path": self.path,
            "slug": self.slug,
            "title": self.title,
            "category": self.category,
        }
        if self.html is not None:
            data["html"] = self.html
        return data
