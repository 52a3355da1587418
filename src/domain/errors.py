"""
Error definitions for the content site.

규칙:
- 파일 접근 실패(UNSAFE_PATH, NOT_FOUND 등)는 예외가 아니라 ReadResult로 반환
- ContentError는 서비스 계층/기동 시점의 명시적 실패에만 사용
- content root 생성 실패 → 기동 중단 (CONTENT_ROOT_UNAVAILABLE)
"""

from typing import Any


class ContentError(Exception):
    """
    콘텐츠 관련 에러.

    사용처:
    - content root 생성/접근 불가 (기동 시 fatal)
    - 게시글 조회 실패를 라우트 계층에 전달

    Usage:
        raise ContentError("NOT_FOUND", "Article not found", path="posts/a.md")
    """

    def __init__(self, code: str, message: str = "", **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        text = f"[{self.code}] {self.message}".rstrip()
        return f"{text} ({ctx_str})" if ctx_str else text

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Startup ===
    CONTENT_ROOT_UNAVAILABLE = "CONTENT_ROOT_UNAVAILABLE"

    # === Read / List ===
    UNSAFE_PATH = "UNSAFE_PATH"  # traversal 또는 정규화 실패
    NOT_FOUND = "NOT_FOUND"
    NOT_A_FILE = "NOT_A_FILE"
    READ_ERROR = "READ_ERROR"  # 존재하는 일반 파일의 I/O 실패, 디코딩 실패
