"""
test_schemas.py - ReadResult / Article / ContentError 테스트

검증:
- ReadResult: content 또는 error 중 정확히 하나
- ContentErrorKind 값 = ErrorCodes 문자열
- ContentError: code/message/context, to_dict
"""

import pytest

from src.domain.errors import ContentError, ErrorCodes
from src.domain.schemas import Article, ContentErrorKind, ReadResult


class TestReadResult:
    """ReadResult 테스트."""

    def test_success(self):
        result = ReadResult.success("/a.md", b"data")

        assert result.ok
        assert result.content == b"data"
        assert result.error is None

    def test_failure(self):
        result = ReadResult.failure("/a.md", ContentErrorKind.NOT_FOUND)

        assert not result.ok
        assert result.content is None
        assert result.error == ContentErrorKind.NOT_FOUND

    def test_requires_exactly_one(self):
        """content와 error 둘 다 / 둘 다 없음 → ValueError."""
        with pytest.raises(ValueError):
            ReadResult(path="/a.md")

        with pytest.raises(ValueError):
            ReadResult(path="/a.md", content=b"x", error=ContentErrorKind.READ_ERROR)

    def test_empty_content_is_success(self):
        """b""도 성공 결과."""
        assert ReadResult.success("/empty.md", b"").ok

    def test_text_decodes_utf8(self):
        result = ReadResult.success("/a.md", "안녕".encode("utf-8"))

        assert result.text() == "안녕"

    def test_text_on_failure_raises(self):
        result = ReadResult.failure("/a.md", ContentErrorKind.UNSAFE_PATH)

        with pytest.raises(ValueError):
            result.text()

    def test_is_immutable(self):
        result = ReadResult.success("/a.md", b"x")

        with pytest.raises(AttributeError):
            result.content = b"y"  # type: ignore[misc]


class TestContentErrorKind:
    """ContentErrorKind 테스트."""

    def test_values_match_error_codes(self):
        assert ContentErrorKind.UNSAFE_PATH.value == ErrorCodes.UNSAFE_PATH
        assert ContentErrorKind.NOT_FOUND.value == ErrorCodes.NOT_FOUND
        assert ContentErrorKind.NOT_A_FILE.value == ErrorCodes.NOT_A_FILE
        assert ContentErrorKind.READ_ERROR.value == ErrorCodes.READ_ERROR

    def test_is_str(self):
        assert ContentErrorKind("NOT_FOUND") is ContentErrorKind.NOT_FOUND
        assert ContentErrorKind.NOT_FOUND == "NOT_FOUND"


class TestContentError:
    """ContentError 테스트."""

    def test_fields(self):
        error = ContentError("NOT_FOUND", "Article not found", slug="a")

        assert error.code == "NOT_FOUND"
        assert error.message == "Article not found"
        assert error.context == {"slug": "a"}

    def test_str_contains_code_and_context(self):
        error = ContentError("NOT_FOUND", "Article not found", slug="a")

        assert str(error) == "[NOT_FOUND] Article not found (slug='a')"

    def test_str_without_message(self):
        assert str(ContentError("READ_ERROR")) == "[READ_ERROR]"

    def test_to_dict(self):
        error = ContentError("CONTENT_ROOT_UNAVAILABLE", "boom", root="/x")

        assert error.to_dict() == {
            "code": "CONTENT_ROOT_UNAVAILABLE",
            "message": "boom",
            "root": "/x",
        }


class TestArticle:
    """Article 테스트."""

    def test_to_dict_without_html(self):
        article = Article(path="posts/a.md", slug="a", title="A")

        assert article.to_dict() == {
            "path": "posts/a.md",
            "slug": "a",
            "title": "A",
            "category": "",
        }

    def test_to_dict_with_html(self):
        article = Article(path="posts/a.md", slug="a", title="A", html="<p>a</p>")

        assert article.to_dict()["html"] == "<p>a</p>"
