"""
App Services: 라우트에서 사용하는 표현 계층 서비스.

- articles: Markdown 게시글 목록/렌더링 (ContentStore 사용)
"""

from .articles import ArticleService, extract_title, render_markdown

__all__ = [
    "ArticleService",
    "extract_title",
    "render_markdown",
]
