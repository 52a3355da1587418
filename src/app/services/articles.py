"""
Article Service: Markdown 게시글 목록/렌더링.

ContentStore 위의 표현 계층:
- 게시글 = articles_dir 아래 Markdown 파일
- 카테고리 = articles_dir 바로 아래 디렉터리
- 렌더링: markdown 라이브러리 (tables, fenced_code, toc)
"""

import logging
from pathlib import PurePosixPath

import markdown

from src.content.store import ContentStore
from src.domain.errors import ContentError, ErrorCodes
from src.domain.schemas import Article, ContentErrorKind

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["tables", "fenced_code", "toc"]

ERROR_MESSAGES = {
    ContentErrorKind.UNSAFE_PATH: "Article not found",  # traversal 여부 노출 안 함
    ContentErrorKind.NOT_FOUND: "Article not found",
    ContentErrorKind.NOT_A_FILE: "Article not found",
    ContentErrorKind.READ_ERROR: "Article could not be read",
}


def extract_title(text: str, fallback: str) -> str:
    """첫 번째 '# ' 헤딩을 제목으로. 없으면 fallback."""
    for line in text.splitlines():
        stripped = line.strip()
        if stripped.startswith("# "):
            return stripped[2:].strip() or fallback
    return fallback


def render_markdown(text: str) -> str:
    """Markdown → HTML."""
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)


class ArticleService:
    """게시글 조회 서비스."""

    def __init__(
        self,
        store: ContentStore,
        articles_dir: str = "posts",
        suffix: str = ".md",
    ):
        """
        Args:
            store: ContentStore (기동 시 1회 생성된 인스턴스)
            articles_dir: 게시글 디렉터리 (content root 기준)
            suffix: 게시글 파일 확장자
        """
        self.store = store
        self.articles_dir = articles_dir.strip("/")
        self.suffix = suffix

    # =========================================================================
    # Paths
    # =========================================================================

    def article_path(self, slug: str) -> str:
        """
        slug("2024/hello") → content root 기준 경로("posts/2024/hello.md").

        Raises:
            ContentError: UNSAFE_PATH (".." 세그먼트로 articles_dir을 벗어나려는 경우)
        """
        slug = slug.strip("/")
        if ".." in PurePosixPath(slug).parts:
            raise ContentError(
                ErrorCodes.UNSAFE_PATH,
                ERROR_MESSAGES[ContentErrorKind.UNSAFE_PATH],
                slug=slug,
            )
        if not slug.endswith(self.suffix):
            slug += self.suffix
        return f"{self.articles_dir}/{slug}"

    def _to_article(self, path: str, text: str) -> Article:
        relative = PurePosixPath(path).relative_to(self.articles_dir)
        slug = relative.with_suffix("").as_posix()
        category = relative.parent.as_posix()
        return Article(
            path=path,
            slug=slug,
            title=extract_title(text, fallback=relative.stem),
            category="" if category == "." else category,
        )

    # =========================================================================
    # Read
    # =========================================================================

    def categories(self) -> list[str]:
        """카테고리 이름 목록."""
        return [
            PurePosixPath(path).name
            for path in self.store.list_directories(self.articles_dir)
        ]

    def list_articles(self, category: str | None = None) -> list[Article]:
        """
        게시글 목록.

        Args:
            category: 카테고리 이름 (None이면 articles_dir 바로 아래 + 모든 카테고리)

        Returns:
            Article 목록 (경로순, html 없음)
        """
        if category:
            category = category.strip("/")
            if ".." in PurePosixPath(category).parts:
                return []
            dirs = [f"{self.articles_dir}/{category}"]
        else:
            dirs = [self.articles_dir, *self.store.list_directories(self.articles_dir)]

        articles = []
        for directory in dirs:
            for path in self.store.list_files(directory, suffix=self.suffix):
                result = self.store.read_file(path)
                if not result.ok:
                    logger.warning("Skipping article %s: %s", path, result.error)
                    continue
                try:
                    text = result.text()
                except UnicodeDecodeError:
                    logger.warning("Skipping article %s: not valid UTF-8", path)
                    continue
                articles.append(self._to_article(path, text))

        articles.sort(key=lambda a: a.path)
        return articles

    def get_article(self, slug: str) -> Article:
        """
        게시글 1건 조회 + HTML 렌더링.

        Args:
            slug: articles_dir 기준 경로 (확장자 생략 가능)

        Returns:
            Article (html 포함)

        Raises:
            ContentError: UNSAFE_PATH, NOT_FOUND, NOT_A_FILE, READ_ERROR
        """
        path = self.article_path(slug)
        result = self.store.read_file(path)

        if result.error is not None:
            raise ContentError(
                result.error.value,
                ERROR_MESSAGES[result.error],
                slug=slug,
            )

        try:
            text = result.text()
        except UnicodeDecodeError as e:
            raise ContentError(
                ErrorCodes.READ_ERROR,
                ERROR_MESSAGES[ContentErrorKind.READ_ERROR],
                slug=slug,
            ) from e

        article = self._to_article(path, text)
        article.html = render_markdown(text)
        return article
