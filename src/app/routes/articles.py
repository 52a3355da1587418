"""
Articles Routes: 게시글.

- GET /articles → 게시글 목록 화면
- GET /articles/{slug} → 게시글 화면
- API: GET /api/articles, GET /api/articles/{slug}
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from src.app.dependencies import get_article_service, render_page
from src.app.services.articles import ArticleService
from src.domain.errors import ContentError, ErrorCodes

# Routers
router = APIRouter()  # HTML pages
api_router = APIRouter()  # API endpoints


def _to_http_error(e: ContentError) -> HTTPException:
    """READ_ERROR만 500, 나머지는 404 (traversal 여부 노출 안 함)."""
    status_code = 500 if e.code == ErrorCodes.READ_ERROR else 404
    return HTTPException(
        status_code=status_code,
        detail={"code": e.code, "message": e.message},
    )


# =============================================================================
# Page Routes (HTML)
# =============================================================================

@router.get("", response_class=HTMLResponse)
async def articles_page(
    request: Request,
    category: str | None = None,
    service: ArticleService = Depends(get_article_service),
) -> HTMLResponse:
    """게시글 목록 화면."""
    return render_page(
        request,
        "pages/articles.html",
        {
            "articles": service.list_articles(category),
            "categories": service.categories(),
            "category": category,
        },
    )


@router.get("/{slug:path}", response_class=HTMLResponse)
async def article_page(
    request: Request,
    slug: str,
    service: ArticleService = Depends(get_article_service),
) -> HTMLResponse:
    """게시글 화면."""
    try:
        article = service.get_article(slug)
    except ContentError as e:
        raise _to_http_error(e) from e

    return render_page(request, "pages/article.html", {"article": article})


# =============================================================================
# API Routes
# =============================================================================

@api_router.get("")
async def list_articles(
    category: str | None = None,
    service: ArticleService = Depends(get_article_service),
) -> dict[str, Any]:
    """게시글 목록 (JSON)."""
    articles = service.list_articles(category)
    return {
        "articles": [article.to_dict() for article in articles],
        "count": len(articles),
        "categories": service.categories(),
    }


@api_router.get("/{slug:path}")
async def get_article(
    slug: str,
    service: ArticleService = Depends(get_article_service),
) -> dict[str, Any]:
    """게시글 상세 (JSON, html 포함)."""
    try:
        return service.get_article(slug).to_dict()
    except ContentError as e:
        raise _to_http_error(e) from e
