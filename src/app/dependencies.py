"""
FastAPI 의존성.

ContentStore / ArticleService는 lifespan에서 1회 생성되어 app.state에 저장됨.
라우트는 Depends로 주입받음 (모듈 전역 인스턴스 없음).
"""

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.app.services.articles import ArticleService
from src.content.store import ContentStore

TEMPLATES_DIR = Path(__file__).parent / "templates"
jinja_templates = Jinja2Templates(directory=TEMPLATES_DIR)


def get_content_store(request: Request) -> ContentStore:
    store: ContentStore = request.app.state.content_store
    return store


def get_article_service(request: Request) -> ArticleService:
    service: ArticleService = request.app.state.article_service
    return service


def render_page(
    request: Request,
    name: str,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    """Jinja2 페이지 렌더링 (site_title 공통 주입)."""
    settings = getattr(request.app.state, "settings", None)
    page_context = {
        "site_title": settings.site_title if settings else "Content Site",
        **(context or {}),
    }
    return jinja_templates.TemplateResponse(
        request,
        name,
        page_context,
        status_code=status_code,
    )
