"""
FastAPI 애플리케이션 진입점 (front controller).

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

# Routes
from src.app.dependencies import render_page
from src.app.routes import articles, content, pages
from src.app.services.articles import ArticleService
from src.content.store import ContentStore
from src.core.config import load_settings
from src.core.logging import configure_logging

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드, ContentStore 1회 생성 (root 생성 실패 시 기동 중단)
    종료 시: 정리할 리소스 없음
    """
    # Startup
    settings = load_settings()
    configure_logging(settings.log_level)

    store = ContentStore(settings.content_root)
    logger.info("Serving content from %s", store.root)

    app.state.settings = settings
    app.state.content_store = store
    app.state.article_service = ArticleService(
        store,
        articles_dir=settings.articles_dir,
        suffix=settings.suffix,
    )

    yield

    # Shutdown


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="Content Site",
    description="Markdown 콘텐츠 사이트 (sandboxed content root)",
    version="0.1.0",
    lifespan=lifespan,
)

# Static files (CSS)
static_dir = Path(__file__).parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=static_dir), name="static")


# =============================================================================
# Error Pages
# =============================================================================


@app.exception_handler(StarletteHTTPException)
async def page_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """API는 JSON, 페이지는 404/에러 화면."""
    if request.url.path.startswith(API_PREFIX):
        return await http_exception_handler(request, exc)

    if exc.status_code == 404:
        return render_page(request, "pages/404.html", {"path": request.url.path}, status_code=404)

    if exc.status_code >= 500:
        return render_page(
            request,
            "pages/error.html",
            {"status_code": exc.status_code},
            status_code=exc.status_code,
        )

    return await http_exception_handler(request, exc)


# =============================================================================
# Routes
# =============================================================================

# 페이지 라우트 (HTML)
app.include_router(pages.router, prefix="", tags=["Pages"])
app.include_router(articles.router, prefix="/articles", tags=["Articles"])

# API 라우트
app.include_router(articles.api_router, prefix="/api/articles", tags=["Articles API"])
app.include_router(content.api_router, prefix="/api/content", tags=["Content API"])


@app.get("/health")
async def health() -> dict[str, Any]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
