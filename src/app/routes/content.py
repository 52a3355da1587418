"""
Content Routes: content root 디렉터리 조회 API.

- GET /api/content/dirs?path= → 하위 디렉터리
- GET /api/content/files?path=&suffix= → 하위 파일
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.app.dependencies import get_content_store
from src.content.store import ContentStore

api_router = APIRouter()


@api_router.get("/dirs")
async def list_directories(
    path: str = "/",
    store: ContentStore = Depends(get_content_store),
) -> dict[str, Any]:
    """하위 디렉터리 목록. 안전하지 않은 경로/없는 경로 → 빈 목록."""
    return {"path": path, "directories": store.list_directories(path)}


@api_router.get("/files")
async def list_files(
    path: str = "/",
    suffix: str | None = None,
    store: ContentStore = Depends(get_content_store),
) -> dict[str, Any]:
    """하위 파일 목록."""
    return {"path": path, "files": store.list_files(path, suffix=suffix)}
