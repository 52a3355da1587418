"""
Pages Routes: 정적 페이지.

- GET / → 홈
- GET /calc → 계산기 (a, b, op 쿼리)
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from src.app.dependencies import get_article_service, render_page
from src.app.services.articles import ArticleService

router = APIRouter()

OPERATIONS = {
    "add": "+",
    "sub": "-",
    "mul": "×",
    "div": "÷",
}


def calculate(a: float, b: float, op: str) -> float:
    """
    사칙연산.

    Raises:
        ValueError: 알 수 없는 연산, 0으로 나누기
    """
    if op == "add":
        return a + b
    if op == "sub":
        return a - b
    if op == "mul":
        return a * b
    if op == "div":
        if b == 0:
            raise ValueError("Division by zero")
        return a / b
    raise ValueError(f"Unknown operation: {op}")


@router.get("/", response_class=HTMLResponse)
async def index_page(
    request: Request,
    service: ArticleService = Depends(get_article_service),
) -> HTMLResponse:
    """홈: 최근 게시글 + 카테고리."""
    return render_page(
        request,
        "pages/index.html",
        {
            "articles": service.list_articles()[:5],
            "categories": service.categories(),
        },
    )


@router.get("/calc", response_class=HTMLResponse)
async def calc_page(
    request: Request,
    a: float | None = None,
    b: float | None = None,
    op: str = "add",
) -> HTMLResponse:
    """계산기. a, b가 모두 있으면 결과 표시."""
    context: dict = {"a": a, "b": b, "op": op, "operations": OPERATIONS}

    if a is None or b is None:
        return render_page(request, "pages/calc.html", context)

    try:
        context["result"] = calculate(a, b, op)
    except ValueError as e:
        context["error"] = str(e)
        return render_page(request, "pages/calc.html", context, status_code=400)

    return render_page(request, "pages/calc.html", context)
