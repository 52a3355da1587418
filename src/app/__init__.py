"""
App layer: 웹 서버 (FastAPI + Jinja2).

역할:
- URI → 페이지 템플릿 또는 게시글 라우트
- ContentStore/ArticleService는 lifespan에서 생성 후 의존성 주입

주의: 폴더 구분
- src/app/templates/ → Jinja2 HTML
- src/content/ → 코드 (ContentStore)
- content/ (루트) → 데이터 저장소 (Markdown)
"""
