"""
Content layer: content root 샌드박스 파일 접근.

역할:
- 상대 경로 → root 하위 경로 변환, traversal 차단 (store.py)
- 파일 읽기 (ReadResult), 디렉터리/파일 목록

주의: 폴더 구분
- src/content/ → 코드 (이 모듈)
- content/ (루트) → 데이터 저장소 (Markdown 파일)
"""

from .store import ContentStore

__all__ = [
    "ContentStore",
]
