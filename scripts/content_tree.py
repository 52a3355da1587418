#!/usr/bin/env python3
"""
content_tree.py - content root 디렉터리 트리 출력

ContentStore를 통해 보이는 디렉터리/파일만 출력합니다
(root 밖으로 향하는 경로, symlink는 표시되지 않음).

사용법:
    # 설정(default.yaml / SITE_CONTENT_ROOT)의 content root 전체
    uv run python scripts/content_tree.py

    # 특정 하위 디렉터리, 깊이 제한
    uv run python scripts/content_tree.py --path posts --depth 1

    # Markdown 파일만
    uv run python scripts/content_tree.py --suffix .md
"""

import argparse
import logging
import sys
from pathlib import Path, PurePosixPath

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.content.store import ContentStore  # noqa: E402
from src.core.config import load_settings  # noqa: E402
from src.core.logging import configure_logging  # noqa: E402
from src.domain.errors import ContentError  # noqa: E402

logger = logging.getLogger(__name__)


def build_tree(
    store: ContentStore,
    path: str = "/",
    depth: int | None = None,
    suffix: str | None = None,
) -> list[str]:
    """
    트리 출력용 줄 목록 생성.

    Args:
        store: ContentStore
        path: 시작 디렉터리 (root 기준)
        depth: 최대 깊이 (None이면 무제한, 0이면 시작 디렉터리의 파일만)
        suffix: 파일 확장자 필터

    Returns:
        들여쓰기된 줄 목록 (디렉터리는 "/"로 끝남)
    """
    lines: list[str] = []
    visited: set[Path] = set()

    def walk(current: str, level: int) -> None:
        # symlink로 이미 방문한 디렉터리를 다시 가리키면 하위 출력 생략
        real = store.resolve_path(current).resolve()
        if real in visited:
            return
        visited.add(real)

        indent = "  " * level
        if depth is None or level < depth:
            for directory in store.list_directories(current):
                lines.append(f"{indent}{PurePosixPath(directory).name}/")
                walk(directory, level + 1)
        for file_path in store.list_files(current, suffix=suffix):
            lines.append(f"{indent}{PurePosixPath(file_path).name}")

    walk(path, 0)
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="content root 디렉터리 트리 출력",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--root",
        type=str,
        help="content root 경로 (기본: 설정값)",
    )
    parser.add_argument(
        "--path",
        type=str,
        default="/",
        help="시작 디렉터리, root 기준 (기본: /)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=None,
        help="최대 깊이 (기본: 무제한)",
    )
    parser.add_argument(
        "--suffix",
        type=str,
        default=None,
        help="파일 확장자 필터 (예: .md)",
    )

    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        store = ContentStore(args.root or settings.content_root)
    except ContentError as e:
        logger.error(f"content root 사용 불가: {e}")
        return 1

    print(f"{store.root}/")
    for line in build_tree(store, args.path, args.depth, args.suffix):
        print(f"  {line}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
