"""
콘텐츠 저장소: content root 아래 파일 읽기 + 디렉터리 조회.

핵심 규칙:
- 모든 공개 메서드는 같은 안전 검사(is_safe)를 거침
- root 포함 여부는 경로 세그먼트 단위로 비교 (content vs content-evil 구분)
- 읽기 실패는 예외 대신 ReadResult(error=...)로 반환
- 파일 쓰기/삭제 없음 (읽기 전용)
"""

import logging
import os
from pathlib import Path

from src.domain.errors import ContentError, ErrorCodes
from src.domain.schemas import ContentErrorKind, ReadResult

logger = logging.getLogger(__name__)

# root 생성 시 권한 (rwxr-xr-x)
ROOT_DIR_MODE = 0o755

PATH_SEPARATORS = "/\\"


def _to_posix(path: Path, root: Path) -> str:
    """root 기준 상대 POSIX 문자열."""
    return path.relative_to(root).as_posix()


# =============================================================================
# Content Store
# =============================================================================

class ContentStore:
    """
    content root에 샌드박스된 읽기 전용 파일 접근.

    구조 예:
    content/
    ├── posts/
    │   ├── hello.md
    │   └── 2024/
    └── pages/
    """

    def __init__(self, root: str | Path):
        """
        Args:
            root: content 디렉터리 경로 (없으면 생성)

        Raises:
            ContentError: CONTENT_ROOT_UNAVAILABLE
        """
        root_path = Path(root)

        if not root_path.exists():
            try:
                root_path.mkdir(mode=ROOT_DIR_MODE, parents=True, exist_ok=True)
            except OSError as e:
                raise ContentError(
                    ErrorCodes.CONTENT_ROOT_UNAVAILABLE,
                    f"Cannot create content root: {e}",
                    root=str(root_path),
                ) from e
            logger.info("Created content root %s", root_path)

        if not root_path.is_dir():
            raise ContentError(
                ErrorCodes.CONTENT_ROOT_UNAVAILABLE,
                "Content root is not a directory",
                root=str(root_path),
            )

        try:
            self._root = root_path.resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise ContentError(
                ErrorCodes.CONTENT_ROOT_UNAVAILABLE,
                f"Cannot resolve content root: {e}",
                root=str(root_path),
            ) from e

    @property
    def root(self) -> Path:
        """정규화된 content root (읽기 전용)."""
        return self._root

    # =========================================================================
    # Path Safety
    # =========================================================================

    def resolve_path(self, relative_path: str) -> Path:
        """
        상대 경로를 root 아래 경로로 변환.

        선행 구분자를 제거하므로 "/posts/a.md"도 root/posts/a.md가 됨.
        정규화(symlink, ..)는 하지 않음 → is_safe에서 검사.
        """
        return self._root / relative_path.lstrip(PATH_SEPARATORS)

    def is_safe(self, candidate: Path) -> bool:
        """
        candidate가 root 자신이거나 root의 하위 경로인지 검사.

        - root와 candidate 모두 strict 정규화
        - 정규화 실패(없는 경로, 깨진 symlink, 권한 없음, symlink 루프, NUL 문자) → False
        - 비교는 문자열 prefix가 아니라 세그먼트 단위
        """
        try:
            real_root = self._root.resolve(strict=True)
            real_path = candidate.resolve(strict=True)
        except RecursionError:
            raise
        except (OSError, RuntimeError, ValueError):
            return False

        return real_path.is_relative_to(real_root)

    def _is_missing_inside_root(self, candidate: Path) -> bool:
        """
        candidate가 존재하지 않고, 존재했다면 root 안이었을 경로인지.

        NOT_FOUND와 traversal(UNSAFE_PATH)을 구분하기 위해 사용:
        - 경로 자체(깨진 symlink 포함)가 존재하면 False
        - .. 정리 후 root 밖이면 False
        - 가장 가까운 존재 상위 디렉터리가 root 밖으로 정규화되면 False
        """
        if os.path.lexists(candidate):
            return False

        normalized = Path(os.path.normpath(candidate))
        if not normalized.is_relative_to(self._root):
            return False

        for ancestor in normalized.parents:
            if os.path.lexists(ancestor):
                return self.is_safe(ancestor)

        return False

    # =========================================================================
    # Read
    # =========================================================================

    def read_file(self, relative_path: str) -> ReadResult:
        """
        root 기준 상대 경로의 파일 내용 읽기.

        Args:
            relative_path: 예) "/posts/hello.md"

        Returns:
            ReadResult: 성공 시 content(bytes), 실패 시 error
            - UNSAFE_PATH: root 밖 또는 정규화 실패
            - NOT_FOUND: root 안의 존재하지 않는 경로
            - NOT_A_FILE: 디렉터리 등 일반 파일 아님
            - READ_ERROR: 읽기 I/O 실패
        """
        candidate = self.resolve_path(relative_path)

        if not self.is_safe(candidate):
            if self._is_missing_inside_root(candidate):
                logger.debug("Content not found: %s", relative_path)
                return ReadResult.failure(relative_path, ContentErrorKind.NOT_FOUND)

            logger.warning("Rejected unsafe content path: %r", relative_path)
            return ReadResult.failure(relative_path, ContentErrorKind.UNSAFE_PATH)

        if not candidate.is_file():
            return ReadResult.failure(relative_path, ContentErrorKind.NOT_A_FILE)

        try:
            content = candidate.read_bytes()
        except OSError as e:
            logger.warning("Failed to read %s: %s", candidate, e)
            return ReadResult.failure(relative_path, ContentErrorKind.READ_ERROR)

        return ReadResult.success(relative_path, content)

    # =========================================================================
    # List
    # =========================================================================

    def list_directories(self, relative_path: str = "/") -> list[str]:
        """
        바로 아래 하위 디렉터리 목록 (비재귀).

        Args:
            relative_path: 조회할 디렉터리 (기본: root)

        Returns:
            root 기준 상대 POSIX 경로 목록 (이름순).
            안전하지 않거나 디렉터리가 아니면 빈 목록.
        """
        return [
            _to_posix(child, self._root)
            for child in self._iter_children(relative_path)
            if child.is_dir()
        ]

    def list_files(self, relative_path: str = "/", suffix: str | None = None) -> list[str]:
        """
        바로 아래 일반 파일 목록 (비재귀).

        Args:
            relative_path: 조회할 디렉터리 (기본: root)
            suffix: 확장자 필터 (예: ".md"), None이면 전체

        Returns:
            root 기준 상대 POSIX 경로 목록 (이름순)
        """
        return [
            _to_posix(child, self._root)
            for child in self._iter_children(relative_path)
            if child.is_file() and (suffix is None or child.suffix == suffix)
        ]

    def _iter_children(self, relative_path: str) -> list[Path]:
        """
        안전 검사를 통과한 디렉터리의 하위 항목 (root 밖으로 향하는 symlink 제외).

        하위 경로는 요청한 경로 아래로 만듦: posts/up -> posts 이면 posts/up/2024.
        요청 경로에 .. 가 있으면 정규화된 경로 기준.
        """
        candidate = self.resolve_path(relative_path)

        if not self.is_safe(candidate):
            if not self._is_missing_inside_root(candidate):
                logger.warning("Rejected unsafe listing path: %r", relative_path)
            return []

        directory = candidate.resolve() if ".." in candidate.parts else candidate
        if not directory.is_dir():
            return []

        try:
            children = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            logger.warning("Failed to list %s: %s", directory, e)
            return []

        return [child for child in children if self.is_safe(child)]
