"""
하이스코어 저장소 모듈
원장을 키-값 저장소에 읽고 씁니다.
"""
import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from shadow_rush.constants import HIGH_SCORES_KEY, SCORE_DIR_NAME, SCORE_FILE_NAME
from shadow_rush.game_state import HighScoreEntry
from shadow_rush.logger import get_logger


logger = get_logger()


def default_score_path() -> Path:
    """사용자 홈 아래 기본 저장 경로"""
    return Path.home() / SCORE_DIR_NAME / SCORE_FILE_NAME


def parse_entries(raw: Any) -> List[HighScoreEntry]:
    """
    저장된 값을 엔트리 목록으로 변환합니다.

    리스트가 아니면 빈 목록을, 모양이 맞지 않는 레코드는 건너뜁니다.
    """
    if not isinstance(raw, list):
        if raw is not None:
            logger.warning(f"하이스코어 데이터가 리스트가 아닙니다 ({type(raw).__name__}). 무시합니다.")
        return []
    entries = []
    for item in raw:
        entry = HighScoreEntry.from_dict(item)
        if entry is None:
            logger.warning(f"잘못된 하이스코어 레코드를 건너뜁니다: {item!r}")
            continue
        entries.append(entry)
    return entries


class HighScoreStore(ABC):
    """하이스코어 저장소 인터페이스"""

    @abstractmethod
    def load(self) -> List[HighScoreEntry]:
        """저장된 엔트리를 읽습니다. 실패하면 빈 목록입니다."""

    @abstractmethod
    def save(self, entries: Sequence[HighScoreEntry]) -> None:
        """엔트리 전체를 덮어씁니다."""


class MemoryScoreStore(HighScoreStore):
    """프로세스 안에서만 유지되는 저장소"""

    def __init__(self, initial: Any = None):
        self.raw: Any = initial
        self.save_count = 0

    def load(self) -> List[HighScoreEntry]:
        return parse_entries(self.raw)

    def save(self, entries: Sequence[HighScoreEntry]) -> None:
        self.raw = [entry.to_dict() for entry in entries]
        self.save_count += 1


class JsonFileScoreStore(HighScoreStore):
    """
    JSON 파일 하나를 키-값 저장소처럼 사용합니다.

    파일은 {key: [{"score": int, "date": str}, ...]} 형태이며, 다른 키는
    건드리지 않습니다.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None, key: str = HIGH_SCORES_KEY):
        self.path = Path(path) if path is not None else default_score_path()
        self.key = key

    def _read_document(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                document = json.load(fh)
        except (OSError, ValueError) as exc:
            logger.warning(f"하이스코어 파일을 읽을 수 없습니다: {self.path} ({exc})")
            return {}
        if not isinstance(document, dict):
            logger.warning(f"하이스코어 파일 형식이 올바르지 않습니다: {self.path}")
            return {}
        return document

    def load(self) -> List[HighScoreEntry]:
        return parse_entries(self._read_document().get(self.key))

    def save(self, entries: Sequence[HighScoreEntry]) -> None:
        document = self._read_document()
        document[self.key] = [entry.to_dict() for entry in entries]
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as fh:
                json.dump(document, fh, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.error(f"하이스코어 저장 실패: {self.path} ({exc})")
            self._discard(tmp_path)
            return
        logger.debug(f"[Scoreboard] {len(entries)} entries saved to {self.path}")

    @staticmethod
    def _discard(tmp_path: Path) -> None:
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning(f"임시 파일 삭제 실패: {tmp_path} ({exc})")
