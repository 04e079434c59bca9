import json
import logging
import os
import tempfile
import threading
from typing import Iterable, List

from promptguess.models import ScoreRecord

logger = logging.getLogger(__name__)


class LeaderboardError(Exception):
    """The persisted leaderboard could not be read."""


class LeaderboardStore:
    """JSON file backed leaderboard, kept sorted by score (highest first).

    Every mutation reads the whole file, appends in memory, re-sorts and
    rewrites the file. Mutations are serialised by a per-store lock and the
    file is replaced atomically, so concurrent guesses never lose an append
    and a crash mid-write leaves the previous file intact.
    Corrupt data raises LeaderboardError instead of being reset.
    """

    def __init__(self, path):
        self.path = os.fspath(path)
        self._lock = threading.Lock()

    def ensure_exists(self) -> bool:
        """Create the file as an empty array if missing. Returns True when created."""
        with self._lock:
            if os.path.exists(self.path):
                return False
            self._write([])
            logger.info("[leaderboard-init] created %s", self.path)
            return True

    def load(self) -> List[ScoreRecord]:
        with self._lock:
            return self._read()

    def append(self, record: ScoreRecord) -> List[ScoreRecord]:
        return self.extend([record])

    def extend(self, records: Iterable[ScoreRecord]) -> List[ScoreRecord]:
        with self._lock:
            leaderboard = self._read()
            leaderboard.extend(records)
            # sorted() is stable, ties keep insertion order
            leaderboard = sorted(leaderboard, key=lambda r: r.score, reverse=True)
            self._write(leaderboard)
            return leaderboard

    def top(self, limit: int) -> List[ScoreRecord]:
        return self.load()[:limit]

    def _read(self) -> List[ScoreRecord]:
        if not os.path.exists(self.path):
            self._write([])
            return []
        try:
            with open(self.path, encoding='utf-8') as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            raise LeaderboardError(f"Could not read leaderboard {self.path}: {exc}") from exc
        if not isinstance(data, list):
            raise LeaderboardError(f"Leaderboard {self.path} must hold a JSON array")
        try:
            return [ScoreRecord.from_dict(entry) for entry in data]
        except (KeyError, TypeError, ValueError) as exc:
            raise LeaderboardError(f"Malformed leaderboard entry in {self.path}: {exc}") from exc

    def _write(self, records: List[ScoreRecord]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.leaderboard-', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as fh:
                json.dump([r.to_dict() for r in records], fh, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
