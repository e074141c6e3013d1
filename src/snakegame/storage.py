# storage.py
"""Best-score persistence: a single non-negative integer that outlives a session."""
from pathlib import Path
from typing import Protocol, Union
import logging

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    def load_best_score(self) -> int: ...
    def save_best_score(self, score: int) -> None: ...


class FileScoreStore:
    """
    Keeps the best score as plain text in ``path``.

    Reads never fail: a missing, unreadable or garbled file counts as 0.
    A failed write is logged and dropped so the game keeps running.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load_best_score(self) -> int:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return 0
        except OSError as e:
            logger.warning("Could not read best score from %s: %s", self.path, e)
            return 0

        try:
            score = int(raw.decode("utf-8").strip())
        except ValueError:
            # UnicodeDecodeError is a ValueError too
            logger.warning("Ignoring unparseable best score in %s: %r", self.path, raw[:32])
            return 0
        if score < 0:
            logger.warning("Ignoring negative best score in %s: %d", self.path, score)
            return 0
        return score

    def save_best_score(self, score: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(int(score)), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save best score to %s: %s", self.path, e)


class MemoryScoreStore:
    """In-process store; forgets everything when the process exits."""

    def __init__(self, best_score: int = 0):
        self.best_score = best_score

    def load_best_score(self) -> int:
        return self.best_score

    def save_best_score(self, score: int) -> None:
        self.best_score = score
