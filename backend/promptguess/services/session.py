import threading
from typing import Optional

from promptguess.models import Round


class GameSession:
    """Holds the active round for the process.

    start_round() overwrites any previous round. There is no way back to the
    "no round" state short of a restart.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._round: Optional[Round] = None

    def start_round(self, provider) -> Round:
        # Provider errors propagate before the current round is replaced
        new_round = provider.generate_round()
        with self._lock:
            self._round = new_round
        return new_round

    def snapshot(self) -> Optional[Round]:
        with self._lock:
            return self._round

    def current_prompt(self) -> str:
        current = self.snapshot()
        return current.prompt if current else ''

    def current_image(self) -> str:
        current = self.snapshot()
        return current.image if current else ''

    @property
    def is_active(self) -> bool:
        return bool(self.current_prompt())
