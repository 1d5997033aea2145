# core/session_utils.py
from __future__ import annotations
import logging
import secrets
from typing import Optional

from core.config import AppConfig, DEFAULT_CONFIG
from core.export_utils import BatchResult, export_csv, generate_batch
from core.history_utils import PasswordHistory
from core.password_utils import GenerationOptions, GenerationResult, RandomBytes, generate_password
from core.strength_utils import StrengthResult, score_password

logger = logging.getLogger(__name__)


class PasswordSession:
    """
    State for one browser session: the current password and its strength,
    the recent history, and the last batch. The UI keeps one instance in
    st.session_state and calls these commands from widget callbacks.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        random_bytes: RandomBytes = secrets.token_bytes,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.random_bytes = random_bytes
        self.history = PasswordHistory(self.config.history_size)
        self.current: Optional[str] = None
        self.strength: Optional[StrengthResult] = None
        self.batch = BatchResult()

    def generate(self, length: int, options: GenerationOptions) -> GenerationResult:
        result = generate_password(length, options, self.random_bytes)
        if result.ok:
            self.current = result.password
            self.strength = score_password(result.password)
            self.history.add(result.password)
        return result

    def run_batch(self, count: int, length: int, options: GenerationOptions) -> BatchResult:
        result = generate_batch(count, length, options, self.random_bytes)
        if result.ok:
            self.batch = result
        return result

    def export_batch(self) -> Optional[str]:
        if not self.batch.passwords:
            return None
        return export_csv(self.batch.passwords)

    def clear_history(self) -> None:
        self.history.clear()

    def remove_from_history(self, index: int) -> None:
        self.history.remove_at(index)
        logger.debug("History entry %d removed (%d left)", index, len(self.history))
