# src/artisan_core/history.py
import json
import os
from typing import List

from loguru import logger

from artisan_core.config import settings
from artisan_core.logging_utils import log_event


class PromptHistory:
    """
    Most-recent-first list of submitted descriptions, persisted as JSON.
    Re-submitting a prompt moves it back to the front.
    """

    def __init__(self, path: str | None = None, limit: int | None = None):
        self.path = path or settings.ARTISAN_HISTORY_PATH
        self.limit = max(1, int(limit or settings.ARTISAN_HISTORY_LIMIT))
        self._entries: List[str] = self._load()

    @property
    def entries(self) -> List[str]:
        return list(self._entries)

    def _load(self) -> List[str]:
        if not os.path.exists(self.path):
            return []
        with open(self.path, 'r', encoding='utf-8') as f:
            try:
                content = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError):
                logger.warning(log_event("artisan.history.corrupt", path=self.path))
                return []
        if not isinstance(content, list):
            return []
        return [str(item) for item in content if isinstance(item, str) and item.strip()][: self.limit]

    def _save(self) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(self._entries, f, ensure_ascii=False, indent=2)

    def add(self, prompt_text: str) -> bool:
        """Record a prompt. Blank input is ignored and returns False."""
        if not prompt_text or not prompt_text.strip():
            return False
        trimmed = prompt_text.strip()
        self._entries = [p for p in self._entries if p != trimmed]
        self._entries.insert(0, trimmed)
        del self._entries[self.limit:]
        self._save()
        return True

    def clear(self) -> None:
        self._entries = []
        self._save()
