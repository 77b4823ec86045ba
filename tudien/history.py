"""Search history kept as one word per line in a plain text file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Union

DEFAULT_HISTORY_PATH = "history"


class SearchHistory:
    """Words that were looked up, oldest first, stored in ``path``."""

    def __init__(self, path: Union[str, "os.PathLike[str]"] = DEFAULT_HISTORY_PATH) -> None:
        self.path = Path(path)

    def record(self, word: str) -> None:
        """Append ``word`` to the history file."""
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(f"{word}\n")

    def text(self) -> str:
        """Return the whole history as stored, one word per line."""
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ""

    def entries(self) -> List[str]:
        """Return the recorded words in the order they were searched."""
        return self.text().splitlines()

    def clear(self) -> None:
        """Forget every recorded word, leaving an empty history file."""
        self.path.write_text("", encoding="utf-8")