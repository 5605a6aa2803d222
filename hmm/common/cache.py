"""JSON cache for model-written scenes.

One file per character reading: `<cache_dir>/<character>.<reading>.json`,
e.g. `scenes/好.hǎo.json`.
"""

import json
import re
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

_UNSAFE_CHARS = re.compile(r'[/\\:*?"<>|]')


def sanitize_filename(name: str) -> str:
    """Replace characters that are not allowed in file names with underscores."""
    return _UNSAFE_CHARS.sub("_", name)


def cache_key(character: str, reading: str) -> str:
    return f"{character}.{reading}"


class SceneCache:
    """Reads and writes cached scenes below one directory."""

    def __init__(self, cache_dir: Path, verbose: bool = False, log_prefix: str = "scene") -> None:
        self.cache_dir = Path(cache_dir)
        self.verbose = verbose
        self.log_prefix = log_prefix

    def _log(self, tag: str, message: str) -> None:
        if self.verbose:
            print(f"[{self.log_prefix}] [{tag}] {message}")

    def path_for(self, character: str, reading: str) -> Path:
        return self.cache_dir / f"{sanitize_filename(cache_key(character, reading))}.json"

    def load(
        self,
        character: str,
        reading: str,
        required_fields: Iterable[str] = (),
    ) -> Optional[Dict[str, Any]]:
        """Cached data, or None when missing, unreadable or incomplete."""
        key = cache_key(character, reading)
        path = self.path_for(character, reading)
        if not path.is_file():
            self._log("cache-miss", key)
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            self._log("warn", f"Unreadable cache entry {path.name}: {e}")
            return None
        if not isinstance(data, dict):
            self._log("warn", f"Ignoring cache entry {path.name}: not an object")
            return None
        missing = [f for f in required_fields if f not in data]
        if missing:
            self._log("cache-miss", f"{key} (missing {', '.join(missing)})")
            return None
        self._log("cache-hit", key)
        return data

    def save(self, character: str, reading: str, data: Dict[str, Any]) -> Path:
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(character, reading)
        path.write_text(json.dumps(data, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
        self._log("file", f"Saved: {path.name}")
        return path


__all__ = [
    "sanitize_filename",
    "cache_key",
    "SceneCache",
]
