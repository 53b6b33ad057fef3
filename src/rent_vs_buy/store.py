from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from .schemas import DEFAULT_INPUTS, Inputs

logger = logging.getLogger(__name__)

STORAGE_KEY = "rvb-inputs"


class StoreError(ValueError):
    """Raised when saved inputs cannot be written."""


class InputStore:
    """Saved calculator inputs in a small JSON key-value file.

    Stored records are merged over ``DEFAULT_INPUTS`` on load, so a file
    written before a field existed still loads.
    """

    def __init__(self, path: Union[str, Path], key: str = STORAGE_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def load(self) -> Inputs:
        entries = self._read()
        saved = entries.get(self.key)
        if saved is None:
            return DEFAULT_INPUTS
        if not isinstance(saved, dict):
            logger.warning("Ignoring saved inputs in %s: expected object", self.path)
            return DEFAULT_INPUTS
        return Inputs.from_dict(saved)

    def save(self, inputs: Inputs) -> None:
        entries = self._read()
        entries[self.key] = inputs.to_dict()
        self._write(entries)
        logger.debug("Saved inputs to %s", self.path)

    def reset(self) -> None:
        entries = self._read()
        if entries.pop(self.key, None) is None:
            return
        self._write(entries)
        logger.debug("Cleared saved inputs in %s", self.path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Could not read %s: expected a JSON object", self.path)
            return {}
        return data

    def _write(self, entries: Dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(entries, indent=2), encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"Could not write {self.path}: {exc}") from exc
