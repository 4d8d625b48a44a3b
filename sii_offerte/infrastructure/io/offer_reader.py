from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from .exceptions import OfferSourceError

if TYPE_CHECKING:
    from pathlib import Path


class OfferJSONReader:
    """Reads offer form data saved as a JSON object."""

    def __init__(self, encoding: str = "utf-8") -> None:
        super().__init__()
        self.encoding = encoding

    def read(self, path: Path) -> dict[str, Any]:
        if not path.exists():
            raise OfferSourceError(f"File not found: {path}")
        if not path.is_file():
            raise OfferSourceError(f"Not a file: {path}")
        try:
            with path.open(encoding=self.encoding) as handle:
                data = json.load(handle)
        except json.JSONDecodeError as e:
            raise OfferSourceError(f"Failed to parse JSON {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise OfferSourceError(f"Encoding error reading {path}: {e}") from e
        except OSError as e:
            raise OfferSourceError(f"Failed to read {path}: {e}") from e
        if not isinstance(data, dict):
            raise OfferSourceError(
                f"Expected a JSON object in {path}, got {type(data).__name__}"
            )
        return data
