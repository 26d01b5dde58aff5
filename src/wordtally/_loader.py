"""Input document reading."""

from __future__ import annotations

import logging
from pathlib import Path

from ._errors import WordtallyReadError

logger = logging.getLogger(__name__)


def read_text(path: Path | str, encoding: str = "utf-8") -> str:
    """Read a whole document into memory.

    Raises WordtallyReadError if the file is missing, is not a regular
    file, cannot be opened, or is not valid text in the given encoding.
    """
    path = Path(path)
    try:
        with open(path, encoding=encoding) as f:
            text = f.read()
    except FileNotFoundError as exc:
        raise WordtallyReadError(f"File not found: {path}") from exc
    except IsADirectoryError as exc:
        raise WordtallyReadError(f"Not a file: {path}") from exc
    except PermissionError as exc:
        raise WordtallyReadError(f"Permission denied: {path}") from exc
    except UnicodeDecodeError as exc:
        raise WordtallyReadError(
            f"Could not decode {path} as {encoding}: {exc.reason}"
        ) from exc
    except OSError as exc:
        raise WordtallyReadError(f"Could not read {path}: {exc}") from exc
    logger.debug("Read %d characters from %s", len(text), path)
    return text
