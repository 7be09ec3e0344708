"""Reading YAML/JSON documents from disk."""

import json
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from pagewire.common.exceptions import LoaderError
from pagewire.constants import JSON_EXTENSIONS, SUPPORTED_EXTENSIONS


def read_document(file_path: str | Path) -> Any:
    """
    Read a YAML or JSON document.

    Args:
        file_path: Path to a ``.yaml``, ``.yml`` or ``.json`` file

    Returns:
        The parsed document

    Raises:
        LoaderError: If the file is missing, unreadable or malformed
    """
    path = Path(file_path)
    suffix = path.suffix.lower().lstrip(".")
    if suffix not in SUPPORTED_EXTENSIONS:
        raise LoaderError(
            f"Unsupported file type '{path.suffix}'; expected one of: "
            + ", ".join(f".{ext}" for ext in SUPPORTED_EXTENSIONS),
            file_path=str(path),
        )
    if not path.is_file():
        raise LoaderError(f"File not found: {path}", file_path=str(path))

    try:
        with open(path, encoding="utf-8") as f:
            if suffix in JSON_EXTENSIONS:
                return json.load(f)
            yaml = YAML(typ="safe", pure=True)
            return yaml.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise LoaderError(f"Cannot read {path}: {e}", file_path=str(path)) from e
    except json.JSONDecodeError as e:
        raise LoaderError(
            f"Invalid JSON in {path}: {e.msg}",
            file_path=str(path),
            context={"line": e.lineno, "column": e.colno},
        ) from e
    except YAMLError as e:
        raise LoaderError(f"Invalid YAML in {path}: {e}", file_path=str(path)) from e


def read_mapping(file_path: str | Path, what: str) -> dict[str, Any]:
    """Read a document whose root must be a mapping."""
    data = read_document(file_path)
    if not isinstance(data, dict):
        raise LoaderError(
            f"{what} file must contain a mapping at root level", file_path=str(file_path)
        )
    return data
