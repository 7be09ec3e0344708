"""Page definition loading.

Page file format (YAML or JSON)::

    id: orders
    title: Orders
    route: /orders
    snippets:
      filters:
        component: GenericFilters
      table:
        component: SalesOrdersTable
        bindings:
          consumes:
            filters: filters
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pagewire.common.exceptions import LoaderError
from pagewire.models.contract import PageDefinition

from .files import read_mapping


def page_from_dict(data: Mapping[str, Any], source: str = "") -> PageDefinition:
    """
    Build a page definition from a document.

    Placements come from a ``snippets`` mapping keyed by placement id, or a
    ``placements`` list whose items carry an ``id``.

    Raises:
        LoaderError: If the document does not describe a valid page
    """
    snippets = data.get("snippets")
    placements = data.get("placements")

    if snippets is not None and placements is not None:
        raise LoaderError("Page cannot define both 'snippets' and 'placements'", file_path=source)

    if snippets is not None:
        if not isinstance(snippets, Mapping):
            raise LoaderError("'snippets' must be a mapping of placement id to snippet", file_path=source)
        items = []
        for placement_id, snippet in snippets.items():
            if not isinstance(snippet, Mapping):
                raise LoaderError(f"Snippet '{placement_id}' must be a mapping", file_path=source)
            items.append({**snippet, "placement_id": str(placement_id)})
    else:
        items = placements or []
        if not isinstance(items, list):
            raise LoaderError("'placements' must be a list", file_path=source)

    try:
        return PageDefinition(
            id=str(data.get("id") or data.get("$id") or Path(source).stem or "page"),
            title=str(data.get("title", "")),
            route=str(data.get("route", "")),
            placements=tuple(items),
        )
    except ValidationError as e:
        raise LoaderError(f"Invalid page definition: {e}", file_path=source) from e


def load_page(file_path: str | Path) -> PageDefinition:
    """Load a page definition from a YAML or JSON file."""
    data = read_mapping(file_path, "Page")
    return page_from_dict(data, source=str(file_path))
