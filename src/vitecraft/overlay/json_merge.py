"""Non-destructive JSON overlay.

Loads an existing JSON object (or starts from an empty one), lets a
callback add what it needs, and writes the result back pretty-printed.

Callbacks follow a mutate-or-return contract: they may modify the
document in place and return None, or return a replacement document.
They should only use the two helpers below so that repeated runs are
no-ops:

- set_if_absent: write a default only when the key is missing.
- union_list: add items to a list-valued key, skipping ones present.

Untouched keys keep their position and value. Numbers are rewritten in
Python's canonical JSON form, so a float spelled `1e3` or `1.50` comes
back as `1000.0` or `1.5` (equal value, different text).
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, Optional

from vitecraft.errors import JSONOverlayError
from vitecraft.overlay.files import write_file

JSONDocument = dict[str, Any]
Mutator = Callable[[JSONDocument], Optional[JSONDocument]]


def load_json_document(path: Path) -> JSONDocument:
    """Load a JSON object from path, or an empty dict if path is absent.

    Raises:
        JSONOverlayError: If the file is not valid JSON or not an object.
    """
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise JSONOverlayError(path, f"invalid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise JSONOverlayError(path, "top-level value is not an object")
    return data


def dump_json_document(doc: Any) -> str:
    """Serialize with 2-space indentation and a single trailing newline."""
    return json.dumps(doc, indent=2, ensure_ascii=False) + "\n"


def upsert_json(path: Path, mutate: Mutator) -> JSONDocument:
    """Apply mutate to the JSON document at path and write it back.

    Args:
        path: JSON file to update (created if absent).
        mutate: Callback that edits the document in place or returns
            a replacement.

    Returns:
        The document that was written.
    """
    doc = load_json_document(path)
    updated = mutate(doc)
    if updated is None:
        updated = doc
    write_file(path, dump_json_document(updated))
    return updated


def set_if_absent(doc: JSONDocument, key: str, default: Any) -> Any:
    """Set doc[key] to default only if key is missing; return doc[key]."""
    if key not in doc:
        doc[key] = default
    return doc[key]


def union_list(doc: JSONDocument, key: str, *items: Any) -> list[Any]:
    """Add items to the list at doc[key] unless already present.

    Existing elements keep their order; new ones are appended in the
    order given. A missing or null key starts as an empty list; a single
    non-list value is kept as the first element.
    """
    current = doc.get(key)
    if current is None:
        values = []
    elif isinstance(current, list):
        values = list(current)
    else:
        values = [current]
    for item in items:
        if item not in values:
            values.append(item)
    doc[key] = values
    return values
