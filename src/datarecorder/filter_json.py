# topmark:header:start
#
#   project      : DataRecorder
#   file         : filter_json.py
#   file_relpath : src/datarecorder/filter_json.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rewrite JSON objects before recording them.

Log lines and API payloads often contain volatile fields (process ids,
timestamps) that would make every recording differ. `FilterJson` walks a JSON
tree and lets a visitor overwrite such fields in place:

```python
line = FilterJson(message).transform_objects(replace_keys(pid=0)).to_str()
```

The walk is pre-order over objects only: the visitor sees an object before its
children, and values that are lists are not descended into, so objects inside
arrays are left untouched.
"""

from __future__ import annotations

import json
from typing import Any, Callable

JsonObject = dict[str, Any]
ObjectVisitor = Callable[[JsonObject], None]


class FilterJson:
    """A JSON tree with in-place object rewriting.

    Args:
        data (str | bytes | Any): JSON text to parse, or an already parsed tree.
            A parsed tree is used (and mutated) as is.
    """

    def __init__(self, data: str | bytes | Any) -> None:
        self._json: Any = json.loads(data) if isinstance(data, (str, bytes)) else data

    def transform_objects(self, visitor: ObjectVisitor) -> FilterJson:
        """Apply ``visitor`` to every reachable object, parents first.

        Args:
            visitor (ObjectVisitor): Called with each object; may mutate it.

        Returns:
            FilterJson: ``self``, for chaining.
        """
        if isinstance(self._json, dict):
            _transform_object(self._json, visitor)
        return self

    def to_str(self) -> str:
        """Serialize the tree in minimal form, keeping key order."""
        return json.dumps(self._json, separators=(",", ":"), ensure_ascii=False)

    def to_json(self) -> Any:
        """Return the (possibly rewritten) tree."""
        return self._json


def _transform_object(obj: JsonObject, visitor: ObjectVisitor) -> None:
    visitor(obj)
    for value in obj.values():
        if isinstance(value, dict):
            _transform_object(value, visitor)


def redact_json(data: str | bytes | Any, visitor: ObjectVisitor) -> Any:
    """Parse ``data`` if needed, rewrite its objects with ``visitor`` and return the tree."""
    return FilterJson(data).transform_objects(visitor).to_json()


def replace_keys(**values: Any) -> ObjectVisitor:
    """Build a visitor that overwrites the given keys wherever they are present.

    Example:
        ``replace_keys(pid=0, timestamp="<ts>")``
    """

    def _visit(obj: JsonObject) -> None:
        for key, value in values.items():
            if key in obj:
                obj[key] = value

    return _visit
