from __future__ import annotations

from typing import Any

from lens_ocr.domain.errors import UnrecognizedFormatError


class DocumentNode:
    """Loosely-typed decoded value addressed by its path from the document root.

    Accessors never assert a schema up front; they fail with
    UnrecognizedFormatError at the first key, index or type that does not match.
    """

    def __init__(self, value: Any, path: str = "") -> None:
        self._value = value
        self._path = path

    @property
    def value(self) -> Any:
        return self._value

    @property
    def path(self) -> str:
        return self._path or "/"

    def is_list(self) -> bool:
        return isinstance(self._value, list)

    def is_str(self) -> bool:
        return isinstance(self._value, str)

    def child(self, key: str | int) -> DocumentNode:
        child_path = f"{self._path}/{key}"
        if isinstance(self._value, dict):
            if key not in self._value:
                raise UnrecognizedFormatError(f"Missing key at {child_path}.", child_path)
            return DocumentNode(self._value[key], child_path)
        if isinstance(self._value, list):
            index = _as_index(key)
            if index is None or not 0 <= index < len(self._value):
                raise UnrecognizedFormatError(f"Missing index at {child_path}.", child_path)
            return DocumentNode(self._value[index], child_path)
        raise UnrecognizedFormatError(
            f"Expected object or array at {self.path}, got {_type_name(self._value)}.",
            self.path,
        )

    def pointer(self, pointer: str) -> DocumentNode:
        node = self
        for token in [part for part in pointer.split("/") if part]:
            node = node.child(token)
        return node

    def first(self) -> DocumentNode | None:
        items = self.as_list()
        if not items:
            return None
        return DocumentNode(items[0], f"{self._path}/0")

    def as_list(self) -> list[Any]:
        if not isinstance(self._value, list):
            raise UnrecognizedFormatError(
                f"Expected array at {self.path}, got {_type_name(self._value)}.", self.path
            )
        return self._value

    def as_dict(self) -> dict[str, Any]:
        if not isinstance(self._value, dict):
            raise UnrecognizedFormatError(
                f"Expected object at {self.path}, got {_type_name(self._value)}.", self.path
            )
        return self._value

    def as_str(self) -> str:
        if not isinstance(self._value, str):
            raise UnrecognizedFormatError(
                f"Expected string at {self.path}, got {_type_name(self._value)}.", self.path
            )
        return self._value


def _as_index(key: str | int) -> int | None:
    if isinstance(key, int):
        return key
    try:
        return int(key)
    except ValueError:
        return None


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
