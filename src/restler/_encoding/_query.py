from typing import Any

from ._fields import is_sequence, is_structured, iter_fields, render_scalar
from ._json import JSONEncoder
from ._protocols import JSONEncoderType


class QueryEncoder:
    """Flattens an object into ordered query items.

    Scalars become one item each, sequences become repeated ``name[]`` items
    and nested objects are sent as compact JSON strings. ``None`` values are
    omitted.

    Examples:
        >>> QueryEncoder().encode({"id": 1, "intArray": [1, 5, 2]})
        [('id', '1'), ('intArray[]', '1'), ('intArray[]', '5'), ('intArray[]', '2')]
    """

    def __init__(self, json_encoder: JSONEncoderType | None = None) -> None:
        self.json_encoder = json_encoder or JSONEncoder()

    def encode(self, obj: Any) -> list[tuple[str, str]]:
        items: list[tuple[str, str]] = []
        for name, value in iter_fields(obj):
            if value is None:
                continue
            if is_sequence(value):
                items.extend(
                    (f"{name}[]", self._render(name, element))
                    for element in value
                    if element is not None
                )
            else:
                items.append((name, self._render(name, value)))
        return items

    def _render(self, name: str, value: Any) -> str:
        if is_structured(value):
            return self.json_encoder.encode(value).decode("utf-8")
        return render_scalar(name, value)
