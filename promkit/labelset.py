"""Label sets: collections of label name and label value pairs."""

from __future__ import annotations

import json
from collections.abc import Mapping

from promkit.fingerprinting import Fingerprint
from promkit.labels import LabelName, LabelValue, _quote
from promkit.signature import label_set_to_fast_fingerprint, label_set_to_fingerprint


def _byte_key(s: str) -> bytes:
    """Key that orders strings byte-wise by their UTF-8 encoding."""
    return s.encode("utf-8", "surrogateescape")


class LabelSet(dict):
    """A mapping of label names to label values."""

    def validate(self) -> None:
        """Raise ValueError if any name or value in the set is invalid."""
        for name, value in self.items():
            if not LabelName(name).is_valid():
                raise ValueError(f"invalid name {_quote(name)}")
            if not LabelValue(value).is_valid():
                raise ValueError(f"invalid value {_quote(value)}")

    def equal(self, other: Mapping[str, str]) -> bool:
        """Return True if both sets hold exactly the same pairs."""
        if len(self) != len(other):
            return False
        return all(name in other and other[name] == value for name, value in self.items())

    def before(self, other: Mapping[str, str]) -> bool:
        """Return True if this set sorts before ``other``.

        Smaller sets come first. Among sets of equal size, the union of
        names is walked in sorted order and the first differing pair
        decides: a missing name sorts first, otherwise values compare.
        """
        if len(self) != len(other):
            return len(self) < len(other)
        for name in sorted([*self, *other], key=_byte_key):
            if name not in self:
                return True
            if name not in other:
                return False
            mine, theirs = _byte_key(self[name]), _byte_key(other[name])
            if mine != theirs:
                return mine < theirs
        return False

    def clone(self) -> "LabelSet":
        """Return a copy of the set."""
        return type(self)(self)

    def merge(self, other: Mapping[str, str]) -> "LabelSet":
        """Return a new set holding both sets' pairs; ``other`` wins on conflict."""
        result = type(self)(self)
        result.update(other)
        return result

    def fingerprint(self) -> Fingerprint:
        """Return the fingerprint of the set."""
        return label_set_to_fingerprint(self)

    def fast_fingerprint(self) -> Fingerprint:
        """Return the cheaper, collision-prone fingerprint of the set."""
        return label_set_to_fast_fingerprint(self)

    def __str__(self) -> str:
        pairs = sorted((f"{name}={_quote(value)}" for name, value in self.items()), key=_byte_key)
        return "{" + ", ".join(pairs) + "}"

    @classmethod
    def from_json(cls, text: str | bytes) -> "LabelSet":
        """Decode a JSON object into a label set, checking its label names."""
        data = json.loads(text)
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("label set must be a JSON object")
        for name, value in data.items():
            if not LabelName(name).is_valid():
                raise ValueError(f"{_quote(name)} is not a valid label name")
            if not isinstance(value, str):
                raise ValueError(f"label value for {_quote(name)} must be a string")
        return cls({LabelName(name): LabelValue(value) for name, value in data.items()})