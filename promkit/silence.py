"""Silences and the label matchers they are built from."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import datetime

from promkit.labels import LabelName, LabelValue, _quote


@dataclass
class Matcher:
    """Matches the value of a given label, literally or by regular expression."""

    name: str
    value: str
    is_regex: bool = False

    def validate(self) -> None:
        """Raise ValueError if any field holds an invalid value."""
        if not LabelName(self.name).is_valid():
            raise ValueError(f"invalid name {_quote(self.name)}")
        if self.is_regex:
            try:
                re.compile(self.value)
            except re.error as err:
                raise ValueError(f"invalid regular expression {_quote(self.value)}") from err
        elif not LabelValue(self.value).is_valid() or not self.value:
            raise ValueError(f"invalid value {_quote(self.value)}")

    @classmethod
    def from_json(cls, text: str | bytes) -> "Matcher":
        """Decode a JSON object with name, value and isRegex keys."""
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("matcher must be a JSON object")
        name = data.get("name")
        if name is not None:
            if not isinstance(name, str) or not LabelName(name).is_valid():
                raise ValueError(f"{_quote(str(name))} is not a valid label name")
        value = data.get("value") or ""
        if not isinstance(value, str):
            raise ValueError("matcher value must be a string")
        is_regex = data.get("isRegex") or False
        if not isinstance(is_regex, bool):
            raise ValueError("matcher isRegex must be a boolean")
        if not name:
            raise ValueError("label name in matcher must not be empty")
        if is_regex:
            try:
                re.compile(value)
            except re.error as err:
                raise ValueError(str(err)) from err
        return cls(LabelName(name), value, is_regex)


@dataclass
class Silence:
    """A silence definition; ``None`` times mean the time is unset."""

    matchers: list[Matcher] = field(default_factory=list)
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    created_at: datetime | None = None
    created_by: str = ""
    comment: str = ""
    id: int = 0

    def validate(self) -> None:
        """Raise ValueError if any field holds an invalid value."""
        if not self.matchers:
            raise ValueError("at least one matcher required")
        for matcher in self.matchers:
            try:
                matcher.validate()
            except ValueError as err:
                raise ValueError(f"invalid matcher: {err}") from err
        if self.starts_at is None:
            raise ValueError("start time missing")
        if self.ends_at is None:
            raise ValueError("end time missing")
        if self.ends_at < self.starts_at:
            raise ValueError("start time must be before end time")
        if not self.created_by:
            raise ValueError("creator information missing")
        if not self.comment:
            raise ValueError("comment missing")
        if self.created_at is None:
            raise ValueError("creation timestamp missing")