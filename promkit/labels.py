"""Label names, label values and label pairs."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from dataclasses import dataclass

import yaml

ALERT_NAME_LABEL = "alertname"
EXPORTED_LABEL_PREFIX = "exported_"
METRIC_NAME_LABEL = "__name__"
SCHEME_LABEL = "__scheme__"
ADDRESS_LABEL = "__address__"
METRICS_PATH_LABEL = "__metrics_path__"
SCRAPE_INTERVAL_LABEL = "__scrape_interval__"
SCRAPE_TIMEOUT_LABEL = "__scrape_timeout__"
RESERVED_LABEL_PREFIX = "__"
META_LABEL_PREFIX = "__meta_"
TMP_LABEL_PREFIX = "__tmp_"
PARAM_LABEL_PREFIX = "__param_"
JOB_LABEL = "job"
INSTANCE_LABEL = "instance"
BUCKET_LABEL = "le"
QUANTILE_LABEL = "quantile"

LABEL_NAME_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*\Z")

_NAME_START = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
_NAME_REST = _NAME_START | frozenset("0123456789")

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote(s: str) -> str:
    """Quote a string with double quotes and escapes for display."""
    out = []
    for ch in s:
        code = ord(ch)
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif 0xDC80 <= code <= 0xDCFF:
            out.append(f"\\x{code - 0xDC00:02x}")
        elif ch.isprintable():
            out.append(ch)
        elif code < 0x80:
            out.append(f"\\x{code:02x}")
        elif code < 0x10000:
            out.append(f"\\u{code:04x}")
        else:
            out.append(f"\\U{code:08x}")
    return '"' + "".join(out) + '"'


class LabelName(str):
    """A key of a label set or metric."""

    def is_valid(self) -> bool:
        """Return True if the name matches ``[a-zA-Z_][a-zA-Z0-9_]*``."""
        if not self:
            return False
        if self[0] not in _NAME_START:
            return False
        return all(ch in _NAME_REST for ch in self[1:])

    @classmethod
    def _checked(cls, value: object) -> "LabelName":
        if not isinstance(value, str):
            raise ValueError(f"label name must be a string, got {type(value).__name__}")
        name = cls(value)
        if not name.is_valid():
            raise ValueError(f"{_quote(value)} is not a valid label name")
        return name

    @classmethod
    def from_json(cls, text: str | bytes) -> "LabelName":
        """Decode a JSON string into a valid label name."""
        return cls._checked(json.loads(text))

    @classmethod
    def from_yaml(cls, text: str | bytes) -> "LabelName":
        """Decode a YAML scalar into a valid label name."""
        value = yaml.load(text, Loader=yaml.BaseLoader)
        return cls._checked("" if value is None else value)


class LabelValue(str):
    """A value associated with a label name."""

    def is_valid(self) -> bool:
        """Return True if the value is valid UTF-8."""
        try:
            self.encode("utf-8")
        except UnicodeEncodeError:
            return False
        return True


@dataclass(frozen=True, order=True)
class LabelPair:
    """A label name paired with a value; ordered by name, then value."""

    name: LabelName
    value: LabelValue


def label_names_string(names: Iterable[str]) -> str:
    """Join label names with ', '."""
    return ", ".join(str(name) for name in names)