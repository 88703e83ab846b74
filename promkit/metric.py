"""Metrics: label sets that identify exactly one stream of samples."""

from __future__ import annotations

import re

from promkit.labels import METRIC_NAME_LABEL, _quote
from promkit.labelset import LabelSet, _byte_key

METRIC_NAME_RE = re.compile(r"^[a-zA-Z_:][a-zA-Z0-9_:]*\Z")

_NAME_START = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_:")
_NAME_REST = _NAME_START | frozenset("0123456789")


class Metric(LabelSet):
    """A label set referring to a single time series."""

    def clone(self) -> "Metric":
        """Return a copy of the metric."""
        return Metric(self)

    def __str__(self) -> str:
        name = self.get(METRIC_NAME_LABEL)
        labels = sorted(
            (
                f"{label}={_quote(value)}"
                for label, value in self.items()
                if label != METRIC_NAME_LABEL
            ),
            key=_byte_key,
        )
        if not labels:
            return name if name is not None else "{}"
        return f"{name or ''}{{{', '.join(labels)}}}"


def is_valid_metric_name(name: str) -> bool:
    """Return True if ``name`` matches ``[a-zA-Z_:][a-zA-Z0-9_:]*``."""
    if not name or name[0] not in _NAME_START:
        return False
    return all(ch in _NAME_REST for ch in name[1:])