"""Fingerprints: 64-bit hashes identifying label sets and metrics."""

from __future__ import annotations

import re
from collections.abc import Set

_MAX_UINT64 = (1 << 64) - 1
_HEX_RE = re.compile(r"[0-9a-fA-F]+\Z")


class Fingerprint(int):
    """An unsigned 64-bit hash of a metric (FNV-1a)."""

    def __new__(cls, value: int = 0) -> "Fingerprint":
        fp = super().__new__(cls, value)
        if not 0 <= fp <= _MAX_UINT64:
            raise ValueError(f"fingerprint out of range: {int(value)}")
        return fp

    def __str__(self) -> str:
        return f"{int(self):016x}"

    def __repr__(self) -> str:
        return f"Fingerprint({int(self)})"


def _parse_hex_uint64(s: str) -> int:
    if not _HEX_RE.match(s):
        raise ValueError(f"invalid fingerprint syntax: {s!r}")
    num = int(s, 16)
    if num > _MAX_UINT64:
        raise ValueError(f"fingerprint out of range: {s!r}")
    return num


def fingerprint_from_string(s: str) -> Fingerprint:
    """Convert a hexadecimal string into a Fingerprint."""
    return Fingerprint(_parse_hex_uint64(s))


def parse_fingerprint(s: str) -> Fingerprint:
    """Parse a hexadecimal string into a Fingerprint."""
    return Fingerprint(_parse_hex_uint64(s))


class FingerprintSet(set):
    """A set of fingerprints."""

    def equal(self, other: Set) -> bool:
        """Return True if both sets hold exactly the same elements."""
        if len(self) != len(other):
            return False
        return all(fp in other for fp in self)

    def intersection(self, other: Set) -> "FingerprintSet":
        """Return the elements contained in both sets."""
        if not self or not other:
            return FingerprintSet()
        smaller, larger = (other, self) if len(other) < len(self) else (self, other)
        return FingerprintSet(fp for fp in smaller if fp in larger)