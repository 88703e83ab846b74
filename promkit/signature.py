"""Signatures (fingerprints) of label sets and metrics."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping

from promkit.fingerprinting import Fingerprint
from promkit.fnv import hash_add, hash_add_byte, new_hash

SEPARATOR_BYTE = 255

EMPTY_LABEL_SIGNATURE = new_hash()


def _byte_order(s: str) -> bytes:
    return s.encode("utf-8", "surrogateescape")


def _hash_pairs(names: Iterable[str], labels: Mapping[str, str]) -> int:
    total = new_hash()
    for name in sorted(names, key=_byte_order):
        total = hash_add(total, name)
        total = hash_add_byte(total, SEPARATOR_BYTE)
        total = hash_add(total, labels.get(name, ""))
        total = hash_add_byte(total, SEPARATOR_BYTE)
    return total


def labels_to_signature(labels: Mapping[str, str] | None) -> int:
    """Return a quasi-unique signature for a label mapping."""
    if not labels:
        return EMPTY_LABEL_SIGNATURE
    return _hash_pairs(labels, labels)


def label_set_to_fingerprint(labels: Mapping[str, str] | None) -> Fingerprint:
    """Return the fingerprint of a label set."""
    return Fingerprint(labels_to_signature(labels))


def label_set_to_fast_fingerprint(labels: Mapping[str, str] | None) -> Fingerprint:
    """Return a cheaper, order-independent fingerprint of a label set.

    It is more prone to collisions than ``label_set_to_fingerprint``.
    """
    if not labels:
        return Fingerprint(EMPTY_LABEL_SIGNATURE)
    result = 0
    for name, value in labels.items():
        pair = hash_add(new_hash(), name)
        pair = hash_add_byte(pair, SEPARATOR_BYTE)
        pair = hash_add(pair, value)
        result ^= pair
    return Fingerprint(result)


def signature_for_labels(metric: Mapping[str, str], *args: str) -> int:
    """Return the signature of ``metric`` restricted to the given label names."""
    if not args:
        return EMPTY_LABEL_SIGNATURE
    return _hash_pairs(args, metric)


def signature_without_labels(
    metric: Mapping[str, str], labels: Collection[str] | None
) -> int:
    """Return the signature of ``metric`` with the given label names left out."""
    if not metric:
        return EMPTY_LABEL_SIGNATURE
    excluded = labels or ()
    names = [name for name in metric if name not in excluded]
    if not names:
        return EMPTY_LABEL_SIGNATURE
    return _hash_pairs(names, metric)