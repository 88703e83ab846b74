import pytest

from promkit.fingerprinting import Fingerprint
from promkit.signature import (
    label_set_to_fast_fingerprint,
    label_set_to_fingerprint,
    labels_to_signature,
    signature_for_labels,
    signature_without_labels,
)

GARLAND = {"name": "garland, briggs", "fear": "love is not enough"}

SINGLE = {"first-label": "first-label-value"}
DOUBLE = {**SINGLE, "second-label": "second-label-value"}
TRIPLE = {**DOUBLE, "third-label": "third-label-value"}


@pytest.mark.parametrize(
    "labels,expected",
    [
        ({}, 14695981039346656037),
        (None, 14695981039346656037),
        (GARLAND, 5799056148416392346),
        (SINGLE, 5146282821936882169),
        (DOUBLE, 3195800080984914717),
        (TRIPLE, 13843036195897128121),
    ],
)
def test_labels_to_signature(labels, expected):
    assert labels_to_signature(labels) == expected


@pytest.mark.parametrize(
    "labels,expected",
    [
        ({}, 14695981039346656037),
        (None, 14695981039346656037),
        (GARLAND, 5799056148416392346),
        (SINGLE, 5146282821936882169),
        (DOUBLE, 3195800080984914717),
        (TRIPLE, 13843036195897128121),
    ],
)
def test_metric_to_fingerprint(labels, expected):
    result = label_set_to_fingerprint(labels)
    assert isinstance(result, Fingerprint)
    assert result == expected


@pytest.mark.parametrize(
    "labels,expected",
    [
        ({}, 14695981039346656037),
        (None, 14695981039346656037),
        (GARLAND, 12952432476264840823),
        (SINGLE, 5147259542624943964),
        (DOUBLE, 18269973311206963528),
        (TRIPLE, 15738406913934009676),
    ],
)
def test_metric_to_fast_fingerprint(labels, expected):
    result = label_set_to_fast_fingerprint(labels)
    assert isinstance(result, Fingerprint)
    assert result == expected


def test_fingerprint_independent_of_insertion_order():
    reversed_labels = dict(reversed(list(TRIPLE.items())))
    assert label_set_to_fingerprint(reversed_labels) == 13843036195897128121
    assert label_set_to_fast_fingerprint(reversed_labels) == 15738406913934009676


@pytest.mark.parametrize(
    "metric,names,expected",
    [
        ({}, (), 14695981039346656037),
        ({}, ("empty",), 7187873163539638612),
        (GARLAND, ("empty",), 7187873163539638612),
        (GARLAND, ("fear", "name"), 5799056148416392346),
        ({**GARLAND, "foo": "bar"}, ("fear", "name"), 5799056148416392346),
        (GARLAND, ("name", "fear"), 5799056148416392346),
        (GARLAND, (), 14695981039346656037),
    ],
)
def test_signature_for_labels(metric, names, expected):
    assert signature_for_labels(metric, *names) == expected


@pytest.mark.parametrize(
    "metric,excluded,expected",
    [
        ({}, None, 14695981039346656037),
        (GARLAND, {"fear", "name"}, 14695981039346656037),
        ({**GARLAND, "foo": "bar"}, {"foo"}, 5799056148416392346),
        (GARLAND, set(), 5799056148416392346),
        (GARLAND, None, 5799056148416392346),
    ],
)
def test_signature_without_labels(metric, excluded, expected):
    assert signature_without_labels(metric, excluded) == expected