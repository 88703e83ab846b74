import pytest

from promkit.fingerprinting import (
    Fingerprint,
    FingerprintSet,
    fingerprint_from_string,
    parse_fingerprint,
)


def test_fingerprint_from_string():
    assert fingerprint_from_string("4294967295") == Fingerprint(285960729237)
    assert parse_fingerprint("4294967295") == Fingerprint(285960729237)


def test_fingerprint_string_roundtrip():
    fp = parse_fingerprint("4294967295")
    assert str(fp) == "0000004294967295"
    assert parse_fingerprint(str(fp)) == fp


@pytest.mark.parametrize("bad", ["", "xyz", "0x10", "+10", " 10", "1_0", "1" * 17])
def test_parse_fingerprint_rejects_bad_input(bad):
    with pytest.raises(ValueError):
        parse_fingerprint(bad)
    with pytest.raises(ValueError):
        fingerprint_from_string(bad)


def test_fingerprint_range():
    with pytest.raises(ValueError):
        Fingerprint(-1)
    with pytest.raises(ValueError):
        Fingerprint(2**64)


def test_fingerprints_sort():
    fps = [
        Fingerprint(14695981039346656037),
        Fingerprint(285960729237),
        Fingerprint(0),
        Fingerprint(4294967295),
        Fingerprint(285960729237),
        Fingerprint(18446744073709551615),
    ]
    assert sorted(fps) == [
        0,
        4294967295,
        285960729237,
        285960729237,
        14695981039346656037,
        18446744073709551615,
    ]


def test_fingerprint_set_equal():
    f = FingerprintSet({14695981039346656037, 0, 4294967295, 285960729237, 18446744073709551615})
    f2 = FingerprintSet({285960729237})
    assert f.equal(f2) is False

    f = FingerprintSet({14695981039346656037, 0, 4294967295})
    f2 = FingerprintSet({14695981039346656037, 0, 285960729237})
    assert f.equal(f2) is False

    f = FingerprintSet({14695981039346656037, 0, 4294967295})
    f2 = FingerprintSet({14695981039346656037, 0, 4294967295})
    assert f.equal(f2) is True


@pytest.mark.parametrize(
    "input1,input2,expected",
    [
        (set(), set(), set()),
        ({0}, set(), set()),
        (
            {14695981039346656037, 0, 4294967295},
            {14695981039346656037, 0, 4294967295},
            {14695981039346656037, 0, 4294967295},
        ),
        (
            {14695981039346656037, 0, 285960729237},
            {14695981039346656037, 0, 4294967295},
            {14695981039346656037, 0},
        ),
        (
            {14695981039346656037, 0, 285960729237},
            {14695981039346656037, 0},
            {14695981039346656037, 0},
        ),
    ],
)
def test_fingerprint_intersection(input1, input2, expected):
    actual = FingerprintSet(input1).intersection(FingerprintSet(input2))
    assert isinstance(actual, FingerprintSet)
    assert actual.equal(FingerprintSet(expected))