import pytest

from promkit.labels import (
    LABEL_NAME_RE,
    LabelName,
    LabelPair,
    LabelValue,
    label_names_string,
)


@pytest.mark.parametrize(
    "given,expected",
    [(["ZZZ", "zzz"], ["ZZZ", "zzz"]), (["aaa", "AAA"], ["AAA", "aaa"])],
)
def test_label_names_sort(given, expected):
    assert sorted(LabelName(n) for n in given) == expected


@pytest.mark.parametrize(
    "given,expected",
    [(["ZZZ", "zzz"], ["ZZZ", "zzz"]), (["aaa", "AAA"], ["AAA", "aaa"])],
)
def test_label_values_sort(given, expected):
    assert sorted(LabelValue(v) for v in given) == expected


@pytest.mark.parametrize(
    "name,valid",
    [
        ("Avalid_23name", True),
        ("_Avalid_23name", True),
        ("1valid_23name", False),
        ("avalid_23name", True),
        ("Ava:lid_23name", False),
        ("a lid_23name", False),
        (":leading_colon", False),
        ("colon:in:the:middle", False),
    ],
)
def test_label_name_is_valid(name, valid):
    assert LabelName(name).is_valid() is valid
    assert (LABEL_NAME_RE.match(name) is not None) is valid


def test_empty_label_name_is_invalid():
    assert LabelName("").is_valid() is False


def test_sort_label_pairs():
    pairs = [
        LabelPair(LabelName("FooName"), LabelValue("FooValue")),
        LabelPair(LabelName("FooName"), LabelValue("BarValue")),
        LabelPair(LabelName("BarName"), LabelValue("FooValue")),
        LabelPair(LabelName("BazName"), LabelValue("BazValue")),
        LabelPair(LabelName("BarName"), LabelValue("FooValue")),
        LabelPair(LabelName("BazName"), LabelValue("FazValue")),
    ]
    expected = [
        ("BarName", "FooValue"),
        ("BarName", "FooValue"),
        ("BazName", "BazValue"),
        ("BazName", "FazValue"),
        ("FooName", "BarValue"),
    ]
    result = sorted(pairs)
    assert [(p.name, p.value) for p in result[: len(expected)]] == expected


def test_label_value_validity():
    assert LabelValue("label").is_valid() is True
    assert LabelValue("台北").is_valid() is True
    invalid = b"\xfflabel".decode("utf-8", "surrogateescape")
    assert LabelValue(invalid).is_valid() is False


def test_label_name_from_json():
    assert LabelName.from_json('"foo_bar"') == "foo_bar"
    with pytest.raises(ValueError, match='"1nvalid_23name" is not a valid label name'):
        LabelName.from_json('"1nvalid_23name"')
    with pytest.raises(ValueError):
        LabelName.from_json("12")


def test_label_name_from_yaml():
    assert LabelName.from_yaml("job") == "job"
    with pytest.raises(ValueError, match="is not a valid label name"):
        LabelName.from_yaml("a-b")
    with pytest.raises(ValueError):
        LabelName.from_yaml("")


def test_label_names_string():
    names = [LabelName("job"), LabelName("instance")]
    assert label_names_string(names) == "job, instance"
    assert label_names_string([]) == ""