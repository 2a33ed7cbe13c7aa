import math

from pyzebras.compute.conversion import parse_dates, parse_nums

RAW_DATA = [
    {"Date": "2019-01-02", "Close": "39.48", "Volume": "148158800"},
    {"Date": "2019-01-03T10:30:00+00:00", "Close": "35.55", "Volume": ""},
    {"Date": "not a date", "Close": "n/a", "Volume": "365248800"},
]


def test_parse_nums():
    result = parse_nums(["Close", "Volume"], RAW_DATA)
    assert [row["Close"] for row in result[:2]] == [39.48, 35.55]
    assert math.isnan(result[2]["Close"])
    assert result[0]["Volume"] == 148158800
    assert math.isnan(result[1]["Volume"])
    assert result[0]["Date"] == "2019-01-02"
    assert RAW_DATA[0]["Close"] == "39.48"


def test_parse_nums_already_numbers():
    assert parse_nums(["a"], [{"a": 3}]) == [{"a": 3.0}]


def test_parse_nums_unknown_column():
    assert parse_nums(["z"], [{"a": "3"}]) == [{"a": "3"}]


def test_parse_dates():
    result = parse_dates(["Date"], RAW_DATA)
    assert result[0]["Date"] == 1546387200000
    assert result[1]["Date"] == 1546387200000 + 86400000 + 37800000
    assert math.isnan(result[2]["Date"])
    assert result[0]["Close"] == "39.48"
