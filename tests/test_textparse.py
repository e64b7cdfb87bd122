import pytest

from defender.textparse import first_line, format_number, get_number, line_at, read_file

SAMPLE = "img/obito.png\n250\n200\n50\n"


@pytest.mark.parametrize(
    "text, expected",
    [("123", 123), ("-42", -42), ("--5", 5), ("+-7", -7), ("12abc", 12), ("abc", 0), ("", 0)],
)
def test_get_number(text, expected):
    assert get_number(text) == expected


def test_get_number_stops_at_space():
    assert get_number(" 12") == 0


def test_format_number_zero():
    assert format_number(0) == "0"


def test_format_number_negative():
    assert format_number(-12) == "-12"


def test_format_number_truncates_float():
    assert format_number(1000.9) == "1000"


@pytest.mark.parametrize("value", [1, 9, 10, 999, 10000, -1, -305])
def test_format_number_round_trip(value):
    assert get_number(format_number(value)) == value


def test_first_line():
    assert first_line(SAMPLE) == "img/obito.png"


def test_first_line_without_newline():
    assert first_line("sniper.txt") == "sniper.txt"


def test_line_at_values():
    assert line_at(0, SAMPLE) == first_line(SAMPLE)
    assert get_number(line_at(1, SAMPLE)) == 250
    assert get_number(line_at(2, SAMPLE)) == 200
    assert get_number(line_at(3, SAMPLE)) == 50


def test_line_at_out_of_range():
    with pytest.raises(IndexError):
        line_at(10, SAMPLE)


def test_line_at_negative():
    with pytest.raises(IndexError):
        line_at(-1, SAMPLE)


def test_read_file(tmp_path):
    path = tmp_path / "gun.txt"
    path.write_text(SAMPLE)
    assert read_file(path) == SAMPLE


def test_read_file_truncates(tmp_path):
    path = tmp_path / "big.txt"
    path.write_text("a" * 5000)
    assert len(read_file(path)) == 4000


def test_read_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.txt")