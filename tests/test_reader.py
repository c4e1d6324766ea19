import math

import pytest

from rocketreplay.telemetry.reader import (
    load_samples,
    parse_csv_line,
    parse_rows,
    read_samples,
    split_lines,
)
from rocketreplay.telemetry.samples import TelemetryFormatError
from rocketreplay.telemetry.types import Vec3

ROW = "1,2,3,4,5,6,7,0,0"


def test_split_lines_handles_both_line_endings_and_blanks():
    text = "a\r\nb\n\n  \nc\n"
    assert split_lines(text) == ["a", "b", "c"]


def test_parse_csv_line():
    assert parse_csv_line(" 1.5, -2,3e2") == [1.5, -2.0, 300.0]


def test_parse_csv_line_unparseable_field_is_nan():
    fields = parse_csv_line("1,abc,3,")
    assert fields[0] == 1.0
    assert math.isnan(fields[1])
    assert math.isnan(fields[3])


def test_read_samples_accepts_trailing_comma():
    samples = read_samples("1,2,3,4,5,6,7,0,0,\n")
    assert len(samples) == 1
    assert samples[0].fuel == 7.0


def test_read_samples_ignores_reserved_field():
    samples = read_samples("1,2,3,4,5,6,7,x,0\n")
    assert samples[0].position == Vec3(1.0, 3.0, 2.0)
    assert samples[0].status_code == 0


def test_read_samples_rejects_text_in_required_field():
    with pytest.raises(TelemetryFormatError) as exc:
        read_samples(f"{ROW}\n{ROW}\n\n1,abc,3,4,5,6,7,0,0\n")
    assert exc.value.row == 4
    assert "field 1" in exc.value.reason


def test_parse_rows_skips_empty_lines():
    assert parse_rows(f"{ROW}\n\n{ROW}\n") == [[1, 2, 3, 4, 5, 6, 7, 0, 0]] * 2


def test_read_samples():
    samples = read_samples(f"{ROW}\r\n{ROW}\n")
    assert len(samples) == 2
    assert samples[0].position == Vec3(1.0, 3.0, 2.0)


def test_read_samples_reports_source_line_numbers():
    text = f"{ROW}\n\n1,2,3\n"
    with pytest.raises(TelemetryFormatError) as exc:
        read_samples(text)
    assert exc.value.row == 3


def test_read_samples_nan_text_is_malformed():
    with pytest.raises(TelemetryFormatError):
        read_samples("nan,0,0,0,0,0,0,0,0")


def test_load_samples(tmp_path):
    path = tmp_path / "flight.csv"
    path.write_text(f"{ROW}\n{ROW}\n", encoding="utf-8")
    assert len(load_samples(path)) == 2


def test_blank_file_gives_no_samples():
    assert read_samples("\n\n") == []
