"""
Tests for the CSV persistence codec.

This module tests:
  - Loading: missing files, empty files, header-only files, ragged rows.
  - Line handling: trailing newline, CRLF, interior blank lines.
  - Saving: exact output format and full overwrite.
  - Round trip of delimiter-free tables.
  - Error handling when the target cannot be written.
"""

import pytest

from models.csv_model import CSVData
from services.csv_service import CSVService, CSVServiceError


# ============================================================================
# read_csv
# ============================================================================

def test_missing_file_loads_empty_table(tmp_path):
    data = CSVService.read_csv(tmp_path / "nope.csv")
    assert data.columns == []
    assert data.rows == []


def test_directory_path_loads_empty_table(tmp_path):
    data = CSVService.read_csv(tmp_path)
    assert data == CSVData()


def test_zero_byte_file_loads_empty_table(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_bytes(b"")
    assert CSVService.read_csv(path) == CSVData()


def test_empty_first_line_yields_single_empty_column(tmp_path):
    path = tmp_path / "blank.csv"
    path.write_bytes(b"\n")
    data = CSVService.read_csv(path)
    assert data.columns == [""]
    assert data.rows == []


def test_trailing_newline_does_not_add_a_record(people_path):
    data = CSVService.read_csv(people_path)
    assert data.columns == ["name", "age"]
    assert data.rows == [["Ann", "30"], ["Bob", "41"]]


def test_missing_final_newline_keeps_last_record(tmp_path):
    path = tmp_path / "t.csv"
    path.write_bytes(b"a,b\n1,2")
    assert CSVService.read_csv(path).rows == [["1", "2"]]


def test_crlf_line_endings_are_stripped(tmp_path):
    path = tmp_path / "t.csv"
    path.write_bytes(b"a,b\r\n1,2\r\n")
    data = CSVService.read_csv(path)
    assert data.columns == ["a", "b"]
    assert data.rows == [["1", "2"]]


def test_interior_blank_line_is_a_one_cell_record(tmp_path):
    path = tmp_path / "t.csv"
    path.write_bytes(b"a\nx\n\ny\n")
    assert CSVService.read_csv(path).rows == [["x"], [""], ["y"]]


def test_ragged_rows_are_loaded_without_validation(tmp_path):
    path = tmp_path / "t.csv"
    path.write_bytes(b"a,b,c\n1\n1,2,3,4\n")
    data = CSVService.read_csv(path)
    assert data.rows == [["1"], ["1", "2", "3", "4"]]


def test_cell_whitespace_is_preserved(tmp_path):
    path = tmp_path / "t.csv"
    path.write_bytes(b" a ,b\n 1,2 \n")
    data = CSVService.read_csv(path)
    assert data.columns == [" a ", "b"]
    assert data.rows == [[" 1", "2 "]]


def test_utf8_bom_is_removed(tmp_path):
    path = tmp_path / "t.csv"
    path.write_bytes(b"\xef\xbb\xbf" + "nombre,año\n".encode("utf-8"))
    assert CSVService.read_csv(path).columns == ["nombre", "año"]


def test_latin1_file_is_decoded(tmp_path):
    path = tmp_path / "t.csv"
    path.write_bytes("ciudad\nBogotá\n".encode("latin-1"))
    assert CSVService.read_csv(path).rows == [["Bogotá"]]


# ============================================================================
# write_csv
# ============================================================================

def test_write_format(tmp_path):
    path = tmp_path / "out.csv"
    CSVService.write_csv(path, CSVData(["a", "b"], [["1", "2"], ["", "x"]]))
    assert path.read_bytes() == b"a,b\n1,2\n,x\n"


def test_write_header_only(tmp_path):
    path = tmp_path / "out.csv"
    CSVService.write_csv(path, CSVData(["only"], []))
    assert path.read_bytes() == b"only\n"


def test_write_overwrites_whole_file(tmp_path):
    path = tmp_path / "out.csv"
    path.write_text("old,header\n1,2\n3,4\n5,6\n", encoding="utf-8")
    CSVService.write_csv(path, CSVData(["new"], [["7"]]))
    assert path.read_text(encoding="utf-8") == "new\n7\n"


def test_write_to_unwritable_path_raises(tmp_path):
    with pytest.raises(CSVServiceError):
        CSVService.write_csv(tmp_path / "missing_dir" / "out.csv", CSVData(["a"], []))


@pytest.mark.parametrize("data", [
    CSVData(["name", "age"], [["Ann", "30"], ["Bob", "41"]]),
    CSVData(["a", "b"], [["", ""], ["x", ""]]),
    CSVData(["single"], [["v"], [""]]),
    CSVData(["dup", "dup"], []),
    CSVData(["ñandú", "über"], [["ç", "ß"]]),
])
def test_round_trip(tmp_path, data):
    path = tmp_path / "rt.csv"
    CSVService.write_csv(path, data)
    assert CSVService.read_csv(path) == data


def test_delimiter_inside_cell_corrupts_round_trip(tmp_path):
    path = tmp_path / "rt.csv"
    CSVService.write_csv(path, CSVData(["a", "b"], [["1,5", "2"]]))
    assert CSVService.read_csv(path).rows == [["1", "5", "2"]]
