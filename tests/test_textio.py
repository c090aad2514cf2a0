import io
from unittest import mock

import pytest

from graphquest.textio import (
    MAX_FIELDS,
    MAX_LINE_LENGTH,
    clear_screen,
    parse_csv_line,
    read_csv,
    split_string,
    wait_for_key,
)


def test_plain_fields():
    assert parse_csv_line("1,Entrada,Sala", ",") == ["1", "Entrada", "Sala"]


def test_quoted_field_keeps_separator():
    assert parse_csv_line('"x,y",z', ",") == ["x,y", "z"]


def test_newline_is_dropped():
    assert parse_csv_line("a,b\n", ",") == parse_csv_line("a,b", ",")


def test_quoted_field_at_end_with_carriage_return():
    assert parse_csv_line('"abc"\r', ",") == ["abc"]


def test_double_separator_after_unquoted_field_is_one():
    assert parse_csv_line("a,,b", ",") == ["a", "b"]


def test_other_separator():
    assert parse_csv_line("a;b", ";") == ["a", "b"]


def test_field_count_is_limited():
    line = ",".join(str(n) for n in range(400))
    fields = parse_csv_line(line, ",")
    assert len(fields) == MAX_FIELDS - 1
    assert fields[0] == "0"


def test_empty_line_has_no_fields():
    assert parse_csv_line("", ",") == []


def test_read_csv_rows(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("id,name\n1,Sala\n", encoding="utf-8")
    assert list(read_csv(path, ",")) == [["id", "name"], ["1", "Sala"]]


def test_read_csv_splits_long_lines(tmp_path):
    path = tmp_path / "long.csv"
    path.write_text("a" * 1500 + "\n", encoding="utf-8")
    rows = list(read_csv(path, ","))
    assert rows == [["a" * (MAX_LINE_LENGTH - 1)], ["a" * (1500 - MAX_LINE_LENGTH + 1)]]


def test_read_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(read_csv(tmp_path / "missing.csv", ","))


def test_split_string_trims_spaces():
    assert split_string("Espada, 3 ,10", ",") == ["Espada", "3", "10"]


def test_split_string_skips_empty_tokens():
    assert split_string(";a;;b;", ";") == ["a", "b"]


def test_split_string_any_delimiter():
    assert split_string("a;b,c", ";,") == ["a", "b", "c"]


def test_split_string_blank_token_becomes_empty():
    assert split_string("a;   ;b", ";") == ["a", "", "b"]


def test_wait_for_key_reads_two_characters(capsys):
    stream = io.StringIO("\nxrest")
    wait_for_key(stream)
    assert stream.read() == "rest"
    assert capsys.readouterr().out == "Presione una tecla para continuar...\n"


def test_clear_screen_runs_clear():
    with mock.patch("graphquest.textio.subprocess.run") as run:
        result = clear_screen()
    assert result is None
    run.assert_called_once_with(["clear"], check=False)


def test_clear_screen_tolerates_missing_command():
    with mock.patch("graphquest.textio.subprocess.run", side_effect=FileNotFoundError) as run:
        result = clear_screen()
    assert result is None
    assert run.call_count == 1