import random

import pytest

from labkit.matgen import (
    main,
    main_rows,
    random_elements,
    read_elements,
    write_flat_matrix,
    write_row_matrix,
)


def test_random_elements_count_and_range():
    values = random_elements(50, random.Random(1))
    assert len(values) == 50
    assert all(0.0 <= value < 1000.0 for value in values)


def test_random_elements_same_seed_gives_same_prefix():
    longer = random_elements(6, random.Random(7))
    shorter = random_elements(3, random.Random(7))
    assert len(longer) == 6
    assert shorter == longer[:3]


def test_random_elements_negative_count_is_empty():
    assert random_elements(-3, random.Random(0)) == []


def test_flat_matrix_round_trip(tmp_path):
    path = tmp_path / "flat.txt"
    written = write_flat_matrix(path, 4, random.Random(3))
    assert len(written) == 16
    assert "\n" not in path.read_text()
    assert read_elements(path) == pytest.approx(written, abs=1e-5)


def test_flat_matrix_negative_size_squares(tmp_path):
    path = tmp_path / "flat.txt"
    written = write_flat_matrix(path, -2, random.Random(3))
    assert len(written) == 4
    assert len(read_elements(path)) == 4


def test_row_matrix_round_trip(tmp_path):
    path = tmp_path / "rows.txt"
    rows = write_row_matrix(path, 3, random.Random(5))
    lines = path.read_text().splitlines()
    assert len(lines) == 3
    assert all(len(line.split()) == 3 for line in lines)
    flat = [value for row in rows for value in row]
    assert read_elements(path) == pytest.approx(flat, abs=1e-5)


def test_read_elements_rejects_garbage(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1.0 two 3.0")
    with pytest.raises(ValueError):
        read_elements(path)


def test_main_wrong_arguments(capsys):
    assert main(["only-one"]) == 0
    assert "wrong arguments" in capsys.readouterr().out


def test_main_writes_file(tmp_path, capsys):
    path = tmp_path / "m.txt"
    assert main([str(path), "3"]) == 0
    assert len(read_elements(path)) == 9
    out = capsys.readouterr().out
    assert f"ELEMENTS OF 3 x 3 MATRIX {path} :" in out
    assert "CLOCKS_PER_SEC = 1000000" in out


def test_main_non_numeric_size_gives_empty_file(tmp_path):
    path = tmp_path / "m.txt"
    assert main([str(path), "abc"]) == 0
    assert path.read_text() == ""


def test_main_rows_usage(capsys):
    assert main_rows([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_rows_writes_and_echoes(tmp_path, capsys):
    path = tmp_path / "r.txt"
    assert main_rows([str(path), "2"]) == 0
    assert len(path.read_text().splitlines()) == 2
    out = capsys.readouterr().out
    echoed = [line for line in out.splitlines() if "\t" in line]
    assert len(echoed) == 2
    assert all(line.count("\t") == 2 for line in echoed)


def test_main_rows_unwritable_path(tmp_path, capsys):
    assert main_rows([str(tmp_path), "2"]) == 1
    assert "error opening file for writing." in capsys.readouterr().out