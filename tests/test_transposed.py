from labkit.loop_order import read_square_matrix, write_matrix
from labkit.matrix import rmatmult, rmattrans
from labkit.transposed import main, multiply_matrices, transpose_matrix

A = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]]
B = [[2.0, 0.0, 1.0], [-1.0, 3.0, 2.0], [0.0, 4.0, -2.0]]
IDENTITY = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]


def test_transpose_small():
    assert transpose_matrix([[1, 2], [3, 4]]) == [[1, 3], [2, 4]]


def test_transpose_is_involution():
    assert transpose_matrix(transpose_matrix(A)) == A


def test_multiply_by_identity():
    assert multiply_matrices(A, IDENTITY) == A
    assert multiply_matrices(IDENTITY, B) == B


def test_multiply_matches_reference_product():
    assert multiply_matrices(A, B) == rmatmult(A, B)


def test_multiply_rounds_to_single_precision():
    result = multiply_matrices([[0.1]], [[1.0]])
    assert result[0][0] != 0.1
    assert abs(result[0][0] - 0.1) < 1e-7


def test_main_usage(capsys):
    assert main(["2"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_missing_input(tmp_path, capsys):
    missing = tmp_path / "none.txt"
    assert main(["2", str(missing), str(missing), str(tmp_path / "c.txt")]) == 1
    assert "Error opening files." in capsys.readouterr().out


def test_main_multiplies_by_transpose_and_logs(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    write_matrix("a.txt", A)
    write_matrix("b.txt", B)
    assert main(["3", "a.txt", "b.txt", "c.txt"]) == 0
    assert read_square_matrix("c.txt", 3) == rmatmult(A, rmattrans(B))
    out = capsys.readouterr().out
    assert "N=3: Time taken =" in out
    assert main(["3", "a.txt", "b.txt", "c.txt"]) == 0
    log_lines = (tmp_path / "time_taken.txt").read_text().splitlines()
    assert len(log_lines) == 2
    assert all(line.startswith("N=3: Time taken =") for line in log_lines)