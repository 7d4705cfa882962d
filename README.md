# labkit

Element-wise vector routines and square-matrix routines for integers and
real numbers, plus some small command-line tools built on top of them.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library

```python
from labkit.vector import iadd_vec, isort_vec, rdivk_vec
from labkit.matrix import imatmult, rmattrans

iadd_vec([1, 2, 3], [4, 5, 6])        # [5, 7, 9]
isort_vec([3, 1, 2], 1)               # [1, 2, 3]  (1 = ascending, anything else = descending)
rdivk_vec([1.0, 3.0], 2.0)            # [0.5, 1.5]

imatmult([[1, 2], [3, 4]], [[5, 6], [7, 8]])   # [[19, 22], [43, 50]]
rmattrans([[1.0, 2.0], [3.0, 4.0]])            # [[1.0, 3.0], [2.0, 4.0]]
```

Every routine returns a new list and leaves its arguments unchanged.

- `labkit.vector`: `iadd_vec`, `isub_vec`, `imul_vec`, `idiv_vec`,
  `imulk_vec`, `idivk_vec`, `irev_vec`, `isort_vec` for integers and the
  matching `r...` functions for real numbers. Element-wise operations on
  vectors of different lengths raise `ValueError`. Integer division
  truncates toward zero, and an integer division by zero raises
  `ZeroDivisionError`. Real division by zero gives an infinity or NaN
  instead of raising.
- `labkit.matrix`: `imatadd`, `imatsub`, `imatmult`, `imattrans` and the
  matching `r...` functions. Matrices must be square and of the same size,
  otherwise `ValueError` is raised.
- `labkit.console`: `TokenReader` reads whitespace-separated numbers and
  lines from a stream; `format_int_vector`, `format_real_vector`,
  `format_int_matrix`, `format_real_matrix` render results (reals with two
  decimals); `print_line` writes a rule as wide as the terminal.
- `labkit.loop_order`: `mmat_ijk`, `mmat_jik`, `mmat_jki`, `mmat_kji`,
  `mmat_kij`, `mmat_ikj` add `a` times `b` into `c` in place, each with a
  different loop order; `read_square_matrix` and `write_matrix` handle the
  text files.
- `labkit.transposed`: `transpose_matrix` and `multiply_matrices`, the
  latter computed in single precision.
- `labkit.matgen`: `random_elements`, `write_flat_matrix`,
  `write_row_matrix` and `read_elements` for random matrix files.
- `labkit.students`: the `Student` record (each text field has a fixed
  maximum length, enforced with `ValueError`) and `AllocationTracker`,
  which logs a `[MALLOC]` line for each object it records and a `[FREE]`
  line for each it releases.

## Commands

| Command | What it does |
| --- | --- |
| `labkit-vector` | Asks for a size, scalar and sort option, then two integer vectors; prints addition, subtraction, multiplication, division, scalar multiplication and division, reversal and both sort orders. Then does the same for two real vectors. |
| `labkit-matrix` | Asks for two integer matrices and two real matrices, one row per line, and prints sum, product, difference and transpose. |
| `labkit-students` | Reads a number of student records to create and a number to free, creates them, frees that many and then the rest, logging every allocation and release. |
| `labkit-matgen FILE N` | Writes N×N random numbers between 0 and 1000 to FILE on a single line, reads them back, prints them and reports the CPU time. |
| `labkit-matgen-rows FILE N` | Same, but writes one matrix row per line and prints the matrix with two decimals. |
| `labkit-loop-order N A_FILE B_FILE C_PREFIX` | Multiplies A by B with all six loop orders (ijk, jik, jki, kji, kij, ikj), writes `C_PREFIX_version1.txt` to `C_PREFIX_version6.txt` and prints the CPU time of each. The result matrix is not cleared between versions, so each file holds the running total. |
| `labkit-transposed N A_FILE B_FILE C_FILE` | Transposes B, multiplies A by the transposed B, writes C_FILE, prints the result and appends the timing to `time_taken.txt` in the current directory. |

The interactive commands read from standard input; on bad or missing
input they print an error to standard error and exit with status 1.

Example:

```
labkit-matgen-rows a.txt 4
labkit-matgen-rows b.txt 4
labkit-loop-order 4 a.txt b.txt c
```

## Limits

- `AllocationTracker` does not allocate or measure real memory: the
  addresses it logs are Python object identities and the size is a fixed
  figure per student record.
- The sort option asked for by `labkit-vector` is read but not used; both
  sort orders are always printed.