"""Vector and matrix routines with console tools, matrix generators and loop-order benchmarks."""

__version__ = "0.1.0"
__all__ = [
    "console",
    "vector",
    "matrix",
    "vector_cli",
    "matrix_cli",
    "students",
    "matgen",
    "loop_order",
    "transposed",
]