"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.
    
    Raised when a shape is not allowed on its own (zero rows, too many
    columns) or does not fit the operation being requested.
    """
    pass


class SizeMismatchError(DimensionError):
    """
    Operand shapes are incompatible for the requested operation.
    
    Raised by addition and subtraction when the row or column counts
    differ, and by matrix multiplication when the left operand's column
    count differs from the right operand's row count.
    
    Attributes:
        operation: Name of the operation ('add', 'subtract', 'matmul')
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """
    
    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.
    
    Attributes:
        operation: Name of the operation ('trace', 'determinant')
        shape: Shape of the offending matrix
    """
    
    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape


class IndeterminateSystemError(DimensionError):
    """
    Augmented matrix does not describe a square system.
    
    A system of n equations must be given as an n x (n + 1) augmented
    matrix. Anything else is under- or over-determined and is rejected
    before any reduction work is attempted.
    
    Attributes:
        rows: Number of rows in the augmented matrix
        columns: Number of columns in the augmented matrix
    """
    
    def __init__(
        self,
        message: str,
        rows: int | None = None,
        columns: int | None = None,
    ):
        super().__init__(message)
        self.rows = rows
        self.columns = columns


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.
    
    Base class for errors arising while reducing or solving.
    """
    pass


class UnsolvableSystemError(NumericalError):
    """
    Linear system is inconsistent.
    
    Raised when the canonical form contains a row whose coefficients are
    all zero while its constant is not (0 = b with b != 0).
    
    Attributes:
        row: Index of the contradictory row in the canonical form
        constant: Right-hand side value of that row
    """
    
    def __init__(
        self,
        message: str,
        row: int | None = None,
        constant: float | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.constant = constant
