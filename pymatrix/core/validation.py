"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import ValidationError, DimensionError
from pymatrix.core.limits import MAX_DIMENSION, ELEMENT_BOUND


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.
    
    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray of dtype float64
        
    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex entries are not supported")

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_positive_shape(rows: int, columns: int, name: str) -> None:
    """
    Verify a matrix shape has at least one row and one column.
    
    Args:
        rows: Requested number of rows
        columns: Requested number of columns
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If either count is below 1
    """
    if rows < 1 or columns < 1:
        raise DimensionError(
            f"{name}: rows and columns must be >= 1, got {rows}x{columns}"
        )


def check_max_dimension(
    rows: int,
    columns: int,
    name: str,
    limit: int = MAX_DIMENSION,
) -> None:
    """
    Verify a matrix shape does not exceed the input size limit.
    
    Raises:
        DimensionError: If rows or columns exceed ``limit``
    """
    if rows > limit or columns > limit:
        raise DimensionError(
            f"{name}: at most {limit} rows and columns allowed, got {rows}x{columns}"
        )


def check_element_bound(
    array: NDArray[np.floating[Any]],
    name: str,
    bound: float = ELEMENT_BOUND,
) -> None:
    """
    Verify every entry satisfies abs(x) < bound.
    
    Raises:
        ValidationError: If any entry reaches the bound
    """
    too_large = np.abs(array) >= bound
    if np.any(too_large):
        loc = np.argwhere(too_large)[0]
        raise ValidationError(
            f"{name}: entries must be smaller than {bound:g} in absolute value, "
            f"got {array[tuple(loc)]:g} at row {loc[0]}, col {loc[1]}"
        )
