"""
Tests for the Matrix value type: construction, access and in-place
operations.
"""

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.exceptions import DimensionError, ValidationError


class TestConstruction:

    def test_default_is_one_by_one_zero(self):
        A = Matrix()
        assert A.shape == (1, 1)
        assert A[0, 0] == 0.0

    def test_zero_filled(self):
        A = Matrix(2, 3)
        assert A.rows == 2
        assert A.columns == 3
        np.testing.assert_array_equal(A.elements, np.zeros((2, 3)))

    @pytest.mark.parametrize("rows, columns", [(0, 2), (2, 0), (-1, 1)])
    def test_non_positive_shape(self, rows, columns):
        with pytest.raises(DimensionError):
            Matrix(rows, columns)

    def test_from_array(self):
        A = Matrix.from_array([[1, 2], [3, 4]])
        assert A.shape == (2, 2)
        assert A.elements.dtype == np.float64
        assert A[1, 0] == 3.0

    def test_from_array_copies(self):
        grid = np.array([[1.0, 2.0]])
        A = Matrix.from_array(grid)
        grid[0, 0] = 99.0
        assert A[0, 0] == 1.0

    def test_from_array_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            Matrix.from_array([1, 2, 3])

    def test_from_array_rejects_empty(self):
        with pytest.raises(DimensionError):
            Matrix.from_array(np.zeros((0, 3)))

    def test_from_array_rejects_inf(self):
        with pytest.raises(ValidationError, match="non-finite"):
            Matrix.from_array([[1.0, np.inf]])

    def test_identity(self):
        np.testing.assert_array_equal(Matrix.identity(3).elements, np.eye(3))

    def test_copies_do_not_share_storage(self):
        A = Matrix.from_array([[1, 2]])
        B = A.copy()
        B[0, 0] = 5.0
        assert A[0, 0] == 1.0


class TestAccess:

    def test_elements_is_read_only(self):
        A = Matrix(2, 2)
        with pytest.raises(ValueError):
            A.elements[0, 0] = 1.0

    def test_setitem(self):
        A = Matrix(2, 2)
        A[1, 1] = 4.5
        assert A[1, 1] == 4.5

    def test_to_array_is_a_copy(self):
        A = Matrix.from_array([[1, 2]])
        arr = A.to_array()
        arr[0, 0] = 7.0
        assert A[0, 0] == 1.0

    def test_iteration_is_row_major(self):
        A = Matrix.from_array([[1, 2], [3, 4]])
        rows = [row.tolist() for row in A]
        assert rows == [[1.0, 2.0], [3.0, 4.0]]

    def test_is_square(self):
        assert Matrix(3, 3).is_square()
        assert not Matrix(2, 3).is_square()

    def test_equality(self):
        A = Matrix.from_array([[1, 2]])
        assert A == Matrix.from_array([[1.0, 2.0]])
        assert A != Matrix.from_array([[1, 3]])
        assert A != Matrix.from_array([[1], [2]])

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(Matrix())

    def test_allclose(self):
        A = Matrix.from_array([[1.0, 2.0]])
        B = Matrix.from_array([[1.0 + 1e-13, 2.0]])
        assert A.allclose(B)
        assert not A.allclose(Matrix.from_array([[1.1, 2.0]]))

    def test_repr(self):
        assert repr(Matrix.from_array([[1, 2]])) == "Matrix([[1.0, 2.0]])"


class TestTranspose:

    def test_in_place_shape_change(self):
        A = Matrix.from_array([[1, 2, 3], [4, 5, 6]])
        result = A.transpose()
        assert result is None
        assert A.shape == (3, 2)
        np.testing.assert_array_equal(A.elements, [[1, 4], [2, 5], [3, 6]])

    def test_involution(self, rng):
        original = Matrix.from_array(rng.uniform(-10, 10, size=(3, 5)))
        A = original.copy()
        A.transpose()
        A.transpose()
        assert A == original


class TestSwapRows:

    def test_swap_preserves_other_rows(self):
        A = Matrix.from_array([[1, 1], [2, 2], [3, 3]])
        A.swap_rows(0, 2)
        np.testing.assert_array_equal(A.elements, [[3, 3], [2, 2], [1, 1]])

    def test_swap_with_itself(self):
        A = Matrix.from_array([[1, 2], [3, 4]])
        A.swap_rows(1, 1)
        np.testing.assert_array_equal(A.elements, [[1, 2], [3, 4]])

    @pytest.mark.parametrize("first, second", [(0, 2), (-1, 0)])
    def test_out_of_range(self, first, second):
        with pytest.raises(IndexError):
            Matrix(2, 2).swap_rows(first, second)


class TestFill:

    def test_scalar_broadcast(self):
        A = Matrix(2, 3)
        A.fill(1.5)
        np.testing.assert_array_equal(A.elements, np.full((2, 3), 1.5))

    def test_array(self):
        A = Matrix(2, 2)
        A.fill([[1, 2], [3, 4]])
        np.testing.assert_array_equal(A.elements, [[1, 2], [3, 4]])

    def test_wrong_shape(self):
        with pytest.raises(DimensionError):
            Matrix(2, 2).fill([1, 2, 3])


class TestReductionMethods:
    """The Matrix wrappers mutate the receiver."""

    def test_to_upper_triangular_returns_sign(self):
        A = Matrix.from_array([[0, 1], [2, 3]])
        assert A.to_upper_triangular() == -1.0
        np.testing.assert_array_equal(A.elements, [[2, 3], [0, 1]])

    def test_to_staircase(self):
        A = Matrix.from_array([[2, 4, 6], [1, 3, 5]])
        A.to_staircase()
        np.testing.assert_array_equal(A.elements, [[1, 2, 3], [0, 1, 2]])

    def test_to_canonical(self, two_by_two_system):
        two_by_two_system.to_canonical()
        np.testing.assert_array_equal(
            two_by_two_system.elements, [[1, 0, -1], [0, 1, 2]]
        )

    def test_determinant_leaves_matrix_untouched(self):
        A = Matrix.from_array([[0, 1], [1, 0]])
        before = A.copy()
        assert A.determinant() == -1.0
        assert A == before
