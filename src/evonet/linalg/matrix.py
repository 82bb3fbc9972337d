"""
Evonet Matrix Module

This module implements the dense 2D matrix used by the neural network engine.
Matrices are immutable: the underlying NumPy storage is marked read-only and
every operation returns a new Matrix. Intermediate results reused inside a
training step can therefore never be modified behind the caller's back.

Classes:
    Matrix: Dense, immutable 2D array of float64 values
"""

import numbers
import numpy as np
from typing import Callable, Iterable

from evonet.errors             import InvalidDimension, ShapeError, ShapeMismatch
from evonet.utils.random_state import get_rng

class Matrix:
    """
    A dense R x C matrix of floating point values (row-major).

    Public Properties:
        rows:  Number of rows
        cols:  Number of columns
        shape: (rows, cols)
        T:     Transpose of the matrix

    Factories:
        Matrix(rows, cols):             zero-filled matrix
        Matrix.random(rows, cols, rng): uniform random entries in [-1, 1)
        Matrix.from_sequence(values):   N x 1 column vector
        Matrix.from_array(array):       copy of a 2D array

    Public Methods:
        randomize(rng):             same shape, fresh random entries
        to_sequence():              column vector => list of floats
        to_array():                 writable copy of the storage
        add(other):                 elementwise sum
        subtract(other):            elementwise difference
        multiply_elementwise(other): elementwise (Hadamard) product
        scale(k):                   multiply every entry by a scalar
        product(other):             matrix multiplication
        transpose():                rows and columns swapped
        map(fn):                    apply fn(value, row, col) to every entry
        apply(fn):                  apply a vectorized function to the whole array
        average():                  mean of all entries
        blend(other, rng):          per-entry 50/50 crossover with another matrix
        copy():                     deep copy
    """

    __slots__ = ('_data',)

    def __init__(self, rows: int, cols: int):
        """
        Create a zero-filled matrix.

        Parameters:
            rows: Number of rows (must be >= 1)
            cols: Number of columns (must be >= 1)
        """
        self._check_dimension(rows, 'rows')
        self._check_dimension(cols, 'cols')
        self._data = np.zeros((rows, cols), dtype=np.float64)
        self._data.flags.writeable = False

    @staticmethod
    def _check_dimension(value, name: str):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
            raise InvalidDimension(f"Matrix {name} must be a positive integer, got {value!r}")

    @classmethod
    def _wrap(cls, array: np.ndarray) -> 'Matrix':
        """Build a Matrix that takes ownership of a freshly computed 2D array."""
        matrix = cls.__new__(cls)
        matrix._data = np.asarray(array, dtype=np.float64)
        matrix._data.flags.writeable = False
        return matrix

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def random(cls, rows: int, cols: int, rng: np.random.Generator | None = None) -> 'Matrix':
        """
        Create a matrix with entries drawn independently and uniformly from [-1, 1).

        Parameters:
            rows: Number of rows (must be >= 1)
            cols: Number of columns (must be >= 1)
            rng:  Random generator (defaults to the process-scoped one)
        """
        cls._check_dimension(rows, 'rows')
        cls._check_dimension(cols, 'cols')
        return cls._wrap(get_rng(rng).uniform(-1.0, 1.0, size=(rows, cols)))

    @classmethod
    def from_sequence(cls, values: Iterable[float]) -> 'Matrix':
        """
        Build an N x 1 column vector from an ordered sequence of N numbers.
        Element i of the sequence ends up in row i.
        """
        column = np.array(list(values), dtype=np.float64)
        if column.ndim != 1:
            raise ShapeError(f"Expected a flat sequence of numbers, got {column.ndim}D data")
        if column.size == 0:
            raise InvalidDimension("Cannot build a column vector from an empty sequence")
        return cls._wrap(column.reshape(-1, 1))

    @classmethod
    def from_array(cls, array) -> 'Matrix':
        """
        Build a matrix from a 2D array-like (copied, so later changes
        to 'array' do not affect the matrix).
        """
        data = np.array(array, dtype=np.float64)
        if data.ndim != 2:
            raise ShapeError(f"Expected 2D data, got {data.ndim}D")
        if data.shape[0] == 0 or data.shape[1] == 0:
            raise InvalidDimension(f"Matrix dimensions must be positive, got {data.shape}")
        return cls._wrap(data)

    def randomize(self, rng: np.random.Generator | None = None) -> 'Matrix':
        """Return a new matrix of the same shape with uniform random entries in [-1, 1)."""
        return Matrix.random(self.rows, self.cols, rng)

    # ------------------------------------------------------------------
    # Introspection and conversion
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def T(self) -> 'Matrix':
        return self.transpose()

    def to_sequence(self) -> list[float]:
        """
        Convert an N x 1 column vector into a list of N floats (inverse of 'from_sequence').
        """
        if self.cols != 1:
            raise ShapeError(f"Only column vectors convert to a sequence, got shape {self.shape}")
        return [float(value) for value in self._data[:, 0]]

    def to_array(self) -> np.ndarray:
        """Return a writable copy of the matrix entries."""
        return self._data.copy()

    def __getitem__(self, index):
        row, col = index
        return float(self._data[row, col])

    # ------------------------------------------------------------------
    # Elementwise operations
    # ------------------------------------------------------------------

    def _check_same_shape(self, other: 'Matrix', operation: str):
        if not isinstance(other, Matrix):
            raise TypeError(f"Cannot {operation} Matrix and {type(other).__name__}")
        if self.shape != other.shape:
            raise ShapeMismatch(f"Cannot {operation} matrices of shapes {self.shape} and {other.shape}")

    def add(self, other: 'Matrix') -> 'Matrix':
        self._check_same_shape(other, 'add')
        return Matrix._wrap(self._data + other._data)

    def subtract(self, other: 'Matrix') -> 'Matrix':
        self._check_same_shape(other, 'subtract')
        return Matrix._wrap(self._data - other._data)

    def multiply_elementwise(self, other: 'Matrix') -> 'Matrix':
        self._check_same_shape(other, 'multiply')
        return Matrix._wrap(self._data * other._data)

    def scale(self, k: float) -> 'Matrix':
        return Matrix._wrap(self._data * float(k))

    # ------------------------------------------------------------------
    # Linear algebra
    # ------------------------------------------------------------------

    def product(self, other: 'Matrix') -> 'Matrix':
        """
        Matrix multiplication 'self . other'.

        Returns:
            A (self.rows x other.cols) matrix
        """
        if not isinstance(other, Matrix):
            raise TypeError(f"Cannot multiply Matrix and {type(other).__name__}")
        if self.cols != other.rows:
            raise ShapeMismatch(f"Cannot multiply matrices of shapes {self.shape} and {other.shape}: "
                                f"{self.cols} columns vs {other.rows} rows")
        return Matrix._wrap(self._data @ other._data)

    def transpose(self) -> 'Matrix':
        return Matrix._wrap(self._data.T.copy())

    # ------------------------------------------------------------------
    # Functional helpers
    # ------------------------------------------------------------------

    def map(self, fn: Callable[[float, int, int], float]) -> 'Matrix':
        """
        Apply a scalar function to every entry.

        Parameters:
            fn: Called as fn(value, row, col) for every entry, returns the new value
        """
        result = np.empty_like(self._data)
        for (row, col), value in np.ndenumerate(self._data):
            result[row, col] = fn(float(value), row, col)
        return Matrix._wrap(result)

    def apply(self, fn: Callable[[np.ndarray], np.ndarray]) -> 'Matrix':
        """
        Apply a vectorized function (such as an activation) to the whole matrix at once.
        The function must return an array of the same shape.
        """
        result = np.asarray(fn(self._data), dtype=np.float64)
        if result.shape != self.shape:
            raise ShapeMismatch(f"Function changed the matrix shape from {self.shape} to {result.shape}")
        return Matrix._wrap(result.copy() if np.shares_memory(result, self._data) else result)

    def average(self) -> float:
        return float(self._data.mean())

    def blend(self, other: 'Matrix', rng: np.random.Generator | None = None) -> 'Matrix':
        """
        Genetic crossover at the parameter level: each entry of the result is
        independently taken from 'self' or from 'other' with probability 1/2.

        Parameters:
            other: Matrix of the same shape
            rng:   Random generator (defaults to the process-scoped one)
        """
        self._check_same_shape(other, 'blend')
        take_self = get_rng(rng).random(self.shape) < 0.5
        return Matrix._wrap(np.where(take_self, self._data, other._data))

    def copy(self) -> 'Matrix':
        return Matrix._wrap(self._data.copy())

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply_elementwise(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.product(other)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self):
        return f"Matrix(rows={self.rows}, cols={self.cols})"

    def __str__(self):
        return "\n".join("[" + ", ".join(f"{value:+.4f}" for value in row) + "]" for row in self._data)
