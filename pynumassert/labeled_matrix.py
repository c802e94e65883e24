"""
Labeled matrix container.

A ``LabeledMatrix`` stores real or complex entries together with an
optional name and optional row and column names. Storage is delegated to a
private implementor, which can be dense (numpy), sparse (scipy DOK) or a
view on another implementor. The container exists so that matrix
assertions can be exercised on every storage scheme; it implements no
linear algebra.

Entries are addressed either by ``(row, column)`` or by a single linear
index in column-major order.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple, Union

import numpy as np
from scipy import sparse


class DenseImplementor:
    """Dense column-major storage."""

    def __init__(self, storage: np.ndarray):
        self._storage = np.asfortranarray(storage)

    @property
    def number_of_rows(self) -> int:
        return self._storage.shape[0]

    @property
    def number_of_columns(self) -> int:
        return self._storage.shape[1]

    @property
    def dtype(self) -> np.dtype:
        return self._storage.dtype

    def get(self, i: int, j: int):
        return self._storage[i, j]

    def set(self, i: int, j: int, value):
        self._storage[i, j] = value

    def as_column_major_dense_array(self) -> np.ndarray:
        return self._storage.ravel(order='F').copy()

    def to_numpy(self) -> np.ndarray:
        return np.array(self._storage)


class SparseImplementor:
    """Sparse storage based on a scipy dictionary-of-keys array."""

    def __init__(self, number_of_rows: int, number_of_columns: int, dtype=np.float64):
        self._storage = sparse.dok_array((number_of_rows, number_of_columns), dtype=dtype)

    @property
    def number_of_rows(self) -> int:
        return self._storage.shape[0]

    @property
    def number_of_columns(self) -> int:
        return self._storage.shape[1]

    @property
    def dtype(self) -> np.dtype:
        return self._storage.dtype

    @property
    def number_of_stored_entries(self) -> int:
        return self._storage.nnz

    def get(self, i: int, j: int):
        return self._storage[i, j]

    def set(self, i: int, j: int, value):
        self._storage[i, j] = value

    def as_column_major_dense_array(self) -> np.ndarray:
        return self._storage.toarray().ravel(order='F')

    def to_numpy(self) -> np.ndarray:
        return self._storage.toarray()


class ViewImplementor:
    """Rows and columns of a parent implementor, without copying."""

    def __init__(self, parent, rows: Sequence[int], columns: Sequence[int]):
        self._parent = parent
        self._rows = np.asarray(rows, dtype=np.intp)
        self._columns = np.asarray(columns, dtype=np.intp)

    @property
    def number_of_rows(self) -> int:
        return len(self._rows)

    @property
    def number_of_columns(self) -> int:
        return len(self._columns)

    @property
    def dtype(self) -> np.dtype:
        return self._parent.dtype

    def get(self, i: int, j: int):
        return self._parent.get(self._rows[i], self._columns[j])

    def set(self, i: int, j: int, value):
        self._parent.set(self._rows[i], self._columns[j], value)

    def as_column_major_dense_array(self) -> np.ndarray:
        return self.to_numpy().ravel(order='F')

    def to_numpy(self) -> np.ndarray:
        return self._parent.to_numpy()[np.ix_(self._rows, self._columns)]


Key = Union[int, Tuple[int, int]]


class LabeledMatrix:
    """
    Matrix of real or complex entries with optional names.

    Examples
    --------
    >>> m = LabeledMatrix.dense(2, 2, [1.0, 2.0, 3.0, 4.0])
    >>> m[1]        # column-major linear index
    2.0
    >>> m[0, 1]
    3.0
    >>> m.set_row_name(0, "first")
    """

    def __init__(self, implementor, name: Optional[str] = None):
        self._implementor = implementor
        self._name = name
        self._row_names = {}
        self._column_names = {}

    # ------------------------------------------------------------------
    # Construction

    @classmethod
    def dense(cls,
              number_of_rows: int,
              number_of_columns: int,
              data: Optional[Sequence] = None,
              dtype=None) -> 'LabeledMatrix':
        """
        Create a dense matrix.

        Parameters
        ----------
        number_of_rows, number_of_columns : int
            Matrix dimensions, both positive
        data : sequence, optional
            Entries in column-major order; zeros if omitted
        dtype : numpy dtype, optional
            Inferred from data, float64 if no data is given
        """
        _check_dimensions(number_of_rows, number_of_columns)
        if data is None:
            storage = np.zeros((number_of_rows, number_of_columns),
                               dtype=dtype or np.float64, order='F')
        else:
            data = np.array(data, dtype=dtype)
            if data.size != number_of_rows * number_of_columns:
                raise ValueError(
                    f"data has {data.size} entries, expected "
                    f"{number_of_rows * number_of_columns}")
            storage = data.reshape((number_of_rows, number_of_columns), order='F')
        return cls(DenseImplementor(storage))

    @classmethod
    def sparse(cls,
               number_of_rows: int,
               number_of_columns: int,
               dtype=np.float64) -> 'LabeledMatrix':
        """Create a sparse matrix of zeros."""
        _check_dimensions(number_of_rows, number_of_columns)
        return cls(SparseImplementor(number_of_rows, number_of_columns, dtype=dtype))

    @classmethod
    def from_array(cls, array) -> 'LabeledMatrix':
        """Create a dense matrix copying a 1-D (column vector) or 2-D array."""
        array = np.array(array)
        if array.ndim == 1:
            array = array.reshape(-1, 1)
        if array.ndim != 2:
            raise ValueError(f"array must be 1- or 2-dimensional, got shape {array.shape}")
        _check_dimensions(*array.shape)
        return cls(DenseImplementor(array))

    def view(self,
             rows: Optional[Sequence[int]] = None,
             columns: Optional[Sequence[int]] = None) -> 'LabeledMatrix':
        """
        Create a view on the given rows and columns (all if omitted).

        Writes through the view modify this matrix. Names are not shared.
        """
        if rows is None:
            rows = range(self.number_of_rows)
        if columns is None:
            columns = range(self.number_of_columns)
        return LabeledMatrix(ViewImplementor(self._implementor, rows, columns))

    # ------------------------------------------------------------------
    # Shape

    @property
    def number_of_rows(self) -> int:
        return self._implementor.number_of_rows

    @property
    def number_of_columns(self) -> int:
        return self._implementor.number_of_columns

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.number_of_rows, self.number_of_columns)

    @property
    def count(self) -> int:
        return self.number_of_rows * self.number_of_columns

    @property
    def dtype(self) -> np.dtype:
        return self._implementor.dtype

    @property
    def is_complex(self) -> bool:
        return np.issubdtype(self.dtype, np.complexfloating)

    def __len__(self) -> int:
        return self.count

    # ------------------------------------------------------------------
    # Entries

    def _position(self, key: Key) -> Tuple[int, int]:
        if isinstance(key, tuple):
            i, j = key
            if not (0 <= i < self.number_of_rows and 0 <= j < self.number_of_columns):
                raise IndexError(f"Position {key} out of range for shape {self.shape}")
            return int(i), int(j)
        key = int(key)
        if not 0 <= key < self.count:
            raise IndexError(f"Linear index {key} out of range for {self.count} entries")
        return key % self.number_of_rows, key // self.number_of_rows

    def __getitem__(self, key: Key):
        i, j = self._position(key)
        return self._implementor.get(i, j)

    def __setitem__(self, key: Key, value):
        i, j = self._position(key)
        self._implementor.set(i, j, value)

    def __iter__(self):
        return iter(self._implementor.as_column_major_dense_array())

    def to_numpy(self) -> np.ndarray:
        """Copy of the entries as a 2-D numpy array."""
        return self._implementor.to_numpy()

    # ------------------------------------------------------------------
    # Names

    @property
    def name(self) -> Optional[str]:
        return self._name

    @name.setter
    def name(self, value: Optional[str]):
        self._name = value

    @property
    def row_names(self) -> Mapping[int, str]:
        return MappingProxyType(self._row_names)

    @property
    def column_names(self) -> Mapping[int, str]:
        return MappingProxyType(self._column_names)

    @property
    def has_row_names(self) -> bool:
        return len(self._row_names) > 0

    @property
    def has_column_names(self) -> bool:
        return len(self._column_names) > 0

    def set_row_name(self, row_index: int, row_name: Optional[str]):
        """Set (or remove, if ``row_name`` is None) the name of a row."""
        if not 0 <= row_index < self.number_of_rows:
            raise IndexError(f"Row index {row_index} out of range")
        if row_name is None:
            self._row_names.pop(row_index, None)
        else:
            self._row_names[row_index] = row_name

    def set_column_name(self, column_index: int, column_name: Optional[str]):
        """Set (or remove, if ``column_name`` is None) the name of a column."""
        if not 0 <= column_index < self.number_of_columns:
            raise IndexError(f"Column index {column_index} out of range")
        if column_name is None:
            self._column_names.pop(column_index, None)
        else:
            self._column_names[column_index] = column_name

    def __repr__(self) -> str:
        storage = type(self._implementor).__name__.replace('Implementor', '').lower()
        return (f"LabeledMatrix({self.number_of_rows}x{self.number_of_columns}, "
                f"{storage}, name={self._name!r})")


def _check_dimensions(number_of_rows: int, number_of_columns: int):
    if number_of_rows < 1:
        raise ValueError(f"number_of_rows must be positive, got {number_of_rows}")
    if number_of_columns < 1:
        raise ValueError(f"number_of_columns must be positive, got {number_of_columns}")
