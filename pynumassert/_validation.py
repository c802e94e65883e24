"""
Reference fixtures for matrix results.

Expected results computed by another tool can be stored as JSON records and
loaded as expected matrix states. A record looks like::

    {
        "name": "covariance",
        "number_of_rows": 2,
        "number_of_columns": 2,
        "entries": [1.0, 0.5, 0.5, 2.0],
        "row_names": {"0": "x", "1": "y"},
        "column_names": null
    }

Entries are in column-major order. Complex entries are ``[re, im]`` pairs.
A file holds either one record or a mapping from record names to records.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple, Union

import numpy as np

from .matrices import ComplexMatrixState, DoubleMatrixState, MatrixState, assert_matrix_state, matrix_parts


def load_reference(filename: str,
                   search_paths: Optional[Iterable[Union[str, Path]]] = None) -> Dict[str, Any]:
    """
    Load reference results from JSON file.

    Parameters
    ----------
    filename : str
        Name of reference file (e.g., 'svd_reference.json')
    search_paths : iterable of path, optional
        Directories to search, in order. By default tests/references,
        ../tests/references, references and the working directory.

    Returns
    -------
    dict
        The decoded JSON content

    Raises
    ------
    FileNotFoundError
        If the file is in none of the searched directories
    """
    if search_paths is None:
        search_paths = ['tests/references', '../tests/references', 'references', '.']
    possible_paths = [Path(directory) / filename for directory in search_paths]

    for path in possible_paths:
        if path.exists():
            with open(path, 'r') as f:
                return json.load(f)

    raise FileNotFoundError(
        f"Could not find reference file {filename}. "
        f"Searched in: {[str(p) for p in possible_paths]}"
    )


def _names(record: Dict[str, Any], key: str) -> Optional[Dict[int, str]]:
    names = record.get(key)
    if names is None:
        return None
    return {int(position): str(name) for position, name in names.items()}


def matrix_state_from_reference(record: Dict[str, Any]) -> MatrixState:
    """
    Build an expected matrix state from a reference record.

    Returns a ``ComplexMatrixState`` if entries are ``[re, im]`` pairs and a
    ``DoubleMatrixState`` otherwise. ``null`` entries stand for NaN.
    """
    entries = record['entries']
    is_complex = len(entries) > 0 and isinstance(entries[0], list)

    if is_complex:
        values = np.array([complex(re, im) for re, im in entries], dtype=np.complex128)
        state_type = ComplexMatrixState
    else:
        values = np.array([np.nan if x is None else x for x in entries], dtype=np.float64)
        state_type = DoubleMatrixState

    return state_type(
        values,
        int(record['number_of_rows']),
        int(record['number_of_columns']),
        name=record.get('name'),
        row_names=_names(record, 'row_names'),
        column_names=_names(record, 'column_names'))


def compare_with_reference(actual: Any,
                           reference: Union[Dict[str, Any], MatrixState],
                           label: str = "matrix",
                           delta: Optional[float] = None) -> Tuple[bool, str]:
    """
    Compare a matrix with reference results, without raising.

    Parameters
    ----------
    actual : matrix-like
        Computed matrix
    reference : dict or MatrixState
        Reference record or expected state
    label : str
        Name used in the report
    delta : float, optional
        Tolerance, by default the configured matrix tolerance

    Returns
    -------
    success : bool
        Whether the matrix matches the reference
    message : str
        Detailed comparison message
    """
    if isinstance(reference, dict):
        reference = matrix_state_from_reference(reference)

    messages = []
    expected_parts = reference.parts()
    actual_parts = matrix_parts(actual)
    if expected_parts.entries.shape == actual_parts.entries.shape:
        with np.errstate(invalid='ignore'):
            diff = np.nanmax(np.abs(expected_parts.entries - actual_parts.entries),
                             initial=0.0)
        messages.append(f"Entries: max diff = {diff:.2e}")

    try:
        assert_matrix_state(reference, actual_parts, delta)
        all_pass = True
    except AssertionError as e:
        all_pass = False
        messages.append(str(e))

    summary = f"\n{label}: {'PASS' if all_pass else 'FAIL'}\n"
    summary += "\n".join(f"  {msg}" for msg in messages)

    return all_pass, summary
