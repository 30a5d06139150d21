# simplify_flat_array/utils/coordinate_file.py
"""
Reading and writing flat coordinate sequences.

Supported formats are chosen by file suffix:

- ``.json``: a flat list ``[x0, y0, x1, y1, ...]`` or a list of ``[x, y]`` pairs.
- ``.npy``: a 1-D array or an array of shape (n, 2).
- ``.line``: a vertex-count header line followed by one ``x y`` pair per line.
- anything else: numbers separated by whitespace and/or commas.
"""

import json
import logging
import re
from pathlib import Path
from typing import List, Sequence, Union

import numpy as np

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s,]+")


def _flatten(data: np.ndarray, file_path: Path) -> List[float]:
    if data.ndim == 2 and data.shape[1] == 2:
        data = data.reshape(-1)
    elif data.ndim != 1:
        raise ValueError(f"Invalid coordinate data shape in {file_path}: {data.shape}. Expected (N,) or (N, 2)")
    return data.astype(np.float64).tolist()


def _parse_tokens(text: str, file_path: Path) -> List[float]:
    tokens = [token for token in _SEPARATORS.split(text) if token]
    try:
        return [float(token) for token in tokens]
    except ValueError as e:
        raise ValueError(f"Error parsing coordinates in {file_path}: {e}")


def read_coordinate_file(file_path: Union[str, Path]) -> List[float]:
    """
    Read a coordinate file into a flat list of floats.

    Args:
        file_path: Path to the coordinate file.

    Returns:
        List[float]: Interleaved ``x, y`` values.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is empty or its content can't be parsed.

    Example:
        >>> coords = read_coordinate_file("path.json")
        >>> len(coords) // 2
        100
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Coordinate file not found: {file_path}")

    suffix = file_path.suffix.lower()

    if suffix == ".npy":
        coords = _flatten(np.load(file_path), file_path)
    elif suffix == ".json":
        with open(file_path, 'r') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError:
                raise ValueError(f"Invalid JSON in coordinate file {file_path}")
        try:
            coords = _flatten(np.asarray(data, dtype=np.float64), file_path)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Error parsing coordinates in {file_path}: {e}")
    else:
        with open(file_path, 'r') as f:
            if suffix == ".line":
                # The vertex count header is not trusted
                next(f, None)
            coords = _parse_tokens(f.read(), file_path)

    if not coords:
        raise ValueError(f"No coordinates found in {file_path}")

    if len(coords) % 2:
        logger.warning(f"Odd number of values in {file_path}; the last value will be ignored")

    return coords


def write_coordinate_file(file_path: Union[str, Path], coords: Union[Sequence[float], np.ndarray]) -> Path:
    """
    Write a flat coordinate sequence to a file.

    Args:
        file_path: Destination path. The suffix selects the format.
        coords: Interleaved ``x, y`` values, a list or a numpy buffer.

    Returns:
        Path: The written path.

    Raises:
        IOError: If writing the file fails.
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    suffix = file_path.suffix.lower()

    try:
        if suffix == ".npy":
            array = coords if isinstance(coords, np.ndarray) else np.asarray(coords, dtype=np.float64)
            np.save(file_path, array)
        elif suffix == ".json":
            with open(file_path, 'w') as f:
                json.dump([float(value) for value in coords], f)
        else:
            values = [float(value) for value in coords]
            with open(file_path, 'w') as f:
                for i in range(0, len(values) - 1, 2):
                    f.write(f"{values[i]!r} {values[i + 1]!r}\n")
    except (IOError, OSError) as e:
        raise IOError(f"Error writing coordinates to {file_path}: {e}")

    return file_path
