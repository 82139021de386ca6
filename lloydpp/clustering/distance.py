"""Euclidean distance primitives and nearest-mean queries.

Points are 1-D arrays of a fixed length N; datasets and mean collections
are 2-D arrays of shape (n, N). Wherever only the ordering of distances
matters the squared distance is used and no square root is taken.
"""

import numpy as np


def as_points(data, name: str = "data") -> np.ndarray:
    """Coerce ``data`` to a 2-D floating array of points.

    Integer input is promoted to float64 so that centroids are not
    truncated. Floating input keeps its dtype.

    Raises:
        ValueError: If ``data`` is not 2-D.
    """
    arr = np.asarray(data)
    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(np.float64)
    if arr.ndim != 2:
        raise ValueError(
            f"{name} must be a 2-D array of shape (n_points, n_dims), "
            f"got shape {arr.shape}"
        )
    return arr


def _check_dims(data: np.ndarray, means: np.ndarray) -> None:
    if data.shape[1] != means.shape[1]:
        raise ValueError(
            f"Dimension mismatch: points have {data.shape[1]} coordinates, "
            f"means have {means.shape[1]}"
        )


def _as_point(p) -> np.ndarray:
    arr = np.asarray(p)
    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(np.float64)
    return arr


def distance_squared(a: np.ndarray, b: np.ndarray) -> float:
    """Squared Euclidean distance between two points.

    Integer coordinates are promoted to float64 before squaring.
    """
    diff = _as_point(a) - _as_point(b)
    return float(np.dot(diff, diff))


def distance(a: np.ndarray, b: np.ndarray) -> float:
    """Euclidean distance between two points."""
    return float(np.sqrt(distance_squared(a, b)))


def _distance_sq_matrix(data: np.ndarray, means: np.ndarray) -> np.ndarray:
    """Squared distances from all points to all means.

    Args:
        data: Data points (n x d).
        means: Means (k x d).

    Returns:
        Squared distance matrix (n x k).
    """
    # (n, 1, d) - (1, k, d) -> (n, k, d) -> (n, k)
    diff = data[:, np.newaxis, :] - means[np.newaxis, :, :]
    return np.einsum("nkd,nkd->nk", diff, diff)


def closest_distance(means, data) -> np.ndarray:
    """Squared distance from each point in ``data`` to its nearest mean.

    Args:
        means: Means chosen so far (m x d), m >= 1.
        data: Data points (n x d).

    Returns:
        Array of n non-negative squared distances.
    """
    means = as_points(means, "means")
    data = as_points(data)
    if len(means) == 0:
        raise ValueError("closest_distance requires at least one mean")
    _check_dims(data, means)
    return _distance_sq_matrix(data, means).min(axis=1)


def closest_mean(point, means) -> int:
    """Index of the mean nearest to ``point``.

    Ties resolve to the lowest index.

    Raises:
        ValueError: If ``means`` is empty.
    """
    means = as_points(means, "means")
    if len(means) == 0:
        raise ValueError("closest_mean requires at least one mean")
    point = np.asarray(point, dtype=means.dtype).reshape(1, -1)
    _check_dims(point, means)
    # argmin returns the first occurrence of the minimum
    return int(np.argmin(_distance_sq_matrix(point, means)[0]))


def calculate_clusters(data, means) -> np.ndarray:
    """Assign each point to its nearest mean.

    Args:
        data: Data points (n x d).
        means: Means (k x d).

    Returns:
        Cluster assignments (n,), in the same order as ``data``.
    """
    data = as_points(data)
    means = as_points(means, "means")
    if len(means) == 0:
        raise ValueError("calculate_clusters requires at least one mean")
    _check_dims(data, means)
    if len(data) == 0:
        return np.zeros(0, dtype=np.intp)
    return np.argmin(_distance_sq_matrix(data, means), axis=1)
