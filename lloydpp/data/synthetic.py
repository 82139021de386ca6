"""Synthetic Gaussian blob generation.

Produces well-separated point clouds with known cluster membership for
exercising and demonstrating the clustering code.
"""

import numpy as np
from dataclasses import dataclass
from typing import Sequence


@dataclass
class SyntheticBlobs:
    """Points drawn around known centers.
    
    Attributes:
        points: Data points (n x d).
        labels: Index of the center each point was drawn around.
        centers: Blob centers (k x d).
    """
    points: np.ndarray
    labels: np.ndarray
    centers: np.ndarray
    
    @property
    def n_points(self) -> int:
        return len(self.points)
    
    @property
    def n_clusters(self) -> int:
        return len(self.centers)


def make_blobs(
    centers: Sequence[Sequence[float]],
    n_per_cluster: int = 50,
    spread: float = 0.5,
    seed: int = 42,
    shuffle: bool = True,
) -> SyntheticBlobs:
    """Generate isotropic Gaussian blobs.
    
    Args:
        centers: Blob centers, one row per cluster.
        n_per_cluster: Points drawn per center.
        spread: Standard deviation of each coordinate around its center.
        seed: Random seed for reproducibility.
        shuffle: Shuffle points so clusters are interleaved.
    
    Returns:
        SyntheticBlobs with points, labels and centers.
    """
    centers = np.asarray(centers, dtype=np.float64)
    if centers.ndim != 2 or len(centers) == 0:
        raise ValueError("centers must be a non-empty 2-D array")
    if n_per_cluster < 1:
        raise ValueError(f"n_per_cluster must be positive, got {n_per_cluster}")
    if spread < 0:
        raise ValueError(f"spread must be non-negative, got {spread}")
    
    rng = np.random.default_rng(seed)
    k, n_dims = centers.shape
    
    noise = rng.normal(0.0, spread, size=(k, n_per_cluster, n_dims))
    points = (centers[:, np.newaxis, :] + noise).reshape(-1, n_dims)
    labels = np.repeat(np.arange(k), n_per_cluster)
    
    if shuffle:
        order = rng.permutation(len(points))
        points = points[order]
        labels = labels[order]
    
    return SyntheticBlobs(points=points, labels=labels, centers=centers)
