"""Clustering quality metrics.

Provides:
- Inertia - sum of squared distances to the assigned means
- Overall distance (OD) - root-mean-square distance to the assigned means
- Cluster extraction by label
"""

import numpy as np

from .distance import as_points


def means_inertia(data, means, labels) -> float:
    """Sum of squared distances from each point to its assigned mean.
    
    Lower is better.
    
    Args:
        data: Data points (n x d).
        means: Cluster means (k x d).
        labels: Cluster assignments (n,).
    
    Returns:
        Inertia.
    """
    data = as_points(data)
    means = as_points(means, "means")
    labels = np.asarray(labels, dtype=np.intp)
    
    diff = data - means[labels]
    return float(np.einsum("nd,nd->", diff, diff))


def overall_distance(data, means, labels) -> float:
    """Compute overall distance (OD) metric.
    
    OD = sqrt(mean(||x_i - c_{y_i}||^2))
    """
    data = as_points(data)
    return float(np.sqrt(means_inertia(data, means, labels) / len(data)))


def get_cluster(data, labels, index: int) -> np.ndarray:
    """Points assigned to cluster ``index``, in dataset order."""
    data = as_points(data)
    labels = np.asarray(labels)
    return data[labels == index]
