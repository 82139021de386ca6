"""Clustering module: k-means++ seeding and Lloyd's algorithm."""

from .distance import (
    distance,
    distance_squared,
    closest_distance,
    closest_mean,
    calculate_clusters,
)
from .lcg import LinearCongruentialGenerator
from .seeding import random_plusplus
from .lloyd import (
    LloydKMeans,
    KMeansResult,
    Termination,
    calculate_means,
    deltas,
    deltas_below_limit,
    get_best_means,
    kmeans_lloyd,
    run,
)
from .metrics import (
    means_inertia,
    overall_distance,
    get_cluster,
)

__all__ = [
    "distance",
    "distance_squared",
    "closest_distance",
    "closest_mean",
    "calculate_clusters",
    "LinearCongruentialGenerator",
    "random_plusplus",
    "LloydKMeans",
    "KMeansResult",
    "Termination",
    "calculate_means",
    "deltas",
    "deltas_below_limit",
    "get_best_means",
    "kmeans_lloyd",
    "run",
    "means_inertia",
    "overall_distance",
    "get_cluster",
]
