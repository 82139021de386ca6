"""lloydpp: k-means clustering with k-means++ seeding."""

from .config import ClusteringParameters
from .clustering import (
    LloydKMeans,
    KMeansResult,
    Termination,
    get_best_means,
    kmeans_lloyd,
    run,
)

__version__ = "0.1.0"

__all__ = [
    "ClusteringParameters",
    "LloydKMeans",
    "KMeansResult",
    "Termination",
    "get_best_means",
    "kmeans_lloyd",
    "run",
]
