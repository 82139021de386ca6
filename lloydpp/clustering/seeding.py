"""k-means++ seeding.

Picks the first mean uniformly, then every further mean with probability
proportional to its squared distance to the nearest mean chosen so far.
Points far from the existing means are favoured, which spreads the initial
centroids and makes poor local minima less likely than uniform sampling.
"""

import logging

import numpy as np

from .distance import as_points, closest_distance
from .lcg import LinearCongruentialGenerator


logger = logging.getLogger(__name__)


def check_dataset(data) -> np.ndarray:
    """Validate a dataset and return it as a 2-D floating array.

    Raises:
        ValueError: If the dataset is empty or not 2-D.
    """
    if len(data) == 0:
        raise ValueError("dataset must contain at least one point")
    return as_points(data)


def random_plusplus(data, k: int, seed: int) -> np.ndarray:
    """Choose k initial means with k-means++.

    Weights are the floating squared distances themselves. Points that
    nearly coincide with a chosen mean get vanishingly small weight, so
    near-duplicates are effectively never picked while a distant point
    exists.

    Args:
        data: Data points (n x d), n >= 1.
        k: Number of means, k >= 1.
        seed: Unsigned 64-bit seed for the LCG.

    Returns:
        Initial means (k x d).

    Raises:
        ValueError: If k < 1 or the dataset is empty.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    data = check_dataset(data)

    rng = LinearCongruentialGenerator(seed)
    n_samples = len(data)

    means = np.empty((k, data.shape[1]), dtype=data.dtype)
    first = rng.randint(n_samples)
    means[0] = data[first]
    logger.debug("k-means++ mean 0: point %d", first)

    for count in range(1, k):
        weights = closest_distance(means[:count], data)
        chosen = rng.weighted_index(weights)
        means[count] = data[chosen]
        logger.debug(
            "k-means++ mean %d: point %d (weight %.6g of %.6g)",
            count, chosen, weights[chosen], weights.sum(),
        )

    return means
