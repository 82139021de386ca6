"""Lloyd's k-means with k-means++ seeding.

Each iteration assigns every point to its nearest mean, recomputes the
means as cluster centroids, and checks how far the means moved. Empty
clusters keep their previous mean rather than being dropped or reseeded,
so the means collection always holds exactly k rows.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from ..config import ClusteringParameters, DEFAULT_MAX_ITERATION, UINT64_MAX
from .distance import as_points, calculate_clusters
from .metrics import means_inertia
from .seeding import check_dataset, random_plusplus


logger = logging.getLogger(__name__)


class Termination(Enum):
    """Why a run stopped."""
    CONVERGED = "converged"
    MAX_ITERATIONS_REACHED = "max_iterations_reached"


@dataclass
class KMeansResult:
    """Result from k-means clustering.

    Attributes:
        means: Final cluster means (k x d).
        labels: Cluster assignment for each point.
        n_iterations: Number of completed Lloyd iterations.
        termination: Stopping condition that ended the run.
        inertia: Sum of squared distances to the assigned means.
        seed: Seed used for k-means++.
    """
    means: np.ndarray
    labels: np.ndarray
    n_iterations: int
    termination: Termination
    inertia: float
    seed: int

    @property
    def converged(self) -> bool:
        return self.termination is Termination.CONVERGED


def calculate_means(
    data,
    clusters,
    old_means,
    k: int,
) -> np.ndarray:
    """Recompute each mean as the centroid of its assigned points.

    A cluster with no assigned points keeps its entry from ``old_means``.
    Only the overlap of ``data`` and ``clusters`` is consulted.

    Args:
        data: Data points (n x d).
        clusters: Cluster assignments, entries in [0, k).
        old_means: Means from the previous iteration (k x d).
        k: Number of clusters.

    Returns:
        New means (k x d).
    """
    data = as_points(data)
    old_means = as_points(old_means, "old_means")
    clusters = np.asarray(clusters, dtype=np.intp)

    n = min(len(data), len(clusters))
    points = data[:n]
    labels = clusters[:n]

    sums = np.zeros((k, data.shape[1]), dtype=np.float64)
    np.add.at(sums, labels, points)
    counts = np.bincount(labels, minlength=k)

    new_means = old_means.astype(np.float64, copy=True)
    filled = counts > 0
    new_means[filled] = sums[filled] / counts[filled, np.newaxis]
    return new_means.astype(old_means.dtype, copy=False)


def deltas(old_means, means) -> np.ndarray:
    """Euclidean distance each mean moved between two iterations.

    Raises:
        ValueError: If the two collections differ in length.
    """
    old_means = as_points(old_means, "old_means")
    means = as_points(means, "means")
    if len(old_means) != len(means):
        raise ValueError(
            f"Cannot compare {len(old_means)} old means with {len(means)} means"
        )
    return np.linalg.norm(means - old_means, axis=1)


def deltas_below_limit(moved, min_delta: float) -> bool:
    """True if no mean moved further than ``min_delta``."""
    return bool(np.all(np.asarray(moved) <= min_delta))


def generate_seed() -> int:
    """Draw a non-deterministic 64-bit seed from OS entropy."""
    state = np.random.SeedSequence().generate_state(1, dtype=np.uint64)
    return int(state[0]) & UINT64_MAX


class LloydKMeans:
    """k-means clustering with Lloyd's algorithm and k-means++ seeding.

    Stops when, checked in this order:

    1. ``min_delta`` is set and no mean moved further than it;
    2. ``max_iteration`` is set and that many iterations have run;
    3. the means did not change at all;
    4. ``max_iteration`` is unset and ``DEFAULT_MAX_ITERATION`` is reached.
    """

    def __init__(self, parameters: ClusteringParameters):
        self.parameters = parameters

        self.means_: Optional[np.ndarray] = None
        self.labels_: Optional[np.ndarray] = None

    def _stop_reason(
        self,
        iteration: int,
        old_means: np.ndarray,
        means: np.ndarray,
    ) -> Optional[Termination]:
        params = self.parameters
        if params.has_min_delta and deltas_below_limit(
            deltas(old_means, means), params.min_delta
        ):
            return Termination.CONVERGED
        if params.has_max_iteration and iteration >= params.max_iteration:
            return Termination.MAX_ITERATIONS_REACHED
        if np.array_equal(old_means, means):
            return Termination.CONVERGED
        if not params.has_max_iteration and iteration >= DEFAULT_MAX_ITERATION:
            logger.warning(
                "No max_iteration configured; stopping at the default bound "
                "of %d iterations without convergence",
                DEFAULT_MAX_ITERATION,
            )
            return Termination.MAX_ITERATIONS_REACHED
        return None

    def fit(self, data) -> KMeansResult:
        """Fit k-means to data.

        Args:
            data: Data points (n x d), n >= 1.

        Returns:
            KMeansResult for the last completed iteration.
        """
        data = check_dataset(data)
        params = self.parameters
        k = params.k

        seed = params.random_seed if params.has_random_seed else generate_seed()
        logger.debug("Seeding %d means from %d points with seed %d", k, len(data), seed)
        means = random_plusplus(data, k, seed)

        iteration = 0
        termination = None
        labels = None
        if params.has_max_iteration and params.max_iteration == 0:
            labels = calculate_clusters(data, means)
            termination = Termination.MAX_ITERATIONS_REACHED

        while termination is None:
            labels = calculate_clusters(data, means)
            old_means = means
            means = calculate_means(data, labels, old_means, k)
            iteration += 1

            if logger.isEnabledFor(logging.DEBUG):
                empty = k - len(np.unique(labels))
                logger.debug(
                    "Iteration %d: max delta %.6g, %d empty clusters",
                    iteration, float(deltas(old_means, means).max()), empty,
                )

            termination = self._stop_reason(iteration, old_means, means)

        logger.info(
            "k-means finished after %d iterations: %s",
            iteration, termination.value,
        )

        self.means_ = means
        self.labels_ = labels

        return KMeansResult(
            means=means,
            labels=labels,
            n_iterations=iteration,
            termination=termination,
            inertia=means_inertia(data, means, labels),
            seed=seed,
        )

    def predict(self, data) -> np.ndarray:
        """Predict cluster assignments for new data.

        Args:
            data: Data points (n x d).

        Returns:
            Cluster assignments.
        """
        if self.means_ is None:
            raise ValueError("Must call fit() first")

        return calculate_clusters(data, self.means_)


def run(data, parameters: ClusteringParameters) -> Tuple[np.ndarray, np.ndarray]:
    """Cluster ``data`` and return ``(means, labels)``."""
    result = LloydKMeans(parameters).fit(data)
    return result.means, result.labels


def kmeans_lloyd(
    data,
    k: int,
    max_iteration: Optional[int] = None,
    min_delta: Optional[float] = None,
    random_seed: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """Convenience function for k-means clustering.

    Args:
        data: Data points (n x d).
        k: Number of clusters.
        max_iteration: Optional iteration bound.
        min_delta: Optional convergence threshold.
        random_seed: Optional seed for reproducible runs.

    Returns:
        Tuple of (means, labels).
    """
    parameters = ClusteringParameters(
        k=k,
        max_iteration=max_iteration,
        min_delta=min_delta,
        random_seed=random_seed,
    )
    return run(data, parameters)


def get_best_means(
    data,
    parameters: ClusteringParameters,
    tries: int = 10,
) -> KMeansResult:
    """Run k-means several times and keep the lowest-inertia result.

    With a configured seed, try ``i`` uses ``seed + i`` (mod 2^64) so the
    whole search is reproducible. Otherwise every try draws a fresh seed.

    Args:
        data: Data points (n x d).
        parameters: Clustering configuration.
        tries: Number of independent runs.

    Returns:
        The KMeansResult with the smallest inertia. Earlier tries win ties.
    """
    if tries < 1:
        raise ValueError(f"tries must be at least 1, got {tries}")
    data = check_dataset(data)

    best: Optional[KMeansResult] = None
    for i in range(tries):
        params = parameters
        if parameters.has_random_seed:
            params = parameters.with_seed((parameters.random_seed + i) & UINT64_MAX)
        result = LloydKMeans(params).fit(data)
        logger.debug("Try %d (seed %d): inertia %.6g", i, result.seed, result.inertia)
        if best is None or result.inertia < best.inertia:
            best = result

    return best
