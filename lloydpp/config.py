"""Configuration dataclasses for lloydpp."""

import math
import numbers
from dataclasses import dataclass, asdict, replace
from typing import Optional, Dict, Any


UINT64_MAX = 2 ** 64 - 1

# Iteration cap applied whenever max_iteration is unset.
DEFAULT_MAX_ITERATION = 1000


@dataclass
class ClusteringParameters:
    """Configuration for a k-means run.
    
    Optional fields use ``None`` for "unset", so an explicit zero
    (e.g. ``min_delta=0.0``) stays a legitimate value.
    
    Attributes:
        k: Number of clusters.
        max_iteration: Stop after this many Lloyd iterations.
        min_delta: Stop once no mean moves further than this.
        random_seed: Seed for k-means++ (unsigned 64-bit). Drawn from
            OS entropy when unset.
    """
    k: int
    max_iteration: Optional[int] = None
    min_delta: Optional[float] = None
    random_seed: Optional[int] = None
    
    def __post_init__(self):
        for name in ("k", "max_iteration", "random_seed"):
            value = getattr(self, name)
            if value is None and name != "k":
                continue
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.k < 1:
            raise ValueError(f"k must be at least 1, got {self.k}")
        if self.max_iteration is not None and self.max_iteration < 0:
            raise ValueError(
                f"max_iteration must be non-negative, got {self.max_iteration}"
            )
        if self.min_delta is not None:
            if math.isnan(self.min_delta) or self.min_delta < 0:
                raise ValueError(
                    f"min_delta must be non-negative, got {self.min_delta}"
                )
        if self.random_seed is not None and not 0 <= self.random_seed <= UINT64_MAX:
            raise ValueError(
                f"random_seed must fit in an unsigned 64-bit integer, "
                f"got {self.random_seed}"
            )
    
    @property
    def has_max_iteration(self) -> bool:
        return self.max_iteration is not None
    
    @property
    def has_min_delta(self) -> bool:
        return self.min_delta is not None
    
    @property
    def has_random_seed(self) -> bool:
        return self.random_seed is not None
    
    def with_seed(self, seed: int) -> "ClusteringParameters":
        """Return a copy of these parameters using ``seed``."""
        return replace(self, random_seed=seed)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert config to a plain dictionary."""
        return asdict(self)
    
    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ClusteringParameters":
        """Create config from dictionary."""
        return cls(
            k=d["k"],
            max_iteration=d.get("max_iteration"),
            min_delta=d.get("min_delta"),
            random_seed=d.get("random_seed"),
        )
