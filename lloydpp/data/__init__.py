"""Data module for synthetic clustering datasets."""

from .synthetic import (
    make_blobs,
    SyntheticBlobs,
)

__all__ = [
    "make_blobs",
    "SyntheticBlobs",
]
