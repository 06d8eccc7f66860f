"""Tolerances used when comparing vectors and building unit vectors."""

from __future__ import annotations
from dataclasses import dataclass
import numpy as np


@dataclass
class VectorConfig:
    """Configuration for approximate comparisons."""
    rel_tol: float = float(np.sqrt(np.finfo(np.float64).eps))  # ~1.5e-8
    abs_tol: float = 0.0
    zero_magnitude_tol: float = 0.0  # Magnitudes <= this have no direction


DEFAULT_CONFIG = VectorConfig()
