"""Serve-time scaling: Low / Moderate / High transforms and profile-driven tables."""

from prescription_engine.scaling.category import (
    category_exercise_parameters,
    scale_for_profile,
)
from prescription_engine.scaling.intensity import (
    scale,
    scale_bodyweight,
    scale_loaded,
    scale_reps_or_duration,
)
from prescription_engine.scaling.service import ScalingService

__all__ = [
    "ScalingService",
    "category_exercise_parameters",
    "scale",
    "scale_bodyweight",
    "scale_for_profile",
    "scale_loaded",
    "scale_reps_or_duration",
]
