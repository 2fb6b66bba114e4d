"""ScalingService — serve-time entrypoint: stored template → scaled view."""

from __future__ import annotations

import logging
from dataclasses import replace

from prescription_engine.collaborators import (
    ExerciseRegistry,
    OneRepMaxProvider,
    TemplateStore,
)
from prescription_engine.exceptions import TemplateNotFoundError, ValidationError
from prescription_engine.models.enums import AgeGroup, Intensity
from prescription_engine.models.profile import ScalingProfile
from prescription_engine.models.scaled import ScaledPrescription
from prescription_engine.scaling.category import scale_for_profile
from prescription_engine.scaling.intensity import parse_age_group, parse_intensity, scale

logger = logging.getLogger(__name__)


class ScalingService:
    """Fetches a stored template and scales it for one request.

    Nothing is cached or written back; every call recomputes the view.

    Usage::

        service = ScalingService(store, registry, maxes)
        view = service.get_scaled(template_id, "High", athlete_id="a-1")
        view = service.get_scaled(template_id, "High", age_group="14-17",
                                  years_of_experience=3)
    """

    def __init__(
        self,
        store: TemplateStore,
        registry: ExerciseRegistry,
        maxes: OneRepMaxProvider | None = None,
    ) -> None:
        self._store = store
        self._registry = registry
        self._maxes = maxes

    def get_scaled(
        self,
        template_id: str,
        intensity: Intensity | str,
        athlete_id: str | None = None,
        age_group: AgeGroup | str | None = None,
        years_of_experience: float | None = None,
    ) -> ScaledPrescription:
        """Scale a stored template to the requested intensity.

        Args:
            template_id: Id returned by the template store.
            intensity: Low / Moderate / High.
            athlete_id: Athlete whose one-rep maxes drive target weights.
                Without it (or without a provider) no weights are emitted.
            age_group: Optional age group for safety caps.
            years_of_experience: With ``age_group``, switches to
                category-specific scaling using the template's category
                and phase.

        Raises:
            TemplateNotFoundError: If no template has this id.
            ValidationError: If the intensity or age group is unknown, or
                years of experience are given without an age group.
        """
        template = self._store.get(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)

        records = self._registry.resolve_many(ex.exercise_slug for ex in template.exercises)
        maxes: dict[str, float] = {}
        if athlete_id is not None and self._maxes is not None:
            maxes = self._maxes.get_maxes(athlete_id)
        logger.debug(
            "Scaling %s for athlete %s (%d maxes known)", template_id, athlete_id, len(maxes)
        )

        if years_of_experience is not None:
            if age_group is None:
                raise ValidationError("years of experience require an age group")
            profile = ScalingProfile(
                category=template.coordinate.category,
                phase=template.coordinate.phase,
                age_group=parse_age_group(age_group),
                years_of_experience=years_of_experience,
            )
            view = scale_for_profile(
                template.exercises,
                profile,
                intensity=parse_intensity(intensity),
                maxes_by_exercise=maxes,
                exercise_metadata=records,
                template_id=template_id,
            )
        else:
            view = scale(
                template.exercises,
                intensity,
                maxes_by_exercise=maxes,
                exercise_metadata=records,
                age_group=age_group,
                template_id=template_id,
            )
        return self._attach_variant_ids(view)

    def _attach_variant_ids(self, view: ScaledPrescription) -> ScaledPrescription:
        """Give each substituted variant its own registry id, when catalogued."""
        variants = {ex.exercise_slug for ex in view.exercises if ex.is_substituted}
        if not variants:
            return view
        records = self._registry.resolve_many(sorted(variants))
        exercises = tuple(
            replace(ex, exercise_id=records[ex.exercise_slug].id)
            if ex.is_substituted and ex.exercise_slug in records
            else ex
            for ex in view.exercises
        )
        return replace(view, exercises=exercises)
