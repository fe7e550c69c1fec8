"""Static session templates consumed by the balance seeder and the editor."""
from typing import List

from gym_scheduler.models.schemas import (
    Intensity,
    SessionDraft,
    SessionTemplate,
    TrainingFocus,
)


SESSION_TEMPLATES: List[SessionTemplate] = [
    SessionTemplate(
        name="Lower Body Power",
        focus=TrainingFocus.STRENGTH,
        intensity=Intensity.HIGH,
        duration=75,
        location="Main Weight Room",
        notes=(
            "Hang power cleans, front squats, speed deadlifts, sled pushes. "
            "Finish with core anti-rotation."
        ),
    ),
    SessionTemplate(
        name="Upper Body Push-Pull",
        focus=TrainingFocus.HYPERTROPHY,
        intensity=Intensity.MEDIUM,
        duration=65,
        location="Training Floor",
        notes=(
            "Superset incline bench + chest-supported rows. Giant set shoulders + arms. "
            "Finish with accessory chest/back."
        ),
    ),
    SessionTemplate(
        name="Tempo Run + Intervals",
        focus=TrainingFocus.CONDITIONING,
        intensity=Intensity.HIGH,
        duration=50,
        location="Track / Treadmill",
        notes=(
            "10 min build, 3x8 min @ goal pace with 2 min float, "
            "finish with 6x30s hard sprints."
        ),
    ),
    SessionTemplate(
        name="Controlled Mobility Flow",
        focus=TrainingFocus.MOBILITY,
        intensity=Intensity.LOW,
        duration=40,
        location="Studio B",
        notes=(
            "CARS sequence, dynamic hip openers, thoracic rotation work, "
            "loaded carries for range control."
        ),
    ),
    SessionTemplate(
        name="Olympic Lifting Technique",
        focus=TrainingFocus.SKILL,
        intensity=Intensity.MEDIUM,
        duration=55,
        location="Platform Area",
        notes="Snatch technical ladder, pause variations, jerk footwork, pulls with tempo focus.",
    ),
    SessionTemplate(
        name="Active Recovery Ride",
        focus=TrainingFocus.RECOVERY,
        intensity=Intensity.LOW,
        duration=35,
        location="Spin Room",
        notes="Zone 2 spin, breathing drills, finish with light band work and foam rolling.",
    ),
]

DEFAULT_DRAFT = SessionDraft()


def apply_template(draft: SessionDraft, template: SessionTemplate) -> SessionDraft:
    """Overlay a template's fields onto a draft, keeping its day, start and status."""

    return draft.model_copy(update=template.model_dump())
