"""Translate free-text physique labels onto the closed GoalType set.

This is the only place a label is matched by text. Exact labels from the
onboarding form are looked up first; anything else falls back to keyword
matching and finally to MAINTENANCE.
"""

from __future__ import annotations

from recovery_engine.models.enums import GoalType

_EXACT_LABELS: dict[str, GoalType] = {
    "muscular": GoalType.MUSCLE_GAIN,
    "bodybuilder": GoalType.MUSCLE_GAIN,
    "power athlete": GoalType.POWER,
    "nfl fullback": GoalType.STRENGTH,
    "strength focused": GoalType.STRENGTH,
    "athletic": GoalType.ATHLETIC,
    "lean & toned": GoalType.FAT_LOSS,
    "weight loss": GoalType.FAT_LOSS,
    "weight gain": GoalType.WEIGHT_GAIN,
    "endurance focused": GoalType.ENDURANCE,
    "maintenance": GoalType.MAINTENANCE,
}

# Checked in order; the first keyword contained in the label wins
_KEYWORDS: tuple[tuple[str, GoalType], ...] = (
    ("muscle", GoalType.MUSCLE_GAIN),
    ("power", GoalType.POWER),
    ("strength", GoalType.STRENGTH),
    ("lean", GoalType.FAT_LOSS),
    ("loss", GoalType.FAT_LOSS),
    ("gain", GoalType.WEIGHT_GAIN),
    ("endurance", GoalType.ENDURANCE),
    ("athlet", GoalType.ATHLETIC),
)


def goal_from_label(label: str | None) -> GoalType:
    """Map a legacy physique label such as ``"Lean & Toned"`` to a GoalType."""
    if not label:
        return GoalType.MAINTENANCE
    normalized = " ".join(label.lower().split())
    if normalized in _EXACT_LABELS:
        return _EXACT_LABELS[normalized]
    for keyword, goal in _KEYWORDS:
        if keyword in normalized:
            return goal
    return GoalType.MAINTENANCE
