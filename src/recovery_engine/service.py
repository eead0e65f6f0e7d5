"""Daily optimization run — pulls records, runs the engine, stores the snapshot.

Usage:
    configure_logging()
    snapshot = run_daily_optimization(profile, record_store, biometric_source=watch)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from recovery_engine import config
from recovery_engine.catalog.templates import candidate_workout
from recovery_engine.collaborators.protocols import BiometricSource, DateRange, RecordStore
from recovery_engine.collaborators.snapshots import SnapshotStore
from recovery_engine.engine import OptimizationEngine
from recovery_engine.models.enums import RecordKind
from recovery_engine.models.insight import OptimizationReport
from recovery_engine.models.nutrition import NutritionTargets
from recovery_engine.models.records import BiometricSample, UserProfile
from recovery_engine.models.recovery import RecoveryScore
from recovery_engine.models.workout import AdaptedWorkout, CandidateWorkout

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install a root handler at ``RECOVERY_LOG_LEVEL`` unless ``level`` is given."""
    logging.basicConfig(level=level or config.LOG_LEVEL, format=LOG_FORMAT)


@dataclass(frozen=True)
class OptimizationSnapshot:
    """Everything one daily run produces for a user."""

    user_id: str
    as_of: date
    recovery: RecoveryScore
    report: OptimizationReport
    nutrition: NutritionTargets
    workout: AdaptedWorkout


def _latest_biometrics(
    source: BiometricSource | None, user_id: str
) -> tuple[BiometricSample, ...]:
    if source is None:
        return ()
    try:
        sample = source.get_latest_biometrics(user_id)
    except Exception as exc:
        # BiometricSourceError or whatever transport error the device client raises
        logger.warning("Failed to pull biometrics, continuing without: %s", exc)
        return ()
    if sample is None:
        logger.info("No biometric sample available for %s", user_id)
        return ()
    return (sample,)


def run_daily_optimization(
    profile: UserProfile,
    store: RecordStore,
    *,
    biometric_source: BiometricSource | None = None,
    snapshot_store: SnapshotStore[OptimizationSnapshot] | None = None,
    candidate: CandidateWorkout | None = None,
    as_of: date | None = None,
    lookback_days: int = config.LOOKBACK_DAYS,
    engine: OptimizationEngine | None = None,
) -> OptimizationSnapshot:
    """Execute one optimization cycle for a user.

    Args:
        profile: The user's profile; ``profile.user_id`` keys every lookup.
        store: Record store the histories are read from.
        biometric_source: Optional wearable sync. Errors are logged and the
            run continues without biometrics.
        snapshot_store: When given, the snapshot is stored under the user id.
        candidate: Workout to adapt. Defaults to the goal's catalog template.
        as_of: The run's day. Defaults to today.
        lookback_days: How many days of history to pull.
        engine: Engine to use; a default one discovers all rules.

    Raises:
        InvalidProfileError: The profile cannot support the nutrition formulas.
    """
    as_of = as_of or date.today()
    user_id = profile.user_id
    engine = engine or OptimizationEngine()
    logger.info("Starting daily optimization for %s (as of %s)", user_id, as_of.isoformat())

    # Fails fast on an unusable profile; every other output depends on it
    nutrition = engine.nutrition_targets(profile)

    window = DateRange.trailing(as_of, lookback_days)
    histories = {
        kind: store.list_records(kind, user_id, window) for kind in RecordKind
    }
    logger.info(
        "Pulled %d sleep, %d workout, %d nutrition and %d progress records",
        len(histories[RecordKind.SLEEP]),
        len(histories[RecordKind.WORKOUT]),
        len(histories[RecordKind.NUTRITION]),
        len(histories[RecordKind.PROGRESS]),
    )

    context = engine.build_context(
        profile,
        sleep=histories[RecordKind.SLEEP],
        workouts=histories[RecordKind.WORKOUT],
        nutrition=histories[RecordKind.NUTRITION],
        progress=histories[RecordKind.PROGRESS],
        biometrics=_latest_biometrics(biometric_source, user_id),
        as_of=as_of,
    )
    report = engine.analyze(context)
    logger.info(
        "Recovery %d/100, %d insight(s), optimization score %d",
        context.recovery.overall,
        len(report.insights),
        report.optimization_score,
    )

    workout = engine.adapt_workout(candidate or candidate_workout(profile.goal), context)

    snapshot = OptimizationSnapshot(
        user_id=user_id,
        as_of=as_of,
        recovery=context.recovery,
        report=report,
        nutrition=nutrition,
        workout=workout,
    )
    if snapshot_store is not None:
        snapshot_store.put(user_id, snapshot)

    logger.info("Daily optimization complete for %s", user_id)
    return snapshot
