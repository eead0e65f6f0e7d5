"""Exception hierarchy for the recovery engine."""

from __future__ import annotations


class RecoveryEngineError(Exception):
    """Base exception for all recovery_engine errors."""


class InvalidProfileError(RecoveryEngineError):
    """The profile lacks a field required for energy-expenditure formulas.

    Raised instead of computing targets from zero or missing values.
    """

    def __init__(self, missing_fields: list[str] | tuple[str, ...]) -> None:
        self.missing_fields = tuple(missing_fields)
        super().__init__(
            "Profile is missing required fields: " + ", ".join(self.missing_fields)
        )


class BiometricSourceError(RecoveryEngineError):
    """A biometric source could not deliver a sample (device offline, sync failed, etc.)."""


class DuplicateRuleError(RecoveryEngineError):
    """Two different insight rule classes share one ``rule_id``."""

    def __init__(self, rule_id: str, existing: type, incoming: type) -> None:
        self.rule_id = rule_id
        super().__init__(
            f"Rule id {rule_id!r} is already registered by {existing.__qualname__}; "
            f"cannot register {incoming.__qualname__}"
        )
