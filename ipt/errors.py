# ipt/errors.py
"""
Exceptions raised by the dosage core.

Every fatal condition derives from DosageError, so front-ends can catch a
single type and show the message. Code-compliance adjustments and advisories
are never raised; they travel as warning strings on the result.
"""
from __future__ import annotations


class DosageError(ValueError):
    """Base class for every fatal dosage error."""


class InsufficientData(DosageError):
    """Fewer samples than a fit needs (3 for the laws, 2 for a raw regression)."""

    def __init__(self, what: str, got: int, required: int):
        self.got = got
        self.required = required
        super().__init__(f"{what}: at least {required} points are required, got {got}")


class InvalidInput(DosageError):
    """Non-positive or out-of-domain scalar, mismatched arrays, unknown table key."""


class DegenerateModel(DosageError):
    """The data cannot support the requested fit or evaluation."""


class InvalidTarget(DosageError):
    """Target strength is unreachable with the fitted Abrams ceiling."""

    def __init__(self, fcj_target: float, k1: float):
        self.fcj_target = fcj_target
        self.k1 = k1
        if fcj_target <= 0:
            message = f"Abrams law: target strength must be positive, got {fcj_target} MPa"
        else:
            message = (
                f"Abrams law: target strength {fcj_target} MPa must be lower than "
                f"k1 = {k1} MPa (strength ceiling as a/c -> 0)"
            )
        super().__init__(message)
