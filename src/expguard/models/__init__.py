"""Guard data models."""
from expguard.models.conflict import ConflictCheck, ConflictMatch
from expguard.models.payload import ReservationRules, ReservedPayload, ReservedTarget
from expguard.models.target import ActiveTarget, CandidateTarget, TargetKeys

__all__ = [
    # Targets
    "ActiveTarget",
    "CandidateTarget",
    "TargetKeys",
    # Conflicts
    "ConflictCheck",
    "ConflictMatch",
    # Payload
    "ReservationRules",
    "ReservedPayload",
    "ReservedTarget",
]
