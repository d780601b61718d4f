"""
SubmissionId Value Object - Opaque identifier assigned by the store.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SubmissionId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("Submission ID cannot be empty")

    def __str__(self) -> str:
        return self.value
