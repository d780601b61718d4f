"""
ContactEmail Value Object - Submitter address with a basic shape check.
"""

import re
from dataclasses import dataclass

# local@domain.tld, no whitespace, exactly one "@"
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


@dataclass(frozen=True)
class ContactEmail:
    value: str

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise ValueError(f"Invalid email address: {self.value!r}")

    @staticmethod
    def is_valid(value: str) -> bool:
        return bool(value) and EMAIL_PATTERN.fullmatch(value) is not None

    @property
    def domain(self) -> str:
        return self.value.rsplit("@", 1)[-1]

    def __str__(self) -> str:
        return self.value
