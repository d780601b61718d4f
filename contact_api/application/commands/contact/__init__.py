"""Contact commands."""

from .submit_contact import (
    PipelineState,
    SubmitContactCommand,
    SubmitContactHandler,
    SubmitContactResult,
)

__all__ = [
    "PipelineState",
    "SubmitContactCommand",
    "SubmitContactHandler",
    "SubmitContactResult",
]
