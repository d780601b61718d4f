"""
Submit Contact Command - The contact submission pipeline.

Flow (strictly sequential, no retries, no rollback):
    RECEIVED ──validate──► VALIDATED ──save──► PERSISTED ──send──► NOTIFIED ──► RESPONDED
        │                      │                   │
        ▼                      ▼                   ▼
    REJECTED                FAILED              FAILED (record stays stored)

Each stage returns a Result; the handler never raises for stage failures.
The presentation layer maps the terminal state to an HTTP response.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from logging import getLogger
from typing import Callable, Optional

from contact_api.application.common.interfaces import Command, CommandHandler
from contact_api.application.services.notification_composer import (
    compose_notification,
)
from contact_api.domain.exceptions import ContactError
from contact_api.domain.ports import ContactRepository, MailSender
from contact_api.domain.services.submission_validator import validate_submission
from contact_api.domain.value_objects.submission_id import SubmissionId

logger = getLogger(__name__)


class PipelineState(str, Enum):
    RECEIVED = "received"
    VALIDATED = "validated"
    PERSISTED = "persisted"
    NOTIFIED = "notified"
    RESPONDED = "responded"
    REJECTED = "rejected"
    FAILED = "failed"


# ==================== RESULT ====================


@dataclass(frozen=True)
class SubmitContactResult:
    state: PipelineState
    submission_id: Optional[SubmissionId] = None
    error: Optional[ContactError] = None

    @property
    def succeeded(self) -> bool:
        return self.state is PipelineState.RESPONDED


# ==================== COMMAND ====================


@dataclass(frozen=True)
class SubmitContactCommand(Command[SubmitContactResult]):
    """Raw submission fields as received; any of them may be missing."""

    name: Optional[str]
    email: Optional[str]
    message: Optional[str]


# ==================== HANDLER ====================


class SubmitContactHandler(CommandHandler[SubmitContactResult]):
    """Validates, persists and announces a contact submission."""

    def __init__(
        self,
        contact_repository: ContactRepository,
        mail_sender: MailSender,
        sender_address: str,
        recipient_address: str,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._contact_repository = contact_repository
        self._mail_sender = mail_sender
        self._sender_address = sender_address
        self._recipient_address = recipient_address
        self._clock = clock

    async def execute(self, command: SubmitContactCommand) -> SubmitContactResult:
        # RECEIVED -> VALIDATED
        validated = validate_submission(
            command.name, command.email, command.message, clock=self._clock
        )
        if not validated.ok:
            logger.info(
                "[Contact] Submission rejected: %s", validated.error.kind.value
            )
            return SubmitContactResult(
                state=PipelineState.REJECTED, error=validated.error
            )
        submission = validated.value

        # VALIDATED -> PERSISTED
        stored = await self._contact_repository.save(submission)
        if not stored.ok:
            logger.error(
                "[Contact] Failed to store submission (email_domain=%s): %s",
                submission.email.domain,
                stored.error.message,
            )
            return SubmitContactResult(state=PipelineState.FAILED, error=stored.error)
        submission_id = stored.value
        logger.info("[Contact] Stored submission %s", submission_id)

        # PERSISTED -> NOTIFIED
        notification = compose_notification(
            submission,
            sender=self._sender_address,
            recipient=self._recipient_address,
        )
        sent = await self._mail_sender.send(notification)
        if not sent.ok:
            # The record stays stored; notification is best effort
            logger.error(
                "[Contact] Submission %s stored but notification failed: %s",
                submission_id,
                sent.error.message,
            )
            return SubmitContactResult(
                state=PipelineState.FAILED,
                submission_id=submission_id,
                error=sent.error,
            )
        logger.info("[Contact] Notification sent for submission %s", submission_id)

        # NOTIFIED -> RESPONDED
        return SubmitContactResult(
            state=PipelineState.RESPONDED, submission_id=submission_id
        )
