"""
Contact API Router - Accepts contact-form submissions.

Thin layer: builds the command, runs the pipeline handler and maps its
terminal state to an HTTP response. This is the only place pipeline
errors become status codes.

Flow:
  HTTP Request → Router → SubmitContactCommand → SubmitContactHandler
                                                   ├─ validate
                                                   ├─ ContactRepository.save
                                                   └─ MailSender.send
  HTTP Response ← Router ← SubmitContactResult ←
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, HTTPException, Request, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from contact_api.application.commands.contact import (
    PipelineState,
    SubmitContactCommand,
    SubmitContactHandler,
    SubmitContactResult,
)
from contact_api.config.settings import Config
from contact_api.domain.exceptions import MailError, StoreError
from contact_api.observability.metrics import (
    MetricsErrorType,
    increment_contact_submission,
    increment_error,
)
from contact_api.presentation.rate_limiting import limiter

logger = getLogger(__name__)

GENERIC_SERVER_ERROR = "Server error"
SUCCESS_MESSAGE = "Message sent successfully"


# ==================== REQUEST/RESPONSE MODELS ====================


class ContactRequest(BaseModel):
    """
    Request body for a contact submission.

    Fields are optional here so that presence is judged by the pipeline's
    validation stage; only non-text values are rejected at this layer.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None


class ContactResponse(BaseModel):
    message: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/api", tags=["contact"])


def _server_error_detail(result: SubmitContactResult) -> str:
    if Config.EXPOSE_ERROR_DETAILS and result.error is not None:
        return result.error.message
    return GENERIC_SERVER_ERROR


def _record_failure(result: SubmitContactResult) -> None:
    if isinstance(result.error, StoreError):
        increment_error(MetricsErrorType.STORE_FAILED)
    elif isinstance(result.error, MailError):
        increment_error(MetricsErrorType.MAIL_FAILED)


# ==================== ENDPOINTS ====================


@router.post(
    "/contact",
    response_model=ContactResponse,
    status_code=status.HTTP_200_OK,
)
@limiter.limit(Config.RATE_LIMIT)
@inject
async def submit_contact(
    request: Request,
    payload: ContactRequest,
    handler: FromDishka[SubmitContactHandler],
):
    """
    Validate, store and announce a contact submission.

    Rate limited per client address (Config.RATE_LIMIT).
    """
    command = SubmitContactCommand(
        name=payload.name,
        email=payload.email,
        message=payload.message,
    )
    result = await handler.execute(command)
    increment_contact_submission(result.state.value)

    if result.state is PipelineState.REJECTED:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=result.error.message
        )

    if result.state is PipelineState.FAILED:
        _record_failure(result)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_server_error_detail(result),
        )

    return ContactResponse(message=SUCCESS_MESSAGE)
