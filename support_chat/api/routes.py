"""Query endpoint relaying a user question to the model.

Every failure is caught at this boundary and returned as an ErrorResponse
with the kind of the error that produced it.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from support_chat.models.schemas import ErrorKind, ErrorResponse, QueryRequest, QueryResponse
from support_chat.relay.exceptions import RelayError
from support_chat.relay.service import RelayService, get_relay_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["query"])


def error_response(
    message: str,
    kind: ErrorKind,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
) -> JSONResponse:
    """Build the JSON failure envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message, kind=kind).model_dump(mode="json"),
    )


@router.post(
    "/query",
    response_model=QueryResponse,
    responses={500: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def query(
    request: QueryRequest,
    service: RelayService = Depends(get_relay_service),
) -> QueryResponse | JSONResponse:
    """Answer a question using only the knowledge documents.

    Args:
        request: The user's latest message.
        service: Relay service (injected).

    Returns:
        QueryResponse with the answer text.

    Raises:
        500: Any relay failure, returned as ErrorResponse.
    """
    try:
        text = await service.answer(request.message)
    except RelayError as e:
        logger.error(f"Relay failed ({e.kind.value}): {e.message}")
        return error_response(e.message, e.kind)
    except Exception as e:
        logger.exception(f"Unexpected relay failure: {e}")
        return error_response(str(e), ErrorKind.INTERNAL)

    return QueryResponse(text=text)
