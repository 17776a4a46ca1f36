"""Omar's cousins question endpoint.

Always answers with HTTP 200 once the request validates; upstream failures
are masked by the proxy's fallback answer.
"""

import logging

from fastapi import APIRouter, Depends

from omars_cousins.models.schemas import AnswerResponse, QuestionRequest
from omars_cousins.proxy.cousins import CousinsService, get_cousins_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["omars-cousins"])


@router.post("/omars-cousins", response_model=AnswerResponse)
async def ask_omars_cousins(
    request: QuestionRequest,
    service: CousinsService = Depends(get_cousins_service),
) -> AnswerResponse:
    """Ask Omar's cousins a question.

    Args:
        request: Payload holding the question.
        service: Proxy service forwarding the question upstream.

    Returns:
        AnswerResponse with the persona's answer or the fallback text.

    Raises:
        422: Missing, empty, or whitespace-only question.
    """
    logger.info(f"Forwarding question ({len(request.question)} chars) to the cousins")
    answer = await service.ask(request.question)
    return AnswerResponse(answer=answer)
