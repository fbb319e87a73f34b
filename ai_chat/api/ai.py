from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse

from ai_chat.core.logger import get_logger
from ai_chat.models.chat import (
    ChatErrorResponse,
    ChatMessage,
    ChatRole,
    ChatSuccessResponse,
    MissingQuestionResponse,
    ResponseFormat,
    parse_format,
)
from ai_chat.services.gemini_service import CompletionProvider, CompletionResult
from ai_chat.services.render import render_chat_page, render_error_page

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["ai"])

MISSING_QUESTION_MESSAGE = "Please pass a question in the query string (e.g., ?question=What is AI?)"


def get_completion_provider(request: Request) -> CompletionProvider:
    return request.app.state.completion_provider


async def handle_question(
    question: Optional[str],
    raw_format: Optional[str],
    provider: CompletionProvider,
) -> Response:
    """Ask the provider and render the answer (or the failure) as HTML or JSON."""
    fmt = parse_format(raw_format)

    if not question:
        if fmt == ResponseFormat.JSON:
            return JSONResponse(status_code=400, content=MissingQuestionResponse().model_dump())
        return HTMLResponse(status_code=400, content=render_error_page(MISSING_QUESTION_MESSAGE))

    try:
        result = await provider.complete(question)
    except Exception as e:
        logger.exception(f"❌ AI provider raised: {e}")
        result = CompletionResult.failure(str(e))

    if not result.ok:
        error = f"Error: {result.error.message}"
        logger.error(f"❌ Error calling AI provider: {result.error.message}")
        if fmt == ResponseFormat.JSON:
            return JSONResponse(status_code=500, content=ChatErrorResponse(error=error).model_dump())
        return HTMLResponse(status_code=500, content=render_error_page(error))

    user_message = ChatMessage(role=ChatRole.USER, message=question)
    ai_message = ChatMessage(role=ChatRole.AI, message=result.text or "")

    if fmt == ResponseFormat.JSON:
        payload = ChatSuccessResponse(user_message=user_message, ai_message=ai_message)
        return JSONResponse(status_code=200, content=payload.model_dump(mode="json", by_alias=True))
    return HTMLResponse(status_code=200, content=render_chat_page(user_message, ai_message))


@router.api_route("/AI", methods=["GET", "POST"])
async def ai(
    question: Optional[str] = Query(default=None),
    format: Optional[str] = Query(default=None),
    provider: CompletionProvider = Depends(get_completion_provider),
):
    """Answer ``question`` with Gemini; ``format`` is ``html`` (default) or ``json``."""
    logger.info(f"💬 Received question (format={format or 'html'}): {question}")
    return await handle_question(question, format, provider)
