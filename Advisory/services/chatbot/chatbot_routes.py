import logging
import httpx
from typing import AsyncIterator
from fastapi import APIRouter, Depends, HTTPException
from Advisory.services.chatbot.chatbot_schemas import ChatRequest, ChatResponse, ErrorResponse
from Advisory.services.chatbot.chatbot_prompt import build_messages
from Advisory.core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


async def get_upstream_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(timeout=settings.FEATHERLESS_TIMEOUT) as client:
        yield client


def extract_reply(data) -> str:
    """Pull choices[0].message.content out of a completion body, or ""."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content if isinstance(content, str) else ""


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
async def chat(
    req: ChatRequest,
    client: httpx.AsyncClient = Depends(get_upstream_client),
):
    if not req.message:
        raise HTTPException(400, "Missing message")

    api_key = settings.FEATHERLESS_API_KEY
    if not api_key:
        raise HTTPException(500, "Missing FEATHERLESS_API_KEY")

    payload = {
        "model": settings.FEATHERLESS_MODEL,
        "messages": build_messages(req.message),
    }

    try:
        r = await client.post(
            settings.FEATHERLESS_URL,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json"
            },
            json=payload
        )
        r.raise_for_status()
        data = r.json()
    except httpx.TimeoutException as e:
        logger.error("Featherless request timed out: %s", e)
        raise HTTPException(504, "Upstream timeout")
    except httpx.HTTPStatusError as e:
        logger.error("Featherless returned %s: %s", e.response.status_code, e.response.text[:200])
        raise HTTPException(502, f"Upstream error: {e.response.status_code}")
    except httpx.RequestError as e:
        logger.error("Featherless request failed: %r", e)
        raise HTTPException(502, "Upstream unavailable")
    except ValueError as e:
        logger.error("Featherless returned a non-JSON body: %s", e)
        raise HTTPException(502, "Upstream returned invalid JSON")

    return ChatResponse(reply=extract_reply(data))
