from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies import get_gateway
from app.schemas import ChatRequest, ChatResponse, ProviderTestResponse
from gateway.errors import ValidationError
from gateway.gateway import AdviceGateway


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/test-gemini", response_model=ProviderTestResponse)
def test_gemini(gateway: AdviceGateway = Depends(get_gateway)):
    try:
        is_working = gateway.test_provider()
    except Exception as e:
        logger.exception("Error testing Gemini API: %s", e)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Failed to test Gemini API", "message": str(e)},
        )

    return ProviderTestResponse(
        success=is_working,
        message=(
            "Gemini API is working correctly"
            if is_working
            else "Gemini API is not working. The application is using mock responses."
        ),
    )


@router.post("/chat", response_model=ChatResponse)
def chat(req: Optional[ChatRequest] = None, gateway: AdviceGateway = Depends(get_gateway)):
    req = req or ChatRequest()
    logger.info(
        "Incoming chat: session_id=%s message_len=%s",
        req.session_id,
        len(req.message or ""),
    )
    try:
        result = gateway.send_chat(req.message, req.session_id)
    except ValidationError:
        raise
    except Exception as e:
        logger.exception("Financial chat failed: %s", e)
        return JSONResponse(status_code=500, content={"error": "Failed to get financial advice"})

    logger.info(
        "Chat answered: session_id=%s continued=%s chars=%s",
        result.session_id,
        result.continued,
        len(result.text),
    )
    return ChatResponse(response=result.text, sessionId=result.session_id)
