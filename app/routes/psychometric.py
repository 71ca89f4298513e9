from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies import get_gateway
from app.schemas import AnalyzeRequest, AnalyzeResponse, QuestionsResponse
from gateway.core.questions import list_questions
from gateway.errors import ValidationError
from gateway.gateway import AdviceGateway


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(req: Optional[AnalyzeRequest] = None, gateway: AdviceGateway = Depends(get_gateway)):
    responses = req.responses if req else None
    try:
        analysis = gateway.analyze(responses)
    except ValidationError:
        raise
    except Exception as e:
        logger.exception("Psychometric analysis failed: %s", e)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to analyze psychometric responses"},
        )
    return AnalyzeResponse(analysis=analysis.to_payload())


@router.get("/questions", response_model=QuestionsResponse)
def questions():
    return QuestionsResponse(questions=list_questions())
