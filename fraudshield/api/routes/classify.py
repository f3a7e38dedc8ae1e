"""
FraudShield Classification Routes

Endpoints for classifying URLs, emails and SMS messages, and for the
link-click and rendered-content interception hooks.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from fraudshield.api.dependencies import get_monitor
from fraudshield.models.detection import AnalysisResult, ContentCategory
from fraudshield.services.detection import FraudMonitor
from fraudshield.utils.constants import MAX_CONTENT_LENGTH
from fraudshield.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["classification"])


class ClassifyRequest(BaseModel):
    """Request model for classification."""
    category: str = Field(..., description="Content category: url, email or sms")
    content: str = Field("", max_length=MAX_CONTENT_LENGTH, description="Text to analyze")
    generate: bool = Field(False, description="Manual-test flag; classification is unchanged")


class LinkClickRequest(BaseModel):
    """A link the user is about to open."""
    href: str = Field(..., max_length=MAX_CONTENT_LENGTH)


class RenderedContentRequest(BaseModel):
    """Text that was just displayed."""
    text: str = Field(..., max_length=MAX_CONTENT_LENGTH)


class ClassifyResponse(BaseModel):
    """Classification outcome; result is null when there is nothing to report."""
    result: Optional[AnalysisResult] = None
    protection_enabled: bool = True


@router.post("/classify", response_model=ClassifyResponse)
def classify_content(
    request: ClassifyRequest,
    monitor: FraudMonitor = Depends(get_monitor),
):
    """
    Classify a URL, email or SMS message.

    Returns:
        The analysis result, or null for blank or unremarkable content
    """
    try:
        result = monitor.manual_test(request.category, request.content, generate=request.generate)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)

    return ClassifyResponse(result=result, protection_enabled=monitor.is_enabled)


@router.post("/intercept/link", response_model=ClassifyResponse)
def intercept_link(
    request: LinkClickRequest,
    monitor: FraudMonitor = Depends(get_monitor),
):
    """Check a link before it is opened."""
    result = monitor.on_link_click(request.href)
    return ClassifyResponse(result=result, protection_enabled=monitor.is_enabled)


@router.post("/intercept/content", response_model=ClassifyResponse)
def intercept_content(
    request: RenderedContentRequest,
    monitor: FraudMonitor = Depends(get_monitor),
):
    """Check newly displayed content that looks like an email."""
    result = monitor.on_content_rendered(request.text)
    return ClassifyResponse(result=result, protection_enabled=monitor.is_enabled)
