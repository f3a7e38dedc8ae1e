"""
FraudShield Detection Data Models

Pydantic models for detection engine results.
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ContentCategory(str, Enum):
    """Kind of content being analyzed; selects rule table and heuristics."""
    URL = "url"
    EMAIL = "email"
    SMS = "sms"


class ThreatLevel(str, Enum):
    """Threat level classification."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Prediction(str, Enum):
    """Verdict reported to result listeners."""
    SAFE = "safe"
    SUSPICIOUS = "suspicious"
    MALICIOUS = "malicious"


class AnalysisResult(BaseModel):
    """Outcome of one evaluation. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique, time-derived result identifier")
    category: ContentCategory = Field(..., description="Content category")
    content_preview: str = Field(..., description="Content truncated to the preview length")
    threat_level: ThreatLevel = Field(..., description="Threat level classification")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Detection confidence 0-1")
    reasons: List[str] = Field(..., min_length=1, description="Reasons in discovery order")
    timestamp: datetime = Field(..., description="Evaluation time (UTC)")
    blocked: bool = Field(..., description="Whether the content should be blocked")


class FraudResult(BaseModel):
    """Standardized result handed to result listeners."""
    id: str
    type: ContentCategory
    content: str
    prediction: Prediction
    confidence: float = Field(..., ge=0.0, le=1.0)
    reasons: List[str] = Field(default_factory=list)
    timestamp: datetime


class AlertStats(BaseModel):
    """Read-only view of the alert history counters."""
    total_evaluated: int = Field(0, ge=0, description="Results recorded since last clear")
    total_blocked: int = Field(0, ge=0, description="Blocked results since last clear")
    history_size: int = Field(0, ge=0, description="Results currently retained")
    capacity: int = Field(..., gt=0, description="Maximum retained results")
    by_threat_level: Dict[str, int] = Field(default_factory=dict)
