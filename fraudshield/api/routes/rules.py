"""
FraudShield Rules API Routes

Read-only view of the rule tables.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from fraudshield.api.dependencies import get_engine
from fraudshield.models.detection import ContentCategory
from fraudshield.services.detection import DetectionEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rules", tags=["rules"])


class RuleResponse(BaseModel):
    """One weighted pattern."""
    pattern: str
    reason: str
    weight: float


class CategoryRulesResponse(BaseModel):
    """Rule table of one category."""
    category: ContentCategory
    rules: List[RuleResponse]
    safe_indicators: List[str]


class RulesResponse(BaseModel):
    """All rule tables."""
    categories: List[CategoryRulesResponse]
    summary: Dict[str, Any]


@router.get("", response_model=RulesResponse)
async def list_rules(
    engine: DetectionEngine = Depends(get_engine),
):
    """
    List rule tables and safe indicators for every category.
    """
    categories = []
    for category in ContentCategory:
        categories.append(CategoryRulesResponse(
            category=category,
            rules=[
                RuleResponse(pattern=r.pattern.pattern, reason=r.reason, weight=r.weight)
                for r in engine.registry.get_rules(category)
            ],
            safe_indicators=[s.pattern.pattern for s in engine.registry.get_safe_indicators(category)],
        ))

    return RulesResponse(categories=categories, summary=engine.get_rule_summary())
