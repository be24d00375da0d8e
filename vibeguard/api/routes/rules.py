"""
Rule Routes — GET /rules and POST /score
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from vibeguard.api.dependencies import get_catalog
from vibeguard.core.catalog import RuleCatalog
from vibeguard.core.scorer import score
from vibeguard.models.rule_models import RuleInfo
from vibeguard.models.scan_models import ScoreRequest
from vibeguard.models.score_models import ScoreResult

router = APIRouter()


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules(
    language: str | None = None,
    catalog: RuleCatalog = Depends(get_catalog),
):
    """The catalog, or only the rules that apply to ``language``."""
    rules = catalog.rules if language is None else catalog.applicable_rules(language)
    return [RuleInfo.from_rule(rule) for rule in rules]


@router.post("/score", response_model=ScoreResult)
async def score_findings(req: ScoreRequest):
    """Score an arbitrary findings list, e.g. local results merged with an external audit."""
    return score(req.findings)
