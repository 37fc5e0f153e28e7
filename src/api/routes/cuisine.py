import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from langsmith import traceable

from src.api.schemas import (
    AuthenticityRequest,
    GuideRequest,
    SubstitutionRequest,
    SubstitutionResponse,
)
from src.cuisine import AuthenticityTool, SubstitutionTool, build_cultural_guide
from src.cuisine.models import AuthenticityAssessment, CulturalGuide, SubstitutionRule

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/cuisine", tags=["cuisine"])


def get_substitution_tool() -> SubstitutionTool:
    return SubstitutionTool()


def get_authenticity_tool() -> AuthenticityTool:
    return AuthenticityTool()


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


@router.post("/substitutions", response_model=SubstitutionResponse)
@traceable(name="find_substitutions_endpoint")
async def find_substitutions(
    body: SubstitutionRequest,
    request: Request,
    tool: Annotated[SubstitutionTool, Depends(get_substitution_tool)],
):
    """
    Suggest substitutes for authentic ingredients.

    Ingredients without a rule are reported in ``skipped_ingredients``.
    """
    request_id = _request_id(request)
    logger.info(
        f"[{request_id}] Substitutions for {len(body.authentic_ingredients)} ingredients, "
        f"{len(body.pantry)} pantry items"
    )

    substitutions = tool.find_substitutes(
        body.authentic_ingredients,
        body.pantry,
        request_id=request_id
    )
    skipped = [
        ingredient for ingredient in body.authentic_ingredients
        if tool.get_rule(ingredient) is None
    ]

    return SubstitutionResponse(
        request_id=request_id,
        substitutions=substitutions,
        skipped_ingredients=skipped
    )


@router.get("/substitutions/{ingredient}", response_model=SubstitutionRule)
async def get_substitution_rule(
    ingredient: str,
    tool: Annotated[SubstitutionTool, Depends(get_substitution_tool)],
):
    """Return the static substitution rule for one ingredient."""
    rule = tool.get_rule(ingredient)
    if rule is None:
        raise HTTPException(
            status_code=404,
            detail=f"No substitution rule for ingredient: {ingredient}"
        )
    return rule


@router.post("/authenticity", response_model=AuthenticityAssessment)
@traceable(name="score_authenticity_endpoint")
async def score_authenticity(
    body: AuthenticityRequest,
    request: Request,
    tool: Annotated[AuthenticityTool, Depends(get_authenticity_tool)],
):
    """Score the authenticity impact of the chosen substitutions."""
    return tool.score(body.substitutions, request_id=_request_id(request))


@router.post("/guide", response_model=CulturalGuide)
@traceable(name="cultural_guide_endpoint")
async def cultural_guide(body: GuideRequest, request: Request):
    """
    Combined substitutions, authenticity score, pairings and etiquette.

    The region comes from the request, falling back to the recipe's region.
    """
    return build_cultural_guide(
        body.recipe,
        body.pantry,
        region=body.region,
        request_id=_request_id(request)
    )
