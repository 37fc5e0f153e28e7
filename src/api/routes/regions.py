import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.cuisine import RegionalTool
from src.cuisine.models import RegionalEtiquette, RegionalPairings, RegionInfo

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/regions", tags=["regions"])


def get_regional_tool() -> RegionalTool:
    return RegionalTool()


@router.get("", response_model=list[RegionInfo])
async def list_regions(
    tool: Annotated[RegionalTool, Depends(get_regional_tool)],
):
    """List region codes and which reference tables cover them."""
    return tool.list_regions()


@router.get("/{region_code}/pairings", response_model=RegionalPairings)
async def get_pairings(
    region_code: str,
    request: Request,
    tool: Annotated[RegionalTool, Depends(get_regional_tool)],
):
    """Traditional pairings; empty lists for unknown regions."""
    request_id = getattr(request.state, "request_id", "unknown")
    return tool.get_pairings(region_code, request_id=request_id)


@router.get("/{region_code}/etiquette", response_model=RegionalEtiquette)
async def get_etiquette(
    region_code: str,
    request: Request,
    tool: Annotated[RegionalTool, Depends(get_regional_tool)],
):
    """Serving etiquette; empty lists for unknown regions."""
    request_id = getattr(request.state, "request_id", "unknown")
    return tool.get_etiquette(region_code, request_id=request_id)
