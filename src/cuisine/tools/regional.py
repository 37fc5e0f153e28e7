import logging

from langsmith import traceable

from src.cuisine.data.knowledge_base import REGIONAL_ETIQUETTE, REGIONAL_PAIRINGS
from src.cuisine.models import (
    CuisineDescriptor,
    RegionalEtiquette,
    RegionalPairings,
    RegionInfo,
)

logger = logging.getLogger(__name__)


class RegionalTool:
    """
    Lookups against the regional pairing and etiquette tables.

    Region codes match exactly. Unknown codes return empty lists.
    """

    @staticmethod
    @traceable(name="regional_tool_pairings")
    def get_pairings(region_code: str, request_id: str = None) -> RegionalPairings:
        """
        Traditional dishes that accompany a region's cuisine.

        Parameters
        ----------
        region_code : str
            Region key such as ``east_asia``
        request_id : str, optional
            Request ID for tracing

        Returns
        -------
        RegionalPairings
            Main dishes, sides, desserts and beverages
        """
        entry = REGIONAL_PAIRINGS.get(region_code)
        if entry is None:
            logger.info(f"[{request_id}] No pairings for region '{region_code}'")
            return RegionalPairings()

        return RegionalPairings(
            main_dishes=list(entry["main_dishes"]),
            side_dishes=list(entry["side_dishes"]),
            desserts=list(entry["desserts"]),
            beverages=list(entry["beverages"])
        )

    @staticmethod
    @traceable(name="regional_tool_etiquette")
    def get_etiquette(region_code: str, request_id: str = None) -> RegionalEtiquette:
        """
        Serving etiquette for a region.

        Parameters
        ----------
        region_code : str
            Region key such as ``east_asia``
        request_id : str, optional
            Request ID for tracing

        Returns
        -------
        RegionalEtiquette
            Presentation, customs, taboos and serving order
        """
        entry = REGIONAL_ETIQUETTE.get(region_code)
        if entry is None:
            logger.info(f"[{request_id}] No etiquette for region '{region_code}'")
            return RegionalEtiquette()

        return RegionalEtiquette(
            presentation=list(entry["presentation"]),
            customs=list(entry["customs"]),
            taboos=list(entry["taboos"]),
            serving_order=list(entry["serving_order"])
        )

    @classmethod
    def find_complementary_dishes(
        cls,
        cuisine: CuisineDescriptor,
        request_id: str = None
    ) -> RegionalPairings:
        return cls.get_pairings(cuisine.region, request_id=request_id)

    @classmethod
    def get_serving_etiquette(cls, region: str, request_id: str = None) -> RegionalEtiquette:
        return cls.get_etiquette(region, request_id=request_id)

    @staticmethod
    def list_regions() -> list[RegionInfo]:
        """All known region codes, flagged by which tables hold data."""
        codes = sorted(set(REGIONAL_PAIRINGS) | set(REGIONAL_ETIQUETTE))
        return [
            RegionInfo(
                code=code,
                has_pairings=code in REGIONAL_PAIRINGS,
                has_etiquette=code in REGIONAL_ETIQUETTE
            )
            for code in codes
        ]
