import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any, Optional

from langsmith import traceable

from src.cuisine.data.knowledge_base import SUBSTITUTION_RULES
from src.cuisine.models import CulturalRecipe, IngredientSubstitution, SubstitutionRule

logger = logging.getLogger(__name__)

_RULES = MappingProxyType({
    name: SubstitutionRule(**rule) for name, rule in SUBSTITUTION_RULES.items()
})


def _pantry_name(item: Any) -> str:
    if isinstance(item, Mapping):
        return str(item.get("name", ""))
    return str(getattr(item, "name", ""))


class SubstitutionTool:
    """
    Resolve substitutes for authentic recipe ingredients.

    Candidates come from a static rule table. A candidate the user already
    has in the pantry wins over the rule's default recommendation.
    """

    @staticmethod
    def get_rule(ingredient: str) -> Optional[SubstitutionRule]:
        """Case-insensitive rule lookup, None for unknown ingredients."""
        return _RULES.get(ingredient.lower())

    @staticmethod
    def known_ingredients() -> list[str]:
        return sorted(_RULES)

    @staticmethod
    @traceable(name="substitution_tool_find")
    def find_substitutes(
        authentic_ingredients: Sequence[str],
        pantry: Iterable[Any],
        request_id: str = None
    ) -> list[IngredientSubstitution]:
        """
        Suggest one substitute per known authentic ingredient.

        Parameters
        ----------
        authentic_ingredients : Sequence[str]
            Ingredient names in recipe order
        pantry : Iterable
            Pantry items exposing a ``name``
        request_id : str, optional
            Request ID for tracing

        Returns
        -------
        list[IngredientSubstitution]
            Suggestions in input order; unknown ingredients are skipped
        """
        pantry_names = [_pantry_name(item).lower() for item in pantry]
        substitutions = []

        for ingredient in authentic_ingredients:
            rule = _RULES.get(ingredient.lower())
            if rule is None:
                logger.debug(f"[{request_id}] No substitution rule for '{ingredient}'")
                continue

            available = next(
                (
                    candidate for candidate in rule.substitutes
                    if any(candidate.lower() in name for name in pantry_names)
                ),
                None
            )

            substitutions.append(IngredientSubstitution(
                original=ingredient,
                substitute=available if available is not None else rule.substitutes[0],
                notes=rule.notes,
                flavor_impact=rule.flavor_impact
            ))

        logger.info(
            f"[{request_id}] Resolved {len(substitutions)} substitutions "
            f"for {len(authentic_ingredients)} ingredients against {len(pantry_names)} pantry items",
            extra={"request_id": request_id}
        )
        return substitutions

    @classmethod
    def find_for_recipe(
        cls,
        recipe: CulturalRecipe,
        pantry: Iterable[Any],
        request_id: str = None
    ) -> list[IngredientSubstitution]:
        """Resolve substitutes for a recipe's authentic ingredients."""
        return cls.find_substitutes(
            recipe.authentic_ingredients,
            pantry,
            request_id=request_id
        )
