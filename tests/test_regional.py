import pytest

from src.cuisine.models import CuisineDescriptor, RegionalEtiquette, RegionalPairings
from src.cuisine.tools.regional import RegionalTool

PAIRING_REGIONS = [
    "east_asia", "southeast_asia", "south_asia", "middle_east", "mediterranean",
    "latin_america", "caribbean", "west_africa", "east_africa", "north_africa",
]
ETIQUETTE_REGIONS = [
    "east_asia", "southeast_asia", "south_asia", "middle_east", "mediterranean",
    "latin_america",
]


class TestPairings:

    def test_east_asia(self):
        result = RegionalTool.get_pairings("east_asia")

        assert result.main_dishes == ["Steamed Fish", "Stir-fried Vegetables", "Clay Pot Rice"]
        assert result.side_dishes == ["Pickled Vegetables", "Cold Salad", "Steamed Eggs"]
        assert result.desserts == ["Red Bean Soup", "Mango Pudding", "Egg Tarts"]
        assert result.beverages == ["Jasmine Tea", "Oolong Tea", "Rice Wine"]

    def test_unknown_region_is_empty(self):
        assert RegionalTool.get_pairings("atlantis") == RegionalPairings()

    def test_lookup_is_case_sensitive(self):
        assert RegionalTool.get_pairings("East_Asia").main_dishes == []

    def test_every_region_has_three_per_category(self):
        for region in PAIRING_REGIONS:
            result = RegionalTool.get_pairings(region)
            for dishes in (result.main_dishes, result.side_dishes, result.desserts, result.beverages):
                assert len(dishes) == 3, region

    def test_returned_lists_are_fresh(self):
        first = RegionalTool.get_pairings("caribbean")
        first.main_dishes.append("Pepperpot")

        second = RegionalTool.get_pairings("caribbean")

        assert second.main_dishes == ["Jerk Chicken", "Curry Goat", "Ackee and Saltfish"]

    def test_find_complementary_dishes(self):
        cuisine = CuisineDescriptor(region="north_africa", key_ingredients=["cumin"])

        result = RegionalTool.find_complementary_dishes(cuisine)

        assert result.main_dishes == ["Couscous", "Tagine", "Shakshuka"]


class TestEtiquette:

    def test_mediterranean_serving_order(self):
        result = RegionalTool.get_etiquette("mediterranean")

        assert result.serving_order == [
            "Antipasti/appetizers",
            "Pasta or rice dish",
            "Main protein dish",
            "Salad course",
            "Cheese and fruit",
            "Dessert and coffee",
        ]

    def test_pairing_only_region_has_no_etiquette(self):
        assert RegionalTool.get_etiquette("west_africa") == RegionalEtiquette()
        assert RegionalTool.get_pairings("west_africa").main_dishes != []

    def test_unknown_region_is_empty(self):
        result = RegionalTool.get_etiquette("atlantis")

        assert result.presentation == []
        assert result.customs == []
        assert result.taboos == []
        assert result.serving_order == []

    def test_populated_regions_have_three_to_six_entries(self):
        for region in ETIQUETTE_REGIONS:
            result = RegionalTool.get_etiquette(region)
            for values in (result.presentation, result.customs, result.taboos, result.serving_order):
                assert 3 <= len(values) <= 6, region

    def test_get_serving_etiquette(self):
        result = RegionalTool.get_serving_etiquette("east_asia")

        assert "Don't stick chopsticks vertically in rice" in result.taboos


class TestRegionCatalog:

    def test_lists_all_pairing_regions(self):
        regions = RegionalTool.list_regions()

        assert [r.code for r in regions] == sorted(PAIRING_REGIONS)

    def test_etiquette_flags(self):
        regions = {r.code: r for r in RegionalTool.list_regions()}

        assert all(r.has_pairings for r in regions.values())
        assert sorted(c for c, r in regions.items() if r.has_etiquette) == sorted(ETIQUETTE_REGIONS)


class TestTablesAreReadOnly:

    def test_pairing_lists_cannot_grow(self):
        from src.cuisine.data.knowledge_base import REGIONAL_PAIRINGS

        with pytest.raises(AttributeError):
            REGIONAL_PAIRINGS["east_asia"]["main_dishes"].append("Hotpot")

        assert RegionalTool.get_pairings("east_asia").main_dishes == [
            "Steamed Fish", "Stir-fried Vegetables", "Clay Pot Rice"
        ]

    def test_region_entries_cannot_be_replaced(self):
        from src.cuisine.data.knowledge_base import REGIONAL_ETIQUETTE

        with pytest.raises(TypeError):
            REGIONAL_ETIQUETTE["east_asia"]["taboos"] = []

    def test_tables_cannot_gain_regions(self):
        from src.cuisine.data.knowledge_base import REGIONAL_PAIRINGS

        with pytest.raises(TypeError):
            REGIONAL_PAIRINGS["atlantis"] = {}

    def test_substitution_candidates_are_tuples(self):
        from src.cuisine.data.knowledge_base import SUBSTITUTION_RULES

        with pytest.raises(AttributeError):
            SUBSTITUTION_RULES["ghee"]["substitutes"].append("lard")
