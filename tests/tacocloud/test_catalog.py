"""Tests for the ingredient catalog."""

import pydantic
import pytest

from tacocloud.catalog import IngredientCatalog
from tacocloud.enums import IngredientType


class TestAllIngredients:
    """Verify the full reference catalog."""

    def test_catalog_has_ten_ingredients(self, catalog: IngredientCatalog):
        """The reference catalog ships 10 ingredients."""
        assert len(catalog.all_ingredients()) == 10
        assert len(catalog) == 10

    def test_two_per_type(self, catalog: IngredientCatalog):
        """Each of the five types has exactly two ingredients."""
        for ingredient_type in IngredientType:
            assert len(catalog.by_type(ingredient_type)) == 2

    def test_reference_order(self, catalog: IngredientCatalog):
        """Ingredients come back in the order the data lists them."""
        ids = [i.id for i in catalog.all_ingredients()]
        assert ids == [
            "FLTO", "COTO", "GRBF", "CARN", "TMTO",
            "LETC", "CHED", "JACK", "SLSA", "SRCR",
        ]

    def test_returned_list_is_a_copy(self, catalog: IngredientCatalog):
        """Mutating the returned list does not change the catalog."""
        catalog.all_ingredients().clear()
        assert len(catalog.all_ingredients()) == 10


class TestById:
    """Verify lookups by short code."""

    def test_by_id_matches_all_ingredients(self, catalog: IngredientCatalog):
        """by_id returns the same Ingredient all_ingredients lists under that id."""
        for ingredient in catalog.all_ingredients():
            assert catalog.by_id(ingredient.id) == ingredient

    def test_by_id_miss_returns_none(self, catalog: IngredientCatalog):
        """Unknown ids are reported as None, not raised."""
        assert catalog.by_id("NOPE") is None
        assert catalog.by_id("") is None

    def test_lookup_is_case_sensitive(self, catalog: IngredientCatalog):
        """Ids are exact short codes."""
        assert catalog.by_id("flto") is None

    def test_contains(self, catalog: IngredientCatalog):
        """Membership checks use ingredient ids."""
        assert "CHED" in catalog
        assert "NOPE" not in catalog


class TestByType:
    """Verify filtering and grouping by ingredient type."""

    def test_wraps(self, catalog: IngredientCatalog):
        """by_type filters and keeps catalog order."""
        wraps = catalog.by_type(IngredientType.WRAP)
        assert [w.name for w in wraps] == ["Flour Tortilla", "Corn Tortilla"]

    def test_grouped_by_type_keys(self, catalog: IngredientCatalog):
        """Grouping is keyed by lowercase type name, in enum order."""
        grouped = catalog.grouped_by_type()
        assert list(grouped) == ["wrap", "protein", "veggies", "cheese", "sauce"]
        assert [i.id for i in grouped["cheese"]] == ["CHED", "JACK"]


class TestLoading:
    """Verify loading catalogs from data."""

    def test_metadata_loaded(self, catalog: IngredientCatalog):
        """Catalog name comes from the metadata block."""
        assert catalog.catalog_name == "Taco Cloud Ingredients"

    def test_from_dict_without_metadata(self):
        """Metadata is optional."""
        catalog = IngredientCatalog.from_dict(
            {"ingredients": [{"id": "FLTO", "name": "Flour Tortilla", "type": "wrap"}]}
        )
        assert catalog.by_id("FLTO").type == IngredientType.WRAP

    def test_duplicate_ids_rejected(self):
        """Two ingredients with the same id is a data error."""
        with pytest.raises(pydantic.ValidationError, match="duplicate ingredient id"):
            IngredientCatalog.from_dict(
                {
                    "ingredients": [
                        {"id": "FLTO", "name": "Flour Tortilla", "type": "wrap"},
                        {"id": "FLTO", "name": "Other Tortilla", "type": "wrap"},
                    ]
                }
            )

    def test_unknown_type_rejected(self):
        """Types outside the five categories fail to load."""
        with pytest.raises(pydantic.ValidationError):
            IngredientCatalog.from_dict(
                {"ingredients": [{"id": "RICE", "name": "Rice", "type": "grain"}]}
            )

    def test_ingredients_are_immutable(self, catalog: IngredientCatalog):
        """Catalog ingredients cannot be modified."""
        ingredient = catalog.by_id("FLTO")
        with pytest.raises(pydantic.ValidationError):
            ingredient.name = "Changed"
