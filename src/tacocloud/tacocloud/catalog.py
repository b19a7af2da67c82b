"""Ingredient catalog: the fixed set of ingredients a customer may choose from."""

import json
from pathlib import Path
from typing import Self

from loguru import logger
from pydantic import BaseModel, PrivateAttr, model_validator

from .config import get_settings
from .enums import IngredientType
from .models import Ingredient


class IngredientCatalog(BaseModel):
    catalog_name: str = "Taco Cloud Ingredients"
    catalog_version: str = "1"
    ingredients: list[Ingredient]

    _by_id: dict[str, Ingredient] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def index_by_id(self) -> Self:
        index: dict[str, Ingredient] = {}
        for ingredient in self.ingredients:
            if ingredient.id in index:
                raise ValueError(f"duplicate ingredient id: {ingredient.id}")
            index[ingredient.id] = ingredient
        self._by_id = index
        return self

    def __len__(self) -> int:
        return len(self.ingredients)

    def __contains__(self, ingredient_id: object) -> bool:
        return ingredient_id in self._by_id

    def all_ingredients(self) -> list[Ingredient]:
        return list(self.ingredients)

    def by_id(self, ingredient_id: str) -> Ingredient | None:
        """Look up an ingredient by its short code.

        Returns None when the id is not in the catalog. The caller decides
        whether a miss is an error.
        """
        ingredient = self._by_id.get(ingredient_id)
        if ingredient is None:
            logger.debug("Ingredient lookup miss: {!r}", ingredient_id)
        return ingredient

    def by_type(self, ingredient_type: IngredientType) -> list[Ingredient]:
        return [i for i in self.ingredients if i.type == ingredient_type]

    def grouped_by_type(self) -> dict[str, list[Ingredient]]:
        """Ingredients keyed by lowercase type name, every type present."""
        return {t.value: self.by_type(t) for t in IngredientType}

    @classmethod
    def from_dict(cls, data: dict) -> "IngredientCatalog":
        """Load a catalog from a dictionary (matching the JSON structure)."""
        metadata = data.get("metadata", {})
        return cls(
            **metadata,
            ingredients=[Ingredient(**item) for item in data["ingredients"]],
        )

    @classmethod
    def from_json_file(cls, path: str | Path) -> "IngredientCatalog":
        """Load a catalog from a JSON file path."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_dict(data)


def load_catalog(path: str | Path | None = None) -> IngredientCatalog:
    """Load the ingredient catalog, defaulting to the configured data file."""
    if path is None:
        path = get_settings().ingredients_json_path
    catalog = IngredientCatalog.from_json_file(path)
    logger.info(
        "Catalog loaded: {} v{} ({} ingredients)",
        catalog.catalog_name,
        catalog.catalog_version,
        len(catalog),
    )
    return catalog
