"""Shared pytest fixtures for tacocloud tests."""

from pathlib import Path

import pytest

from tacocloud.catalog import IngredientCatalog
from tacocloud.models import OrderDetails, Taco, TacoOrder
from tacocloud.sessions import OrderSessionStore
from tacocloud.workflow import TacoCloud

# Path to the packaged ingredient data relative to project root
INGREDIENTS_JSON_PATH = (
    Path(__file__).resolve().parents[2]
    / "src"
    / "tacocloud"
    / "tacocloud"
    / "data"
    / "ingredients.json"
)

# Passes the Luhn check
VALID_CARD_NUMBER = "4111111111111111"


@pytest.fixture
def catalog() -> IngredientCatalog:
    """Load the reference ingredient catalog from JSON."""
    return IngredientCatalog.from_json_file(INGREDIENTS_JSON_PATH)


@pytest.fixture
def store() -> OrderSessionStore:
    return OrderSessionStore()


@pytest.fixture
def app(catalog: IngredientCatalog, store: OrderSessionStore) -> TacoCloud:
    return TacoCloud(catalog=catalog, store=store)


@pytest.fixture
def taco(catalog: IngredientCatalog) -> Taco:
    """A valid carnitas taco."""
    return Taco(
        name="Carnitas Classic",
        ingredients=(catalog.by_id("FLTO"), catalog.by_id("CARN"), catalog.by_id("SLSA")),
    )


@pytest.fixture
def valid_details() -> OrderDetails:
    """Checkout details that pass every rule."""
    return OrderDetails(
        delivery_name="Ada Lovelace",
        delivery_street="12 Analytical Way",
        delivery_city="London",
        delivery_state="LN",
        delivery_zip="10001",
        cc_number=VALID_CARD_NUMBER,
        cc_expiration="05/29",
        cc_cvv="123",
    )


@pytest.fixture
def valid_order(valid_details: OrderDetails, taco: Taco) -> TacoOrder:
    """An order with one taco and valid checkout details."""
    order = valid_details.apply_to(TacoOrder())
    order.add_taco(taco)
    return order
