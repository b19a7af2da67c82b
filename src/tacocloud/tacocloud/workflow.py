"""Request-level entry points for designing tacos and placing orders.

Each method handles one inbound submission for one session and returns
either a redirect target or the violations to show the customer. Nothing
here renders views or speaks HTTP; the caller owns that.
"""

from collections.abc import Sequence

from loguru import logger
from pydantic import BaseModel, Field

from .builder import build_taco
from .catalog import IngredientCatalog, load_catalog
from .errors import OrderValidationError, TacoValidationError
from .finalizer import checkout
from .models import Confirmation, Ingredient, OrderDetails, TacoOrder, Violation
from .sessions import OrderSessionStore

DESIGN_VIEW = "design"
ORDER_FORM_VIEW = "orderForm"
CURRENT_ORDER_REDIRECT = "/orders/current"
HOME_REDIRECT = "/"


class DesignForm(BaseModel):
    """What the taco design page needs to render."""

    ingredients: dict[str, list[Ingredient]]
    order: TacoOrder


class SubmissionResult(BaseModel):
    """Outcome of one submission: a redirect on success, a view plus errors otherwise."""

    success: bool
    redirect: str | None = None
    view: str | None = None
    violations: list[Violation] = Field(default_factory=list)
    confirmation: Confirmation | None = None

    def errors_by_field(self) -> dict[str, list[str]]:
        grouped: dict[str, list[str]] = {}
        for violation in self.violations:
            grouped.setdefault(violation.field or "", []).append(violation.message)
        return grouped


class TacoCloud:
    """Wires the catalog, session store, builder, and finalizer together."""

    def __init__(
        self,
        catalog: IngredientCatalog | None = None,
        store: OrderSessionStore | None = None,
    ):
        self.catalog = catalog if catalog is not None else load_catalog()
        self.store = store if store is not None else OrderSessionStore()

    def design_form(self, session_id: str) -> DesignForm:
        return DesignForm(
            ingredients=self.catalog.grouped_by_type(),
            order=self.store.current_order(session_id),
        )

    def process_taco(
        self, session_id: str, name: str | None, ingredient_ids: Sequence[str] | None
    ) -> SubmissionResult:
        try:
            taco = build_taco(name, ingredient_ids, self.catalog)
        except TacoValidationError as e:
            return SubmissionResult(
                success=False, view=DESIGN_VIEW, violations=e.violations
            )

        self.store.append_taco(session_id, taco)
        logger.info("Processing taco: {} {}", taco.name, taco.ingredient_ids)
        return SubmissionResult(success=True, redirect=CURRENT_ORDER_REDIRECT)

    def order_form(self, session_id: str) -> TacoOrder:
        return self.store.current_order(session_id)

    def process_order(self, session_id: str, details: OrderDetails) -> SubmissionResult:
        try:
            confirmation = checkout(self.store, session_id, details)
        except OrderValidationError as e:
            return SubmissionResult(
                success=False, view=ORDER_FORM_VIEW, violations=e.violations
            )

        return SubmissionResult(
            success=True, redirect=HOME_REDIRECT, confirmation=confirmation
        )
