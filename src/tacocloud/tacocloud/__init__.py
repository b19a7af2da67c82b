"""Taco Cloud: design tacos, collect them into an order, check out."""

from .builder import build_taco, validate_taco
from .catalog import IngredientCatalog, load_catalog
from .enums import IngredientType, ViolationCode
from .errors import (
    IntegrityError,
    OrderValidationError,
    SessionIntegrityError,
    TacoCloudError,
    TacoValidationError,
    ValidationError,
)
from .finalizer import checkout, finalize_order, validate_order
from .models import Confirmation, Ingredient, OrderDetails, Taco, TacoOrder, Violation
from .sessions import OrderSessionStore
from .workflow import DesignForm, SubmissionResult, TacoCloud

__all__ = [
    "Confirmation",
    "DesignForm",
    "Ingredient",
    "IngredientCatalog",
    "IngredientType",
    "IntegrityError",
    "OrderDetails",
    "OrderSessionStore",
    "OrderValidationError",
    "SessionIntegrityError",
    "SubmissionResult",
    "Taco",
    "TacoCloud",
    "TacoCloudError",
    "TacoOrder",
    "TacoValidationError",
    "ValidationError",
    "Violation",
    "ViolationCode",
    "build_taco",
    "checkout",
    "finalize_order",
    "load_catalog",
    "validate_order",
    "validate_taco",
]
