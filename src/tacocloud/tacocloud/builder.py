"""Taco builder: turns a submitted name and ingredient ids into a Taco."""

from collections.abc import Sequence

from loguru import logger

from .catalog import IngredientCatalog
from .enums import ViolationCode
from .errors import TacoValidationError
from .models import Taco, Violation

MIN_NAME_LENGTH = 5


def validate_taco(
    name: str | None,
    ingredient_ids: Sequence[str] | None,
    catalog: IngredientCatalog,
) -> list[Violation]:
    """Check a taco submission and return every violation found.

    An empty list means the submission is valid.
    """
    violations: list[Violation] = []

    if name is None:
        violations.append(
            Violation(
                code=ViolationCode.INVALID_NAME,
                field="name",
                message="Taco name cannot be null",
            )
        )
    elif len(name) < MIN_NAME_LENGTH:
        violations.append(
            Violation(
                code=ViolationCode.INVALID_NAME,
                field="name",
                message=f"Name must be at least {MIN_NAME_LENGTH} characters long",
            )
        )

    if not ingredient_ids:
        violations.append(
            Violation(
                code=ViolationCode.EMPTY_INGREDIENT_LIST,
                field="ingredients",
                message="You must choose at least 1 ingredient",
            )
        )
    else:
        for ingredient_id in ingredient_ids:
            if catalog.by_id(ingredient_id) is None:
                violations.append(
                    Violation(
                        code=ViolationCode.INGREDIENT_NOT_FOUND,
                        field="ingredients",
                        message=f"Unknown ingredient: {ingredient_id}",
                    )
                )

    return violations


def build_taco(
    name: str | None,
    ingredient_ids: Sequence[str] | None,
    catalog: IngredientCatalog,
) -> Taco:
    """Build a Taco with ingredients in submission order.

    Raises:
        TacoValidationError: with every violation, if the submission is invalid.
    """
    violations = validate_taco(name, ingredient_ids, catalog)
    if violations:
        logger.debug(
            "Taco rejected ({} violations): {}",
            len(violations),
            [v.code.value for v in violations],
        )
        raise TacoValidationError(violations)

    ingredients = tuple(catalog.by_id(ingredient_id) for ingredient_id in ingredient_ids)
    return Taco(name=name, ingredients=ingredients)
