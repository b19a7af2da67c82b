"""CLI entry point for the Taco Cloud order workflow.

Usage:
    python -m tacocloud.main
"""

import uuid

from loguru import logger

from .config import get_settings
from .logging import setup_logging
from .models import OrderDetails
from .workflow import SubmissionResult, TacoCloud

CHECKOUT_PROMPTS = [
    ("delivery_name", "Name"),
    ("delivery_street", "Street"),
    ("delivery_city", "City"),
    ("delivery_state", "State"),
    ("delivery_zip", "Zip"),
    ("cc_number", "Credit card #"),
    ("cc_expiration", "Expiration (MM/YY)"),
    ("cc_cvv", "CVV"),
]


def _print_errors(result: SubmissionResult) -> None:
    for field, messages in result.errors_by_field().items():
        for message in messages:
            print(f"  ! {field}: {message}")


def _print_design_form(app: TacoCloud, session_id: str) -> None:
    form = app.design_form(session_id)
    for type_name, ingredients in form.ingredients.items():
        choices = ", ".join(f"{i.id} ({i.name})" for i in ingredients)
        print(f"  {type_name:<8} {choices}")
    if form.order.tacos:
        print(f"In your order: {', '.join(t.name for t in form.order.tacos)}")


def _design_taco(app: TacoCloud, session_id: str) -> bool:
    """Prompt for one taco. Returns False when the customer is done designing."""
    name = input("Taco name (or 'done'): ").strip()
    if name.lower() in ("done", "checkout"):
        return False
    raw_ids = input("Ingredient ids, comma separated: ")
    ids = [part.strip().upper() for part in raw_ids.split(",") if part.strip()]

    result = app.process_taco(session_id, name, ids)
    if result.success:
        print(f"Added {name}.")
    else:
        print("Could not add that taco:")
        _print_errors(result)
    print()
    return True


def _checkout(app: TacoCloud, session_id: str) -> bool:
    """Prompt for delivery and payment details. Returns True once the order is placed."""
    order = app.order_form(session_id)
    print(f"Checking out {len(order.tacos)} taco(s).")
    values = {field: input(f"{label}: ").strip() for field, label in CHECKOUT_PROMPTS}

    result = app.process_order(session_id, OrderDetails(**values))
    if not result.success:
        print("Please correct the following:")
        _print_errors(result)
        print()
        return False

    confirmation = result.confirmation
    print("-" * 50)
    print(
        f"Order {confirmation.order_id} placed: "
        f"{confirmation.taco_count} taco(s) for {confirmation.delivery_name}."
    )
    print("-" * 50)
    return True


def main() -> None:
    """Run the Taco Cloud CLI."""
    settings = get_settings()

    setup_logging(
        level=settings.log_level,
        log_dir=settings.log_dir,
        to_file=settings.log_to_file,
    )
    logger.info("Starting Taco Cloud CLI")

    app = TacoCloud()
    session_id = f"cli-{uuid.uuid4()}"
    logger.info("Session started (session_id={})", session_id)

    print("-" * 50)
    print("Design your tacos! Type 'done' to check out, Ctrl-D to quit.")
    print("-" * 50)

    try:
        while True:
            _print_design_form(app, session_id)
            if not _design_taco(app, session_id):
                if _checkout(app, session_id):
                    break
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")

    logger.info("CLI session ended (session_id={})", session_id)


if __name__ == "__main__":
    main()
