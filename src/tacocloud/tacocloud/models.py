from datetime import datetime, timezone
import uuid

from pydantic import BaseModel, ConfigDict, Field

from .enums import IngredientType, ViolationCode


class Ingredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: IngredientType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (
            self.id == other.id
            and self.name == other.name
            and self.type == other.type
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.type))


class Taco(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=5)
    ingredients: tuple[Ingredient, ...] = Field(min_length=1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Taco):
            return NotImplemented
        return self.name == other.name and self.ingredients == other.ingredients

    def __hash__(self) -> int:
        return hash((self.name, self.ingredients))

    @property
    def ingredient_ids(self) -> list[str]:
        return [ingredient.id for ingredient in self.ingredients]


# Delivery fields in the order a checkout form presents them.
DELIVERY_FIELDS: tuple[str, ...] = (
    "delivery_name",
    "delivery_street",
    "delivery_city",
    "delivery_state",
    "delivery_zip",
)


class OrderDetails(BaseModel):
    """Delivery and payment fields submitted at checkout."""

    delivery_name: str | None = None
    delivery_street: str | None = None
    delivery_city: str | None = None
    delivery_state: str | None = None
    delivery_zip: str | None = None
    cc_number: str | None = None
    cc_expiration: str | None = None
    cc_cvv: str | None = None

    def apply_to(self, order: "TacoOrder") -> "TacoOrder":
        """Return a copy of `order` with these details filled in.

        The original order is left as it was.
        """
        return order.model_copy(update=self.model_dump(), deep=True)


class TacoOrder(BaseModel):
    order_id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    # Delivery
    delivery_name: str | None = None
    delivery_street: str | None = None
    delivery_city: str | None = None
    delivery_state: str | None = None
    delivery_zip: str | None = None

    # Payment
    cc_number: str | None = None
    cc_expiration: str | None = None
    cc_cvv: str | None = None

    tacos: list[Taco] = Field(default_factory=list)

    def add_taco(self, taco: Taco) -> None:
        self.tacos.append(taco)

    @property
    def details(self) -> OrderDetails:
        """The delivery and payment fields currently on this order."""
        return OrderDetails(**self.model_dump(include=set(OrderDetails.model_fields)))


class Confirmation(BaseModel):
    model_config = ConfigDict(frozen=True)

    order_id: str
    delivery_name: str
    taco_names: list[str]
    placed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def taco_count(self) -> int:
        return len(self.taco_names)


class Violation(BaseModel):
    """A single user-correctable problem with a submission."""

    model_config = ConfigDict(frozen=True)

    code: ViolationCode
    field: str | None = None
    message: str
