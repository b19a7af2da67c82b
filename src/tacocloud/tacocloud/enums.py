from enum import StrEnum


class IngredientType(StrEnum):
    WRAP = "wrap"
    PROTEIN = "protein"
    VEGGIES = "veggies"
    CHEESE = "cheese"
    SAUCE = "sauce"


class ViolationCode(StrEnum):
    INVALID_NAME = "invalid-name"
    EMPTY_INGREDIENT_LIST = "empty-ingredient-list"
    INGREDIENT_NOT_FOUND = "ingredient-not-found"
    MISSING_DELIVERY_FIELD = "missing-delivery-field"
    INVALID_CARD_NUMBER = "invalid-card-number"
    INVALID_EXPIRATION = "invalid-expiration"
    INVALID_CVV = "invalid-cvv"
    EMPTY_ORDER = "empty-order"
