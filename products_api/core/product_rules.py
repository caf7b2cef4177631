"""Product rule chains: one ordered tuple of FieldRules per mutating or id-based route."""

from products_api.core.validation import (
    FieldRule, body, param,
    is_boolean, is_int, is_numeric, is_positive, not_empty,
)

_PRODUCT_FIELDS: tuple[FieldRule, ...] = (
    body("name", not_empty, "El nombre no puede ser vacio"),
    body("price", is_numeric, "El precio debe ser numerico"),
    body("price", not_empty, "El precio no puede ser vacio"),
    body("price", is_positive, "El precio debe ser mayor a 0"),
)

_PRODUCT_ID = param("id", is_int, "El id debe ser numerico")

GET_PRODUCT_RULES: tuple[FieldRule, ...] = (
    param("id", is_int, "ID no válido"),
)

CREATE_PRODUCT_RULES = _PRODUCT_FIELDS

UPDATE_PRODUCT_RULES: tuple[FieldRule, ...] = (
    _PRODUCT_ID,
    *_PRODUCT_FIELDS,
    body("availability", is_boolean, "La disponibilidad no puede ser vacia"),
)

TOGGLE_AVAILABILITY_RULES: tuple[FieldRule, ...] = (_PRODUCT_ID,)

DELETE_PRODUCT_RULES: tuple[FieldRule, ...] = (_PRODUCT_ID,)
