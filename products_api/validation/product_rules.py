from products_api.validation.rules import (
    BODY,
    PATH,
    chain,
    is_boolean,
    is_int,
    is_numeric,
    is_positive,
    max_length,
    not_blank,
    not_empty,
)

NAME_MAX_LENGTH = 255

ID_RULES = chain("id", PATH, (is_int, "ID no valido"))

NAME_RULES = chain(
    "name", BODY,
    (not_blank, "El nombre del producto no puede ir vacio"),
    (max_length(NAME_MAX_LENGTH), "El nombre del producto no puede superar los 255 caracteres"),
)

PRICE_RULES = chain(
    "price", BODY,
    (is_numeric, "Valor no valido"),
    (not_empty, "El precio del producto no puede ir vacio"),
    (is_positive, "Precio no valido"),
)

AVAILABILITY_RULES = chain(
    "availability", BODY,
    (is_boolean, "valor para disponibilidad no valido"),
)

# Per-route rule sets, in the order errors are reported
CREATE_PRODUCT_RULES = NAME_RULES + PRICE_RULES
UPDATE_PRODUCT_RULES = ID_RULES + NAME_RULES + PRICE_RULES + AVAILABILITY_RULES
