PRODUCT_NOT_FOUND = "Producto no encontrado"


class RequestValidationFailed(Exception):
    """
    Raised when one or more validation rules of a route failed.

    Carries the failures (`FieldError` items) in the order the rules ran.
    """

    def __init__(self, errors: list):
        self.errors = errors
        super().__init__(f"{len(errors)} validation error(s)")
