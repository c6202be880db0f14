from products_api.exceptions import RequestValidationFailed
from products_api.validation.rules import FieldError, Rule, run_rules


def check_errors(errors: list[FieldError]) -> None:
    """Checkpoint run after a route's rules: raise if any of them failed."""
    if errors:
        raise RequestValidationFailed(errors)


__all__ = ["FieldError", "Rule", "check_errors", "run_rules"]
