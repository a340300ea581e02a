from cssbuilder.validation.validator import check_fragment, validate_or_raise

__all__ = ["check_fragment", "validate_or_raise"]
