from .schema_validator import validate_custom_mapping, validate_search_body

__all__ = ["validate_custom_mapping", "validate_search_body"]
