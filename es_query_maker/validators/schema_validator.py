import logging
from typing import Any, Dict

import jsonschema

logger = logging.getLogger(__name__)

# Loose shape of a _search request body: only the sections this library
# emits are described, anything else the caller passes through is allowed.
SEARCH_BODY_SCHEMA = {
    "type": "object",
    "properties": {
        "query": {"type": "object"},
        "aggs": {
            "type": "object",
            "additionalProperties": {"type": "object"},
        },
        "post_filter": {"type": "object"},
        "size": {"type": "integer", "minimum": 0},
        "from": {"type": "integer", "minimum": 0},
        "sort": {
            "type": "array",
            "items": {"type": "object", "minProperties": 1, "maxProperties": 1},
        },
        "search_after": {"type": "array"},
        "explain": {"type": "boolean"},
        "timeout": {"type": "string", "pattern": "^[0-9]+s$"},
        "highlight": {"type": "object"},
        "_source": {
            "type": "object",
            "properties": {
                "includes": {"type": "array", "items": {"type": "string"}},
                "excludes": {"type": "array", "items": {"type": "string"}},
            },
            "additionalProperties": False,
        },
    },
}

# Escape hatches accept raw DSL; it still has to be a JSON object.
CUSTOM_MAPPING_SCHEMA = {
    "type": "object",
    "propertyNames": {"type": "string", "minLength": 1},
}


def validate_search_body(body: Dict[str, Any]) -> bool:
    """
    Validates a rendered search request body against the known sections.

    Args:
        body: Output of ``SearchRequest.map()`` or a hand-written body.

    Returns:
        True if the body matches the schema, else False.
    """
    try:
        jsonschema.validate(instance=body, schema=SEARCH_BODY_SCHEMA)
        return True
    except jsonschema.exceptions.ValidationError as ve:
        logger.debug("Search body validation error: %s", ve.message)
        return False


def validate_custom_mapping(mapping: Any) -> bool:
    try:
        jsonschema.validate(instance=mapping, schema=CUSTOM_MAPPING_SCHEMA)
        return True
    except jsonschema.exceptions.ValidationError as ve:
        logger.debug("Custom mapping validation error: %s", ve.message)
        return False
