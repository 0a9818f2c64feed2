"""Field identifier classification by token inspection"""

from sysname.core.models import FieldIdentifier, FieldMode


DYNAMIC_TOKEN = "dynamic-metadata"
STRUCTURED_TOKEN = "system-data-structure"


def _after_token(identifier: str, token: str) -> str:
    """Return the text following the first occurrence of token, minus one leading '/'."""
    rest = identifier[identifier.index(token) + len(token):]
    return rest[1:] if rest.startswith("/") else rest


def classify(identifier: str) -> FieldIdentifier:
    """Classify identifier as dynamic, structured, or wired (the fallback)."""
    if DYNAMIC_TOKEN in identifier:
        return FieldIdentifier(identifier, FieldMode.dynamic, (_after_token(identifier, DYNAMIC_TOKEN),))
    if STRUCTURED_TOKEN in identifier:
        segments = _after_token(identifier, STRUCTURED_TOKEN).split("/")
        return FieldIdentifier(identifier, FieldMode.structured, tuple(segments))
    return FieldIdentifier(identifier, FieldMode.wired, (identifier,))


def split_identifiers(field_ids: str) -> list[str]:
    """Split a comma-delimited identifier list, dropping blank entries."""
    return [s.strip() for s in field_ids.split(",") if s.strip()]
