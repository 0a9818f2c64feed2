"""Name assembly: classify, resolve, normalize, and join each configured field"""

import logging
from typing import Optional, Sequence, Union

from sysname.core.classify import classify, split_identifiers
from sysname.core.errors import (
    ConfigurationError,
    FieldNotFoundOrEmpty,
    NoContentError,
    SourceMissingError,
    SystemNameError,
    TypeMismatchError,
)
from sysname.core.models import Asset, AssemblyResult, FieldIdentifier, FieldMode, Page
from sysname.core.resolve import resolve_dynamic, resolve_structured, resolve_wired
from sysname.core.utils.normalize import Normalizer, normalize_filename


logger = logging.getLogger(__name__)

DEFAULT_TOKEN = "-"


def _token(value: Optional[str]) -> str:
    return value if value and value.strip() else DEFAULT_TOKEN


def _resolve(field: FieldIdentifier, page: Page) -> str:
    """Resolve one classified identifier against the page, raising on absence."""
    if field.mode == FieldMode.dynamic:
        if page.dynamic_fields is None:
            raise SourceMissingError(field.raw, "Dynamic Metadata Fields")
        value, label = resolve_dynamic(page.dynamic_fields, field.path[0]), "dynamic metadata"
    elif field.mode == FieldMode.structured:
        if page.structured_data is None:
            raise SourceMissingError(field.raw, "Structured Data")
        value, label = resolve_structured(page.structured_data, field.path), "structured data"
    else:
        value, label = resolve_wired(page.metadata, field.path[0]), "wired metadata"

    if value is None or not value.strip():
        raise FieldNotFoundOrEmpty(field.raw, label)
    return value


def normalize_value(value: str, space_token: str, normalizer: Normalizer, keep: str = "") -> str:
    """Apply the filename normalizer, then trim, substitute spaces, and lowercase."""
    return normalizer(value, keep).strip().replace(" ", space_token).lower()


def build_name(
    identifiers: Union[str, Sequence[str]],
    space_token: Optional[str],
    concat_token: Optional[str],
    asset: Asset,
    normalizer: Normalizer = normalize_filename,
    keep: str = "",
    ) -> str:
    """Return the system name for asset; raise a SystemNameError on the first failure."""
    if isinstance(identifiers, str):
        identifiers = split_identifiers(identifiers)
    else:
        identifiers = [s.strip() for s in identifiers if s and s.strip()]
    if not identifiers:
        raise ConfigurationError("Field IDs are required.")
    if not isinstance(asset, Page):
        raise TypeMismatchError(f"Field extraction is only supported for pages, not {type(asset).__name__}.")

    space_token = _token(space_token)
    concat_token = _token(concat_token)

    parts: list[str] = []
    for raw in identifiers:
        field = classify(raw)
        value = normalize_value(_resolve(field, asset), space_token, normalizer, keep)
        logger.debug("Resolved %s field %r -> %r", field.mode.value, raw, value)
        parts.append(value + concat_token)

    name = "".join(parts).removesuffix(concat_token)
    if not name.strip():
        raise NoContentError(",".join(identifiers))
    return name


def assemble(
    identifiers: Union[str, Sequence[str]],
    space_token: Optional[str],
    concat_token: Optional[str],
    asset: Asset,
    normalizer: Normalizer = normalize_filename,
    keep: str = "",
    ) -> AssemblyResult:
    """Run build_name and capture its outcome as an AssemblyResult."""
    try:
        name = build_name(identifiers, space_token, concat_token, asset, normalizer, keep)
    except SystemNameError as e:
        return AssemblyResult(ok=False, reason=str(e))
    return AssemblyResult(name=name, ok=True)
