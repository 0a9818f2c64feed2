"""Page snapshot models and the intermediate types of the naming pipeline"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Discriminator, Field, Tag


class FieldMode(str, Enum):
    """Addressing mode of a field identifier"""
    wired = "wired"
    dynamic = "dynamic"
    structured = "structured"


class LeafKind(str, Enum):
    """Restrict structured data text fields to the kinds that affect formatting"""
    text = "text"
    wysiwyg = "wysiwyg"
    datetime = "datetime"
    calendar = "calendar"
    checkbox = "checkbox"
    multiselect = "multiselect"


class WiredMetadata(BaseModel):
    """The fixed, built-in metadata every page carries"""
    title:             Optional[str] = None
    display_name:      Optional[str] = None
    description:       Optional[str] = None
    author:            Optional[str] = None
    keywords:          Optional[str] = None
    summary:           Optional[str] = None
    teaser:            Optional[str] = None
    start_date:        Optional[date] = None
    end_date:          Optional[date] = None
    review_date:       Optional[date] = None
    expiration_folder: Optional[str] = None    # never used for names


class DynamicField(BaseModel):
    """A deployment-defined custom metadata field."""
    name: str
    values: list[str] = []


class StructuredLeaf(BaseModel):
    """A typed text field inside the structured data tree."""
    type: Literal["text"] = "text"
    identifier: str
    kind: LeafKind = LeafKind.text
    values: list[str] = []


class StructuredGroup(BaseModel):
    """A named group of structured data nodes."""
    type: Literal["group"] = "group"
    identifier: str
    children: list["StructuredNode"] = []


def _node_type(v: Any) -> str:
    """Tag untyped snapshot nodes: anything with children is a group."""
    if isinstance(v, dict):
        return v.get("type") or ("group" if "children" in v else "text")
    return getattr(v, "type", "text")


StructuredNode = Annotated[
    Union[Annotated[StructuredGroup, Tag("group")], Annotated[StructuredLeaf, Tag("text")]],
    Discriminator(_node_type),
]

StructuredGroup.model_rebuild()


class Asset(BaseModel):
    """Any folder-contained asset a host workflow can create."""
    name: str = ""
    hide_system_name: bool = False


class Page(Asset):
    """A page asset: wired metadata plus optional dynamic fields and structured data.

    `dynamic_fields` and `structured_data` are None when the page type defines
    none at all, which is distinct from an empty collection.
    """
    metadata:        WiredMetadata = Field(default_factory=WiredMetadata)
    dynamic_fields:  Optional[list[DynamicField]] = None
    structured_data: Optional[list[StructuredNode]] = None


@dataclass(frozen=True)
class FieldIdentifier:
    """A classified field reference; `raw` keeps the configured text for messages."""
    raw:  str
    mode: FieldMode
    path: tuple[str, ...]


@dataclass
class AssemblyResult:
    """Outcome of one name assembly; `reason` is set only on failure."""
    name:   str = ""
    ok:     bool = False
    reason: str = ""
