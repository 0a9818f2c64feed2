"""Shared fixtures for core unit tests"""

from datetime import date

import pytest

from sysname.core.models import (
    DynamicField,
    LeafKind,
    Page,
    StructuredGroup,
    StructuredLeaf,
    WiredMetadata,
)


def _strip_bang(raw: str, keep: str = "") -> str:
    """Normalizer stub: only removes exclamation marks."""
    return raw.replace("!", "")


@pytest.fixture(name="metadata")
def metadata_fixture():
    return WiredMetadata(
        title="  My Page!  ",
        display_name="Display Name",
        author="Jane Doe",
        summary="",
        start_date=date(2024, 3, 9),
        end_date=date(2025, 12, 31),
    )


@pytest.fixture(name="tree")
def tree_fixture():
    """Structured data: a loose field, a nested group, and typed leaves."""
    return [
        StructuredLeaf(identifier="headline", values=["Top Story"]),
        StructuredGroup(identifier="event", children=[
            StructuredLeaf(identifier="name", values=["Spring Gala"]),
            StructuredLeaf(identifier="starts", kind=LeafKind.datetime, values=["0"]),
            StructuredLeaf(identifier="day", kind=LeafKind.calendar, values=["07-04-2021"]),
            StructuredGroup(identifier="venue", children=[
                StructuredLeaf(identifier="city", values=["Atlanta"]),
            ]),
        ]),
        StructuredLeaf(identifier="tags", kind=LeafKind.checkbox, values=["a", "", "b"]),
        StructuredLeaf(identifier="body", kind=LeafKind.wysiwyg, values=["<p>Rich</p>"]),
    ]


@pytest.fixture(name="page")
def page_fixture(metadata, tree):
    return Page(
        metadata=metadata,
        dynamic_fields=[
            DynamicField(name="foo", values=["Bar Baz"]),
            DynamicField(name="empty", values=["   "]),
        ],
        structured_data=tree,
    )


@pytest.fixture(name="strip_bang")
def strip_bang_fixture():
    return _strip_bang
