"""Unit tests for core/hook.py"""

import logging

import pytest

from sysname.config import Settings
from sysname.core.hook import PLUGIN_NAME, prepopulate, run_post
from sysname.core.models import Asset, Page


@pytest.mark.parametrize("name,expected", [("", "hidden"), ("   ", "hidden"), ("kept", "kept")])
def test_prepopulate_seeds_placeholder(name, expected):
    asset = prepopulate(Asset(name=name))
    assert asset.hide_system_name is True
    assert asset.name == expected


def test_prepopulate_custom_placeholder():
    assert prepopulate(Page(), placeholder="pending").name == "pending"


def test_run_post_sets_name(page, strip_bang):
    settings = Settings(field_ids="title,dynamic-metadata/foo", space_token="_")
    result = run_post(page, settings, strip_bang)
    assert result.allow
    assert result.message == ""
    assert page.name == "my_page-bar_baz"


def test_run_post_denies_without_mutation(page, strip_bang, caplog):
    """A failed run denies creation, names the identifier, and leaves the name alone."""
    page.name = "hidden"
    settings = Settings(field_ids="dynamic-metadata/missing")
    with caplog.at_level(logging.WARNING, logger="sysname.core.hook"):
        result = run_post(page, settings, strip_bang)
    assert not result.allow
    assert result.message.startswith(f"{PLUGIN_NAME}: ")
    assert "dynamic-metadata/missing" in result.message
    assert page.name == "hidden"
    assert "dynamic-metadata/missing" in caplog.text


def test_run_post_requires_field_ids(page):
    result = run_post(page, Settings())
    assert not result.allow
    assert "Field IDs are required" in result.message


def test_run_post_type_mismatch():
    result = run_post(Asset(name="x"), Settings(field_ids="title"))
    assert not result.allow
    assert "pages" in result.message


def test_run_post_uses_keep_chars(page):
    """keep_chars reaches the normalizer so listed characters survive."""
    page.metadata.title = "C++ Guide"
    assert run_post(page, Settings(field_ids="title")).allow
    assert page.name == "c-guide"
    assert run_post(page, Settings(field_ids="title", keep_chars="+")).allow
    assert page.name == "c++-guide"
