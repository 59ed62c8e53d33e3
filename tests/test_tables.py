from itertools import product
from unittest.mock import patch

import pytest

import tables
from tables import (
    APPLICATION_TABLES,
    DEFAULT_PLATFORM_TABLES,
    MULTISITE_TABLES,
    DEFAULT_OUTPUT_FORMAT,
    OutputFormat,
    is_application_table,
    is_default_platform_table,
    is_known_table,
    is_multisite_table,
    is_platform_table,
    valid_output_format,
)


@pytest.mark.parametrize("name", sorted(APPLICATION_TABLES))
def test_application_tables_are_known(name):
    assert is_application_table(name)
    assert is_known_table(name)


def test_platform_tables():
    for name in DEFAULT_PLATFORM_TABLES:
        assert is_default_platform_table(name)
        assert is_platform_table(name)
        assert is_known_table(name)
    for name in MULTISITE_TABLES:
        assert is_multisite_table(name)
        assert is_platform_table(name)
        assert is_known_table(name)


def test_users_is_in_two_sets():
    assert is_application_table("users")
    assert is_multisite_table("users")
    assert not is_default_platform_table("users")


@pytest.mark.parametrize(
    "name", ["unrelated_table", "", "Entities", "wp_entities", " events", "posts"]
)
def test_unknown_tables(name):
    assert not is_known_table(name)
    assert not is_platform_table(name)
    assert not is_application_table(name)


def test_matching_is_case_sensitive():
    assert is_default_platform_table("wp_posts")
    assert not is_default_platform_table("WP_POSTS")


@pytest.mark.parametrize(
    "application,default,multisite", list(product([False, True], repeat=3))
)
def test_combinators_truth_table(application, default, multisite):
    with patch.object(
        tables, "APPLICATION_TABLES", frozenset({"t"} if application else set())
    ), patch.object(
        tables, "DEFAULT_PLATFORM_TABLES", frozenset({"t"} if default else set())
    ), patch.object(
        tables, "MULTISITE_TABLES", frozenset({"t"} if multisite else set())
    ):
        assert tables.is_platform_table("t") == (default or multisite)
        assert tables.is_known_table("t") == (application or default or multisite)


@pytest.mark.parametrize("value", ["OBJECT", "OBJECT_K", "ARRAY_A", "ARRAY_N"])
def test_valid_output_format_keeps_recognized(value):
    assert valid_output_format(value) == value
    assert valid_output_format(OutputFormat(value)) is OutputFormat(value)


@pytest.mark.parametrize("value", ["bogus", 42, None, "object", [], {"a": 1}])
def test_valid_output_format_defaults(value):
    assert valid_output_format(value) is DEFAULT_OUTPUT_FORMAT
    assert DEFAULT_OUTPUT_FORMAT == "OBJECT"
