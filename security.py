from re import compile as re_compile

from naming import Platform, current_platform
from tables import (
    is_application_table,
    is_default_platform_table,
    is_known_table,
    is_multisite_table,
    is_platform_table,
)

COLUMN_PATTERN = re_compile(r"[A-Za-z0-9_]+")


class InvalidIdentifier(ValueError):
    """Raised when a column or schema identifier is unsafe to use."""


def prefixed_table_name(
    table: str, prefix: str | None = None, platform: Platform | None = None
) -> str:
    """
    Applies a prefix to a table name and quotes the result.

    The explicit prefix wins when given, even if it is empty; otherwise the
    platform's configured prefix is used. The table part goes through the
    platform's key sanitizer, and the concatenation through its identifier
    quoting.

    Args:
        table: The base table name.
        prefix: An optional custom prefix.
        platform: The naming rules to use; defaults to the configured ones.

    Returns:
        The quoted, prefixed table name.
    """
    platform = platform or current_platform()
    if prefix is None:
        prefix = platform.prefix
    return platform.quote_identifier(prefix + platform.sanitize_key(table))


def sanitize_column_name(column: str, platform: Platform | None = None) -> str:
    """
    Validates a column name and returns its sanitized key.

    Only letters, digits and underscores are accepted, and at least one of
    them is required.

    Raises:
        InvalidIdentifier: If the column name contains anything else.
    """
    if not isinstance(column, str) or not COLUMN_PATTERN.fullmatch(column):
        raise InvalidIdentifier(f"Invalid column name: {column!r}")
    platform = platform or current_platform()
    return platform.sanitize_key(column)


def has_recognized_prefix(table_name: str, platform: Platform | None = None) -> bool:
    """
    Checks whether a table name starts with the platform prefix or, when one
    is configured, with the custom prefix.
    """
    platform = platform or current_platform()
    if table_name.startswith(platform.prefix):
        return True
    if platform.custom_prefix is not None and table_name.startswith(
        platform.custom_prefix
    ):
        return True
    return False


def classify_table(name: str, platform: Platform | None = None) -> dict[str, bool | str]:
    """Runs every table predicate against a name."""
    return {
        "table": name,
        "application": is_application_table(name),
        "default_platform": is_default_platform_table(name),
        "multisite": is_multisite_table(name),
        "platform": is_platform_table(name),
        "known": is_known_table(name),
        "recognized_prefix": has_recognized_prefix(name, platform),
    }


def sanitize_schema(
    schema: dict[str, list[str]], platform: Platform | None = None
) -> dict[str, list[str]]:
    """
    Sanitizes all table and column names within a schema dictionary.

    Table names are prefixed and quoted with `prefixed_table_name`; column
    names are validated with `sanitize_column_name`.

    Args:
        schema: A dictionary where keys are table names and values are lists
                of column names.
        platform: The naming rules to use; defaults to the configured ones.

    Returns:
        A new dictionary with all identifiers sanitized.

    Raises:
        InvalidIdentifier: If the schema is malformed, a column is invalid, or
                           two tables sanitize to the same name.
    """
    if not isinstance(schema, dict):
        raise InvalidIdentifier("Schema must be a dictionary.")

    platform = platform or current_platform()
    sanitized_schema = {}
    for table, columns in schema.items():
        if not isinstance(columns, list):
            raise InvalidIdentifier(f"Columns for table {table!r} must be a list.")
        sane_table = prefixed_table_name(table, platform=platform)
        if sane_table in sanitized_schema:
            raise InvalidIdentifier(f"Duplicate table after sanitizing: {table!r}")
        sanitized_schema[sane_table] = [
            sanitize_column_name(col, platform) for col in columns
        ]

    return sanitized_schema
