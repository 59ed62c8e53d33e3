from collections import namedtuple
from re import sub

import configs

# The host platform's naming rules, bundled so callers can inject their own.
Platform = namedtuple(
    "Platform", ["prefix", "custom_prefix", "sanitize_key", "quote_identifier"]
)


def sanitize_key(key: str) -> str:
    """
    Lowercases a key and strips every character outside [a-z0-9_-].

    Args:
        key: The raw table or column key.

    Returns:
        The sanitized key, possibly empty.
    """
    return sub(r"[^a-z0-9_\-]", "", key.lower())


def quote_identifier(identifier: str) -> str:
    """
    Quotes an identifier with backticks, doubling any embedded backtick.

    Args:
        identifier: The unquoted identifier.

    Returns:
        The identifier, safe to embed in a MySQL-dialect query string.
    """
    return "`" + identifier.replace("`", "``") + "`"


def current_platform() -> Platform:
    """Builds a Platform from the process-wide configuration."""
    return Platform(
        prefix=configs.table_prefix,
        custom_prefix=configs.custom_prefix,
        sanitize_key=sanitize_key,
        quote_identifier=quote_identifier,
    )
