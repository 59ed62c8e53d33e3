from enum import Enum

APPLICATION_TABLES = frozenset(
    {
        "entities",
        "artists",
        "releases",
        "works",
        "masters",
        "producers",
        "transcriptions",
        "copyrights",
        "royalties",
        "popularity",
        "events",
        "venues",
        "tags",
        "taxonomies",
        "attributes",
        "countries",
        "languages",
        "entity_tags",
        "entity_taxonomies",
        "entity_attributes",
        "content_distributions",
        "distribution_links",
        "external_platform_accounts",
        "payment_history",
        "analytics",
        "platform_data",
        "distributed_assets",
        "user_sessions",
        "users",
        "usermeta",
        "firebase_user_metadata",
        "user_role_assignments",
        "asset_access_control",
        "api_tokens",
        "user_api_tokens",
        "user_services",
        "encryption_keys",
    }
)

DEFAULT_PLATFORM_TABLES = frozenset(
    {
        "wp_commentmeta",
        "wp_comments",
        "wp_links",
        "wp_options",
        "wp_postmeta",
        "wp_posts",
        "wp_terms",
        "wp_termmeta",
        "wp_term_relationships",
        "wp_term_taxonomy",
        "wp_usermeta",
        "wp_users",
    }
)

MULTISITE_TABLES = frozenset({"blogmeta", "blogs", "site", "sitemeta", "users"})


class OutputFormat(str, Enum):
    """Row shapes a query result may be returned in."""

    OBJECT = "OBJECT"
    OBJECT_K = "OBJECT_K"
    ARRAY_A = "ARRAY_A"
    ARRAY_N = "ARRAY_N"


DEFAULT_OUTPUT_FORMAT = OutputFormat.OBJECT


def is_application_table(name: str) -> bool:
    return name in APPLICATION_TABLES


def is_default_platform_table(name: str) -> bool:
    return name in DEFAULT_PLATFORM_TABLES


def is_multisite_table(name: str) -> bool:
    return name in MULTISITE_TABLES


def is_platform_table(name: str) -> bool:
    """True for both single-site and multi-site platform tables."""
    return is_default_platform_table(name) or is_multisite_table(name)


def is_known_table(name: str) -> bool:
    """True if the name belongs to the application or to the platform."""
    return is_application_table(name) or is_platform_table(name)


def valid_output_format(value):
    """
    Returns the value unchanged if it is a recognized output format.

    Anything else, including unhashable values, falls back to OBJECT.

    Args:
        value: The requested output format.

    Returns:
        The requested format, or the default format.
    """
    if value in tuple(OutputFormat):
        return value
    return DEFAULT_OUTPUT_FORMAT
