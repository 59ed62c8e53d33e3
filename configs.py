from os import environ

table_prefix = "wp_"
custom_prefix = None
catalog_path = "catalog.db"
port = 8080


def reload() -> None:
    """
    Re-read the naming and catalog settings from the environment.

    Nothing is changed unless every value parses.

    Raises:
        ValueError: If PORT is not an integer.
    """
    global table_prefix, custom_prefix, catalog_path, port
    new_table_prefix = environ.get("DB_PREFIX", "wp_")
    new_custom_prefix = environ.get("DARKMATTER_DB_PREFIX")
    new_catalog_path = environ.get("CATALOG_DB_PATH", "catalog.db")
    new_port = int(environ.get("PORT", 8080))
    table_prefix, custom_prefix, catalog_path, port = (
        new_table_prefix,
        new_custom_prefix,
        new_catalog_path,
        new_port,
    )


reload()
