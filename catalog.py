from pathlib import Path

from aiosqlite import connect

from naming import Platform, current_platform
from security import classify_table
from tables import is_known_table


async def fetch_table_names(db_path: str) -> list[str]:
    """
    Lists the user tables of an SQLite database file.

    The file is opened read-only and is never created.

    Args:
        db_path: Path to the database file.

    Returns:
        The table names, sorted.

    Raises:
        FileNotFoundError: If there is no file at `db_path`.
    """
    path = Path(db_path)
    if not path.is_file():
        raise FileNotFoundError(f"No catalog database at {db_path}")

    async with connect(f"{path.resolve().as_uri()}?mode=ro", uri=True) as db:
        cursor = await db.cursor()
        await cursor.execute(
            "SELECT name FROM sqlite_master "
            "WHERE type='table' AND substr(name, 1, 7) != 'sqlite_' ORDER BY name"
        )
        rows = await cursor.fetchall()
    return [row[0] for row in rows]


def strip_recognized_prefix(table_name: str, platform: Platform) -> str:
    """Removes the longest configured prefix the table name starts with."""
    prefixes = [platform.prefix]
    if platform.custom_prefix is not None:
        prefixes.append(platform.custom_prefix)
    for prefix in sorted(prefixes, key=len, reverse=True):
        if prefix and table_name.startswith(prefix):
            return table_name[len(prefix):]
    return table_name


async def audit_tables(
    db_path: str, platform: Platform | None = None
) -> list[dict[str, bool | str]]:
    """
    Classifies every table found in an SQLite database.

    Each entry is the `classify_table` mapping plus `base_name`, the name with
    its recognized prefix removed. A table counts as known if either its raw
    name or its base name is known.

    Args:
        db_path: Path to the database file.
        platform: The naming rules to use; defaults to the configured ones.

    Returns:
        One mapping per table, in name order.
    """
    platform = platform or current_platform()
    report = []
    for name in await fetch_table_names(db_path):
        entry = classify_table(name, platform)
        base_name = strip_recognized_prefix(name, platform)
        entry["base_name"] = base_name
        entry["known"] = entry["known"] or is_known_table(base_name)
        report.append(entry)
    return report
