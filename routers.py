from logging import info, warning

from aiohttp.web_request import Request
from aiohttp.web_response import Response, json_response
from orjson import dumps

from catalog import audit_tables
from security import (
    InvalidIdentifier,
    classify_table,
    prefixed_table_name,
    sanitize_column_name,
)
from tables import valid_output_format
import configs


def orjson_response(data) -> Response:
    return json_response(data=data, dumps=lambda x: dumps(x).decode())


async def get_table_router(request: Request) -> Response:
    """
    Handles GET /tables/{name}.
    Returns every classification of the table name.
    """
    return orjson_response(classify_table(request.match_info["name"]))


async def get_prefixed_table_router(request: Request) -> Response:
    """
    Handles GET /tables/{name}/prefixed.
    Returns the quoted, prefixed table name. An optional `prefix` query
    parameter overrides the configured prefix.
    """
    table = request.match_info["name"]
    prefixed = prefixed_table_name(table, request.query.get("prefix"))
    return orjson_response({"table": table, "prefixed": prefixed})


async def get_column_router(request: Request) -> Response:
    """
    Handles GET /columns/{column}.
    Returns the sanitized column name, or 400 if the name is rejected.
    """
    column = request.match_info["column"]
    try:
        sanitized = sanitize_column_name(column)
    except InvalidIdentifier as er:
        warning("Rejected column name %r", column)
        return Response(status=400, text=str(er))
    return orjson_response({"column": column, "sanitized": sanitized})


async def get_output_format_router(request: Request) -> Response:
    """
    Handles GET /output-format/{value}.
    Returns the requested format if it is recognized, the default otherwise.
    """
    value = request.match_info["value"]
    return orjson_response({"requested": value, "format": valid_output_format(value)})


async def get_audit_router(_request: Request) -> Response:
    """
    Handles GET /audit.
    Classifies every table of the configured catalog database.
    """
    try:
        report = await audit_tables(configs.catalog_path)
    except FileNotFoundError as er:
        return Response(status=404, text=str(er))
    info("Audited %d tables in %s", len(report), configs.catalog_path)
    return orjson_response(report)


async def health_router(_request: Request) -> Response:
    """
    Handles GET /health.
    A simple health check endpoint.
    """
    return Response(text="HEALTHY")
