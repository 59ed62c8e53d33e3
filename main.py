from asyncio import get_running_loop
from logging import basicConfig, warning, INFO
from signal import SIGHUP

from aiohttp.web import get, Application, run_app

from routers import (
    health_router,
    get_table_router,
    get_prefixed_table_router,
    get_column_router,
    get_output_format_router,
    get_audit_router,
)
import configs


def handle_sighup() -> None:
    """Signal handler for SIGHUP to reload the naming configuration."""
    warning("Received SIGHUP")
    try:
        configs.reload()
    except ValueError as er:
        warning("Reload failed, keeping previous configuration: %s", er)
        return
    warning(
        "Reloaded: prefix=%r custom_prefix=%r catalog=%s",
        configs.table_prefix,
        configs.custom_prefix,
        configs.catalog_path,
    )


async def install_signal_handlers(_app: Application) -> None:
    get_running_loop().add_signal_handler(SIGHUP, handle_sighup)


def create_app() -> Application:
    """Build the aiohttp application with all lookup routes registered."""
    app = Application()
    app.add_routes(
        [
            get("/health", health_router),
            get("/tables/{name}", get_table_router),
            get("/tables/{name}/prefixed", get_prefixed_table_router),
            get("/columns/{column}", get_column_router),
            get("/output-format/{value}", get_output_format_router),
            get("/audit", get_audit_router),
        ]
    )
    return app


def main() -> None:
    """
    Main entry point for the application.
    SIGTERM is handled by aiohttp; SIGHUP re-reads the configuration.
    """
    basicConfig(level=INFO)
    app = create_app()
    app.on_startup.append(install_signal_handlers)
    run_app(app, port=configs.port)


if __name__ == "__main__":
    main()
