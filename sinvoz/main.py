import uvicorn

from sinvoz.api.app import create_app
from sinvoz.config.settings import Settings
from sinvoz.database.connection import close_pool, ensure_schema, init_pool
from sinvoz.logging.logger import Log


def main() -> None:
    """Entry point: initialize pool -> ensure schema -> build app -> serve."""
    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)

    try:
        ensure_schema()
        app = create_app(settings)
        Log.info(f"Server listening on port {settings.port}")
        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
    finally:
        close_pool()


if __name__ == "__main__":
    main()
