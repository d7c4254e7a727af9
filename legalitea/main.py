import uvicorn

from legalitea.api.app import create_app
from legalitea.config.settings import Settings
from legalitea.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> configure logging -> serve the API."""
    settings = Settings()
    Log.configure(settings.log_level)
    Log.info(
        f"Starting LegaliTea API ({settings.app_env}) with provider "
        f"'{settings.analysis_provider}' on {settings.api_host}:{settings.api_port}"
    )
    app = create_app(settings)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
