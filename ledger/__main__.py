import uvicorn

from .logging_utils import configure_root_logger, get_logger
from .settings import get_settings

LOGGER = get_logger(__name__)


def main() -> None:
    settings = get_settings()
    configure_root_logger(settings.log_level)
    LOGGER.info("serving on http://%s:%s%s", settings.host, settings.port, settings.api_prefix)
    uvicorn.run(
        "ledger.main:create_app",
        host=settings.host,
        port=settings.port,
        factory=True,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
