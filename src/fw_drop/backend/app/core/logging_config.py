import logging
import sys


def setup_logging(level: str = "info") -> None:
    """
    Configures the root logger for the application.
    Called once from the app lifespan; uvicorn keeps its own loggers.
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - [%(levelname)s] - %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("python_multipart").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)
