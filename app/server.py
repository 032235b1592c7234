import logging
import sys

import uvicorn

from app.core.config import load_settings
from app.core.errors import ConfigurationError, MissingCredentialError
from app.core.logging import configure_logging
from app.main import create_app

logger = logging.getLogger(__name__)

def run() -> None:
    """Start the API; exits with status 1 before serving when configuration is unusable."""
    try:
        settings = load_settings()
    except MissingCredentialError as e:
        configure_logging()
        logger.error("Missing ROUTELLM_API_KEY in environment. Set it in .env or your shell. (%s)", e)
        sys.exit(1)
    except ConfigurationError as e:
        configure_logging()
        logger.error("%s", e)
        sys.exit(1)

    app = create_app(settings)
    logger.info("Backend running on http://localhost:%s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
