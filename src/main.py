"""Main application entry point.

Serves the NiceGUI assistant page. The knowledge service (/embed, /ask) runs
separately; its address comes from RAG_API_BASE_URL.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Application entry point."""
    from nicegui import ui

    from src.client.config import get_client_config
    from src.ui.assistant_page import assistant_page  # noqa: F401 - Registers the page

    config = get_client_config()

    logger.info(f"Knowledge service expected at {config.api_base_url}")
    logger.info(f"Assistant UI available at http://localhost:{config.ui_port}/")

    ui.run(
        title="RAG Document Assistant",
        favicon="📄",
        host=config.ui_host,
        port=config.ui_port,
        reload=False,
        show=False,
    )


if __name__ == "__main__":
    main()
