"""Command-line entry point for the reviewer assigner."""

import logging
import os
import sys

from dotenv import load_dotenv

from .assigner import ReviewerAssigner
from .config import load_config
from .exceptions import ReviewerAssignerError


def configure_logging():
    """Configure logging (can be overridden by LOG_LEVEL environment variable)."""
    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%m/%d/%Y %I:%M:%S %p'
    )


def main():
    """Main entry point for the script."""
    # Load environment variables from .env file if it exists
    load_dotenv()
    configure_logging()

    try:
        config = load_config()
    except ReviewerAssignerError as e:
        logging.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logging.info(f"Loaded configuration for {config.repository} PR #{config.pr_number}")

    try:
        ReviewerAssigner(config).run()
    except ReviewerAssignerError as e:
        if e.__cause__ is not None:
            logging.error(f"{e}: {e.__cause__}")
        else:
            logging.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
