# cipherdesk/main.py
import sys

from cipherdesk.config.loader import get_config
from cipherdesk.services.logging import setup_logging
from cipherdesk.ui.application import run

def main():
    config = get_config()
    setup_logging(level=config.log_level, retention=config.log_retention) # Configure logging early
    return run(sys.argv)

if __name__ == "__main__":
    main()
