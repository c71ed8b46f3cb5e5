import os
import logging
from dotenv import load_dotenv, find_dotenv

logger = logging.getLogger(__name__)


def load_dotenv_if_enabled():
    """
    Load variables from a local .env file, only if USE_DOTENV is set to 'true'.

    In production, set the CONNSTR_* variables in the OS environment instead.
    DOTENV_PATH may point to a specific file; otherwise find_dotenv() searches
    upwards from the current directory.

    Returns:
        True if a .env file was loaded, False otherwise
    """
    if os.getenv('USE_DOTENV') != 'true':
        return False

    dotenv_path = os.getenv('DOTENV_PATH') or find_dotenv(usecwd=True)
    if not dotenv_path or not os.path.exists(dotenv_path):
        logger.warning(f"USE_DOTENV is set but no .env file was found (DOTENV_PATH={os.getenv('DOTENV_PATH')!r})")
        return False

    load_dotenv(dotenv_path)
    logger.info(f"Loaded environment from {dotenv_path}")
    return True
