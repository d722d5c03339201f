import logging
import os
from typing import Optional

from dotenv import load_dotenv


def env_file_candidates() -> list[str]:
    """``.env.<ENV>`` (ENV defaults to ``debug``), then ``.env``."""
    return [f".env.{os.getenv('ENV', 'debug')}", ".env"]


def configure_env(env_file_name: Optional[str] = None) -> Optional[str]:
    """
    Load environment variables from a dotenv file, overriding existing values.

    Args:
        env_file_name: Load exactly this file. When omitted, the first
            existing file of :func:`env_file_candidates` is loaded.

    Returns:
        The file that was loaded, or None when nothing was found. A missing
        file is not an error: settings can come from the real environment.
    """
    candidates = [env_file_name] if env_file_name is not None else env_file_candidates()

    for env_file in candidates:
        if load_dotenv(env_file, override=True):
            logging.debug(f"☑️ Loaded {env_file} file successfully")
            return env_file

    logging.debug(f"No env file loaded (tried {', '.join(candidates)})")
    return None
