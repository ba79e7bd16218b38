"""Environment variables loader."""
import os
from pathlib import Path
from dotenv import load_dotenv


DEFAULT_CONFIG_PATH = "config.yml"


def load_env_file() -> None:
    """
    Load environment variables from .env file if it exists.
    
    On AWS (Lambda, ECS) variables are set by the runtime and .env
    files are not used.
    """
    if os.getenv("AWS_LAMBDA_FUNCTION_NAME") or os.getenv("ECS_CONTAINER_METADATA_URI"):
        return
    
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)


def default_config_path() -> str:
    """Config path from RIN_CONFIG, or config.yml in the working directory."""
    return os.getenv("RIN_CONFIG") or DEFAULT_CONFIG_PATH
