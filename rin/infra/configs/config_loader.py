"""Configuration loader."""
import yaml
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from rin.domain.entities.config import Config
from rin.domain.services.merge_service import merge_config
from rin.infra.common import (
    ConfigParseError,
    ConfigReadError,
    ConfigValidationError,
    S3PathBuilder,
    get_logger,
)
from rin.infra.s3_storage import S3Storage

logger = get_logger(__name__)


def read_source(path: str, region: str | None = None) -> bytes:
    """
    Read raw config bytes from a local path or an s3:// URI.
    
    Args:
        path: Local path or s3://bucket/key
        region: AWS region of the config bucket (defaults to boto3 default)
    
    Raises:
        ConfigReadError: If the source cannot be read
    """
    if S3PathBuilder.is_s3_uri(path):
        try:
            storage, key = S3Storage.from_uri(path, region=region)
            return storage.get_object(key)
        except ValueError as e:
            raise ConfigReadError(f"Invalid config URI: {path}") from e
        except (ClientError, BotoCoreError) as e:
            raise ConfigReadError(f"Cannot read config from {path}: {e}") from e
    
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise ConfigReadError(f"Cannot read config file {path}: {e}") from e


def validate_config(config: Config) -> Config:
    """
    Check required fields.
    
    Raises:
        ConfigValidationError: If queue_name is empty or no target is defined
    """
    if not config.queue_name:
        raise ConfigValidationError("queue_name", "queue_name required")
    if not config.targets:
        raise ConfigValidationError("targets", "no targets defined")
    return config


def parse_config(source: bytes | str) -> Config:
    """
    Parse YAML source into a merged, validated Config.
    
    Args:
        source: YAML document
        
    Returns:
        Config with defaults merged into every target
        
    Raises:
        ConfigParseError: If the document is not well-formed
        ConfigValidationError: If a required field is missing
    """
    try:
        data = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML: {e}") from e
    
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigParseError(f"Config root must be a mapping, got {type(data).__name__}")
    
    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(f"Invalid config: {e}") from e
    
    return validate_config(merge_config(config))


def load_config(path: str, region: str | None = None) -> Config:
    """
    Load configuration from a local YAML file or an s3:// URI.
    
    Args:
        path: Local path or s3://bucket/key
        region: AWS region of the config bucket (defaults to boto3 default)

    Returns:
        Merged and validated Config
        
    Raises:
        ConfigReadError: If the source cannot be read
        ConfigParseError: If the document is not well-formed
        ConfigValidationError: If a required field is missing
    """
    config = parse_config(read_source(path, region=region))
    logger.info("Loaded config from %s: queue=%s, targets=%d", path, config.queue_name, len(config.targets))
    return config
