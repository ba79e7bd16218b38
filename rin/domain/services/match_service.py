"""Target matching and routing."""
from typing import Optional

from rin.domain.entities.config import Config, Target
from rin.domain.entities.s3_event import S3EventRecord
from rin.infra.common import get_logger

logger = get_logger(__name__)


def matches_location(target: Target, bucket: str, key: str) -> bool:
    """
    Check whether an S3 object belongs to a target.
    
    Args:
        target: Merged target
        bucket: Bucket name
        key: Object key
        
    Returns:
        True if bucket equals the target bucket and key starts with its prefix
    """
    if target.s3 is None:
        return False
    return bucket == target.s3.bucket and key.startswith(target.s3.key_prefix)


def matches_notification(target: Target, record: S3EventRecord) -> bool:
    """Check whether an S3 event record belongs to a target."""
    return matches_location(target, record.bucket, record.key)


def find_target(config: Config, bucket: str, key: str) -> Optional[Target]:
    """
    Select the target owning an S3 object.
    
    When targets overlap, the longest key prefix wins; ties go to the
    target listed first.
    
    Args:
        config: Merged config
        bucket: Bucket name
        key: Object key
        
    Returns:
        Owning target, or None if no target matches
    """
    best: Optional[Target] = None
    for target in config.targets:
        if not matches_location(target, bucket, key):
            continue
        if best is None or len(target.s3.key_prefix) > len(best.s3.key_prefix):
            best = target
    
    if best is None:
        logger.debug("No target for s3://%s/%s", bucket, key)
    return best


def find_target_for_record(config: Config, record: S3EventRecord) -> Optional[Target]:
    """Select the target owning the object of an S3 event record."""
    return find_target(config, record.bucket, record.key)
