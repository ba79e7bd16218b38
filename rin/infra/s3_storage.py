"""S3 storage operations."""
import boto3
from typing import Optional

from rin.infra.common import S3PathBuilder, get_logger

logger = get_logger(__name__)


class S3Storage:
    """Read-only S3 adapter for config sources."""
    
    def __init__(self, bucket: str, region: Optional[str] = None):
        """
        Initialize S3 storage.
        
        Args:
            bucket: S3 bucket name
            region: AWS region (defaults to boto3 default)
        """
        self.bucket = bucket
        self.s3_client = boto3.client("s3", region_name=region)
    
    @classmethod
    def from_uri(cls, uri: str, region: Optional[str] = None) -> tuple["S3Storage", str]:
        """
        Build storage for the bucket of an s3:// URI.
        
        Returns:
            Tuple of (storage, key)
            
        Raises:
            ValueError: If uri is not an s3:// URI with a bucket
        """
        bucket, key = S3PathBuilder.split_uri(uri)
        return cls(bucket, region=region), key
    
    def object_uri(self, key: str) -> str:
        """Get s3:// URI of a key in this bucket."""
        return S3PathBuilder.object_uri(self.bucket, key)
    
    def get_object(self, key: str) -> bytes:
        """Get object body from S3."""
        logger.debug("Reading %s", self.object_uri(key))
        response = self.s3_client.get_object(Bucket=self.bucket, Key=key)
        return response["Body"].read()
