"""Centralized S3 URI building."""

S3_SCHEME = "s3"


class S3PathBuilder:
    """Builder for s3:// URIs."""
    
    @staticmethod
    def object_uri(bucket: str, key: str) -> str:
        """Get object URI (s3://bucket/key)."""
        return f"{S3_SCHEME}://{bucket}/{key}"
    
    @staticmethod
    def prefix_pattern(bucket: str, key_prefix: str) -> str:
        """Get display pattern for every object under a prefix."""
        return f"{S3_SCHEME}://{bucket}/{key_prefix}*"
    
    @staticmethod
    def is_s3_uri(uri: str) -> bool:
        """Check if string is an s3:// URI."""
        return uri.startswith(f"{S3_SCHEME}://")
    
    @staticmethod
    def split_uri(uri: str) -> tuple[str, str]:
        """
        Split s3:// URI into bucket and key.
        
        Args:
            uri: URI such as s3://bucket/path/to/key
            
        Returns:
            Tuple of (bucket, key)
            
        Raises:
            ValueError: If uri is not an s3:// URI or has no bucket
        """
        if not S3PathBuilder.is_s3_uri(uri):
            raise ValueError(f"Not an S3 URI: {uri}")
        bucket, _, key = uri[len(S3_SCHEME) + 3:].partition("/")
        if not bucket:
            raise ValueError(f"S3 URI has no bucket: {uri}")
        return bucket, key
