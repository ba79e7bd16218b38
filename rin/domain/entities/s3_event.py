"""S3 event notification entities."""
from pydantic import BaseModel, ConfigDict, Field


class S3Bucket(BaseModel):
    """Bucket section of an S3 event record."""
    name: str
    arn: str | None = None


class S3Object(BaseModel):
    """Object section of an S3 event record."""
    model_config = ConfigDict(populate_by_name=True)

    key: str
    size: int | None = None
    e_tag: str | None = Field(default=None, alias="eTag")


class S3Entity(BaseModel):
    """S3 section of an event record."""
    bucket: S3Bucket
    object: S3Object


class S3EventRecord(BaseModel):
    """
    Single record of an S3 event notification.
    
    Only bucket name and object key are needed for routing; the remaining
    fields are kept for logging.
    """
    model_config = ConfigDict(populate_by_name=True)

    event_name: str = Field(default="", alias="eventName")
    event_time: str = Field(default="", alias="eventTime")
    aws_region: str = Field(default="", alias="awsRegion")
    s3: S3Entity

    @property
    def bucket(self) -> str:
        return self.s3.bucket.name

    @property
    def key(self) -> str:
        return self.s3.object.key
