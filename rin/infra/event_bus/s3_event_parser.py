"""S3 event notification parser."""
import json
from typing import Any

from pydantic import ValidationError

from rin.domain.entities.s3_event import S3EventRecord
from rin.infra.common import EventParseError


def parse_s3_event(body: str | bytes | dict[str, Any]) -> list[S3EventRecord]:
    """
    Parse an S3 event notification document (e.g. an SQS message body).
    
    Args:
        body: JSON text or already-decoded document
        
    Returns:
        Event records; empty for documents without Records (s3:TestEvent)
        
    Raises:
        EventParseError: If the body is not valid JSON or a record is malformed
    """
    if isinstance(body, (str, bytes)):
        try:
            body = json.loads(body)
        except ValueError as e:
            raise EventParseError(f"Invalid event JSON: {e}") from e
    
    if not isinstance(body, dict):
        raise EventParseError(f"Event must be a JSON object, got {type(body).__name__}")
    
    try:
        return [S3EventRecord.model_validate(record) for record in body.get("Records") or []]
    except ValidationError as e:
        raise EventParseError(f"Invalid event record: {e}") from e
