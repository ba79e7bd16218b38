"""Redshift COPY statement rendering."""
from pydantic import BaseModel, ConfigDict

from rin.domain.entities.config import Credentials, Target
from rin.infra.common.errors import MissingConfigError
from rin.infra.common.paths import S3PathBuilder
from rin.infra.common.quoting import qualify_table, quote_literal


CREDENTIALS_TEMPLATE = "aws_access_key_id={};aws_secret_access_key={}"

# The leading comment keeps the postgres driver from treating the reply as a
# PostgreSQL COPY protocol response, which Redshift does not send.
COPY_TEMPLATE = "/* Rin */ COPY {table} FROM {source} CREDENTIALS {credentials} REGION {region} {option}"


class CopyParams(BaseModel):
    """Rendered pieces of a COPY statement, already quoted."""
    model_config = ConfigDict(frozen=True)

    table: str
    source: str
    credentials: str
    region: str
    option: str = ""

    def render(self) -> str:
        return COPY_TEMPLATE.format(
            table=self.table,
            source=self.source,
            credentials=self.credentials,
            region=self.region,
            option=self.option,
        )


def build_copy_params(target: Target, key: str, credentials: Credentials) -> CopyParams:
    """
    Build quoted COPY parameters for an object.
    
    Args:
        target: Merged target
        key: Object key that triggered the load
        credentials: Shared AWS credentials
        
    Returns:
        CopyParams
        
    Raises:
        MissingConfigError: If the target has no redshift or s3 section
    """
    if target.redshift is None:
        raise MissingConfigError("redshift")
    if target.s3 is None:
        raise MissingConfigError("s3")
    
    clause = CREDENTIALS_TEMPLATE.format(
        credentials.aws_access_key_id,
        credentials.aws_secret_access_key,
    )
    return CopyParams(
        table=qualify_table(target.redshift.table, target.redshift.db_schema),
        source=quote_literal(S3PathBuilder.object_uri(target.s3.bucket, key)),
        credentials=quote_literal(clause),
        region=quote_literal(target.s3.region),
        option=target.sql_option,
    )


def build_copy_sql(target: Target, key: str, credentials: Credentials) -> str:
    """Render the COPY statement loading an object into the target table."""
    return build_copy_params(target, key, credentials).render()
