"""Shared fixtures."""
import pytest


CONFIG_YAML = """\
queue_name: q1
credentials:
  aws_access_key_id: AKIAEXAMPLE
  aws_secret_access_key: secret
  aws_region: us-east-1
redshift:
  host: redshift.example.com
  port: 5439
  dbname: warehouse
  user: loader
  password: pw
s3:
  bucket: logs
  region: us-east-1
sql_option: CSV GZIP
targets:
  - redshift:
      table: events
    s3:
      key_prefix: app/
  - redshift:
      schema: audit
      table: access
    s3:
      key_prefix: app/access/
    sql_option: JSON 'auto'
"""


@pytest.fixture
def config_yaml() -> str:
    """Valid config document with two overlapping targets."""
    return CONFIG_YAML


@pytest.fixture
def config_file(tmp_path, config_yaml):
    """Write the valid config document to a temporary file."""
    path = tmp_path / "config.yml"
    path.write_text(config_yaml, encoding="utf-8")
    return path
