"""S3 to Redshift load configuration and COPY rendering."""

__version__ = "0.1.0"
