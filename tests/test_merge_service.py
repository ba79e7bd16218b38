"""Tests for default inheritance."""
from rin.domain.entities.config import Config, RedshiftTable, S3Location, Target
from rin.domain.services.match_service import matches_location
from rin.domain.services.merge_service import merge_config, merge_target


def _global_redshift() -> RedshiftTable:
    return RedshiftTable(
        host="redshift.example.com",
        port=5439,
        dbname="warehouse",
        user="loader",
        password="pw",
        schema="public",
        table="default_table",
    )


def test_empty_fields_inherit_globals():
    """Test every empty target field takes the global default."""
    target = Target(redshift=RedshiftTable(), s3=S3Location())
    s3 = S3Location(region="us-east-1", bucket="logs", key_prefix="app/")
    
    merged = merge_target(target, _global_redshift(), s3, "CSV")
    
    assert merged.redshift == _global_redshift()
    assert merged.s3 == s3
    assert merged.sql_option == "CSV"


def test_set_fields_are_never_overwritten():
    """Test non-empty target fields win over globals."""
    target = Target(
        redshift=RedshiftTable(host="other", port=5440, schema="audit", table="events"),
        s3=S3Location(bucket="mine", key_prefix="x/"),
        sql_option="JSON 'auto'",
    )
    
    merged = merge_target(target, _global_redshift(), S3Location(bucket="logs", region="us-east-1"), "CSV")
    
    assert merged.redshift.host == "other"
    assert merged.redshift.port == 5440
    assert merged.redshift.db_schema == "audit"
    assert merged.redshift.table == "events"
    assert merged.redshift.dbname == "warehouse"
    assert merged.s3.bucket == "mine"
    assert merged.s3.key_prefix == "x/"
    assert merged.s3.region == "us-east-1"
    assert merged.sql_option == "JSON 'auto'"


def test_merge_does_not_mutate_inputs():
    """Test merge returns new objects and leaves inputs untouched."""
    global_s3 = S3Location(bucket="logs", region="us-east-1")
    target = Target(s3=S3Location(key_prefix="app/"), redshift=RedshiftTable(table="events"))
    config = Config(queue_name="q1", s3=global_s3, redshift=_global_redshift(), targets=[target])
    
    merged = merge_config(config)
    
    assert merged is not config
    assert target.s3 == S3Location(key_prefix="app/")
    assert config.s3 == S3Location(bucket="logs", region="us-east-1")
    assert config.redshift == _global_redshift()


def test_merge_is_idempotent():
    """Test merging an already merged config changes nothing."""
    config = Config(
        queue_name="q1",
        s3=S3Location(bucket="logs", region="us-east-1"),
        redshift=_global_redshift(),
        sql_option="CSV",
        targets=[
            Target(s3=S3Location(key_prefix="app/"), redshift=RedshiftTable(table="events")),
            Target(),
        ],
    )
    
    once = merge_config(config)
    
    assert merge_config(once) == once


def test_missing_sections_inherit_global_copy():
    """Test a target without redshift/s3 blocks gets the global ones."""
    config = Config(
        queue_name="q1",
        s3=S3Location(bucket="logs", region="us-east-1"),
        redshift=_global_redshift(),
        targets=[Target()],
    )
    
    merged = merge_config(config)
    
    assert merged.targets[0].s3 == config.s3
    assert merged.targets[0].redshift == config.redshift


def test_missing_globals_leave_target_as_is():
    """Test absent global sections are treated as empty defaults."""
    target = Target(s3=S3Location(bucket="logs"))
    
    merged = merge_config(Config(queue_name="q1", targets=[target]))
    
    assert merged.targets[0] == target
    assert merged.targets[0].redshift is None


def test_end_to_end_scenario():
    """Test target overriding only prefix and table inherits bucket and region."""
    config = Config(
        queue_name="q1",
        s3=S3Location(bucket="logs", region="us-east-1"),
        targets=[Target(s3=S3Location(key_prefix="app/"), redshift=RedshiftTable(table="events"))],
    )
    
    target = merge_config(config).targets[0]
    
    assert target.s3.bucket == "logs"
    assert target.s3.region == "us-east-1"
    assert target.s3.key_prefix == "app/"
    assert target.redshift.table == "events"
    assert matches_location(target, "logs", "app/2024/01/01/f.gz") is True
    assert matches_location(target, "logs", "other/f.gz") is False
