"""Default inheritance from global config into targets.

A target field is unset when it holds its type's zero value ("" or 0).
There is no presence marker, so a target cannot explicitly opt into an
empty value while the matching global default is non-empty.
"""
from typing import TypeVar

from pydantic import BaseModel

from rin.domain.entities.config import Config, RedshiftTable, S3Location, Target
from rin.infra.common import get_logger

logger = get_logger(__name__)

SectionT = TypeVar("SectionT", bound=BaseModel)


def _fill_unset(section: SectionT | None, defaults: SectionT | None) -> SectionT | None:
    """Return a copy of section with zero-valued fields taken from defaults."""
    if defaults is None:
        return section
    if section is None:
        return defaults.model_copy()
    updates = {
        name: getattr(defaults, name)
        for name in type(section).model_fields
        if not getattr(section, name)
    }
    return section.model_copy(update=updates)


def merge_target(
    target: Target,
    redshift: RedshiftTable | None = None,
    s3: S3Location | None = None,
    sql_option: str = "",
) -> Target:
    """
    Resolve a target against global defaults.
    
    Args:
        target: Target as declared in the config
        redshift: Global Redshift defaults
        s3: Global S3 defaults
        sql_option: Global SQL option
        
    Returns:
        New Target; inputs are left untouched
    """
    return target.model_copy(update={
        "redshift": _fill_unset(target.redshift, redshift),
        "s3": _fill_unset(target.s3, s3),
        "sql_option": target.sql_option or sql_option,
    })


def merge_config(config: Config) -> Config:
    """
    Resolve every target of a config against its global defaults.
    
    Applying this to its own output returns an equal config.
    
    Args:
        config: Config as parsed from the declarative source
        
    Returns:
        New Config with resolved targets
    """
    targets = [
        merge_target(target, config.redshift, config.s3, config.sql_option)
        for target in config.targets
    ]
    logger.debug("Merged defaults into %d targets", len(targets))
    return config.model_copy(update={"targets": targets})
