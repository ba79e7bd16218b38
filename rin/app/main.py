"""CLI entry point for checking configs and rendering COPY statements."""
from typing import Optional

import typer

from rin.domain.services.copy_service import build_copy_sql
from rin.domain.services.match_service import find_target
from rin.infra.common import ConfigError, MissingConfigError, setup_logging, get_logger
from rin.infra.configs.config_loader import load_config
from rin.infra.configs.env_loader import default_config_path, load_env_file

load_env_file()
setup_logging()
logger = get_logger(__name__)

app = typer.Typer(help="Load S3 objects into Redshift: config tools.", no_args_is_help=True)

CONFIG_HELP = "Config path or s3:// URI (default: $RIN_CONFIG or config.yml)"


@app.command()
def check(
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
):
    """Validate config and list its targets."""
    path = config_path or default_config_path()
    try:
        config = load_config(path)
    except ConfigError as e:
        logger.error("Invalid config %s: %s", path, e)
        raise typer.Exit(code=1)

    for target in config.targets:
        redshift = target.redshift
        if redshift is not None and redshift.password:
            redshift = redshift.model_copy(update={"password": "xxxxx"})
        source = target.s3 if target.s3 is not None else "(no s3 section)"
        destination = redshift if redshift is not None else "(no redshift section)"
        typer.echo(f"{source} => {destination}")
    typer.echo(f"Config OK: queue={config.queue_name}, targets={len(config.targets)}")


@app.command()
def render(
    bucket: str = typer.Argument(..., help="S3 bucket name"),
    key: str = typer.Argument(..., help="S3 object key"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
):
    """Print the COPY statement for an S3 object (nothing is executed)."""
    path = config_path or default_config_path()
    try:
        config = load_config(path)
    except ConfigError as e:
        logger.error("Invalid config %s: %s", path, e)
        raise typer.Exit(code=1)
    
    target = find_target(config, bucket, key)
    if target is None:
        logger.error("No target matches s3://%s/%s", bucket, key)
        raise typer.Exit(code=1)
    
    try:
        sql = build_copy_sql(target, key, config.credentials)
    except MissingConfigError as e:
        logger.error("Cannot render COPY for s3://%s/%s: %s", bucket, key, e)
        raise typer.Exit(code=1)
    
    typer.echo(sql)


if __name__ == "__main__":
    app()
