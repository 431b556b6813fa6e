"""
Command line entry point for the directory generator.
This is the only place that decides exit status and prints errors.
"""

import sys
import traceback
from pathlib import Path
from typing import Optional
import click
import yaml

from . import __version__
from .builder import load_and_validate, run_build
from .errors import DirectoryError
from .models import DirectoryConfig
from .utils import init_logger


ERROR_MARKER = "ERROR:"


def fail(message: str):
    """Print an error to stderr and exit with a non-zero status."""
    click.echo(f"{ERROR_MARKER} {message}", err=True)
    sys.exit(1)


@click.command()
@click.option(
    '--config',
    type=click.Path(dir_okay=False),
    default='config.yaml',
    help='Path to configuration file (default: config.yaml)'
)
@click.option(
    '--data-file',
    type=click.Path(dir_okay=False),
    help='Override entry data file from config'
)
@click.option(
    '--output-dir',
    type=click.Path(file_okay=False),
    help='Override output directory from config'
)
@click.option(
    '--check',
    is_flag=True,
    help='Validate entries only; write nothing'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (detailed logs and tracebacks)'
)
@click.version_option(version=__version__, prog_name='webdir')
def main(
    config: str,
    data_file: Optional[str],
    output_dir: Optional[str],
    check: bool,
    debug: bool
):
    """
    Personal Website Directory Generator

    Validate the directory entries and build the HTML page and OPML
    feed list from them.

    Examples:

      # Build index.html and pwd.opml in the current directory
      python main.py

      # Validate only
      python main.py --check

      # Build into another directory
      python main.py --output-dir public
    """
    config_data = load_config(config)

    try:
        directory_config = build_directory_config(
            config_data=config_data or {},
            data_file=data_file,
            output_dir=output_dir,
            debug=debug
        )
    except ValueError as e:
        # pydantic's ValidationError is a ValueError too
        fail(f"Invalid configuration in {config}: {e}")

    logger = init_logger(
        debug_mode=directory_config.debug_mode,
        debug_log_file=directory_config.debug_log_file if directory_config.debug_mode else None
    )
    if config_data is None:
        logger.warning(f"No config file at {config}; building with defaults")

    try:
        if check:
            entries = load_and_validate(directory_config)
            click.echo(f"{len(entries)} entries OK")
        else:
            run_build(directory_config)

    except (DirectoryError, OSError) as e:
        if debug:
            traceback.print_exc()
        fail(str(e))


def load_config(config_path: str) -> Optional[dict]:
    """
    Read the YAML build configuration.
    Returns None when the file does not exist.
    """
    path = Path(config_path)
    if not path.exists():
        return None

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        fail(f"Cannot read config file {config_path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        fail(f"Config file {config_path} must hold a mapping")
    return data


def config_section(config_data: dict, name: str) -> dict:
    """Get one section of the config; an empty section counts as missing."""
    section = config_data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"section '{name}' must be a mapping")
    return section


def build_directory_config(
    config_data: dict,
    data_file: Optional[str],
    output_dir: Optional[str],
    debug: bool
) -> DirectoryConfig:
    """
    Build DirectoryConfig from config file and CLI overrides.

    Raises:
        ValueError: a section is not a mapping or a value has the wrong type
    """
    defaults = DirectoryConfig()

    input_section = config_section(config_data, 'input')
    output_section = config_section(config_data, 'output')
    site_section = config_section(config_data, 'site')
    debug_section = config_section(config_data, 'debug')

    return DirectoryConfig(
        data_file=data_file or input_section.get('data_file', defaults.data_file),
        output_dir=output_dir or output_section.get('dir', defaults.output_dir),
        opml_file=output_section.get('opml_file', defaults.opml_file),
        html_file=output_section.get('html_file', defaults.html_file),
        title=site_section.get('title', defaults.title),
        readme_url=site_section.get('readme_url', defaults.readme_url),
        irc_url=site_section.get('irc_url', defaults.irc_url),
        hn_profile_url=site_section.get('hn_profile_url', defaults.hn_profile_url),
        debug_mode=debug or debug_section.get('enabled', False),
        debug_log_file=debug_section.get('log_file', defaults.debug_log_file),
    )


if __name__ == '__main__':
    main()
