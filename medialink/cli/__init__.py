"""CLI entry point for medialink."""

import logging

import rich_click as click

from .. import __version__

# Import command modules — avoid shadowing module names with command objects
# so that `import medialink.cli.<module>` still resolves to the module.
from . import config_cmd as _config_mod
from . import image_cmd as _image_mod
from . import parse_cmd as _parse_mod


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Resolve, format and validate embeddable media links."""
    if verbose:
        logging.basicConfig(
            format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            level=logging.DEBUG,
        )


# Register commands
cli.add_command(_parse_mod.parse)
cli.add_command(_parse_mod.link)
cli.add_command(_parse_mod.scan)
cli.add_command(_image_mod.image)
cli.add_command(_config_mod.config)


if __name__ == "__main__":
    cli()
