import importlib.metadata
import os

import click
from dotenv import load_dotenv

from .._utils.constants import DOTENV_FILE
from .cli_send import send as send


def _get_safe_version() -> str:
    """Get the version of the restspec package."""
    try:
        return importlib.metadata.version("restspec")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


@click.group()
@click.version_option(
    _get_safe_version(),
    prog_name="restspec",
    message="%(prog)s version %(version)s",
)
def cli() -> None:
    load_dotenv(dotenv_path=os.path.join(os.getcwd(), DOTENV_FILE), override=False)


cli.add_command(send)
