import click
from dotenv import load_dotenv

from .._config import Config
from .._logging import configure_logging
from .._utils.constants import DOTENV_FILE
from .cli_request import get, post, request
from .cli_utils import domain, status, validate


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log request activity")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Issue HTTP requests and inspect URLs and status codes."""
    load_dotenv(DOTENV_FILE)
    config = Config.from_env()
    configure_logging("INFO" if verbose else config.log_level)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


cli.add_command(get)
cli.add_command(post)
cli.add_command(request)
cli.add_command(status)
cli.add_command(domain)
cli.add_command(validate)
