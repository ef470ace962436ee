import click

from .._services._normalizer import describe_status, is_success_status
from .._utils._urls import check_url, extract_domain


@click.command()
@click.argument("code", type=int)
def status(code: int) -> None:
    """Describe an HTTP status CODE."""
    outcome = "success" if is_success_status(code) else "failure"
    click.echo(f"{code} {describe_status(code)} ({outcome})")


@click.command()
@click.argument("url")
def domain(url: str) -> None:
    """Print the domain part of URL."""
    click.echo(extract_domain(url))


@click.command()
@click.argument("url")
@click.pass_context
def validate(ctx: click.Context, url: str) -> None:
    """Check whether URL would be accepted for a request."""
    problem = check_url(url)
    if problem is None:
        click.echo("valid")
        return
    click.echo(f"invalid: {problem.value}")
    ctx.exit(1)
