import click

from ..models.request import HttpMethod, RequestSpec
from .._utils.constants import DEFAULT_CONTENT_TYPE, HEADER_CONTENT_TYPE
from ._utils._common import output_options, parse_header_option, run_request
from ._utils._formatters import format_result


def _execute(ctx: click.Context, spec: RequestSpec, fmt: str, no_color: bool) -> None:
    result = run_request(spec, ctx.obj["config"])
    format_result(result, fmt=fmt, no_color=no_color)
    if not result.success:
        ctx.exit(1)


@click.command()
@click.argument("url")
@output_options
@click.pass_context
def get(ctx: click.Context, url: str, fmt: str, no_color: bool) -> None:
    """Send a GET request to URL."""
    _execute(ctx, RequestSpec(url=url, method=HttpMethod.GET.value), fmt, no_color)


@click.command()
@click.argument("url")
@click.option("--body", "-d", default="", help="Request body")
@click.option(
    "--content-type",
    default=DEFAULT_CONTENT_TYPE,
    show_default=True,
    help="Content-Type of the body",
)
@output_options
@click.pass_context
def post(
    ctx: click.Context,
    url: str,
    body: str,
    content_type: str,
    fmt: str,
    no_color: bool,
) -> None:
    """Send a POST request to URL."""
    spec = RequestSpec(
        url=url,
        method=HttpMethod.POST.value,
        body=body,
        headers={HEADER_CONTENT_TYPE: content_type or DEFAULT_CONTENT_TYPE},
    )
    _execute(ctx, spec, fmt, no_color)


@click.command()
@click.argument("method")
@click.argument("url")
@click.option(
    "--header",
    "-H",
    "header_values",
    multiple=True,
    help='Extra header as "Name: value" (repeatable)',
)
@click.option("--body", "-d", default="", help="Request body")
@output_options
@click.pass_context
def request(
    ctx: click.Context,
    method: str,
    url: str,
    header_values: tuple[str, ...],
    body: str,
    fmt: str,
    no_color: bool,
) -> None:
    """Send a METHOD request to URL with custom headers."""
    spec = RequestSpec(
        url=url,
        method=method,
        body=body,
        headers=parse_header_option(header_values),
    )
    _execute(ctx, spec, fmt, no_color)
