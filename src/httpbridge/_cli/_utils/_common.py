import click

from ...models.request import RequestSpec
from ...models.response import ResponseResult
from ..._config import Config
from ..._services._dispatcher import CallbackDispatcher
from ..._utils.constants import REQUEST_TIMEOUT_SECONDS
from ...client import HttpClient

# Slack on top of the transport timeout before the CLI gives up waiting.
_WAIT_MARGIN_SECONDS = 5.0


def output_options(function):
    function = click.option(
        "--format",
        "fmt",
        type=click.Choice(["table", "json"]),
        default="table",
        show_default=True,
        help="Output format",
    )(function)
    function = click.option(
        "--no-color", is_flag=True, default=False, help="Disable colored output"
    )(function)
    return function


def parse_header_option(values: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated ``-H "Name: value"`` options."""
    headers: dict[str, str] = {}
    for raw in values:
        name, separator, value = raw.partition(":")
        if not separator or not name.strip():
            raise click.BadParameter(
                f"Expected 'Name: value', got {raw!r}", param_hint="--header"
            )
        headers[name.strip()] = value.strip()
    return headers


def run_request(spec: RequestSpec, config: Config) -> ResponseResult:
    """Issue a request and wait for its callback on the calling thread."""
    dispatcher = CallbackDispatcher()
    results: list[ResponseResult] = []

    with HttpClient(config=config, dispatcher=dispatcher) as client:
        client.submit(spec, results.append)
        dispatcher.process_pending(timeout=REQUEST_TIMEOUT_SECONDS + _WAIT_MARGIN_SECONDS)

    if not results:
        raise click.ClickException("Timed out waiting for the response")
    return results[0]
