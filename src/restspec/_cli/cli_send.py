import json
from typing import Any, Optional, Tuple

import click
import httpx

from .._adapters import HttpxClientAdapter
from .._builders import with_expected_body
from .._config import ClientConfig
from .._specs import BodySpec, FormSpec
from .._utils._logs import setup_logging
from ..models.errors import RestSpecError
from ._utils._console import ConsoleLogger

console = ConsoleLogger()

_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def _split(value: str, separator: str, option: str) -> Tuple[str, str]:
    key, found, rest = value.partition(separator)
    if not found or not key.strip():
        raise click.BadParameter(
            f"expected 'key{separator}value', got '{value}'", param_hint=option
        )
    return key.strip(), rest.strip() if separator == ":" else rest


def _parse_body(data: str) -> Any:
    try:
        return json.loads(data)
    except json.JSONDecodeError:
        return data


def _build_request(
    url: str,
    method: str,
    headers: Tuple[str, ...],
    params: Tuple[str, ...],
    files: Tuple[str, ...],
    data: Optional[str],
    accept: Optional[str],
    content_type: Optional[str],
    bearer: Optional[str],
    user: Optional[str],
):
    method_spec = with_expected_body(str).uri(url)
    spec: FormSpec[str] = getattr(method_spec, method.lower())()

    if (files or data is not None) and not isinstance(spec, BodySpec):
        raise click.UsageError(f"{method} requests cannot carry a body or files.")

    for header in headers:
        spec.add_header(*_split(header, ":", "--header"))
    for param in params:
        spec.add_param(*_split(param, "=", "--param"))
    if accept:
        spec.accept([media_type.strip() for media_type in accept.split(",")])
    if content_type:
        spec.content_type(content_type)
    if bearer:
        spec.bearer_token(bearer)
    if user:
        username, found, password = user.partition(":")
        if not found:
            console.warning("No password given for --user, sending an empty one")
        spec.basic_auth(username, password)

    if isinstance(spec, BodySpec):
        for file in files:
            spec.add_file(*_split(file, "=", "--file"))
        if data is not None:
            spec.body(_parse_body(data))

    return spec.build()


def _print_body(text: Optional[str]) -> None:
    if not text:
        return
    try:
        click.echo(json.dumps(json.loads(text), indent=2))
    except json.JSONDecodeError:
        click.echo(text)


@click.command()
@click.argument("url")
@click.option(
    "--method",
    "-X",
    type=click.Choice(_METHODS, case_sensitive=False),
    default="GET",
    show_default=True,
    help="HTTP method",
)
@click.option("--header", "-H", "headers", multiple=True, help="Header as 'Name: value'")
@click.option("--param", "-p", "params", multiple=True, help="Parameter as 'key=value'")
@click.option("--file", "-F", "files", multiple=True, help="Attachment as 'key=path'")
@click.option("--data", "-d", default=None, help="Request body, JSON or plain text")
@click.option("--accept", default=None, help="Comma separated acceptable media types")
@click.option("--content-type", default=None, help="Content-Type of the request")
@click.option("--bearer", default=None, help="Bearer token")
@click.option("--user", "-u", default=None, help="Basic auth as 'username:password'")
@click.option("--debug", is_flag=True, help="Log request details")
def send(
    url: str,
    method: str,
    headers: Tuple[str, ...],
    params: Tuple[str, ...],
    files: Tuple[str, ...],
    data: Optional[str],
    accept: Optional[str],
    content_type: Optional[str],
    bearer: Optional[str],
    user: Optional[str],
    debug: bool,
) -> None:
    """Build a request and send it to URL."""
    setup_logging(should_debug=debug)

    try:
        request = _build_request(
            url,
            method.upper(),
            headers,
            params,
            files,
            data,
            accept,
            content_type,
            bearer,
            user,
        )
    except RestSpecError as e:
        console.error(f"Invalid request: {e}")
        return

    with HttpxClientAdapter(config=ClientConfig.from_env()) as adapter:
        try:
            with console.spinner(f"{request.method} {request.uri}"):
                envelope = adapter.send(request)
        except httpx.HTTPStatusError as e:
            console.info(f"{e.response.status_code} {e.response.reason_phrase}")
            _print_body(e.response.text)
            console.error(f"Request failed with status {e.response.status_code}")
            return
        except httpx.HTTPError as e:
            console.error(f"Request failed: {e}")
            return

    console.success(f"{envelope.status_code}")
    _print_body(envelope.body)
