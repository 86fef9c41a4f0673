# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import asyncio
import json
import logging
from typing import Any, Callable

import click

from wpapi.errors import WPTransportError
from wpapi.request import WPRequest
from wpapi.resources import (
    CollectionRequest,
    MediaRequest,
    PagesRequest,
    PostsRequest,
    TaxonomiesRequest,
    TypesRequest,
    UsersRequest,
)
from wpapi.site import WP

RESOURCES: dict[str, type[CollectionRequest]] = {
    "taxonomies": TaxonomiesRequest,
    "users": UsersRequest,
    "posts": PostsRequest,
    "pages": PagesRequest,
    "types": TypesRequest,
    "media": MediaRequest,
}

ACTIONS = ("terms", "me", "comments", "revisions")


def request_options(func: Callable[..., Any]) -> Callable[..., Any]:
    options = [
        click.argument("resource", type=click.Choice(sorted(RESOURCES))),
        click.option("--id", "resource_id", type=str, help="Item of the collection"),
        click.option(
            "--action",
            type=click.Choice(ACTIONS),
            help="Sub-resource to navigate to (e.g. terms, comments)",
        ),
        click.option("--action-id", type=str, help="Item of the sub-resource"),
        click.option("--path", "page_path", type=str, help="Page path (pages only)"),
        click.option(
            "--endpoint",
            type=str,
            envvar="WP_API_ENDPOINT",
            required=True,
            help="Base URI of the REST API",
        ),
        click.option("--username", type=str, envvar="WP_API_USERNAME"),
        click.option("--password", type=str, envvar="WP_API_PASSWORD"),
        click.option(
            "--timeout",
            type=float,
            envvar="WP_API_TIMEOUT",
            help="Request timeout in seconds",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_request(
    ctx: click.Context,
    resource: str,
    resource_id: str | None,
    action: str | None,
    action_id: str | None,
    page_path: str | None,
    endpoint: str,
    username: str | None,
    password: str | None,
    timeout: float | None,
) -> WPRequest:
    site_options: dict[str, Any] = {"endpoint": endpoint}
    if username is not None:
        site_options["username"] = username
    if password is not None:
        site_options["password"] = password
    if timeout is not None:
        site_options["timeout"] = timeout

    site = WP(site_options, transport=(ctx.obj or {}).get("transport"))
    request: Any = site.request(RESOURCES[resource])

    if page_path is not None:
        if not isinstance(request, PagesRequest):
            raise click.UsageError("--path is only available for pages")
        request = request.path(page_path)

    if resource_id is not None:
        request = request.id(resource_id)

    if action is not None:
        navigate = getattr(request, action, None)
        if navigate is None:
            raise click.UsageError(f"{resource} has no '{action}' action")
        request = navigate()

    if action_id is not None:
        if action is None:
            raise click.UsageError("--action-id requires --action")
        request = request.id(action_id)

    return request


@click.group()
@click.option("--verbose", is_flag=True, envvar="WP_API_VERBOSE", help="Log requests")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    ctx.ensure_object(dict)
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@cli.command()
@request_options
@click.pass_context
def uri(ctx: click.Context, **kwargs: Any) -> None:
    """Print the URI a request would target."""
    click.echo(build_request(ctx, **kwargs).generate_request_uri())


def run_verb(ctx: click.Context, verb: str, kwargs: dict[str, Any]) -> None:
    request = build_request(ctx, **kwargs)

    async def run() -> Any:
        return await getattr(request, verb)()

    try:
        result = asyncio.run(run())
    except WPTransportError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    click.echo(json.dumps(result, indent=2, default=str))


@cli.command()
@request_options
@click.pass_context
def get(ctx: click.Context, **kwargs: Any) -> None:
    """Perform a GET request and print the response body."""
    run_verb(ctx, "get", kwargs)


@cli.command()
@request_options
@click.pass_context
def head(ctx: click.Context, **kwargs: Any) -> None:
    """Perform a HEAD request and print the response headers."""
    run_verb(ctx, "head", kwargs)
