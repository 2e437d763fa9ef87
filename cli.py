import json
from pathlib import Path

import click

from admin_session import AdminSession
from portfolio_client import RESOURCE_LABELS, PortfolioClient, PortfolioClientError
from utils import split_list_text

RESOURCE_CHOICE = click.Choice(sorted(RESOURCE_LABELS))


def _require_session(ctx: click.Context) -> None:
    if not ctx.obj["session"].is_authenticated():
        raise click.ClickException("Admin session expired or missing. Run `login` first.")


def _split_fields(payload, fields: tuple[str, ...]):
    records = payload if isinstance(payload, list) else [payload]
    for record in records:
        if not isinstance(record, dict):
            continue
        for field in fields:
            if isinstance(record.get(field), str):
                record[field] = split_list_text(record[field])
    return payload


@click.group()
@click.option("--base-url", envvar="PORTFOLIO_API_URL", default=None, help="Content API base URL")
@click.option("--session-file", type=click.Path(path_type=Path), default=None)
@click.pass_context
def cli(ctx, base_url, session_file):
    ctx.ensure_object(dict)
    ctx.obj["base_url"] = base_url
    ctx.obj["session"] = AdminSession(path=session_file)


@cli.command()
@click.password_option("--password", confirmation_prompt=False)
@click.pass_context
def login(ctx, password):
    if not ctx.obj["session"].login(password):
        raise click.ClickException("Invalid password")
    click.echo("Logged in")


@cli.command()
@click.pass_context
def logout(ctx):
    ctx.obj["session"].logout()
    click.echo("Logged out")


@cli.command()
@click.pass_context
def status(ctx):
    click.echo("authenticated" if ctx.obj["session"].is_authenticated() else "not authenticated")


@cli.command()
@click.argument("resource", type=RESOURCE_CHOICE)
@click.pass_context
def show(ctx, resource):
    try:
        with PortfolioClient(ctx.obj["base_url"]) as client:
            data = client.fetch_achievements() if resource == "achievements" else client.fetch(resource)
    except PortfolioClientError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


@cli.command()
@click.argument("resource", type=RESOURCE_CHOICE)
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--token", envvar="ADMIN_TOKEN", required=True, help="Server bearer token")
@click.option("--split", "split_fields", multiple=True, help="Field holding newline/comma separated text to send as a list")
@click.pass_context
def push(ctx, resource, source, token, split_fields):
    """Replace RESOURCE with the whole JSON document in SOURCE."""
    _require_session(ctx)
    try:
        payload = json.load(source)
    except ValueError as exc:
        raise click.ClickException(f"{source.name} is not valid JSON: {exc}") from exc
    payload = _split_fields(payload, split_fields)
    try:
        with PortfolioClient(ctx.obj["base_url"]) as client:
            client.save(resource, payload, token)
    except PortfolioClientError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Saved {RESOURCE_LABELS[resource]}")


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--token", envvar="ADMIN_TOKEN", required=True, help="Server bearer token")
@click.pass_context
def upload(ctx, path, token):
    _require_session(ctx)
    try:
        with PortfolioClient(ctx.obj["base_url"]) as client:
            result = client.upload_image(path, token)
    except PortfolioClientError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(result["url"])


if __name__ == "__main__":
    cli()
