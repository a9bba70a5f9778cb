"""Terminal front end: list, filter and add records against a running server."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from recordcrate import __version__
from recordcrate.client.api import RecordsClient
from recordcrate.client.render import render_form, render_list
from recordcrate.client.session import Session
from recordcrate.config import API_URL, LOG_FORMAT
from recordcrate.models.record import RECORD_FIELDS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="recordcrate", description="Record collection manager")
    parser.add_argument("--api-url", default=API_URL, help=f"Server URL (default: {API_URL})")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("serve", help="Run the API and static file server")

    list_cmd = sub.add_parser("list", help="Show records, optionally filtered")
    list_cmd.add_argument("--filter", default="", help="Case-insensitive pattern matched against every field")

    add_cmd = sub.add_parser("add", help="Validate and submit a new record")
    for name in RECORD_FIELDS:
        add_cmd.add_argument(f"--{name}", default="")
    return parser


async def list_records(client: RecordsClient, filter_text: str) -> int:
    session = Session(client)
    view = await session.start()
    if filter_text:
        view = session.set_filter(filter_text)
    print(render_list(view))
    return 1 if view.fetch_failed else 0


async def add_record(client: RecordsClient, values: dict[str, str]) -> int:
    session = Session(client)
    view = await session.start()
    if view.fetch_failed:
        print(render_list(view))
        return 1
    for name in RECORD_FIELDS:
        view = session.edit(name, values.get(name, ""))
    print(render_form(view))
    if not view.submit_enabled:
        print("Record not submitted: fix the fields marked * or !")
        return 1
    print("Submitting...")
    if not await session.submit():
        print(render_form(session.view))
        return 1
    print(render_list(session.view))
    return 0


async def _run(args: argparse.Namespace) -> int:
    async with RecordsClient(args.api_url) as client:
        if args.command == "list":
            return await list_records(client, args.filter)
        values = {name: getattr(args, name) for name in RECORD_FIELDS}
        return await add_record(client, values)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "serve":
        from recordcrate.main import main as serve

        serve()
        return 0
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    return asyncio.run(_run(args))


if __name__ == "__main__":
    sys.exit(main())
