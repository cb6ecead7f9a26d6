"""Starting the catalogue's HTTP server."""

from __future__ import annotations

import argparse
import os
import re
import sqlite3
import sys
from contextlib import closing

from dotenv import load_dotenv

from gamecatalog.database import connect
from gamecatalog.routes import create_app

DEFAULT_PORT = 8080
_HOST = "127.0.0.1"


def resolve_port(value: str | None) -> int:
    """The port to listen on: ``value`` as a number, or 8080 when unset."""
    if value is None:
        return DEFAULT_PORT
    text = str(value)
    if not re.fullmatch(r"\+?[0-9]+", text):
        raise ValueError(f"invalid port: {text!r}")
    port = int(text)
    if port > 65535:
        raise ValueError(f"port out of range: {text!r}")
    return port


def main(argv: list[str] | None = None) -> int:
    """Connect to the database and serve the catalogue until stopped."""
    argparse.ArgumentParser(
        prog="gamecatalog", description="Serve the game catalogue over HTTP."
    ).parse_args(argv)
    load_dotenv()
    try:
        db = connect()
    except (RuntimeError, ValueError, sqlite3.Error) as exc:
        print(f"Failed to connect to database: {exc}", file=sys.stderr)
        return 1
    with closing(db):
        try:
            port = resolve_port(os.environ.get("PORT"))
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print(f"🚀 Server running at http://localhost:{port}")
        create_app(db).run(host=_HOST, port=port)
    return 0


if __name__ == "__main__":
    sys.exit(main())