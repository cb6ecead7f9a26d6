"""Schema migrations for the catalogue database and their command line."""

from __future__ import annotations

import argparse
import sqlite3
import sys
import time
from contextlib import closing
from dataclasses import dataclass

from dotenv import load_dotenv

from gamecatalog.database import connect

_TRACKING_TABLE = "seaql_migrations"


@dataclass(frozen=True)
class Migration:
    """A named schema change with the statements that apply and revert it."""

    name: str
    up_statements: tuple[str, ...]
    down_statements: tuple[str, ...]

    def up(self, conn: sqlite3.Connection) -> None:
        for statement in self.up_statements:
            conn.execute(statement)

    def down(self, conn: sqlite3.Connection) -> None:
        for statement in self.down_statements:
            conn.execute(statement)


MIGRATIONS: tuple[Migration, ...] = (
    Migration(
        name="m20220101_000001_create_table",
        up_statements=(
            'CREATE TABLE IF NOT EXISTS "post" ('
            '"id" integer NOT NULL PRIMARY KEY AUTOINCREMENT, '
            '"title" varchar NOT NULL, '
            '"text" text, '
            '"created_at" timestamp NOT NULL)',
        ),
        down_statements=('DROP TABLE "post"',),
    ),
    Migration(
        name="m20250529_055640_create_creator_and_game_tables",
        up_statements=(
            'CREATE TABLE IF NOT EXISTS "creator" ('
            '"id" uuid_text NOT NULL PRIMARY KEY, '
            '"first_name" varchar NOT NULL, '
            '"last_name" varchar NOT NULL, '
            '"email" varchar NOT NULL, '
            '"created_at" timestamp_with_timezone_text NOT NULL, '
            '"updated_at" timestamp_with_timezone_text NOT NULL)',
            'CREATE TABLE IF NOT EXISTS "game" ('
            '"id" uuid_text NOT NULL PRIMARY KEY, '
            '"name" varchar NOT NULL, '
            '"description" varchar NOT NULL, '
            '"genre" varchar NOT NULL, '
            '"creator_id" uuid_text NOT NULL, '
            '"created_at" timestamp_with_timezone_text NOT NULL, '
            '"updated_at" timestamp_with_timezone_text NOT NULL, '
            'CONSTRAINT "fk-game-creator_id" FOREIGN KEY ("creator_id") '
            'REFERENCES "creator" ("id") ON DELETE CASCADE)',
        ),
        down_statements=('DROP TABLE "game"', 'DROP TABLE "creator"'),
    ),
    Migration(
        name="m20250529_061644_rename_creator_to_creators",
        up_statements=('ALTER TABLE "creator" RENAME TO "creators"',),
        down_statements=('ALTER TABLE "creators" RENAME TO "creator"',),
    ),
    Migration(
        name="m20250529_070451_rename_game_to_games",
        up_statements=('ALTER TABLE "game" RENAME TO "games"',),
        down_statements=('ALTER TABLE "games" RENAME TO "game"',),
    ),
)


class Migrator:
    """Applies and reverts migrations, recording which ones have run."""

    def __init__(self, conn: sqlite3.Connection, migrations: tuple[Migration, ...] = MIGRATIONS):
        self.conn = conn
        self.migrations = tuple(migrations)

    def _ensure_tracking_table(self) -> None:
        self.conn.execute(
            f'CREATE TABLE IF NOT EXISTS "{_TRACKING_TABLE}" ('
            '"version" varchar NOT NULL PRIMARY KEY, '
            '"applied_at" bigint NOT NULL)'
        )
        self.conn.commit()

    def applied(self) -> list[str]:
        """Names of applied migrations, oldest first."""
        self._ensure_tracking_table()
        rows = self.conn.execute(
            f'SELECT "version" FROM "{_TRACKING_TABLE}" ORDER BY "version"'
        ).fetchall()
        return [row[0] for row in rows]

    def pending(self) -> list[Migration]:
        """Migrations not yet applied, in order."""
        done = set(self.applied())
        return [migration for migration in self.migrations if migration.name not in done]

    def up(self, steps: int | None = None) -> list[str]:
        """Apply pending migrations, all of them or the first ``steps``."""
        todo = self.pending()
        if steps is not None:
            todo = todo[:steps]
        names = []
        for migration in todo:
            try:
                migration.up(self.conn)
                self.conn.execute(
                    f'INSERT INTO "{_TRACKING_TABLE}" ("version", "applied_at") VALUES (?, ?)',
                    (migration.name, int(time.time())),
                )
                self.conn.commit()
            except sqlite3.Error:
                self.conn.rollback()
                raise
            names.append(migration.name)
        return names

    def down(self, steps: int | None = None) -> list[str]:
        """Revert applied migrations, newest first: all of them or ``steps``."""
        by_name = {migration.name: migration for migration in self.migrations}
        targets = list(reversed(self.applied()))
        if steps is not None:
            targets = targets[:steps]
        for name in targets:
            if name not in by_name:
                raise RuntimeError(f"Migration file of version '{name}' is missing")
        names = []
        for name in targets:
            try:
                by_name[name].down(self.conn)
                self.conn.execute(
                    f'DELETE FROM "{_TRACKING_TABLE}" WHERE "version" = ?', (name,)
                )
                self.conn.commit()
            except sqlite3.Error:
                self.conn.rollback()
                raise
            names.append(name)
        return names

    def fresh(self) -> list[str]:
        """Drop every table in the database, then apply all migrations."""
        self.conn.commit()
        enforced = self.conn.execute("PRAGMA foreign_keys").fetchone()[0]
        self.conn.execute("PRAGMA foreign_keys = OFF")
        try:
            tables = [
                row[0]
                for row in self.conn.execute(
                    "SELECT name FROM sqlite_master "
                    "WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
                )
            ]
            for table in tables:
                escaped = table.replace('"', '""')
                self.conn.execute(f'DROP TABLE "{escaped}"')
            self.conn.commit()
        finally:
            self.conn.execute(f"PRAGMA foreign_keys = {'ON' if enforced else 'OFF'}")
        return self.up()

    def status(self) -> list[tuple[str, bool]]:
        """Every known migration paired with whether it has been applied."""
        done = set(self.applied())
        return [(migration.name, migration.name in done) for migration in self.migrations]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gamecatalog-migrate", description="Manage the database schema.")
    parser.add_argument("-u", "--database-url", help="database URL (default: DATABASE_URL)")
    commands = parser.add_subparsers(dest="command")
    up = commands.add_parser("up", help="apply pending migrations")
    up.add_argument("-n", "--num", type=int, default=None, help="number of migrations to apply")
    down = commands.add_parser("down", help="roll back applied migrations")
    down.add_argument("-n", "--num", type=int, default=1, help="number of migrations to roll back")
    commands.add_parser("fresh", help="drop all tables and apply all migrations")
    commands.add_parser("refresh", help="roll back all migrations and apply them again")
    commands.add_parser("reset", help="roll back all migrations")
    commands.add_parser("status", help="show the state of every migration")
    return parser


def _report(action: str, names: list[str]) -> None:
    if not names:
        print("No migrations to run")
    for name in names:
        print(f"{action} migration '{name}'")


def main(argv: list[str] | None = None) -> int:
    """Run a migration command; returns the process exit code."""
    args = _build_parser().parse_args(argv)
    load_dotenv()
    try:
        conn = connect(args.database_url)
    except (RuntimeError, ValueError, sqlite3.Error) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    with closing(conn):
        migrator = Migrator(conn)
        command = args.command or "up"
        try:
            if command == "up":
                _report("Applying", migrator.up(getattr(args, "num", None)))
            elif command == "down":
                _report("Rolling back", migrator.down(args.num))
            elif command == "fresh":
                _report("Applying", migrator.fresh())
            elif command == "refresh":
                _report("Rolling back", migrator.down())
                _report("Applying", migrator.up())
            elif command == "reset":
                _report("Rolling back", migrator.down())
            else:
                for name, applied in migrator.status():
                    print(f"Migration '{name}'... {'Applied' if applied else 'Pending'}")
        except (RuntimeError, sqlite3.Error) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())