# gamecatalog

A small JSON web service that keeps a catalogue of game creators and the
games they have made. Creators and games are stored in an SQLite database;
deleting a creator also removes that creator's games.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Configuration

Settings are read from the environment. A `.env` file in the working
directory is loaded first, if present.

| Variable       | Meaning                                        | Default |
|----------------|------------------------------------------------|---------|
| `DATABASE_URL` | Location of the SQLite database (required)     | none    |
| `PORT`         | Port the server listens on at `127.0.0.1`      | `8080`  |

`DATABASE_URL` may be `sqlite://PATH`, `sqlite:PATH`, `sqlite::memory:` or a
plain file path. Anything after a `?` is ignored, and URLs with any other
scheme are rejected. Note that `sqlite:///games.db` names the absolute path
`/games.db`.

Example `.env`:

```
DATABASE_URL=sqlite://games.db
PORT=8080
```

`PORT` must be a whole number no greater than 65535.

## Preparing the database

The schema is built by a sequence of migrations, recorded in a
`seaql_migrations` table. Apply every pending one:

```
gamecatalog-migrate up
```

Running `gamecatalog-migrate` with no command does the same. Other commands:

```
gamecatalog-migrate up -n 2     # apply only the next two pending migrations
gamecatalog-migrate status      # list migrations and whether each is applied
gamecatalog-migrate down        # roll back the most recent migration
gamecatalog-migrate down -n 3   # roll back the three most recent migrations
gamecatalog-migrate reset       # roll back every applied migration
gamecatalog-migrate refresh     # roll back every migration, then apply all again
gamecatalog-migrate fresh       # drop every table, then apply all migrations
```

`-u URL` / `--database-url URL` (given before the command) uses that database
instead of `DATABASE_URL`. The tool exits with status 1 on errors.

The migrations create the `creators` and `games` tables (with a cascading
foreign key from `games.creator_id` to `creators.id`) and also an unused
`post` table.

## Running the server

```
gamecatalog
```

It connects to `DATABASE_URL`, prints the address it listens on and serves
the API below with Flask's built-in server on `127.0.0.1`. The database must
already have been migrated.

## API

Request bodies are JSON. Identifiers are UUIDs, and timestamps are UTC in ISO
8601 form ending in `Z`.

Errors are answered with a plain-text body:

- `400` when the body is not JSON, is not an object, lacks a required field,
  has a field of the wrong type or an invalid UUID;
- `404` with `Creator not found` or `Game not found`, and also when an `{id}`
  in the path is not a UUID;
- `500` with the database's message, for example when a game names a
  `creator_id` that does not exist.

### Creators

| Method | Path                          | Result                                  |
|--------|-------------------------------|-----------------------------------------|
| POST   | `/api/creators`               | Create a creator, `201 Created`         |
| GET    | `/api/creators`               | List all creators                       |
| GET    | `/api/creators/{id}`          | One creator, or `404`                   |
| PUT    | `/api/creators/{id}`          | Update given fields, or `404`           |
| DELETE | `/api/creators/{id}`          | `204 No Content`, or `404`              |
| GET    | `/api/creators/{id}/games`    | All games by that creator               |

Creating a creator:

```json
{"first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com"}
```

When updating, every field is optional; only fields present and not `null`
change. `updated_at` is set on every update.

### Games

| Method | Path                          | Result                                  |
|--------|-------------------------------|-----------------------------------------|
| POST   | `/api/games`                  | Create a game, `201 Created`            |
| GET    | `/api/games`                  | List all games                          |
| GET    | `/api/games/{id}`             | One game, or `404`                      |
| PUT    | `/api/games/{id}`             | Update given fields, or `404`           |
| DELETE | `/api/games/{id}`             | `204 No Content`, or `404`              |
| GET    | `/api/games/{id}/with-creator`| The game together with its creator      |

Creating a game:

```json
{
  "name": "Engine Quest",
  "description": "A puzzle game about analytical engines",
  "genre": "puzzle",
  "creator_id": "00000000-0000-0000-0000-000000000001"
}
```

`/api/games/{id}/with-creator` answers with
`{"game": {...}, "creator": {...}}`, or `404` with `Game not found` or
`Creator not found`.

## Using it from Python

The Flask application can be built directly from an open database
connection, which is handy for embedding or testing:

```python
from gamecatalog.database import connect
from gamecatalog.migrations import Migrator
from gamecatalog.routes import create_app

db = connect("sqlite://games.db")
Migrator(db).up()
app = create_app(db)
```

The operations behind the routes can also be called directly with a
connection: `gamecatalog.creator_controller` (`create_creator`,
`get_all_creators`, `get_creator_by_id`, `update_creator`, `delete_creator`,
`get_games_by_creator`) and `gamecatalog.game_controller` (`create_game`,
`list_games`, `get_game`, `update_game`, `delete_game`,
`get_game_with_creator`). They take a request object from `gamecatalog.dtos`
or a plain dict, return `Creator` and `Game` records from
`gamecatalog.models`, and raise `NotFound` or `ValidationError`.

## What it does not do

Only SQLite is supported as storage. There is no authentication, no paging
or filtering of lists, and no production-grade server: `gamecatalog` runs
Flask's development server.