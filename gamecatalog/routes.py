"""HTTP routes of the catalogue."""

from __future__ import annotations

import sqlite3
import threading
import uuid

from flask import Flask, Response, jsonify, request

from gamecatalog import creator_controller, game_controller
from gamecatalog.creator_controller import NotFound
from gamecatalog.dtos import ValidationError


def _text(message: str, status: int) -> Response:
    return Response(message, status=status, mimetype="text/plain")


def _body():
    data = request.get_json(silent=True)
    if data is None:
        raise ValidationError("Json deserialize error: expected a JSON request body")
    return data


def create_app(db: sqlite3.Connection) -> Flask:
    """Build the web application serving creators and games from ``db``."""
    app = Flask(__name__)
    lock = threading.Lock()

    def call(func, *args):
        with lock:
            return func(db, *args)

    @app.errorhandler(NotFound)
    def _not_found(exc):
        return _text(str(exc), 404)

    @app.errorhandler(ValidationError)
    def _bad_request(exc):
        return _text(str(exc), 400)

    @app.errorhandler(sqlite3.Error)
    def _database_error(exc):
        return _text(str(exc), 500)

    @app.post("/api/creators")
    def create_creator():
        creator = call(creator_controller.create_creator, _body())
        return jsonify(creator.to_dict()), 201

    @app.get("/api/creators")
    def get_all_creators():
        return jsonify([c.to_dict() for c in call(creator_controller.get_all_creators)])

    @app.get("/api/creators/<uuid:creator_id>")
    def get_creator_by_id(creator_id: uuid.UUID):
        return jsonify(call(creator_controller.get_creator_by_id, creator_id).to_dict())

    @app.put("/api/creators/<uuid:creator_id>")
    def update_creator(creator_id: uuid.UUID):
        payload = _body()
        return jsonify(call(creator_controller.update_creator, creator_id, payload).to_dict())

    @app.delete("/api/creators/<uuid:creator_id>")
    def delete_creator(creator_id: uuid.UUID):
        call(creator_controller.delete_creator, creator_id)
        return Response(status=204)

    @app.get("/api/creators/<uuid:creator_id>/games")
    def get_games_by_creator(creator_id: uuid.UUID):
        games = call(creator_controller.get_games_by_creator, creator_id)
        return jsonify([g.to_dict() for g in games])

    @app.post("/api/games")
    def create_game():
        game = call(game_controller.create_game, _body())
        return jsonify(game.to_dict()), 201

    @app.get("/api/games")
    def list_games():
        return jsonify([g.to_dict() for g in call(game_controller.list_games)])

    @app.get("/api/games/<uuid:game_id>")
    def get_game(game_id: uuid.UUID):
        return jsonify(call(game_controller.get_game, game_id).to_dict())

    @app.put("/api/games/<uuid:game_id>")
    def update_game(game_id: uuid.UUID):
        payload = _body()
        return jsonify(call(game_controller.update_game, game_id, payload).to_dict())

    @app.delete("/api/games/<uuid:game_id>")
    def delete_game(game_id: uuid.UUID):
        call(game_controller.delete_game, game_id)
        return Response(status=204)

    @app.get("/api/games/<uuid:game_id>/with-creator")
    def get_game_with_creator(game_id: uuid.UUID):
        game, creator = call(game_controller.get_game_with_creator, game_id)
        return jsonify({"game": game.to_dict(), "creator": creator.to_dict()})

    return app