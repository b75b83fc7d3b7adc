from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import auth_required, current_claims, json_body, json_endpoint, request_range
from ..container import Container


def register(app: Flask, container: Container) -> None:
    tokens = container.tokens

    @app.route("/api/entries", methods=["POST"], endpoint="entries_create")
    @auth_required(tokens)
    @json_endpoint
    def entries_create():
        claims = current_claims()
        body = json_body()
        entry_id = container.entry_service.record(
            company_id=claims.company_id,
            user_id=claims.user_id,
            kind=body.get("type"),
            amount=body.get("amount"),
            entry_date=body.get("date"),
            category=body.get("category"),
            description=body.get("description"),
        )
        return jsonify({"id": entry_id}), 201

    @app.route("/api/entries", methods=["GET"], endpoint="entries_list")
    @auth_required(tokens)
    @json_endpoint
    def entries_list():
        entries = container.entry_service.list_entries(
            company_id=current_claims().company_id,
            date_range=request_range(),
        )
        return jsonify([e.as_dict() for e in entries])
