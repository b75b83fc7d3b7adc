from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import auth_required, current_claims, json_body, json_endpoint, request_range
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    tokens = container.tokens

    @app.route("/api/extras", methods=["POST"], endpoint="extras_create")
    @auth_required(tokens, Role.ADMIN)
    @json_endpoint
    def extras_create():
        claims = current_claims()
        body = json_body()
        extra_id = container.extra_service.record(
            current_role=claims.role,
            company_id=claims.company_id,
            expense_date=body.get("date"),
            amount=body.get("amount"),
            description=body.get("description"),
        )
        return jsonify({"id": extra_id}), 201

    @app.route("/api/extras", methods=["GET"], endpoint="extras_list")
    @auth_required(tokens)
    @json_endpoint
    def extras_list():
        extras = container.extra_service.list_extras(
            company_id=current_claims().company_id,
            date_range=request_range(),
        )
        return jsonify([x.as_dict() for x in extras])
