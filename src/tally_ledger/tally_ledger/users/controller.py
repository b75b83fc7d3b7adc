from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import auth_required, current_claims, json_body, json_endpoint
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    tokens = container.tokens

    @app.route("/api/auth/register", methods=["POST"], endpoint="auth_register")
    @json_endpoint
    def auth_register():
        body = json_body()
        token = container.auth_service.register(
            company_name=body.get("companyName"),
            company_email=body.get("companyEmail"),
            company_phone=body.get("companyPhone"),
            name=body.get("name"),
            email=body.get("email"),
            password=body.get("password"),
        )
        return jsonify({"token": token})

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    @json_endpoint
    def auth_login():
        body = json_body()
        token = container.auth_service.login(body.get("email"), body.get("password"))
        return jsonify({"token": token})

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @auth_required(tokens)
    @json_endpoint
    def me():
        user = container.user_service.get_profile(current_claims().user_id)
        return jsonify(user.profile())

    @app.route("/api/users", methods=["POST"], endpoint="users_create")
    @auth_required(tokens, Role.ADMIN)
    @json_endpoint
    def users_create():
        claims = current_claims()
        body = json_body()
        user_id = container.user_service.create_employee(
            current_role=claims.role,
            company_id=claims.company_id,
            name=body.get("name"),
            email=body.get("email"),
            password=body.get("password"),
        )
        return jsonify({"id": user_id}), 201

    @app.route("/api/users", methods=["GET"], endpoint="users_list")
    @auth_required(tokens, Role.ADMIN)
    @json_endpoint
    def users_list():
        claims = current_claims()
        users = container.user_service.list_company_users(current_role=claims.role, company_id=claims.company_id)
        return jsonify([u.profile() for u in users])
