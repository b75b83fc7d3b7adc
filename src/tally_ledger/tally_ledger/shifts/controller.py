from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import auth_required, current_claims, json_endpoint, request_range
from ..container import Container


def register(app: Flask, container: Container) -> None:
    tokens = container.tokens

    @app.route("/api/shifts/clock-in", methods=["POST"], endpoint="shifts_clock_in")
    @auth_required(tokens)
    @json_endpoint
    def shifts_clock_in():
        claims = current_claims()
        shift = container.shift_service.clock_in(
            company_id=claims.company_id,
            user_id=claims.user_id,
            user_name=claims.name,
        )
        return jsonify({"id": shift.shift_id, "clock_in": shift.clock_in.isoformat()}), 201

    @app.route("/api/shifts/clock-out", methods=["POST"], endpoint="shifts_clock_out")
    @auth_required(tokens)
    @json_endpoint
    def shifts_clock_out():
        claims = current_claims()
        shift = container.shift_service.clock_out(company_id=claims.company_id, user_id=claims.user_id)
        return jsonify({"id": shift.shift_id, "clock_out": shift.clock_out.isoformat()})

    @app.route("/api/shifts", methods=["GET"], endpoint="shifts_list")
    @auth_required(tokens)
    @json_endpoint
    def shifts_list():
        shifts = container.shift_service.list_shifts(
            company_id=current_claims().company_id,
            date_range=request_range(),
        )
        return jsonify([s.as_dict() for s in shifts])
