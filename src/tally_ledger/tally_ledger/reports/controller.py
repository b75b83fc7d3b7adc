from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.http import auth_required, current_claims, json_endpoint, request_range
from ..container import Container
from .model import BUCKET_KEY_FIELDS


def register(app: Flask, container: Container) -> None:
    tokens = container.tokens

    def _wants_csv() -> bool:
        return (request.args.get("format") or "").lower() == "csv"

    def _write_report_csv(*, rows: list[dict], fieldnames: list[str], filename: str):
        """Write report rows to a CSV attachment.

        Shared helper used by every report export.
        """

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=fieldnames, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports/summary", methods=["GET"], endpoint="reports_summary")
    @auth_required(tokens)
    @json_endpoint
    def reports_summary():
        date_range = request_range()
        report = container.report_service.summary(
            company_id=current_claims().company_id,
            date_range=date_range,
            period=request.args.get("period"),
        )
        if _wants_csv():
            fieldnames = [BUCKET_KEY_FIELDS[report.period], "in", "out", "profit"]
            if report.period.value == "monthly":
                fieldnames.insert(3, "extra")
            return _write_report_csv(
                rows=[b.as_dict(report.period) for b in report.buckets],
                fieldnames=fieldnames,
                filename=f"summary_{report.period.value}_{date_range.start}_to_{date_range.end}.csv",
            )
        return jsonify(report.as_dict())

    @app.route("/api/reports/by-employee", methods=["GET"], endpoint="reports_by_employee")
    @auth_required(tokens)
    @json_endpoint
    def reports_by_employee():
        date_range = request_range()
        report = container.report_service.by_employee(company_id=current_claims().company_id, date_range=date_range)
        if _wants_csv():
            return _write_report_csv(
                rows=report.row_dicts(),
                fieldnames=["employee_name", "total_in", "total_out", "profit"],
                filename=f"by_employee_{date_range.start}_to_{date_range.end}.csv",
            )
        return jsonify(report.as_dict())

    @app.route("/api/reports/by-category", methods=["GET"], endpoint="reports_by_category")
    @auth_required(tokens)
    @json_endpoint
    def reports_by_category():
        date_range = request_range()
        report = container.report_service.by_category(company_id=current_claims().company_id, date_range=date_range)
        if _wants_csv():
            return _write_report_csv(
                rows=report.row_dicts(),
                fieldnames=["category", "total_in", "total_out", "profit"],
                filename=f"by_category_{date_range.start}_to_{date_range.end}.csv",
            )
        return jsonify(report.as_dict())

    @app.route("/api/reports/traffic", methods=["GET"], endpoint="reports_traffic")
    @auth_required(tokens)
    @json_endpoint
    def reports_traffic():
        report = container.report_service.traffic(company_id=current_claims().company_id, date_range=request_range())
        return jsonify(report.as_dict())
