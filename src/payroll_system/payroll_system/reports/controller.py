from __future__ import annotations

import csv
import io

from flask import Flask, Response, jsonify, request

from ..common.api import api_view, to_jsonable
from ..container import Container
from .model import REPORT_COLUMNS, ReportRow


def render_csv(rows: list[ReportRow]) -> str:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow([title for _, title in REPORT_COLUMNS])
    for row in rows:
        data = to_jsonable(row)
        writer.writerow([data[key] if data[key] is not None else "" for key, _ in REPORT_COLUMNS])
    return output.getvalue()


def register(app: Flask, container: Container) -> None:
    def _build():
        return container.report_service.build_monthly_report(
            request.args.get("month", ""),
            request.args.get("department") or None,
        )

    @app.route("/api/reports/monthly", methods=["GET"], endpoint="report_monthly")
    @api_view
    def report_monthly():
        return jsonify(to_jsonable(_build()))

    @app.route("/api/reports/monthly.csv", methods=["GET"], endpoint="report_monthly_csv")
    @api_view
    def report_monthly_csv():
        rows = _build()
        filename = f"payroll_report_{request.args.get('month', '')}.csv"
        return Response(
            render_csv(rows),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
