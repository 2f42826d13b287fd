from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import api_view, json_error, to_jsonable
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_list")
    @api_view
    def payroll_list():
        records = container.payroll_service.list_payroll(
            month=request.args.get("month") or None,
            department=request.args.get("department") or None,
        )
        return jsonify(to_jsonable(list(records)))

    @app.route("/api/payroll/generate", methods=["POST"], endpoint="payroll_generate")
    @api_view
    def payroll_generate():
        data = request.get_json(silent=True) or {}
        result = container.payroll_service.generate_payroll(
            data.get("month", ""),
            data.get("department") or None,
        )
        warnings = to_jsonable(result.warnings)

        if not result.created:
            return json_error(
                "No payroll generated",
                400,
                message="No active employees with attendance found",
                warnings=warnings,
                created=[],
            )

        message = f"Payroll generated for {result.count} employee(s)"
        if result.warnings:
            message += f". {len(result.warnings)} employee(s) skipped."
        return jsonify(
            {
                "created": to_jsonable(result.created),
                "count": result.count,
                "warnings": warnings,
                "message": message,
            }
        )

    @app.route("/api/payroll/<emp_id>", methods=["GET"], endpoint="payroll_for_employee")
    @api_view
    def payroll_for_employee(emp_id: str):
        records = container.payroll_service.payroll_for_employee(emp_id, request.args.get("month") or None)
        return jsonify(to_jsonable(list(records)))

    @app.route("/api/payroll/<emp_id>", methods=["PATCH"], endpoint="payroll_update")
    @api_view
    def payroll_update(emp_id: str):
        data = request.get_json(silent=True) or {}
        record = container.payroll_service.update_payroll(
            emp_id,
            data.get("month", ""),
            food_allowance=data.get("food_allowance"),
            deductions=data.get("deductions"),
            comments=data.get("comments"),
        )
        return jsonify(to_jsonable(record))
