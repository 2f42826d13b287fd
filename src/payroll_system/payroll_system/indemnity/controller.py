from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import api_view, to_jsonable
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/indemnity", methods=["GET"], endpoint="indemnity_list")
    @api_view
    def indemnity_list():
        return jsonify(to_jsonable(list(container.indemnity_service.list_indemnity())))

    @app.route("/api/indemnity/<emp_id>", methods=["GET"], endpoint="indemnity_get")
    @api_view
    def indemnity_get(emp_id: str):
        return jsonify(to_jsonable(container.indemnity_service.get_indemnity(emp_id)))

    @app.route("/api/indemnity/calculate", methods=["POST"], endpoint="indemnity_calculate")
    @api_view
    def indemnity_calculate():
        records = container.indemnity_service.recalculate_indemnity()
        return jsonify({"message": "Indemnity calculated successfully", "records": to_jsonable(records)})

    @app.route("/api/indemnity/<emp_id>/pay", methods=["PATCH"], endpoint="indemnity_pay")
    @api_view
    def indemnity_pay(emp_id: str):
        data = request.get_json(silent=True) or {}
        record = container.indemnity_service.mark_paid(emp_id, indemnity_amount=data.get("indemnity_amount"))
        return jsonify(to_jsonable(record))
