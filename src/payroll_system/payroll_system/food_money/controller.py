from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import api_view, to_jsonable
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/food-money", methods=["GET"], endpoint="food_money_list")
    @api_view
    def food_money_list():
        entries = container.food_money_service.list_food_money(request.args.get("month", ""))
        return jsonify(to_jsonable(list(entries)))

    @app.route("/api/food-money/bulk", methods=["POST"], endpoint="food_money_bulk")
    @app.route("/api/food-allowance/bulk", methods=["POST"], endpoint="food_allowance_bulk")
    @api_view
    def food_money_bulk():
        data = request.get_json(silent=True) or {}
        month = data.get("month", "")
        saved = container.food_money_service.set_food_money(month, data.get("entries") or [])
        return jsonify(
            {
                "count": len(saved),
                "entries": to_jsonable(saved),
                "message": f"Set food money for {len(saved)} employee(s) for {month}",
            }
        )
