from __future__ import annotations

from flask import Flask, jsonify, request

from .dispatcher import Bridge


def register(app: Flask, bridge: Bridge) -> None:
    """Expose the bridge over HTTP for a webview or browser UI."""

    @app.route("/api/operations", methods=["GET"], endpoint="api_operations")
    def api_operations():
        return jsonify({"success": True, "data": bridge.operations()})

    @app.route("/api/<operation>", methods=["POST"], endpoint="api_invoke")
    def api_invoke(operation: str):
        # Domain failures still answer 200: the envelope carries them.
        envelope = bridge.invoke(operation, request.get_json(silent=True))
        status = 404 if envelope.get("code") == "InvalidChannel" else 200
        return jsonify(envelope), status
