"""
PassLock Local API
==================
Flask bridge the front-end calls to save a password.

Binds to the loopback interface only; the vault is local to this machine.
"""

import os
from typing import Optional

from flask import Flask, request, jsonify

from passlock import __version__
from passlock.bridge import configure_logging, save_password
from passlock.core.config import VaultConfig
from passlock.core.errors import VaultErrorKind

# Failures caused by the request itself rather than the vault
_CLIENT_ERRORS = frozenset({VaultErrorKind.INVALID_INPUT})


def create_app(config: Optional[VaultConfig] = None) -> Flask:
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = 64 * 1024
    app.config["VAULT_CONFIG"] = config

    def vault_config() -> VaultConfig:
        return app.config["VAULT_CONFIG"] or VaultConfig.get_instance()

    # ============================================================
    # ROUTES
    # ============================================================

    @app.route("/api/health")
    def health():
        return jsonify({"status": "ok", "version": __version__})

    @app.route("/api/passwords", methods=["POST"])
    def create_password():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"ok": False, "error": "JSON body required"}), 400

        label = data.get("label")
        password = data.get("password")
        if not isinstance(label, str) or not isinstance(password, str):
            return jsonify({"ok": False, "error": "label and password are required"}), 400

        result = save_password(label, password, vault_config())
        if result.ok:
            return jsonify(result.to_dict()), 201

        status = 400 if result.kind in _CLIENT_ERRORS else 500
        return jsonify(result.to_dict()), status

    return app


# ============================================================
# ENTRY POINT
# ============================================================

def main() -> None:
    config = VaultConfig.load()
    configure_logging(config)
    config.ensure_directories()
    app = create_app(config)
    app.run(host="127.0.0.1", port=int(os.environ.get("PASSLOCK_PORT", 5000)))


if __name__ == "__main__":
    main()
