"""
heroku_pg/routes/diagnostics.py
-------------------------------
Blueprint for checking that the app can reach its database.

  GET  /api/health      -> SELECT 1 on a pooled connection
  POST /api/smoke-test  -> create / insert / select / drop on a pooled connection

No SQL beyond the health check lives here; the smoke test is in
heroku_pg/services/smoke_test.py. The smoke test always uses the
SMOKE_TEST_TABLE from app.config; callers cannot choose the table.
"""

import atexit
import logging
import threading

import psycopg
from flask import Blueprint, current_app, jsonify

from heroku_pg.db.connection import ConnectionFailed, get_pool
from heroku_pg.services.smoke_test import smoke_test_pool

diagnostics_bp = Blueprint("diagnostics", __name__)

EXTENSION_KEY = "heroku_pg"

_pool_lock = threading.Lock()

logger = logging.getLogger(__name__)


def get_app_pool():
    """
    Return the pool for the current app, opening it on first use.

    The pool is built from DATABASE_URL and POOL_MAX_SIZE in app.config and
    closed when the interpreter exits. Concurrent first requests share one pool.
    """
    app = current_app._get_current_object()
    with _pool_lock:
        pool = app.extensions.get(EXTENSION_KEY)
        if pool is None:
            pool = get_pool(
                app.config["DATABASE_URL"],
                app.config["POOL_MAX_SIZE"],
                min_size = app.config["POOL_MIN_SIZE"],
                timeout  = app.config["POOL_TIMEOUT"],
                name     = app.name,
            )
            app.extensions[EXTENSION_KEY] = pool
            atexit.register(pool.close)
    return pool


def _unavailable(error):
    logger.error(f"Database unavailable: {error}")
    return jsonify({"status": "unavailable", "error": str(error).split("\n")[0]}), 503


# ─────────────────────────────────────────────────────────────────────────────
# GET /api/health
# ─────────────────────────────────────────────────────────────────────────────

@diagnostics_bp.route("/health", methods=["GET"])
def health():
    """
    Success Response — 200
    ----------------------
    { "status": "ok" }

    Error Response — 503
    --------------------
    { "status": "unavailable", "error": "connect failed: ..." }

    A pool that cannot be opened, a checkout that times out and a
    connection dropped by the server all count as unavailable.
    """
    pool = get_app_pool()
    try:
        with pool.connection() as conn:
            conn.execute("SELECT 1")
    except psycopg.OperationalError as e:
        return _unavailable(e)
    return jsonify({"status": "ok"}), 200


# ─────────────────────────────────────────────────────────────────────────────
# POST /api/smoke-test
# ─────────────────────────────────────────────────────────────────────────────

@diagnostics_bp.route("/smoke-test", methods=["POST"])
def run_smoke_test():
    """
    Runs against the SMOKE_TEST_TABLE configured for the app.
    The request body is ignored.

    Success Response — 200
    ----------------------
    {
        "table": "person_nonconflicting",
        "rows":  [ { "id": 1, "name": "Ferris", "data": null } ]
    }
    """
    table = current_app.config["SMOKE_TEST_TABLE"]
    rows  = smoke_test_pool(get_app_pool(), table, out=logger.info)

    return jsonify({
        "table": table,
        "rows": [
            {
                "id":   row.id,
                "name": row.name,
                "data": row.data.hex() if row.data is not None else None,
            }
            for row in rows
        ],
    }), 200


# ─────────────────────────────────────────────────────────────────────────────
# Error handlers
# ─────────────────────────────────────────────────────────────────────────────

@diagnostics_bp.errorhandler(ConnectionFailed)
def connection_failed(e):
    return _unavailable(e)


@diagnostics_bp.errorhandler(psycopg.Error)
def query_failed(e):
    err = str(e).split("\n")[0]
    logger.error(f"Query failed: {err}")
    return jsonify({"status": "error", "error": err}), 500
