from flask import Blueprint, jsonify

bp = Blueprint("routes", __name__)

API_VERSION = "1.0.0"


@bp.get("/")
def index():
    """Describe the API and list its endpoints."""
    return jsonify(
        {
            "statusCode": 200,
            "message": "Customer Records API",
            "isError": False,
            "version": API_VERSION,
            "endpoints": {
                "GET /customers": "List all customers",
                "GET /customers/<id>": "Get a customer by id",
                "POST /customers": "Create a customer",
                "PUT /customers/<id>": "Update a customer",
                "DELETE /customers/<id>": "Delete a customer",
            },
        }
    )


@bp.get("/health")
def health():
    """Health check endpoint. Returns JSON."""
    return {"ok": True}


@bp.get("/healthz")
def healthz():
    """
    Fast health check for container probes. No DB access, minimal overhead.
    """
    return "ok", 200
