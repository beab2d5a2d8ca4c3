"""JSON API for recording costs and reading reports."""

from typing import Optional

from flask import Blueprint, Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from config import Config
from errors import InternalFailure, MissingUserId, SpendbookError
from logger import get_logger
from services.base import Services
from tools.costs import record_cost
from tools.reports import get_monthly_report
from tools.users import summarize_user
from validation import CostRequest, ReportRequest, coerce_user_id

logger = get_logger()

api = Blueprint("api", __name__)


def _services() -> Services:
    return current_app.config["SERVICES"]


def _config() -> Config:
    return _services().config


@api.route("/costs", methods=["POST"])
@api.route("/add", methods=["POST"])
def add_cost():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    cost = record_cost(
        _services(), CostRequest.from_dict(payload), _config().validation_policy()
    )
    return (
        jsonify({"message": "Cost Item Added Successfully", "data": cost.to_dict()}),
        201,
    )


@api.route("/report", methods=["GET"])
def monthly_report():
    report_request = ReportRequest(
        id=request.args.get("id"),
        year=request.args.get("year"),
        month=request.args.get("month"),
    )
    report = get_monthly_report(
        _services(), report_request, _config().validation_policy()
    )
    return jsonify(report.to_dict())


@api.route("/users/<user_id>", methods=["GET"])
def user_summary(user_id: str):
    # Any value that is not a storable id is simply an unknown user
    summary = summarize_user(_services(), coerce_user_id(user_id))
    return jsonify(
        {
            "message": "User Information Retrieved Successfully",
            "data": summary.to_dict(),
        }
    )


@api.route("/about", methods=["GET"])
def about():
    team = [
        {"first_name": member["first_name"], "last_name": member["last_name"]}
        for member in _config().team
    ]
    return jsonify({"message": "Team Information Retrieved Successfully", "data": team})


def _handle_spendbook_error(error: SpendbookError):
    status = error.status
    if isinstance(error, MissingUserId) and _config().missing_report_id == "internal":
        status = InternalFailure.status
    if status >= 500:
        logger.error(f"{request.method} {request.path} failed: {error.message}")
    return jsonify(error.to_dict()), status


def _handle_unexpected_error(error: Exception):
    # Routing errors (404, 405) keep their own status
    if isinstance(error, HTTPException):
        return jsonify({"error": error.name, "message": error.description}), error.code

    logger.exception(f"Unhandled error on {request.method} {request.path}")
    failure = InternalFailure(str(error))
    return jsonify(failure.to_dict()), failure.status


def create_app(config: Config, services: Optional[Services] = None) -> Flask:
    """Build the Flask application.

    Args:
        config: Application configuration.
        services: Optional services container (tests inject one backed by an
            in-memory database).

    Returns:
        Configured Flask app with the API mounted under /api.
    """
    app = Flask(__name__)
    app.config["SERVICES"] = services or Services(config)
    app.json.sort_keys = False

    app.register_blueprint(api, url_prefix="/api")
    app.register_error_handler(SpendbookError, _handle_spendbook_error)
    app.register_error_handler(Exception, _handle_unexpected_error)

    return app
