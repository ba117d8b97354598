from __future__ import annotations

from functools import wraps

from flask import Flask, g, jsonify, request

from ..common.datetime_utils import now_timestamp
from ..common.identity import normalize_identity
from ..core.constants import DEFAULT_HISTORY_LIMIT, DEFAULT_IDENTITY_HEADER
from ..core.exceptions import (
    AlreadyRegistered,
    AuthorizationError,
    DomainError,
    InvalidTimestamp,
    NotRegistered,
    ValidationError,
)
from ..container import Container


def _status_for(error: DomainError) -> int:
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, (AuthorizationError, NotRegistered)):
        return 403
    if isinstance(error, AlreadyRegistered):
        return 409
    return 422


def _parse_timestamp(value) -> float:
    if isinstance(value, str):
        v = value.strip()
        try:
            return int(v)
        except ValueError:
            try:
                return float(v)
            except ValueError:
                raise InvalidTimestamp("Timestamp must be a number of seconds since the epoch")
    return value


def register(app: Flask, container: Container) -> None:
    ledger = container.ledger
    header = app.config.get("IDENTITY_HEADER", DEFAULT_IDENTITY_HEADER)

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"success": False, "error": e.code, "message": str(e)}), _status_for(e)

    def identity_required(view):
        """The upstream proxy authenticates the caller and forwards the identity header."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            caller = (request.headers.get(header) or "").strip()
            if not caller:
                body = {"success": False, "error": "Unauthenticated", "message": f"Missing {header} header"}
                return jsonify(body), 401
            g.caller = caller
            return view(*args, **kwargs)

        return wrapper

    def _json_body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    @app.route("/api/admin", methods=["GET"], endpoint="admin_identity")
    def admin_identity():
        return jsonify({"success": True, "admin": ledger.admin_identity})

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @identity_required
    def me():
        return jsonify({"success": True, "status": ledger.caller_status(g.caller).to_dict()})

    @app.route("/api/participants", methods=["POST"], endpoint="register_participant")
    @identity_required
    def register_participant():
        data = _json_body()
        participant = ledger.register_participant(g.caller, data.get("name"))
        return jsonify({"success": True, "participant": participant.to_dict()}), 201

    @app.route("/api/participants", methods=["GET"], endpoint="list_participants")
    @identity_required
    def list_participants():
        include_evicted = request.args.get("include_evicted", "0").lower() in {"1", "true", "yes"}
        rows = ledger.list_participants(g.caller, include_evicted=include_evicted)
        return jsonify({"success": True, "participants": [p.to_dict() for p in rows]})

    @app.route("/api/participants/<identity>", methods=["GET"], endpoint="participant_profile")
    def participant_profile(identity: str):
        participant = ledger.get_profile(identity)
        if participant is None:
            # Unknown identities read as an empty, unregistered profile.
            unknown = {"identity": normalize_identity(identity), "name": "", "registered": False}
            return jsonify({"success": True, "participant": unknown})
        return jsonify({"success": True, "participant": participant.to_dict()})

    @app.route("/api/participants/<identity>", methods=["DELETE"], endpoint="evict_participant")
    @identity_required
    def evict_participant(identity: str):
        ledger.evict_user(g.caller, identity)
        return jsonify({"success": True})

    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    @identity_required
    def mark_attendance():
        data = request.get_json(silent=True)
        data = data if isinstance(data, dict) else {}
        timestamp = _parse_timestamp(data.get("timestamp", now_timestamp()))
        record = ledger.mark_own_attendance(g.caller, timestamp)
        return jsonify({"success": True, "record": record.to_dict()}), 201

    @app.route("/api/attendance/<identity>", methods=["GET"], endpoint="check_attendance")
    def check_attendance(identity: str):
        raw = request.args.get("timestamp")
        timestamp = _parse_timestamp(raw) if raw is not None else now_timestamp()
        present = ledger.check_attendance(identity, timestamp)
        return jsonify({"success": True, "recorded": present is not None, "present": present})

    @app.route("/api/attendance/<identity>/history", methods=["GET"], endpoint="attendance_history")
    def attendance_history(identity: str):
        try:
            limit = int(request.args.get("limit", DEFAULT_HISTORY_LIMIT))
        except ValueError:
            raise ValidationError("limit must be an integer")
        rows = ledger.attendance_history(identity, limit=limit)
        return jsonify({"success": True, "records": [r.to_dict() for r in rows]})

    @app.route("/api/attendance/<identity>", methods=["PUT"], endpoint="modify_attendance")
    @identity_required
    def modify_attendance(identity: str):
        data = _json_body()
        if "timestamp" not in data or "present" not in data:
            raise ValidationError("timestamp and present are required")
        timestamp = _parse_timestamp(data["timestamp"])
        record = ledger.modify_attendance(g.caller, identity, timestamp, data["present"])
        return jsonify({"success": True, "record": record.to_dict()})
