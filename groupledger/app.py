# groupledger/app.py
from flask import Flask, request, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import load_config
from .errors import PayloadError, UnknownMemberError
from .payloads import parse_balances, parse_debt, parse_group
from .settlement import (
    calculate_net_balances,
    find_unknown_users,
    get_settlement_suggestions,
    get_user_balance,
    settlement_expense,
    simplify_debts,
)

app = Flask(__name__)
load_config(app)
CORS(app, origins=app.config["CORS_ORIGINS"])  # Allows the frontend to call us from another origin


def _json_body():
    data = request.get_json(silent=True)
    if data is None:
        raise PayloadError("Request body must be JSON")
    return data


def _group_from_request():
    expenses, members = parse_group(_json_body())
    # Non-members are logged by the balance calculator; strict mode rejects them here
    if app.config["STRICT_MEMBERSHIP"]:
        unknown = find_unknown_users(expenses, members)
        if unknown:
            raise UnknownMemberError(unknown)
    return expenses, members


@app.errorhandler(PayloadError)
def bad_payload(e):
    body = {"error": str(e)}
    if isinstance(e, UnknownMemberError):
        body["unknownUsers"] = e.user_ids
    app.logger.info("Rejected request to %s: %s", request.path, e)
    return jsonify(body), 400


@app.errorhandler(Exception)
def unexpected_error(e):
    if isinstance(e, HTTPException):
        return e
    # Returns the error message to the frontend if something crashes
    app.logger.exception("Unhandled error in %s", request.path)
    return jsonify({"error": str(e)}), 500


# --- 1. HEALTH CHECK ---
@app.route('/api', methods=['GET'])
def health_check():
    return jsonify({"status": "healthy", "message": "Backend is running!"})


# --- 2. BALANCES ---
@app.route('/api/balances', methods=['POST'])
def balances():
    expenses, members = _group_from_request()
    return jsonify({"balances": calculate_net_balances(expenses, members)})


@app.route('/api/balances/<user_id>', methods=['POST'])
def user_balance(user_id):
    expenses, members = _group_from_request()
    return jsonify({"userId": user_id, "balance": get_user_balance(expenses, members, user_id)})


# --- 3. SETTLEMENTS ---
@app.route('/api/settlements', methods=['POST'])
def settlements():
    net, names = parse_balances(_json_body())
    debts = simplify_debts(net, names)
    return jsonify({"settlements": [d.to_dict() for d in debts]})


@app.route('/api/calculate', methods=['POST'])
def calculate():
    expenses, members = _group_from_request()
    debts = get_settlement_suggestions(expenses, members)
    app.logger.debug("Suggested %d payments for %d members", len(debts), len(members))
    return jsonify({
        "balances": calculate_net_balances(expenses, members),
        "settlements": [d.to_dict() for d in debts],
    })


@app.route('/api/settlement-expense', methods=['POST'])
def record_settlement():
    debt = parse_debt(_json_body())
    return jsonify(settlement_expense(debt).to_dict())

