"""
Auth blueprint: login, signup and logout.
"""
from flask import Blueprint, jsonify

from highlandgames.auth import log_in, log_out
from highlandgames.blueprints import get_services, error_response, json_body

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/login', methods=['POST'])
def login():
    data = json_body()
    account = get_services().auth.authenticate(data.get('username'), data.get('password'))
    if not account:
        return jsonify({'success': False, 'message': 'Invalid credentials'}), 401

    log_in(account)
    return jsonify({'success': True, 'user': account.to_public_dict()})


@auth_bp.route('/signup', methods=['POST'])
def signup():
    data = json_body()
    user, errors = get_services().auth.signup(
        data.get('username'), data.get('email'), data.get('password')
    )
    if 'conflict' in errors:
        return jsonify({'success': False, 'message': errors['conflict']}), 409
    if errors:
        body, status = error_response(errors)
        body['success'] = False
        return jsonify(body), status

    return jsonify({'success': True}), 201


@auth_bp.route('/logout', methods=['POST'])
def logout():
    log_out()
    return jsonify({'success': True})
