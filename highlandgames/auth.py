"""
Session helpers and route guards for the JSON API.
Login stores username, role and email in the Flask session.
"""
from functools import wraps
from typing import Optional

from flask import session, jsonify, current_app, request

from highlandgames.extensions import csrf
from highlandgames.models.account import Account


def log_in(account: Account) -> None:
    session.clear()
    session.permanent = True
    session['username'] = account.username
    session['role'] = account.role
    if getattr(account, 'email', None):
        session['email'] = account.email


def log_out() -> None:
    session.clear()


def current_role() -> Optional[str]:
    return session.get('role')


def is_admin() -> bool:
    return current_role() == 'admin'


def admin_required(f):
    """Require an admin session; state-changing calls must also carry a CSRF token."""
    @wraps(f)
    def decorated(*args, **kwargs):
        if not current_role():
            return jsonify({'message': 'Login required'}), 401
        if not is_admin():
            return jsonify({'message': 'Admin access required'}), 403
        if request.method != 'GET' and current_app.config.get('WTF_CSRF_ENABLED', True):
            csrf.protect()
        return f(*args, **kwargs)
    return decorated
