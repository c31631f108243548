"""
Registration blueprint: submissions and status lookups by email.
"""
from flask import Blueprint, request, jsonify, session

from highlandgames.blueprints import get_services, error_response, json_body

registration_bp = Blueprint('registration', __name__)


@registration_bp.route('/register', methods=['POST'])
def register():
    """Register a submitter for one event (eventName) or several (eventNames)."""
    data = json_body()

    registrations, errors = get_services().registrations.register(
        name=data.get('name'),
        email=data.get('email'),
        reg_type=data.get('type'),
        event_name=data.get('eventName'),
        event_names=data.get('eventNames'),
    )
    if errors:
        return error_response(errors)

    return jsonify({
        'message': 'Success',
        'registered': [r.event_name for r in registrations]
    })


def _registrations_by_email():
    email = request.args.get('email', '').strip() or session.get('email')
    if not email:
        return jsonify({'message': 'Email is required'}), 400
    return jsonify(get_services().registrations.registrations_for_email(email))


@registration_bp.route('/check-status')
def check_status():
    """Status of every registration made with an email."""
    return _registrations_by_email()


@registration_bp.route('/user/my-registrations')
def my_registrations():
    """Dashboard listing; falls back to the logged-in user's email."""
    return _registrations_by_email()
