"""
Admin blueprint: registration review and content management
for events, slides and heritage items.
"""
from flask import Blueprint, jsonify, abort

from highlandgames.auth import admin_required
from highlandgames.blueprints import get_services, error_response, json_body

admin_bp = Blueprint('admin', __name__)

CONTENT_TYPES = ('events', 'slides', 'heritage')


def _content_service(kind):
    if kind not in CONTENT_TYPES:
        abort(404)
    return get_services().content[kind]


def _status_for(errors):
    return 404 if 'id' in errors else 400


# ---------------------------------------------------------------------------
# Registrations
# ---------------------------------------------------------------------------
@admin_bp.route('/registrations')
@admin_required
def list_registrations():
    """All registrations, newest first."""
    registrations = get_services().registrations.list_registrations()
    return jsonify([r.to_dict() for r in registrations])


@admin_bp.route('/registrations/<int:registration_id>', methods=['PUT'])
@admin_required
def update_registration(registration_id):
    """Approve or reject a registration."""
    data = json_body()
    registration, errors = get_services().registrations.update_status(
        registration_id, data.get('status')
    )
    if errors:
        return error_response(errors, _status_for(errors))
    return jsonify({'message': 'Updated', 'registration': registration.to_dict()})


# ---------------------------------------------------------------------------
# Content: /events, /slides, /heritage
# ---------------------------------------------------------------------------
@admin_bp.route('/<kind>', methods=['POST'])
@admin_required
def create_content(kind):
    service = _content_service(kind)
    entity, errors = service.create(json_body())
    if errors:
        return error_response(errors)
    return jsonify({'message': 'Created', 'item': entity.to_dict()}), 201


@admin_bp.route('/<kind>/<int:entity_id>', methods=['PUT'])
@admin_required
def update_content(kind, entity_id):
    """Partial update: omitted fields keep their stored value."""
    service = _content_service(kind)
    entity, errors = service.update(entity_id, json_body())
    if errors:
        return error_response(errors, _status_for(errors))
    return jsonify({'message': 'Updated', 'item': entity.to_dict()})


@admin_bp.route('/<kind>/<int:entity_id>', methods=['DELETE'])
@admin_required
def delete_content(kind, entity_id):
    service = _content_service(kind)
    deleted, errors = service.delete(entity_id)
    if not deleted:
        return error_response(errors, _status_for(errors))
    return jsonify({'message': 'Deleted'})
