"""
Public blueprint: reference data for the site, the SPA shell and stored images.
"""
from flask import Blueprint, jsonify, render_template, send_from_directory, current_app
from flask_wtf.csrf import generate_csrf

from highlandgames.blueprints import get_services

public_bp = Blueprint('public', __name__)


@public_bp.route('/')
def index():
    """Single-page front end."""
    return render_template('index.html')


@public_bp.route('/images/<path:filename>')
def image(filename):
    """Serve an uploaded image from the primary image directory."""
    return send_from_directory(current_app.config['IMAGE_UPLOAD_DIR'], filename)


@public_bp.route('/api/events')
def list_events():
    events = get_services().content['events'].list_all()
    return jsonify([e.to_dict() for e in events])


@public_bp.route('/api/events/<int:event_id>')
def get_event(event_id):
    event = get_services().content['events'].get(event_id)
    if not event:
        return jsonify({'message': 'Not found'}), 404
    return jsonify(event.to_dict())


@public_bp.route('/api/slides')
def list_slides():
    slides = get_services().content['slides'].list_all()
    return jsonify([s.to_dict() for s in slides])


@public_bp.route('/api/heritage')
def list_heritage():
    items = get_services().content['heritage'].list_all()
    return jsonify([h.to_dict() for h in items])


@public_bp.route('/api/tally')
def list_tally():
    return jsonify(get_services().tally.find_all())


@public_bp.route('/api/csrf-token')
def csrf_token():
    """Token the admin dashboard sends back in the X-CSRFToken header."""
    return jsonify({'csrfToken': generate_csrf()})
