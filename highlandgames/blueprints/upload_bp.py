"""
Upload blueprint: image upload for the admin content forms.
"""
from flask import Blueprint, request, jsonify

from highlandgames.auth import admin_required
from highlandgames.blueprints import get_services

upload_bp = Blueprint('upload', __name__)


@upload_bp.route('/upload', methods=['POST'])
@admin_required
def upload():
    """Store one file and return the path to reference it by."""
    file_path, error = get_services().image_store.save(request.files.get('file'))
    if error:
        return jsonify({'message': error}), 400
    return jsonify({'filePath': file_path})
