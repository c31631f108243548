"""
Blueprints for the Highland Games JSON API and the single-page shell.
"""
from flask import current_app, request


def get_services():
    """Services wired by create_app() for the current application."""
    return current_app.extensions['highlandgames']


def error_response(errors, status=400):
    """JSON body for a failed operation: first message plus the field errors."""
    message = next(iter(errors.values()), 'Invalid request')
    return {'message': message, 'errors': errors}, status


def register_blueprints(app):
    from .public_bp import public_bp
    from .registration_bp import registration_bp
    from .auth_bp import auth_bp
    from .admin_bp import admin_bp
    from .upload_bp import upload_bp

    app.register_blueprint(public_bp)
    app.register_blueprint(registration_bp, url_prefix='/api')
    app.register_blueprint(auth_bp, url_prefix='/api')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(upload_bp, url_prefix='/api')


def json_body():
    """The request's JSON object, or an empty dict for anything else."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
