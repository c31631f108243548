"""
Paisley Highland Games - event registration site
Flask application factory.

Serves the JSON API used by the single-page front end: reference data,
registrations with email confirmation, login/signup and the admin
content dashboard with image upload.
"""
import logging
import sqlite3
from datetime import timedelta

import click
from flask import Flask, jsonify
from flask_wtf.csrf import CSRFError

from highlandgames import config
from highlandgames.extensions import csrf, cors

__version__ = '1.0.0'

_CONFIG_KEYS = (
    'DATABASE_PATH', 'IMAGE_UPLOAD_DIR', 'IMAGE_MIRROR_DIR', 'MAX_CONTENT_LENGTH',
    'EMAIL_HOST', 'EMAIL_PORT', 'EMAIL_USER', 'EMAIL_PASS', 'EMAIL_SECURE', 'EMAIL_FROM_NAME',
    'CORS_ORIGINS', 'LOG_LEVEL', 'SECRET_KEY', 'PORT',
)


def create_app(test_config=None, notifier=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    for key in _CONFIG_KEYS:
        app.config[key] = getattr(config, key)
    app.config['RUN_TASKS_INLINE'] = False
    app.config['VERIFY_SMTP_ON_START'] = False
    app.permanent_session_lifetime = timedelta(hours=2)

    # JSON API: CSRF is checked explicitly on admin mutations only
    app.config['WTF_CSRF_CHECK_DEFAULT'] = False

    if test_config:
        app.config.update(test_config)

    _configure_logging(app)

    csrf.init_app(app)
    cors.init_app(app, resources={r'/api/*': {'origins': app.config['CORS_ORIGINS']}},
                  supports_credentials=True)

    from highlandgames.init_db import init_db
    from highlandgames.services import build_services
    init_db(app.config['DATABASE_PATH'])
    app.extensions['highlandgames'] = build_services(app.config, notifier=notifier)
    if app.config['VERIFY_SMTP_ON_START']:
        app.extensions['highlandgames'].notifier.verify()

    from highlandgames.blueprints import register_blueprints
    register_blueprints(app)

    _register_error_handlers(app)
    _register_commands(app)

    return app


def _configure_logging(app):
    level = getattr(logging, str(app.config['LOG_LEVEL']).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )
    app.logger.setLevel(level)


# ==================== ERROR HANDLERS ====================

def _register_error_handlers(app):

    @app.errorhandler(sqlite3.Error)
    def database_error(error):
        """Driver errors are passed through unsanitized."""
        app.logger.error("Database error: %s", error)
        return jsonify({'error': str(error)}), 500

    @app.errorhandler(CSRFError)
    def csrf_error(error):
        return jsonify({'message': error.description}), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'message': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'message': 'Method not allowed'}), 405

    @app.errorhandler(413)
    def too_large(error):
        return jsonify({'message': 'File too large'}), 413

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({'message': 'Internal server error'}), 500


# ==================== CLI ====================

def _register_commands(app):

    @app.cli.command('init-db')
    def init_db_command():
        """Create the database tables."""
        from highlandgames.init_db import init_db
        init_db(app.config['DATABASE_PATH'])
        click.echo('Highland Games tables initialized.')

    @app.cli.command('seed-demo')
    def seed_demo_command():
        """Insert demo events, slides, heritage and tally rows."""
        from highlandgames.init_db import seed_demo_data
        seed_demo_data(app.config['DATABASE_PATH'])
        click.echo('Demo data inserted.')

    @app.cli.command('create-admin')
    @click.argument('username')
    @click.password_option()
    def create_admin_command(username, password):
        """Create an admin account (or reset its password)."""
        admin = app.extensions['highlandgames'].auth.create_admin(username, password)
        click.echo(f'Admin {admin.username} ready.')
