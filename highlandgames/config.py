"""
Highland Games Configuration
Values are read from the environment (and a local .env file when present).
"""
import os

from dotenv import load_dotenv

load_dotenv()

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_DIR = os.path.dirname(BASE_DIR)

# Database configuration
DATABASE_PATH = os.environ.get('DATABASE_PATH', os.path.join(PROJECT_DIR, 'data', 'highland_games.db'))

# Image storage: primary (build output) and mirror (dev-serve) directories
IMAGE_UPLOAD_DIR = os.environ.get('IMAGE_UPLOAD_DIR', os.path.join(PROJECT_DIR, 'client', 'dist', 'images'))
IMAGE_MIRROR_DIR = os.environ.get('IMAGE_MIRROR_DIR', os.path.join(PROJECT_DIR, 'client', 'public', 'images'))
IMAGE_URL_PREFIX = '/images/'
MAX_CONTENT_LENGTH = 10 * 1024 * 1024  # 10MB

ALLOWED_IMAGE_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp', 'svg'}

# Outbound mail
EMAIL_HOST = os.environ.get('EMAIL_HOST', '')
EMAIL_PORT = int(os.environ.get('EMAIL_PORT', '465'))
EMAIL_USER = os.environ.get('EMAIL_USER', '')
EMAIL_PASS = os.environ.get('EMAIL_PASS', '')
EMAIL_SECURE = os.environ.get('EMAIL_SECURE', 'true').lower() in ('1', 'true', 'yes')
EMAIL_FROM_NAME = os.environ.get('EMAIL_FROM_NAME', 'Paisley Games')

# Server
PORT = int(os.environ.get('PORT', '3001'))
CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

# Map centre used when an event has no usable coordinates
DEFAULT_LAT = 55.8456
DEFAULT_LNG = -4.4239

# Business rules
VALID_STATUSES = ['pending', 'approved', 'rejected']
VALID_REGISTRATION_TYPES = ['individual', 'group']

# Flask secret key (MUST be set in production via environment variable)
SECRET_KEY = os.environ.get('FLASK_SECRET_KEY')
if not SECRET_KEY:
    # Development fallback - generates a random key per process
    import secrets
    SECRET_KEY = secrets.token_hex(32)
    print("WARNING: Using auto-generated SECRET_KEY. Set FLASK_SECRET_KEY environment variable in production!")
