import os

from flask import Blueprint, current_app, jsonify, send_from_directory

main = Blueprint('main', __name__)


@main.route('/')
def index():
    client_dir = os.path.abspath(current_app.config['CLIENT_DIR'])
    return send_from_directory(client_dir, 'index.html')


@main.route('/health')
def health_check():
    return jsonify({'status': 'ok', 'service': 'racer'})
