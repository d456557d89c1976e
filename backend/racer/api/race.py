from flask import Blueprint, current_app, jsonify

race = Blueprint('race', __name__)


@race.route('/state', methods=['GET'])
def get_race_state():
    session = current_app.extensions['race_session']
    with session.lock:
        payload = session.snapshot()
    return jsonify(payload)


@race.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    session = current_app.extensions['race_session']
    with session.lock:
        entries = session.leaderboard.snapshot()
    return jsonify(entries)
