from flask import Blueprint, jsonify, request, current_app
from promptguess.models import PlayerScore, ScoreRecord
from promptguess.services.leaderboard import LeaderboardError
from promptguess.services.provider import ProviderError


game = Blueprint('game', __name__)


def _session():
    return current_app.extensions['game_session']

def _leaderboard():
    return current_app.extensions['leaderboard']

def _provider():
    return current_app.extensions['image_provider']

def _scorer():
    return current_app.extensions['scorer']

def _nonempty_str(value) -> bool:
    return isinstance(value, str) and bool(value.strip())

def _render_guess_image(text):
    """Best effort: a failed render is logged and reported as None."""
    try:
        return _provider().generate_image_for(text)
    except Exception as exc:
        current_app.logger.warning(f"[guess-image-failed] {exc}")
        return None


@game.errorhandler(LeaderboardError)
def handle_leaderboard_error(exc):
    current_app.logger.error(f"[leaderboard-error] {exc}")
    return jsonify({'error': str(exc)}), 500


@game.route('/health', methods=['GET'])
def health():
    return jsonify({'status': 'ok', 'round_active': _session().is_active})


@game.route('/prompt', methods=['GET'])
def new_round():
    try:
        current = _session().start_round(_provider())
    except ProviderError as exc:
        current_app.logger.error(f"[round-start-failed] {exc}")
        return jsonify({'error': str(exc)}), 500
    current_app.logger.info(f"[round-start] prompt_words={len(current.prompt.split())}")
    # The prompt text stays server-side
    return jsonify({'image': current.image})


@game.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    return jsonify([r.to_dict() for r in _leaderboard().load()])


@game.route('/guess', methods=['POST'])
def submit_guess():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    name = data.get('name')
    guess = data.get('guess')
    if not (_nonempty_str(name) and _nonempty_str(guess)):
        return jsonify({'error': 'Missing name or guess'}), 400

    current = _session().snapshot()
    if current is None or not current.prompt:
        return jsonify({'error': 'No prompt available yet'}), 400

    score = _scorer().score(guess, current.prompt)
    leaderboard = _leaderboard().append(ScoreRecord.create(name, guess, current.prompt, score))
    current_app.logger.info(f"[guess] name={name} score={score}")

    guess_image = _render_guess_image(guess)

    return jsonify({
        'score': score,
        'leaderboard': [r.to_dict() for r in leaderboard],
        'aiImage': current.image,
        'guessImage': guess_image,
    })


@game.route('/guess-group', methods=['POST'])
def submit_group_guess():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    players = data.get('players')
    min_players = int(current_app.config.get('MIN_GROUP_PLAYERS', 2))
    max_players = int(current_app.config.get('MAX_GROUP_PLAYERS', 5))

    if not isinstance(players, list) or not (min_players <= len(players) <= max_players):
        return jsonify({'error': f'Players must be an array between {min_players} and {max_players} members'}), 400
    for idx, player in enumerate(players):
        if not isinstance(player, dict) or not (_nonempty_str(player.get('name')) and _nonempty_str(player.get('guess'))):
            return jsonify({'error': f'Player {idx + 1} is missing name or guess'}), 400

    current = _session().snapshot()
    if current is None or not current.prompt:
        return jsonify({'error': 'No prompt available yet'}), 400

    scorer = _scorer()
    scores = [
        PlayerScore(name=p['name'], guess=p['guess'], score=scorer.score(p['guess'], current.prompt))
        for p in players
    ]
    _leaderboard().extend(ScoreRecord.create(s.name, s.guess, current.prompt, s.score) for s in scores)

    # max() returns the first maximal entry, so ties go to the earliest player
    top_scorer = max(scores, key=lambda s: s.score)
    current_app.logger.info(f"[guess-group] players={len(scores)} top={top_scorer.name} score={top_scorer.score}")

    top_scorer_image = _render_guess_image(top_scorer.guess)

    return jsonify({
        'scores': [s.to_dict() for s in sorted(scores, key=lambda s: s.score, reverse=True)],
        'topScorerImage': top_scorer_image,
        'aiImage': current.image,
    })
