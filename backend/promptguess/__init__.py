from flask import Flask
from flask_cors import CORS
import click
from config import Config


def _cors_origins(value):
    if not value or value == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


def create_app(config_class=Config, provider=None, scorer=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    CORS(flask_app, origins=_cors_origins(flask_app.config.get('CORS_ORIGINS')))

    from promptguess.services.leaderboard import LeaderboardStore
    from promptguess.services.scoring import WordOverlapScorer
    from promptguess.services.session import GameSession

    if provider is None:
        if not flask_app.config.get('GEMINI_API_KEY'):
            raise RuntimeError('Please set GEMINI_API_KEY')
        from promptguess.services.provider import GeminiProvider
        provider = GeminiProvider(
            api_key=flask_app.config['GEMINI_API_KEY'],
            model=flask_app.config.get('GEMINI_MODEL', 'gemini-2.0-flash-exp'),
            base_url=flask_app.config.get('GEMINI_API_URL'),
            timeout=flask_app.config.get('PROVIDER_TIMEOUT_SEC', 60),
        )

    leaderboard = LeaderboardStore(flask_app.config.get('LEADERBOARD_PATH', 'leaderboard.json'))
    # Bootstrap the file on first run so /leaderboard never sees a missing file
    leaderboard.ensure_exists()

    flask_app.extensions['image_provider'] = provider
    flask_app.extensions['scorer'] = scorer or WordOverlapScorer()
    flask_app.extensions['leaderboard'] = leaderboard
    flask_app.extensions['game_session'] = GameSession()

    from promptguess.api.game import game
    flask_app.register_blueprint(game)

    @click.command('leaderboard-init')
    def leaderboard_init_command():
        """Creates an empty leaderboard file if none exists."""
        created = leaderboard.ensure_exists()
        if created:
            click.echo(f'Created empty leaderboard at {leaderboard.path}')
        else:
            click.echo(f'Leaderboard already exists at {leaderboard.path}')

    @click.command('leaderboard-top')
    @click.option('--limit', default=10, show_default=True, type=click.IntRange(min=1),
                  help='Number of records to show.')
    def leaderboard_top_command(limit):
        """Prints the best scores on the leaderboard."""
        records = leaderboard.top(limit)
        if not records:
            click.echo('Leaderboard is empty.')
            return
        for rank, record in enumerate(records, start=1):
            click.echo(f'{rank}. {record.name} {record.score} "{record.guess}"')

    flask_app.cli.add_command(leaderboard_init_command)
    flask_app.cli.add_command(leaderboard_top_command)

    return flask_app
