import click
from flask import Flask, jsonify
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException
from config import Config, configure_logging
from errors import HabitTrackerError
from models import db
from routes import api_bp

app = Flask(__name__)
app.config.from_object(Config)

configure_logging(app.config['LOG_LEVEL'])

db.init_app(app)
migrate = Migrate(app, db)

app.register_blueprint(api_bp, url_prefix='/api')


@app.errorhandler(HabitTrackerError)
def handle_habit_tracker_error(error):
    if error.status_code >= 500:
        app.logger.error('Request failed: %s', error.message)
    return jsonify({'error': error.message}), error.status_code


@app.errorhandler(HTTPException)
def handle_http_error(error):
    return jsonify({'error': error.description}), error.code


@app.cli.command('init-db')
@click.option('--drop', is_flag=True, help='Drop existing tables before creating them.')
def init_db_command(drop):
    """Create the habits and habit_logs tables."""
    if drop:
        click.echo('Dropping all tables...')
        db.drop_all()
    db.create_all()
    click.echo('Database initialized.')


if __name__ == '__main__':
    app.run(debug=True)
