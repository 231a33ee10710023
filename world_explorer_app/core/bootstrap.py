"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import os

import click
from flask import Flask, send_from_directory

from ..extensions import db
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure application logging from the LOG_* config keys."""

    setup_logging(app)
    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)


def configure_static_uploads(app: Flask) -> None:
    """Serve the uploads directory (cached narration audio) under UPLOAD_URL_PATH."""

    url_path = app.config.get('UPLOAD_URL_PATH', '/uploads')

    def serve_upload(filename):
        return send_from_directory(app.config['UPLOAD_FOLDER'], filename)

    app.add_url_rule(f"{url_path}/<path:filename>", endpoint='uploads', view_func=serve_upload)
    app.logger.info("Configured static 'uploads' folder at URL: %s", url_path)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)


def register_commands(app: Flask) -> None:
    """Register CLI commands (``flask seed-geography``)."""

    @app.cli.command('seed-geography')
    @click.option('--force', is_flag=True, help='Upsert demo records even when countries already exist.')
    def seed_geography_command(force: bool) -> None:
        """Load the demo countries and points of interest."""
        from ..modules.geography.logics.seed_data import seed_demo_data

        countries, pois = seed_demo_data(force=force)
        click.echo(f"Seeded {countries} countries and {pois} points of interest.")


def initialize_database(app: Flask) -> None:
    """Create database tables and load demo data when configured."""

    from .. import models  # noqa: F401  (register tables with the metadata)

    db.create_all()

    if app.config.get('SEED_DEMO_DATA') and not app.config.get('TESTING'):
        from ..modules.geography.logics.seed_data import seed_demo_data

        countries, pois = seed_demo_data()
        if countries:
            app.logger.info("Seeded %s demo countries and %s points of interest.", countries, pois)

    os.makedirs(app.config['AUDIO_CACHE_DIR'], exist_ok=True)
