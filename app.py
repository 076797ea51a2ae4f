import logging

from flask import Flask, current_app, jsonify, request
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

from config import Settings
from errors import MissingVideoUrl, TranscriptServiceError
from models import TranscriptStore, db
from orchestrator import TranscriptOrchestrator
from providers import build_providers

MAX_LIST_LIMIT = 100

migrate = Migrate()


def create_app(settings=None, providers=None):
    """Build the Flask app.

    Tests pass fake providers; otherwise the real yt-dlp, caption and OpenAI
    adapters are created from settings.
    """
    settings = settings or Settings.from_env()

    app = Flask(__name__)

    # ==== Configuration ====
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(settings.log_level)

    app.config["SQLALCHEMY_DATABASE_URI"] = settings.database_url
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["TRANSCRIPT_SETTINGS"] = settings
    app.extensions["transcript_providers"] = providers or build_providers(settings)

    db.init_app(app)
    migrate.init_app(app, db)

    # Initialize database
    with app.app_context():
        db.create_all()

    register_routes(app)
    register_error_handlers(app)
    return app


def get_orchestrator():
    providers = current_app.extensions["transcript_providers"]
    return TranscriptOrchestrator(
        current_app.config["TRANSCRIPT_SETTINGS"],
        video_info=providers.video_info,
        captions=providers.captions,
        generator=providers.generator,
        store=TranscriptStore(db.session),
    )


def envelope(result):
    record = result.record
    return {
        "message": result.message,
        "videoUrl": record.video_url,
        "transcript": record.transcript,
        "summary": record.summary,
    }


# ==== Routes ====


def register_routes(app):
    @app.route("/transcripts", methods=["POST"])
    def create_transcript():
        body = request.get_json(silent=True)
        video_url = body.get("videoUrl") if isinstance(body, dict) else None
        if not video_url:
            raise MissingVideoUrl()

        result = get_orchestrator().resolve(video_url)
        status = 201 if result.created else 200
        return jsonify(envelope(result)), status

    @app.route("/transcripts", methods=["GET"])
    def list_transcripts():
        limit = request.args.get("limit", default=20, type=int)
        limit = max(1, min(limit, MAX_LIST_LIMIT))
        records = TranscriptStore(db.session).recent(limit)
        return jsonify({"transcripts": [record.to_dict() for record in records]})

    @app.route("/transcripts/<video_id>", methods=["GET"])
    def get_transcript(video_id):
        record = TranscriptStore(db.session).find_by_video_id(video_id)
        if not record:
            return jsonify({"error": "Transcript not found."}), 404
        return jsonify(record.to_dict())


def register_error_handlers(app):
    @app.errorhandler(TranscriptServiceError)
    def handle_service_error(error):
        if error.status_code >= 500:
            app.logger.error("Transcript request failed: %s", error)
        else:
            app.logger.info("Rejected transcript request: %s", error)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        # Let Flask render its own 404/405 responses.
        if isinstance(error, HTTPException):
            return error
        app.logger.exception("Error creating video transcript")
        return jsonify({"message": "An unexpected error occurred."}), 500


# ==== Run Server ====

if __name__ == "__main__":
    create_app().run(debug=True)
