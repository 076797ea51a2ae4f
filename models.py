from datetime import datetime
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

from errors import PersistenceFailed

db = SQLAlchemy()

class Transcript(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    video_id = db.Column(db.String(11), unique=True, nullable=False)
    title = db.Column(db.String(255), nullable=False)
    video_url = db.Column(db.Text, nullable=False)
    transcript = db.Column(db.Text)
    transcript_source = db.Column(db.String(20))
    summary = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            'videoId': self.video_id,
            'title': self.title,
            'videoUrl': self.video_url,
            'transcript': self.transcript,
            'summary': self.summary,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Transcript {self.video_id}>'


class TranscriptStore:
    """Record store over the Flask-SQLAlchemy session."""

    def __init__(self, session=None):
        self.session = session or db.session

    def find_by_video_id(self, video_id):
        return Transcript.query.filter_by(video_id=video_id).first()

    def recent(self, limit=20):
        return Transcript.query.order_by(Transcript.created_at.desc()).limit(limit).all()

    def missing_summaries(self):
        return Transcript.query.filter(
            Transcript.transcript.isnot(None),
            Transcript.summary.is_(None),
        ).all()

    def create(self, record):
        self.session.add(record)
        self._commit(record)
        return record

    def update(self, record):
        self._commit(record)
        return record

    def _commit(self, record):
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise PersistenceFailed(f"Could not save {record!r}: {e}") from e
