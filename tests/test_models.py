from datetime import datetime, timedelta

import pytest

from errors import PersistenceFailed
from fakes import VIDEO_ID, VIDEO_URL
from models import Transcript, db


def make_record(**overrides):
    fields = dict(video_id=VIDEO_ID, title="first", video_url=VIDEO_URL, transcript="words")
    fields.update(overrides)
    return Transcript(**fields)


class TestTranscriptStore:
    def test_round_trip_keeps_text_identical(self, store):
        transcript = "line one \nline two \néè \U0001f3b5 \n"
        store.create(make_record(transcript=transcript, summary="sum\nmary"))
        db.session.expire_all()

        record = store.find_by_video_id(VIDEO_ID)

        assert record.transcript == transcript
        assert record.summary == "sum\nmary"

    def test_update_saves_changes(self, store):
        record = store.create(make_record())
        record.summary = "later"
        store.update(record)
        db.session.expire_all()

        assert store.find_by_video_id(VIDEO_ID).summary == "later"

    def test_duplicate_video_id_raises_and_rolls_back(self, store):
        store.create(make_record())

        with pytest.raises(PersistenceFailed):
            store.create(make_record(title="second"))

        # The session is usable again and the first row is untouched.
        assert Transcript.query.count() == 1
        assert store.find_by_video_id(VIDEO_ID).title == "first"
        store.create(make_record(video_id="aaaaaaaaaaa"))
        assert Transcript.query.count() == 2

    def test_missing_summaries(self, store):
        store.create(make_record())
        store.create(make_record(video_id="aaaaaaaaaaa", summary="done"))
        store.create(make_record(video_id="bbbbbbbbbbb", transcript=None))

        assert [r.video_id for r in store.missing_summaries()] == [VIDEO_ID]

    def test_recent_is_newest_first(self, store):
        now = datetime.utcnow()
        store.create(make_record(video_id="aaaaaaaaaaa", created_at=now - timedelta(days=1)))
        store.create(make_record(video_id="bbbbbbbbbbb", created_at=now))

        assert [r.video_id for r in store.recent(limit=1)] == ["bbbbbbbbbbb"]


def test_video_url_is_unbounded_text():
    assert isinstance(Transcript.__table__.c.video_url.type, db.Text)
