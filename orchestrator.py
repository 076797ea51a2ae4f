import logging
from typing import NamedTuple

from errors import (
    GenerationFailed,
    InvalidInput,
    MetadataFetchFailed,
    VideoUnavailable,
)
from locator import LocatorError, parse_locator
from models import Transcript
from providers import (
    SUMMARY_INSTRUCTIONS,
    TRANSCRIBE_INSTRUCTIONS,
    GenerationError,
    ProviderError,
    VideoInfoUnavailable,
)

logger = logging.getLogger(__name__)

MESSAGE_CAPTIONS = "Video saved and transcribed successfully."
MESSAGE_GENERATED = "Transcript generated successfully using OpenAI."
MESSAGE_UNAVAILABLE = "Transcript not available for this video."
MESSAGE_CACHED = "Transcript retrieved from saved records."

SOURCE_CAPTIONS = "captions"
SOURCE_GENERATED = "generated"


class TranscriptResult(NamedTuple):
    record: Transcript
    message: str
    created: bool


class TranscriptOrchestrator:
    """Resolves a YouTube URL into a stored transcript and summary.

    A stored record for the video id is returned as is. Otherwise metadata
    and captions are fetched, a transcript is generated when captions are
    missing, the record is created, and a summary is added when there is a
    transcript to summarize.
    """

    def __init__(self, settings, video_info, captions, generator, store):
        self.settings = settings
        self.video_info = video_info
        self.captions = captions
        self.generator = generator
        self.store = store

    def resolve(self, source_url: str) -> TranscriptResult:
        try:
            video_id = parse_locator(source_url)
        except LocatorError as e:
            raise InvalidInput(str(e)) from e

        existing = self.store.find_by_video_id(video_id)
        if existing:
            logger.info("Returning saved transcript for %s", video_id)
            return TranscriptResult(existing, MESSAGE_CACHED, created=False)

        title = self.fetch_title(source_url)

        transcript, source = self.fetch_transcript(video_id, source_url)
        if source == SOURCE_CAPTIONS:
            message = MESSAGE_CAPTIONS
        elif source == SOURCE_GENERATED:
            message = MESSAGE_GENERATED
        else:
            message = MESSAGE_UNAVAILABLE

        record = Transcript(
            video_id=video_id,
            title=title,
            video_url=source_url,
            transcript=transcript,
            transcript_source=source,
        )
        self.store.create(record)
        logger.info("Saved %s (%s), transcript source: %s", video_id, title, source or "none")

        # The record stays without a summary if this step fails.
        if record.transcript:
            self.summarize(record)

        return TranscriptResult(record, message, created=True)

    def fetch_title(self, url):
        try:
            return self.video_info.get_info(url).title
        except VideoInfoUnavailable as e:
            raise VideoUnavailable(str(e)) from e
        except ProviderError as e:
            raise MetadataFetchFailed(str(e)) from e

    def fetch_transcript(self, video_id, url):
        """Return (text, source); source is None when nothing could be obtained."""
        result = self.captions.get_captions(video_id, self.settings.caption_language)
        if result.found:
            return result.text, SOURCE_CAPTIONS
        if result.status == result.ERROR:
            logger.warning("Caption provider failed for %s, treating as no captions", video_id)

        try:
            generated = self.generator.complete(
                TRANSCRIBE_INSTRUCTIONS, url, self.settings.transcript_max_tokens
            )
        except GenerationError as e:
            logger.warning("Transcript generation failed for %s: %s", video_id, e)
            return None, None

        if not generated or not generated.strip():
            return None, None
        return generated, SOURCE_GENERATED

    def summarize(self, record):
        try:
            summary = self.generator.complete(
                SUMMARY_INSTRUCTIONS, record.transcript, self.settings.summary_max_tokens
            )
        except GenerationError as e:
            raise GenerationFailed(f"Summary for {record.video_id} failed: {e}") from e

        record.summary = summary
        self.store.update(record)
        return record
