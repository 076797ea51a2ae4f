"""Adapters for the external services a transcript request depends on.

Each adapter wraps one third-party SDK and converts its failures into the
small set of exceptions the orchestrator understands.
"""
import logging
from typing import NamedTuple, Optional

import requests
import yt_dlp
from yt_dlp.utils import DownloadError
from openai import OpenAI, OpenAIError
from youtube_transcript_api import CouldNotRetrieveTranscript, YouTubeTranscriptApi

logger = logging.getLogger(__name__)

# Substrings yt-dlp puts in its error text when a video cannot be watched.
UNAVAILABLE_MARKERS = (
    "video unavailable",
    "this video is not available",
    "private video",
    "this video is private",
    "this video has been removed",
    "is not a valid url",
    "incomplete youtube id",
)

TRANSCRIBE_INSTRUCTIONS = "Transcribe the spoken content of the following video."
SUMMARY_INSTRUCTIONS = "Summarize the following transcript."


class ProviderError(Exception):
    pass


class VideoInfoUnavailable(ProviderError):
    """The video does not exist or cannot be viewed."""


class VideoInfoError(ProviderError):
    pass


class GenerationError(ProviderError):
    pass


class VideoInfo(NamedTuple):
    title: str


class VideoInfoProvider:
    """Looks up video metadata with yt-dlp without downloading media."""

    def __init__(self, timeout: float = 20.0):
        self.options = {
            "quiet": True,
            "no_warnings": True,
            "skip_download": True,
            "noplaylist": True,
            "socket_timeout": timeout,
        }

    def get_info(self, url: str) -> VideoInfo:
        try:
            with yt_dlp.YoutubeDL(self.options) as ydl:
                info = ydl.extract_info(url, download=False)
        except DownloadError as e:
            message = str(e).lower()
            if any(marker in message for marker in UNAVAILABLE_MARKERS):
                raise VideoInfoUnavailable(str(e)) from e
            raise VideoInfoError(str(e)) from e
        except Exception as e:
            raise VideoInfoError(str(e)) from e

        if not info or not info.get("title"):
            raise VideoInfoUnavailable(f"YouTube video information not found for {url}")
        return VideoInfo(title=info["title"])


class CaptionResult(NamedTuple):
    """Outcome of a caption lookup.

    ``missing`` and ``error`` both leave ``text`` as None; they are kept apart
    so the caller can log provider failures differently from videos that
    simply have no captions.
    """

    text: Optional[str]
    status: str

    FOUND = "found"
    MISSING = "missing"
    ERROR = "error"

    @property
    def found(self) -> bool:
        return self.status == self.FOUND


def join_captions(segments) -> str:
    return "".join(f"{segment} \n" for segment in segments)


class TimeoutSession(requests.Session):
    """requests session that applies a default timeout to every call."""

    def __init__(self, timeout: float):
        super().__init__()
        self.timeout = timeout

    def request(self, method, url, **kwargs):
        kwargs.setdefault("timeout", self.timeout)
        return super().request(method, url, **kwargs)


class CaptionProvider:
    def __init__(self, api: Optional[YouTubeTranscriptApi] = None, timeout: float = 20.0):
        self.session = None
        if api is None:
            self.session = TimeoutSession(timeout)
            api = YouTubeTranscriptApi(http_client=self.session)
        self.api = api

    def get_captions(self, video_id: str, language: str = "en") -> CaptionResult:
        try:
            fetched = self.api.fetch(video_id, languages=[language])
        except CouldNotRetrieveTranscript as e:
            logger.info("No %s captions for %s: %s", language, video_id, type(e).__name__)
            return CaptionResult(None, CaptionResult.MISSING)
        except Exception as e:
            logger.warning("Caption lookup failed for %s: %s", video_id, e)
            return CaptionResult(None, CaptionResult.ERROR)

        segments = [snippet.text for snippet in fetched]
        if not segments:
            return CaptionResult(None, CaptionResult.MISSING)
        return CaptionResult(join_captions(segments), CaptionResult.FOUND)


class TextGenerator:
    """Single prompt completions through the OpenAI Responses API."""

    def __init__(self, client: OpenAI, model: str):
        self.client = client
        self.model = model

    def complete(self, instructions: str, text: str, max_tokens: int) -> str:
        try:
            response = self.client.responses.create(
                model=self.model,
                instructions=instructions,
                input=text,
                temperature=0.5,
                max_output_tokens=max_tokens,
            )
        except OpenAIError as e:
            raise GenerationError(str(e)) from e
        return response.output_text


class Providers(NamedTuple):
    video_info: VideoInfoProvider
    captions: CaptionProvider
    generator: TextGenerator


def build_providers(settings) -> Providers:
    """Create the real adapters from settings; one OpenAI client, no retries."""
    client = OpenAI(
        api_key=settings.openai_api_key,
        timeout=settings.request_timeout,
        max_retries=0,
    )
    return Providers(
        video_info=VideoInfoProvider(timeout=settings.request_timeout),
        captions=CaptionProvider(timeout=settings.request_timeout),
        generator=TextGenerator(client, settings.model),
    )
