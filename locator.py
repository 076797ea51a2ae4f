import re

# Hosts we treat as YouTube; scheme and www./m. prefixes are optional.
YOUTUBE_URL = re.compile(
    r"^(?:https?://)?(?:(?:www|m)\.)?(?:youtube\.com|youtube-nocookie\.com|youtu\.be)(?:/\S*)?$",
    re.IGNORECASE,
)

VIDEO_ID = r"([A-Za-z0-9_-]{11})"

# Accepted shapes: watch page query parameter, short link, embed, shorts and /v/ paths.
VIDEO_ID_PATTERNS = (
    re.compile(r"^(?:https?://)?(?:(?:www|m)\.)?youtube\.com/watch/?\?(?:[^#]*&)?v=" + VIDEO_ID + r"(?:[&#]|$)", re.IGNORECASE),
    re.compile(r"^(?:https?://)?youtu\.be/" + VIDEO_ID + r"(?:[/?#]|$)", re.IGNORECASE),
    re.compile(r"^(?:https?://)?(?:(?:www|m)\.)?youtube(?:-nocookie)?\.com/embed/" + VIDEO_ID + r"(?:[/?#]|$)", re.IGNORECASE),
    re.compile(r"^(?:https?://)?(?:(?:www|m)\.)?youtube\.com/(?:shorts|v)/" + VIDEO_ID + r"(?:[/?#]|$)", re.IGNORECASE),
)


class LocatorError(ValueError):
    pass


class InvalidUrl(LocatorError):
    """The input is not a YouTube URL."""


class IdNotFound(LocatorError):
    """A YouTube URL that does not carry a recognizable video id."""


def parse_locator(url: str) -> str:
    """Return the canonical 11 character video id for a YouTube URL.

    Raises InvalidUrl when the string is not a YouTube URL and IdNotFound when
    it is one but none of the accepted shapes match.
    """
    if not isinstance(url, str):
        raise InvalidUrl(f"Not a YouTube URL: {url!r}")
    url = url.strip()
    if not YOUTUBE_URL.match(url):
        raise InvalidUrl(f"Not a YouTube URL: {url!r}")

    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.match(url)
        if match:
            return match.group(1)
    raise IdNotFound(f"No video id found in {url!r}")
