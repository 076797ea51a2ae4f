class TranscriptServiceError(Exception):
    """Base for failures that end a transcript request.

    Each subclass knows the HTTP status and the message shown to clients.
    Client errors are reported under "error", server side ones under "message".
    """

    status_code = 500
    message = "An unexpected error occurred."

    def __init__(self, detail=None):
        super().__init__(detail or self.message)
        self.detail = detail

    def to_dict(self):
        key = "error" if self.status_code < 500 else "message"
        return {key: self.message}


class MissingVideoUrl(TranscriptServiceError):
    status_code = 400
    message = "videoUrl is missing in the request body."


class InvalidInput(TranscriptServiceError):
    status_code = 400
    message = "Please enter a valid YouTube video URL."


class VideoUnavailable(TranscriptServiceError):
    status_code = 404
    message = "YouTube video is unavailable."


class MetadataFetchFailed(TranscriptServiceError):
    status_code = 502
    message = "Error fetching video information."


class GenerationFailed(TranscriptServiceError):
    status_code = 502
    message = "Error generating summary."


class PersistenceFailed(TranscriptServiceError):
    status_code = 500
    message = "Error saving transcript."
