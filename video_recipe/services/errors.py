class ServiceError(Exception):
    public_message = "An error occurred while processing the video"


class InvalidURLError(ServiceError):
    public_message = "Invalid video URL"


class UnsupportedPlatformError(ServiceError):
    public_message = "Transcript extraction is not available for this platform"

    def __init__(self, platform: str):
        super().__init__(f"Transcript extraction not implemented for {platform}")
        self.platform = platform


class TranscriptUnavailableError(ServiceError):
    public_message = "No transcript available for this video"


class FetchFailedError(ServiceError):
    public_message = "Failed to fetch the video transcript"


class NetworkTimeoutError(FetchFailedError):
    public_message = "Timed out while fetching the video transcript"

    def __init__(self, url: str, timeout_seconds: float):
        super().__init__(f"Network timeout after {timeout_seconds}s: {url}")
        self.url = url
        self.timeout_seconds = timeout_seconds


class StructuringFailedError(ServiceError):
    public_message = "Failed to generate a recipe from the transcript"


class RateLimitedError(StructuringFailedError):
    public_message = "Recipe generation is rate limited, try again shortly"


class GeminiConfigurationError(ServiceError):
    public_message = "Recipe generation is not configured"


class IngredientNormalizationError(ServiceError):
    public_message = "Failed to normalize ingredients"
