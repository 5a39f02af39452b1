from __future__ import annotations

import pytest

from video_recipe.services.errors import (
    FetchFailedError,
    GeminiConfigurationError,
    IngredientNormalizationError,
    InvalidURLError,
    NetworkTimeoutError,
    RateLimitedError,
    ServiceError,
    StructuringFailedError,
    TranscriptUnavailableError,
    UnsupportedPlatformError,
)


class TestServiceError:
    def test_base_exception(self) -> None:
        error = ServiceError("Base service error")
        assert str(error) == "Base service error"
        assert isinstance(error, Exception)


class TestUnsupportedPlatformError:
    def test_keeps_platform(self) -> None:
        error = UnsupportedPlatformError("tiktok")
        assert "tiktok" in str(error)
        assert error.platform == "tiktok"


class TestNetworkTimeoutError:
    def test_timeout_with_url_and_seconds(self) -> None:
        error = NetworkTimeoutError("https://www.youtube.com/watch?v=abc", 15.0)
        assert "https://www.youtube.com/watch?v=abc" in str(error)
        assert "15" in str(error)
        assert error.url == "https://www.youtube.com/watch?v=abc"
        assert error.timeout_seconds == 15.0

    def test_is_a_fetch_failure(self) -> None:
        assert isinstance(NetworkTimeoutError("https://example.com", 10.0), FetchFailedError)


class TestPublicMessages:
    ERRORS = [
        InvalidURLError,
        UnsupportedPlatformError,
        TranscriptUnavailableError,
        FetchFailedError,
        NetworkTimeoutError,
        StructuringFailedError,
        RateLimitedError,
        GeminiConfigurationError,
        IngredientNormalizationError,
    ]

    @pytest.mark.parametrize("error_type", ERRORS)
    def test_each_kind_has_short_message(self, error_type: type[ServiceError]) -> None:
        assert error_type.public_message
        assert "Traceback" not in error_type.public_message

    def test_messages_are_distinct(self) -> None:
        messages = [error_type.public_message for error_type in self.ERRORS]
        assert len(set(messages)) == len(messages)


class TestExceptionHierarchy:
    def test_all_errors_inherit_from_service_error(self) -> None:
        assert issubclass(InvalidURLError, ServiceError)
        assert issubclass(UnsupportedPlatformError, ServiceError)
        assert issubclass(TranscriptUnavailableError, ServiceError)
        assert issubclass(FetchFailedError, ServiceError)
        assert issubclass(NetworkTimeoutError, FetchFailedError)
        assert issubclass(StructuringFailedError, ServiceError)
        assert issubclass(RateLimitedError, StructuringFailedError)
        assert issubclass(GeminiConfigurationError, ServiceError)
        assert issubclass(IngredientNormalizationError, ServiceError)
