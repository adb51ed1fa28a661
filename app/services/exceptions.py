from typing import Any, Dict


class ServiceError(Exception):
    """Base class for errors that terminate a request."""

    status_code = 500

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            content["details"] = self.details
        return content


class InvalidRequestError(ServiceError):
    """Missing or unusable input from the caller."""

    status_code = 400


class UpstreamError(ServiceError):
    """A third-party provider failed or answered with an error."""

    status_code = 500


class MetadataError(UpstreamError):
    pass


class DownloadLinksError(UpstreamError):
    pass
