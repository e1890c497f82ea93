class UploadError(Exception):
    """Fatal failure that aborts the upload run."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class IOFailure(UploadError):
    """The file to upload could not be read."""


class NetworkFailure(UploadError):
    """The request could not be sent or its response could not be received."""
