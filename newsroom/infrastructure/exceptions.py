"""Infrastructure exceptions for the image store and outgoing mail.

They extend ExternalServiceException so presentation maps them to a 500
envelope consistently.
"""

from newsroom.domain.exceptions import ExternalServiceException


class ImageUploadError(ExternalServiceException):
    """Image store rejected or failed an upload."""

    def __init__(self, reason: str) -> None:
        super().__init__("Image upload failed", "image_store", reason)


class ImageStoreConfigurationError(ExternalServiceException):
    """Image store backend is missing required configuration."""

    def __init__(self, reason: str) -> None:
        super().__init__("Image store configuration missing", "image_store", reason)


class EmailDeliveryError(ExternalServiceException):
    """Outgoing mail could not be delivered."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            "Failed to send email. Please try again later.", "mail", reason
        )
