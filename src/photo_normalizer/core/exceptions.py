"""Custom exceptions for the photo normalizer."""


class PhotoNormalizerError(Exception):
    """Base exception for all photo normalizer errors."""


class InvalidKey(PhotoNormalizerError):
    """Error raised when a trigger key is not `<collection>/<group>/<item>`."""


class ImageProcessingError(PhotoNormalizerError):
    """Error raised when decoding or re-encoding an image fails."""


class InvalidDimensions(ImageProcessingError):
    """Error raised when an image has missing or non-positive dimensions."""


class S3Error(PhotoNormalizerError):
    """Error raised for S3 related failures."""


class RecordStoreError(PhotoNormalizerError):
    """Error raised when the photo list cannot be updated."""


class ConfigurationError(PhotoNormalizerError):
    """Error raised for invalid configuration options."""
