class ConfigurationSourceError(Exception):
    """Base class for errors raised while opening a configuration source."""


class InvalidLocationError(ConfigurationSourceError):
    """Raised when the configuration location is missing or is not a valid URI."""


class UnsupportedSchemeError(ConfigurationSourceError, ValueError):
    """Raised when the configuration location uses a scheme other than ``s3``."""


class FetchFailedError(ConfigurationSourceError):
    """Raised when the object store fails to return the configuration object."""


class UnknownRegionError(ValueError):
    """Raised when the region override does not name a known S3 region.

    This is a deployment misconfiguration and is intentionally not a
    :class:`ConfigurationSourceError`.
    """
