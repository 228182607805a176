import click


class UploadError(click.ClickException):
    """Base class for every failure that terminates an upload run."""


class ResolutionError(UploadError):
    pass


class ValidationError(UploadError):
    pass


class NotFoundError(UploadError):
    pass


class TransportError(UploadError):
    pass


class CompressionError(UploadError):
    pass


class ParseError(UploadError):
    pass


class AuthScopeError(UploadError):
    pass


class AuthError(UploadError):
    pass


class RemoteError(UploadError):
    pass


class BrowserError(UploadError):
    pass
