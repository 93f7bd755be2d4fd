class GaiAIError(Exception):
    """Base class for every error raised by the bot."""


class InvalidKeyFormat(GaiAIError):
    pass


class NonceFetchFailed(GaiAIError):
    pass


class AuthFailed(GaiAIError):
    pass


class UnsupportedMethod(GaiAIError):
    def __init__(self, method):
        super().__init__(f"Method {method} not supported")
        self.method = method


class RequestFailed(GaiAIError):
    """
    A single HTTP attempt failed.
    `status` is None when the server never answered; `detail` is the
    message field of the error body, when the server sent one.
    """

    def __init__(self, message, status=None, detail=None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.detail = detail
