class Success:
    """Successful call; `body` is the decoded JSON payload."""

    ok = True

    def __init__(self, body):
        self.body = body

    @property
    def code(self):
        if isinstance(self.body, dict):
            return self.body.get("code")
        return None

    @property
    def data(self):
        if isinstance(self.body, dict):
            data = self.body.get("data")
            if isinstance(data, dict):
                return data
        return {}

    @property
    def message(self):
        if isinstance(self.body, dict):
            return self.body.get("message")
        return None

    def __repr__(self):
        return f"Success(body={self.body!r})"


class Failure:
    """Failed call; `status` is the HTTP status code or None."""

    ok = False
    code = None

    def __init__(self, message, status=None):
        self.message = message
        self.status = status

    @property
    def data(self):
        return {}

    def __repr__(self):
        return f"Failure(message={self.message!r}, status={self.status!r})"
