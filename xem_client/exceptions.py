"""Errors raised by the XEM API client."""


class XEMError(Exception):
    """Base class for XEM client errors."""
    pass


class XEMRequestError(XEMError):
    """The request could not be built from the configured addresses."""
    pass


class XEMBodyReadError(XEMError):
    """Reading the response body failed."""

    def __init__(self, error: Exception):
        self.error = error
        super().__init__(f"unable to read response body: {error}")


class XEMHTTPError(XEMError):
    """The service answered with a status code outside 200-299."""

    def __init__(self, url: str, status_code: int, body: str):
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(f"{url}: {status_code} {body}")


class XEMDecodeError(XEMError):
    """The response body is not the JSON envelope we expected."""

    def __init__(self, error: Exception, body: str):
        self.error = error
        self.body = body
        super().__init__(f"unable to decode JSON: {error} {body}")


class XEMRequestFailedError(XEMError):
    """The envelope decoded but its result was not "success"."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"request failed: {message}")
