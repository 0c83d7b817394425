"""
Domain Errors - Failures the core knows how to report

Adapters raise these; the service renders them into a ResponseEnvelope.
"""


class FeedError(Exception):
    """Base class for FPDS feed failures"""


class TransportTimeout(FeedError):
    """The feed request did not complete within the timeout"""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"FPDS request timed out after {timeout:g} seconds")


class UpstreamHttpError(FeedError):
    """The feed answered with a non-success HTTP status"""

    def __init__(self, status: int, body: str = ""):
        self.status = status
        self.body = body
        super().__init__(f"FPDS returned status {status}")


class UpstreamMalformedResponse(FeedError):
    """The feed answered, but not with an Atom document"""

    def __init__(self, body: str = ""):
        self.body = body
        super().__init__("FPDS returned a response that is not an Atom feed")
