from enum import Enum


class HttpStatusCode(Enum):
    """Constants for HTTP status codes the client branches on"""

    OK = 200
    NO_CONTENT = 204
    MULTIPLE_CHOICES = 300


def is_success_status(status: int) -> bool:
    """True for 2xx statuses."""
    return HttpStatusCode.OK.value <= status < HttpStatusCode.MULTIPLE_CHOICES.value
