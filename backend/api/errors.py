import logging
from collections.abc import Iterator
from contextlib import contextmanager

from services.errors import PersistenceError, ServiceError, UpstreamError

logger = logging.getLogger(__name__)


@contextmanager
def failure_message(label: str, message: str) -> Iterator[None]:
    """Replace backend failures inside the block with one static client message.

    Client errors (bad input, auth, not found) pass through unchanged.
    """
    try:
        yield
    except (UpstreamError, PersistenceError) as e:
        logger.error("%s Error: %s", label, e)
        raise ServiceError(message) from e
