"""Synchronous command dispatch returning tagged results."""

from collections.abc import Callable

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from flowershop.shared.results import DomainError, Failure, Result
from flowershop.utils.logging import get_logger

logger = get_logger(__name__)


def dispatch(command, on_unexpected: Callable[[Exception], DomainError]) -> Result:
    """Process `command` and return the handler's result.

    The command handler's unit of work has already rolled back by the time an
    exception reaches this point. Validation errors keep propagating so they
    surface as bad requests; anything else is logged and turned into the
    error family's unhandled failure.
    """
    try:
        return current_domain.process(command, asynchronous=False)
    except ValidationError:
        raise
    except Exception as exc:
        logger.exception("command_failed", command=command.__class__.__name__)
        return Failure(on_unexpected(exc))
