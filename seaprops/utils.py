import logging

from .errors import DomainError

logger = logging.getLogger(__name__)


def check_range(value, lower, upper, variable, subject):
    # closed interval; NaN fails the comparison and is rejected too
    if not lower <= value <= upper:
        logger.debug('%s: %s=%r outside [%r, %r]', subject, variable, value, lower, upper)
        raise DomainError(variable, value, lower, upper, subject)
