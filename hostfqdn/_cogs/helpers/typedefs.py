"""
Type definitions shared across the codebase.

The resolution functions accept any of the standard loggable classes
for their debug events: the loggers, but also the adapters which add
the contextual ``extra`` fields. Mind that ``logging.LoggerAdapter`` is
a generic only in the type-sheds, not at runtime, hence the branching.
"""
import logging
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    LoggerAdapter = logging.LoggerAdapter[Any]
else:
    LoggerAdapter = logging.LoggerAdapter

Logger = Union[logging.Logger, LoggerAdapter]
