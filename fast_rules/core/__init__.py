"""Core building blocks of the validation engine, re-exported for convenient access."""

from .cancellation import *  # noqa: F401,F403
from .message_builder_context import *  # noqa: F401,F403
from .message_formatter import *  # noqa: F401,F403
from .message_resolver import *  # noqa: F401,F403
from .root_context_data import *  # noqa: F401,F403
from .validation_context import *  # noqa: F401,F403
from .validation_failure import *  # noqa: F401,F403
from .validator_options import *  # noqa: F401,F403
