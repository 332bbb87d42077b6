# SPDX-License-Identifier: MIT

import atexit

from memote.repository.configuration import CONFIGURATION_REPO


def flush_configuration() -> None:
    # Notes are written through on every change; only settings are deferred
    CONFIGURATION_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_configuration)
