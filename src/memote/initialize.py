# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler
from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from memote import configuration
from memote.cleanup import register_cleanup
from memote.repository.configuration import CONFIGURATION_REPO
from memote.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()

    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    configuration.DATA_STORAGE_PATH.mkdir(parents=True, exist_ok=True)

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config.get("log_level", configuration.DEFAULT_LOG_LEVEL))
    view_state.set_show_header(config["show_header"])
    view_state.set_preview_length(
        config.get("preview_length", configuration.DEFAULT_PREVIEW_LENGTH)
    )

    register_cleanup()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))
