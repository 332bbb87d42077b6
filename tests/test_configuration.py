import importlib
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from yaml import safe_dump, safe_load

from memote import configuration
from memote.repository.configuration import ConfigurationRepository
from memote.view import state as view_state

# the package re-exports the initialize function under the module name
initialize_module = importlib.import_module("memote.initialize")


class ConfigurationTestCase(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        root = Path(self.temp_dir.name)
        self.config_path = root / "config"
        self.app_config_path = self.config_path / "config.yaml"
        self.data_path = root / "data"

        patches = [
            mock.patch.object(configuration, "CONFIG_PATH", self.config_path),
            mock.patch.object(configuration, "APP_CONFIG_PATH", self.app_config_path),
            mock.patch.object(configuration, "DATA_PATH", self.data_path),
            mock.patch.object(
                configuration, "DATA_STORAGE_PATH", self.data_path / "storage"
            ),
        ]
        for patch in patches:
            patch.start()
            self.addCleanup(patch.stop)
        self.addCleanup(self.temp_dir.cleanup)


class TestConfigurationRepository(ConfigurationTestCase):
    def test_fills_in_missing_keys(self):
        self.config_path.mkdir(parents=True)
        self.app_config_path.write_text(safe_dump({"data_path": None, "show_header": False}))

        config = ConfigurationRepository().get_config()

        self.assertFalse(config["show_header"])
        self.assertEqual(config.get("log_level"), "WARNING")
        self.assertEqual(config.get("preview_length"), 80)

    def test_update_is_written_on_flush(self):
        self.config_path.mkdir(parents=True)
        self.app_config_path.write_text(safe_dump(configuration.get_default_configuration()))
        repository = ConfigurationRepository()

        repository.update_config(log_level="DEBUG", preview_length=40)
        self.assertEqual(safe_load(self.app_config_path.read_text())["log_level"], "WARNING")

        self.assertTrue(repository.flush())
        stored = safe_load(self.app_config_path.read_text())
        self.assertEqual(stored["log_level"], "DEBUG")
        self.assertEqual(stored["preview_length"], 40)
        self.assertFalse(repository.flush())

    def test_get_config_returns_copy(self):
        self.config_path.mkdir(parents=True)
        self.app_config_path.write_text(safe_dump(configuration.get_default_configuration()))
        repository = ConfigurationRepository()

        repository.get_config()["show_header"] = False

        self.assertTrue(repository.get_config()["show_header"])


class TestDataPathConfiguration(ConfigurationTestCase):
    def test_data_path_setting_moves_storage(self):
        custom = Path(self.temp_dir.name) / "elsewhere"
        self.config_path.mkdir(parents=True)
        self.app_config_path.write_text(
            safe_dump({"data_path": str(custom), "show_header": True})
        )

        configuration.load_data_path_configuration()

        self.assertEqual(configuration.DATA_PATH, custom)
        self.assertEqual(configuration.DATA_STORAGE_PATH, custom / "storage")

    def test_missing_config_keeps_defaults(self):
        configuration.load_data_path_configuration()

        self.assertEqual(configuration.DATA_PATH, self.data_path)


class TestInitialize(ConfigurationTestCase):
    def test_first_run_creates_config_and_data_directories(self):
        fresh_repository = ConfigurationRepository()
        with (
            mock.patch.object(initialize_module, "CONFIGURATION_REPO", fresh_repository),
            mock.patch.object(initialize_module, "register_cleanup") as register_cleanup,
            mock.patch.object(initialize_module, "configure_logging") as configure_logging,
        ):
            initialize_module.initialize()

        stored = safe_load(self.app_config_path.read_text())
        self.assertEqual(stored, dict(configuration.get_default_configuration()))
        self.assertTrue((self.data_path / "storage").is_dir())
        configure_logging.assert_called_once_with("WARNING")
        register_cleanup.assert_called_once()
        self.assertTrue(view_state.get_show_header())


if __name__ == "__main__":
    unittest.main()
