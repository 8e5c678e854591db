# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()
    helpkit_dir = fake_home / ".helpkit"
    helpkit_dir.mkdir()

    # Create minimal config.json w/ test defaults
    config_data = {
        "program_name": "helpkit",
        "manifest_path": None,
        "resources_dir": None,
        "locale": "en",
        "strict_resources": False,
        "dev_mode": False,
    }
    config_file = helpkit_dir / "config.json"
    with open(config_file, "w") as f:
        json.dump(config_data, f, indent=2)

    monkeypatch.setattr(Path, "home", lambda: fake_home)

    # environment overrides must not leak in from the developer's shell
    monkeypatch.delenv("HELPKIT_LOCALE", raising=False)
    monkeypatch.delenv("HELPKIT_MANIFEST", raising=False)

    # ! reset global settings_manager state & patch its config_path to use isolated location
    from helpkit.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = config_file

    # ! drop any reporter a previous CLI invocation registered
    from helpkit.core.output import reset_reporter

    reset_reporter()

    return fake_home


@pytest.fixture
def sample_manifest_data():
    # Provide a small manifest in the on-disk JSON shape
    return {
        "create": {
            "modulePath": "./create",
            "description": "[CreateDesc]",
            "synopsis": "<PATH> [--OPTIONS]",
            "args": [{"name": "PATH", "description": "[CreatePathDesc]"}],
            "options": [
                {"name": "--template <NAME>", "description": "Template to copy"}
            ],
        },
        "build": {
            "description": "Build the project",
            "synopsis": "[PLATFORM]",
            "args": [{"name": "PLATFORM", "description": "Platform to build"}],
        },
        "version": {
            "description": "[VersionDesc]",
            "synopsis": "",
        },
    }


@pytest.fixture
def sample_registry(sample_manifest_data):
    from helpkit.core.manifest import ManifestRegistry

    return ManifestRegistry.from_mapping(sample_manifest_data)


@pytest.fixture
def sample_strings():
    # resource catalog used by the fake resolve function
    return {
        "CommandHelpUsageSynopsis": "Synopsis",
        "CommandHelpProgramUsage": "{0} <COMMAND>",
        "CommandHelpBadCommand": "Unknown command: {0}",
        "CommandHelpUsageOptions": "Options:",
        "CreateDesc": "Create a project",
        "CreatePathDesc": "Where to create it",
        "VersionDesc": "Print the version",
        "VerboseDesc": "Print more output",
    }


@pytest.fixture
def fake_resolve(sample_strings):
    # key -> string; unknown keys come back unchanged
    def resolve(key: str) -> str:
        return sample_strings.get(key, key)

    return resolve


@pytest.fixture
def manifest_file(tmp_path, sample_manifest_data):
    # write sample manifest to disk
    path = tmp_path / "commands.json"
    path.write_text(json.dumps(sample_manifest_data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def recording_consoles():
    # separate stdout/stderr recording consoles for a Logger
    from test_support.rich_capture import make_recording_console

    return make_recording_console(), make_recording_console()
