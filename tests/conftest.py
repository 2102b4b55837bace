import os
import sys
import logging
import pytest
import configparser
from pathlib import Path
from click.testing import CliRunner

# Add project root to sys.path for local imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from models.digest_settings import DigestSettings
from utils.digestkit_config import load_configuration

# ────────────────────────────────────────────────
# STANDARD TEST VECTORS
# ────────────────────────────────────────────────

EMPTY_HEX = {
    "sha1": "da39a3ee5e6b4b0d3255bfef95601890afd80709",
    "sha256": "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
    "sha512": (
        "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
        "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e"
    ),
    "md5": "d41d8cd98f00b204e9800998ecf8427e",
}

ABC_HEX = {
    "sha1": "a9993e364706816aba3e25717850c26c9cd0d89d",
    "sha256": "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
    "sha512": (
        "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
        "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
    ),
    "md5": "900150983cd24fb0d6963f7d28e17f72",
}

ALGORITHMS = ["sha1", "sha256", "sha512", "md5"]


@pytest.fixture
def empty_hex():
    return dict(EMPTY_HEX)


@pytest.fixture
def abc_hex():
    return dict(ABC_HEX)


# ────────────────────────────────────────────────
# LOGGING ISOLATION
# ────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers[:] = handlers


# ────────────────────────────────────────────────
# CONFIGURATION FIXTURES
# ────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def clear_digestkit_env(monkeypatch):
    """Keep DIGESTKIT_* variables from the developer's shell out of the tests."""
    for name in ("DIGESTKIT_DEFAULT_ENCODING", "DIGESTKIT_LOCK_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_config_path(tmp_path):
    """Create a temporary configuration file for digestkit tests."""
    config_path = tmp_path / "test_digestkit_config.ini"
    config = configparser.ConfigParser()
    config["Digest"] = {"default_encoding": "base64", "lock_timeout": "2.5"}

    with config_path.open("w") as config_file:
        config.write(config_file)

    return config_path


@pytest.fixture
def invalid_config_path(tmp_path):
    config_path = tmp_path / "invalid_digestkit_config.ini"
    config_path.write_text("[digest]\ndefault_encoding = rot13\nlock_timeout = -1\n")
    return config_path


@pytest.fixture
def config(test_config_path):
    """Load the configuration from the test config path."""
    return load_configuration(str(test_config_path))


@pytest.fixture
def default_settings():
    return DigestSettings()


# ────────────────────────────────────────────────
# CLI FIXTURES
# ────────────────────────────────────────────────

@pytest.fixture
def runner():
    """Fixture providing a Click CliRunner instance."""
    return CliRunner()


@pytest.fixture
def missing_config_path(tmp_path):
    return Path(tmp_path) / "does_not_exist.ini"
