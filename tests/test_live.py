"""Tests for live() assembly."""

import logging
import os
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
from layered_env import BaseWithOverride
from layered_env import InitializationFailedError
from layered_env import MissingRequiredKeysError
from layered_env import NoFiles
from layered_env import SingleFile
from layered_env import live
from layered_env.live import DEFAULTS


class TestLive:
    """Test live() merging and error translation."""

    @pytest.fixture
    def root(self):
        """Create temporary project root for testing."""
        with TemporaryDirectory() as tmpdir:
            yield Path(tmpdir)

    def test_no_files_uses_process_environment(self):
        env = live(NoFiles(), environ={"ONLY": "process"})
        assert env.get("ONLY") == "process"
        assert env.get("NON_EXISTENT_KEY") is None

    def test_default_source_is_no_files(self):
        assert live(environ={"A": "1"}).to_dict() == {"A": "1"}

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("LAYERED_ENV_TEST_KEY", "from-os")
        env = live(NoFiles())
        assert env.get("LAYERED_ENV_TEST_KEY") == "from-os"

    def test_os_environ_not_modified(self, root, monkeypatch):
        monkeypatch.delenv("FILE_ONLY_KEY", raising=False)
        (root / ".env").write_text("FILE_ONLY_KEY=value")

        live(BaseWithOverride(root))

        assert "FILE_ONLY_KEY" not in os.environ

    def test_defaults_are_empty(self):
        assert dict(DEFAULTS) == {}

    def test_process_environment_beats_file(self, root):
        (root / ".env").write_text("PORT=8080\nHOST=localhost")
        env = live(BaseWithOverride(root), environ={"PORT": "9000"})
        assert env.as_int("PORT") == 9000
        assert env.get("HOST") == "localhost"

    def test_precedence_all_layers(self, root):
        """Test process env > override file > base file for shared keys."""
        (root / ".env").write_text("A=base\nB=base\nC=base\nD=base")
        (root / ".env.development").write_text("B=override\nC=override\nD=override")

        env = live(BaseWithOverride(root, "development"), environ={"C": "process"})

        assert env.get("A") == "base"
        assert env.get("B") == "override"
        assert env.get("C") == "process"
        assert env.get("D") == "override"

    def test_missing_single_file_equals_no_files(self, root):
        """Test a nonexistent file never raises and behaves like NoFiles."""
        environ = {"PATH": "/usr/bin", "HOME": "/home/test"}
        missing = live(SingleFile(root / "does-not-exist.env"), environ=environ)
        none = live(NoFiles(), environ=environ)
        assert missing == none

    def test_malformed_file_does_not_raise(self, root):
        path = root / "invalid.env"
        path.write_text("VALID_KEY=value\nINVALID_LINE_WITHOUT_EQUALS\nANOTHER_VALID=value")

        env = live(SingleFile(path), environ={})

        assert env.get("VALID_KEY") is None
        assert env.get("ANOTHER_VALID") is None

    def test_rejected_path_does_not_raise(self):
        env = live(SingleFile("bad\0path"), environ={"A": "1"})
        assert env.to_dict() == {"A": "1"}

    def test_required_keys_satisfied_by_process_environment(self, root):
        env = live(SingleFile(root / "missing.env"), required_keys={"API_KEY"}, environ={"API_KEY": "k"})
        assert env.get("API_KEY") == "k"

    def test_missing_required_keys_wrapped(self, root):
        (root / ".env").write_text("APP_NAME=X")

        with pytest.raises(InitializationFailedError) as exc_info:
            live(BaseWithOverride(root, "development"), required_keys={"APP_NAME", "MISSING_KEY"}, environ={})

        underlying = exc_info.value.underlying
        assert isinstance(underlying, MissingRequiredKeysError)
        assert underlying.keys == ["MISSING_KEY"]
        assert exc_info.value.__cause__ is underlying

    def test_failure_logged_as_error(self, caplog):
        with caplog.at_level(logging.ERROR):
            with pytest.raises(InitializationFailedError):
                live(NoFiles(), required_keys={"MISSING_KEY"}, environ={})

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.ERROR
        assert "MISSING_KEY" in caplog.records[0].getMessage()

    def test_injected_logger(self, caplog):
        custom = logging.getLogger("app.bootstrap")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(InitializationFailedError):
                live(required_keys={"MISSING_KEY"}, environ={}, log=custom)

        assert [record.name for record in caplog.records] == ["app.bootstrap"]

    def test_unknown_source_wrapped(self):
        with pytest.raises(InitializationFailedError) as exc_info:
            live("not-a-source", environ={})
        assert isinstance(exc_info.value.underlying, TypeError)

    def test_custom_decoder(self, root):
        path = root / "settings.cfg"
        path.write_text("anything")

        env = live(SingleFile(path), decoder=lambda text: {"DECODED": "yes"}, environ={})

        assert env.as_bool("DECODED") is True

    # ===== Deprecated local_env_file =====

    def test_local_env_file_deprecated(self, root):
        path = root / ".env.json"
        path.write_text('{"APP_ENV": "json-demo"}')

        with pytest.deprecated_call():
            env = live(local_env_file=path, environ={})

        assert env.get("APP_ENV") == "json-demo"

    def test_local_env_file_with_source_rejected(self, root):
        with pytest.raises(TypeError):
            live(NoFiles(), local_env_file=root / ".env", environ={})
