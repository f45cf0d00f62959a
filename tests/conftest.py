import pytest

pytest_plugins = ["kblog.testing.fixtures"]


@pytest.fixture(autouse=True)
def _no_kblog_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("KBLOG_LINE_PREFIX", "KBLOG_LOG_LEVEL", "KBLOG_JSON_LOGS"):
        monkeypatch.delenv(key, raising=False)
