import pytest
import respx
from httpx import Response

from hotlist_engine import cli_entrypoints
from notifiers.wxpusher_sender import WXPUSHER_SEND_URL

API_URL = "https://apis.tianapi.com/wxhottopic/index"


@pytest.fixture(autouse=True)
def _env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate the CLI from any real .env file and shell settings."""
    monkeypatch.setattr(cli_entrypoints, "load_dotenv", lambda *a, **kw: False)
    for name in ("TIANAPI_URL", "PUSH_HOUR", "PUSH_MINUTE", "HOT_LIST_COUNT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("WXPUSHER_APP_TOKEN", "AT_token")
    monkeypatch.setenv("WXPUSHER_UID", "UID_123")
    monkeypatch.setenv("TIANAPI_KEY", "tian-key")


def _mock_endpoints(router: respx.MockRouter, success: bool) -> None:
    router.post(API_URL).mock(
        return_value=Response(200, json={"code": 200, "result": {"list": [{"word": "A"}]}})
    )
    router.post(WXPUSHER_SEND_URL).mock(return_value=Response(200, json={"success": success}))


def test_exit_zero_on_delivery() -> None:
    with respx.mock as mock:
        _mock_endpoints(mock, success=True)
        assert cli_entrypoints.main([]) == 0


def test_exit_one_on_rejected_delivery() -> None:
    with respx.mock as mock:
        _mock_endpoints(mock, success=False)
        assert cli_entrypoints.main([]) == 1


def test_test_flag_same_exit_code_with_distinct_log(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("INFO")
    with respx.mock as mock:
        _mock_endpoints(mock, success=True)
        assert cli_entrypoints.main(["--test"]) == 0

    assert "test push" in caplog.text


def test_missing_config_exits_before_network(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.delenv("TIANAPI_KEY")
    with respx.mock(assert_all_called=False) as mock:
        _mock_endpoints(mock, success=True)
        assert cli_entrypoints.main([]) == 1
        assert not mock.calls

    assert "TIANAPI_KEY" in caplog.text


def test_push_console_script_exits_with_status(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli_entrypoints.sys, "argv", ["wxhot-push"])
    with respx.mock as mock:
        _mock_endpoints(mock, success=True)
        with pytest.raises(SystemExit) as excinfo:
            cli_entrypoints.push()

    assert excinfo.value.code == 0
