from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "fetch_lottery.py"


@pytest.fixture
def script():  # type: ignore[no-untyped-def]
    spec = importlib.util.spec_from_file_location("fetch_lottery", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_unknown_identifier_exits_with_not_supported(script) -> None:  # type: ignore[no-untyped-def]
    assert script.main(["atlantis_lotto"]) == 1


def test_source_restriction_without_mapping_is_not_supported(script) -> None:  # type: ignore[no-untyped-def]
    # euro_jackpot has no primary source, so restricting to primary leaves nothing to fetch.
    assert script.main(["euro_jackpot", "--source", "primary"]) == 1


def test_cache_window_comes_from_environment_loaded_at_run_time(script, monkeypatch) -> None:  # type: ignore[no-untyped-def]
    built: list[float] = []

    class RecordingCache(script.ResultCache):  # type: ignore[name-defined]
        def __init__(self, max_age_seconds: float, *args, **kwargs) -> None:  # type: ignore[no-untyped-def]
            built.append(max_age_seconds)
            super().__init__(max_age_seconds, *args, **kwargs)

    # Set after the script (and its config module) were imported, as load_dotenv would.
    monkeypatch.setenv("CACHE_MAX_AGE_SECONDS", "42")
    monkeypatch.setattr(script, "ResultCache", RecordingCache)

    assert script.main(["atlantis_lotto"]) == 1
    assert built == [42.0]
