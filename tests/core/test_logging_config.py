from __future__ import annotations

import pytest
import structlog

from jobmatch.logging import configure_logging


def test_configure_logging_rejects_unknown_format():
    with pytest.raises(ValueError, match="Unknown log format"):
        configure_logging("INFO", "xml")


@pytest.mark.parametrize("fmt", ["json", "console"])
def test_configure_logging_routes_through_stdlib(fmt: str):
    configure_logging("DEBUG", fmt)

    config = structlog.get_config()

    assert isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)
    assert config["processors"][-1].__class__.__name__ == (
        "JSONRenderer" if fmt == "json" else "ConsoleRenderer"
    )
