import logging
from pathlib import Path

import pytest
import yaml


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A config file that keeps logs and history inside tmp_path."""
    path = tmp_path / "cmdassist.yaml"
    path.write_text(yaml.dump({
        "log_file": str(tmp_path / "cmdassist.log"),
        "history_file": str(tmp_path / "history"),
    }))
    return path


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("cmdassist")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
