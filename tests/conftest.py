# tests/conftest.py
import logging

import pytest

from core.models import Task
from infra.services import build_service_dict
from infra.settings import EngineSettings


@pytest.fixture
def settings(tmp_path):
    return EngineSettings(
        log_level=logging.INFO,
        log_dir=tmp_path / "logs",
        console_logging=False,
        strict_reconciliation=True,
    )


@pytest.fixture
def services(settings):
    return build_service_dict(settings)


@pytest.fixture
def chain_tasks():
    return [
        Task.create("A", 4),
        Task.create("B", 2, ["A"]),
        Task.create("C", 8, ["B"]),
    ]


@pytest.fixture
def diamond_tasks():
    return [
        Task.create("A", 2),
        Task.create("B", 3, ["A"]),
        Task.create("C", 1, ["A"]),
        Task.create("D", 2, ["B", "C"]),
    ]
