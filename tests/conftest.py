# File: tests/conftest.py

import os
import sys
from pathlib import Path

import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())

from config_ready.core.common.enums import LayoutConvention
from config_ready.features.specimen_aggregator.domain.models import AggregationConfig


@pytest.fixture
def resources_config():
    return AggregationConfig.for_layout(LayoutConvention.RESOURCES)


@pytest.fixture
def legacy_config():
    return AggregationConfig.for_layout(LayoutConvention.LEGACY)


@pytest.fixture
def project_root(tmp_path):
    """
    Empty project with an empty vendor/ dir.
    """
    root = tmp_path / "project"
    (root / "vendor").mkdir(parents=True)
    return root


@pytest.fixture
def add_specimen():
    """
    Factory: writes vendor/<group>/<package>/<specimen path> with given content.
    """
    def _add(root: Path, group: str, package: str, config: AggregationConfig, content: str = "<?php return [];\n") -> Path:
        location = root / "vendor" / group / package / config.specimen_path
        location.parent.mkdir(parents=True, exist_ok=True)
        location.write_text(content)
        return location
    return _add
