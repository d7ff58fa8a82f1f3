"""Shared fixtures for fcpxml chapter exporter tests."""

import logging
import pytest
from pathlib import Path
import tempfile


SAMPLE_PROJECT = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE fcpxml>
<fcpxml version="1.10">
  <resources>
    <format id="r1" frameDuration="100/6000s" width="1920" height="1080"/>
    <asset id="r2" name="Camera A" start="0s" duration="3600s"/>
  </resources>
  <library>
    <event name="Episode 12">
      <project name="Episode 12">
        <sequence format="r1" duration="900s">
          <spine>
            <asset-clip ref="r2" offset="0s" start="0s" duration="120s">
              <chapter-marker start="0s" duration="100/6000s" value="Intro"/>
              <chapter-marker start="3900/60s" duration="100/6000s" value="Setup"/>
            </asset-clip>
            <ref-clip ref="r3" offset="7200/60s" start="60s" duration="180s">
              <chapter-marker start="90s" duration="100/6000s" value="Demo"/>
              <chapter-marker start="30s" duration="100/6000s" value="Before trim"/>
            </ref-clip>
            <asset-clip ref="r2" offset="300s" start="0s" duration="600s">
              <asset-clip ref="r2" lane="1" offset="310s" start="10s" duration="20s">
                <chapter-marker start="15s" duration="100/6000s" value="Nested"/>
              </asset-clip>
            </asset-clip>
          </spine>
        </sequence>
      </project>
    </event>
  </library>
</fcpxml>
"""


@pytest.fixture
def temp_dir():
    """Create a temporary working directory."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def project_file(temp_dir):
    """Write the sample project to a temporary .fcpxml file."""
    path = temp_dir / "project.fcpxml"
    path.write_text(SAMPLE_PROJECT, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo root logger changes made by setup_logging()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
