"""Pytest configuration for Pleeease tests."""

import logging

import orjson
import pytest

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@pytest.fixture
def sample_css():
    """Return sample CSS content for testing."""
    return """
    /*! banner */
    /* regular comment */
    body {
        color: red;
        margin: 0;
    }

    .container {
        max-width: 1200px;
    }
    """


@pytest.fixture
def css_file(tmp_path):
    """Write a small stylesheet and return its path."""
    path = tmp_path / 'in.css'
    path.write_text('a {\n  color: red;\n}\n')
    return path


@pytest.fixture
def rc_file(tmp_path):
    """Return a function writing a .pleeeaserc with the given options."""
    def write(options, directory=None):
        path = (directory or tmp_path) / '.pleeeaserc'
        path.write_bytes(orjson.dumps(options))
        return path
    return write
