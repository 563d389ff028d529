"""Tests for ntreelib's loguru integration."""

import sys
from pathlib import Path

import pytest
from loguru import logger

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from ntreelib import TreeNode, NodeNotFoundError, enable_logging, disable_logging


@pytest.fixture
def captured():
    """Collect ntreelib log lines as ``LEVEL message`` strings."""
    messages = []
    handler_id = enable_logging(level="DEBUG", sink=messages.append, fmt="{level} {message}")
    yield messages
    disable_logging(handler_id)


def test_silent_by_default():
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG")
    try:
        TreeNode("a").add_child(TreeNode("b"))
    finally:
        logger.remove(handler_id)
    assert messages == []


def test_add_and_remove_are_logged(captured):
    root = TreeNode("a")
    root.add_child(TreeNode("b"))
    root.remove_child(0)

    text = "".join(captured)
    assert "DEBUG Added child 'b' under 'a'" in text
    assert "DEBUG Removed child 'b' from 'a' at index 0" in text


def test_missing_parent_logs_warning(captured):
    with pytest.raises(NodeNotFoundError):
        TreeNode("a").add_child_under("nope", TreeNode("b"))
    assert any(line.startswith("WARNING Parent 'nope' not found") for line in captured)


def test_disable_logging_silences_again():
    messages = []
    handler_id = enable_logging(sink=messages.append, fmt="{message}")
    disable_logging(handler_id)

    TreeNode("a").add_child(TreeNode("b"))
    assert not any("Added child" in line for line in messages)
