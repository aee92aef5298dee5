# tests/conftest.py
# This file is part of Logic Parser - A propositional-logic formula parser
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Logic Parser tests.

The configuration handles:
- Python path setup for module imports
- Test environment verification
- Common fixtures and tree invariant checks shared by parser tests
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability before any test runs.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import logic_parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def basic_formula():
    """Provide a simple formula for testing.

    Returns:
        str: Single conjunction
    """
    return "(p∧q)"


@pytest.fixture
def complex_formula():
    """Provide a formula using every connective.

    Returns:
        str: Nested formula with all five connectives
    """
    return "((¬p∧q)→((r∨s)↔¬¬t))"


def _check_well_formed(root):
    """Check the structural invariants every returned logic tree must satisfy.

    Args:
        root: Root node returned by the parser
    """
    from logic_parser import AtomicNode, ChildrenLayout, RootNode

    assert isinstance(root, RootNode)
    assert root.parent is None

    seen = set()
    for node in root.walk():
        assert id(node) not in seen, "Logic tree contains a cycle or shared node"
        seen.add(id(node))

        assert node.is_complete, f"{node.name} node has unfilled child slots"

        if node.children_layout is ChildrenLayout.NONE:
            assert isinstance(node, AtomicNode)
            assert node.children == ()
        elif node.children_layout is ChildrenLayout.LEFT_AND_RIGHT:
            assert len(node.children) == 2
        else:
            assert len(node.children) == 1

        for child in node.children:
            assert child.parent is node
            assert not isinstance(child, RootNode)


@pytest.fixture
def assert_well_formed():
    """Provide the logic tree invariant check.

    Returns:
        Callable[[RootNode], None]: Asserts arity, parent links and acyclicity
    """
    return _check_well_formed
