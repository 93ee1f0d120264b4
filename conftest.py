"""
# Provide the &forwarding.test.core.Test instance to test functions collected by pytest.
"""
import pytest

from forwarding.test import core

@pytest.fixture
def test(request):
	t = core.Test(request.node.nodeid, request.function)
	with t.exits:
		yield t
