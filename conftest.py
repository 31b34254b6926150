"""
# Bridge between pytest and the contention harness in &horology.test.core.
"""
import pytest
from horology.test import core

@pytest.fixture
def test(request):
	"""
	# The &core.Test instance given to test functions.
	"""
	t = core.Test(request.node.nodeid, request.function)
	with t.exits:
		yield t

@pytest.hookimpl(wrapper=True)
def pytest_runtest_call(item):
	try:
		return (yield)
	except core.Skip as fate:
		pytest.skip(str(fate.content))
