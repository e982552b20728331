"""
# Supply the &library.Test instance taken by the test functions when collected by pytest.
"""
import pytest
from . import library

@pytest.fixture
def test(request):
	t = library.Test(request.node.name, request.function)
	with t.exits:
		yield t
