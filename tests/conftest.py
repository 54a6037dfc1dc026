import pytest

# base URL of the RFC 3986 section 5.4 examples
RFC3986_BASE = 'http://a/b/c/d;p?q'


@pytest.fixture
def base():
    return RFC3986_BASE
