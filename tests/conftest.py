import pytest
from groups.constructors import cyclic_group, imprimitive_group, symmetric_group


@pytest.fixture(scope="session")
def mu3():
    # Cube roots of unity acting on a line: one hyperplane orbit, e_Omega = 3.
    return cyclic_group(3)

@pytest.fixture(scope="session")
def mu4():
    return cyclic_group(4)

@pytest.fixture(scope="session")
def s3():
    return symmetric_group(3)

@pytest.fixture(scope="session")
def b2():
    # G(2,1,2): two hyperplane orbits, both with e_Omega = 2.
    return imprimitive_group(2, 1, 2)

@pytest.fixture(scope="session")
def g312():
    # G(3,1,2): orbits with e_Omega = 2 (x1 = z^k x2) and e_Omega = 3 (xi = 0).
    return imprimitive_group(3, 1, 2)

@pytest.fixture
def dummy_logger(caplog):
    caplog.set_level("DEBUG")
    return caplog
