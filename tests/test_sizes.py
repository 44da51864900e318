import pytest

from altro.sizes import DYNAMIC, StateControlSized, add_sizes


def test_add_sizes_static():
    assert add_sizes(3, 2) == 5


@pytest.mark.parametrize("n, m", [(DYNAMIC, 2), (3, DYNAMIC), (DYNAMIC, DYNAMIC)])
def test_add_sizes_dynamic(n, m):
    assert add_sizes(n, m) == DYNAMIC


def test_static_sizes_from_declaration():
    sized = StateControlSized(3, 2)
    assert sized.state_dimension() == 3
    assert sized.control_dimension() == 2
    assert sized.state_memory_size() == 3
    assert sized.control_memory_size() == 2


def test_dynamic_sizes_accept_any_dimension():
    sized = StateControlSized(DYNAMIC, DYNAMIC, 7, 4)
    assert sized.state_dimension() == 7
    assert sized.control_dimension() == 4
    assert sized.state_memory_size() == DYNAMIC
    assert sized.control_memory_size() == DYNAMIC


def test_inconsistent_state_size_raises():
    with pytest.raises(ValueError, match="State sizes must be consistent"):
        StateControlSized(3, 2, 4, 2)


def test_inconsistent_control_size_raises():
    with pytest.raises(ValueError, match="Control sizes must be consistent"):
        StateControlSized(3, 2, 3, 1)


def test_dynamic_without_dimension_raises():
    with pytest.raises(ValueError, match="State dimension must be greater than zero"):
        StateControlSized()
    with pytest.raises(ValueError, match="Control dimension must be greater than zero"):
        StateControlSized(3, DYNAMIC)