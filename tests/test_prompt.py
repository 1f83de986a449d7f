import pytest

from gridpath.config import EXIT_GRID_TOO_SMALL, EXIT_SAME_ENDPOINTS
from gridpath.prompt import (
    GridTooSmallError,
    InputError,
    SameEndpointsError,
    read_cell,
    read_int,
    validate_dimensions,
    validate_endpoints,
)


def answers(*values):
    """input() replacement returning the given answers in order."""
    it = iter(values)
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return next(it)

    fake_input.prompts = prompts
    return fake_input


def test_read_int_retries_until_valid(caplog):
    fake = answers("abc", "-3", " 7 ")
    assert read_int("Width", minimum=0, input_fn=fake) == 7
    assert fake.prompts == ["Width: "] * 3
    assert "Not an integer" in caplog.text


@pytest.mark.parametrize("raw", ["3 4", "3,4", " 3 , 4 "])
def test_read_cell_accepts_space_or_comma(raw):
    assert read_cell("Start", input_fn=answers(raw)) == (3, 4)


def test_read_cell_rejects_bad_input():
    fake = answers("1", "1 2 3", "-1 2", "x y", "0 5")
    assert read_cell("Goal", input_fn=fake) == (0, 5)
    assert fake.prompts[0] == "Goal coordinates [x, y]: "
    assert len(fake.prompts) == 5


@pytest.mark.parametrize("width,height", [(1, 5), (5, 1), (0, 0)])
def test_validate_dimensions_too_small(width, height):
    with pytest.raises(GridTooSmallError) as info:
        validate_dimensions(width, height)
    assert info.value.exit_code == EXIT_GRID_TOO_SMALL
    assert isinstance(info.value, InputError)


def test_validate_dimensions_ok():
    validate_dimensions(2, 2)


def test_validate_endpoints():
    validate_endpoints((0, 0), (0, 1))
    with pytest.raises(SameEndpointsError) as info:
        validate_endpoints((2, 3), (2, 3))
    assert info.value.exit_code == EXIT_SAME_ENDPOINTS
