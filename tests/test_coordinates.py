import pytest

from camptools.coordinates import Coordinates
from camptools.landscape import Ackley, Rastrigin, SumSquares


def test_z_is_computed_at_construction():
    xy = Coordinates("rastrigin", 4.0, 5.0)
    assert xy.z == pytest.approx(0.0, abs=1e-12)
    assert xy.landscape_function_name == "rastrigin"


def test_setting_x_and_y_updates_z():
    xy = Coordinates("sum_squares")
    xy.x = 3.0
    xy.y = 4.0
    assert (xy.x, xy.y) == (3.0, 4.0)
    assert xy.z == SumSquares().calculate_z(3.0, 4.0)


def test_modify_adds_delta_and_updates_z():
    xy = Coordinates("ackley", 1.0, 10.0)
    xy.modify_x(0.5)
    xy.modify_y(-2.0)
    assert xy.x == pytest.approx(1.5)
    assert xy.y == pytest.approx(8.0)
    assert xy.z == Ackley().calculate_z(xy.x, xy.y)


def test_modify_then_undo_restores_z():
    xy = Coordinates("rastrigin", 32.0, 110.0)
    original = xy.z
    xy.modify_x(7.25)
    xy.modify_x(-7.25)
    assert xy.z == pytest.approx(original)


def test_unknown_landscape_raises():
    with pytest.raises(ValueError, match="Valid options are 'sum_squares'"):
        Coordinates("himmelblau")


def test_failed_switch_keeps_old_landscape():
    xy = Coordinates("sum_squares", 1.0, 2.0)
    with pytest.raises(ValueError):
        xy.set_landscape_function("nope")
    assert xy.landscape_function_name == "sum_squares"
    assert xy.z == SumSquares().calculate_z(1.0, 2.0)


def test_set_landscape_function_recomputes_z():
    xy = Coordinates("sum_squares", 10.0, 10.0)
    xy.set_landscape_function("rastrigin")
    assert xy.landscape_function_name == "rastrigin"
    assert xy.z == Rastrigin().calculate_z(10.0, 10.0)


def test_z_cannot_be_assigned():
    xy = Coordinates("sum_squares", 3.0, 4.0)
    with pytest.raises(AttributeError):
        xy.z = 5.0
    assert xy.z == 25.0


def test_copy_is_equal_and_independent():
    xy = Coordinates("ackley", 32.0, 1.0)
    clone = xy.copy()
    assert clone == xy
    assert clone.z == xy.z
    clone.modify_x(1.0)
    assert xy.x == 32.0
    assert clone != xy


def test_assign_overwrites_values():
    target = Coordinates("sum_squares", 1.0, 1.0)
    source = Coordinates("rastrigin", 110.0, 1300.0)
    target.assign(source)
    assert target == source
    assert target.z == source.z
    assert target.landscape_function_name == "rastrigin"