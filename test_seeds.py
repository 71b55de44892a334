import pytest

from gradval import GradVal, grad, grads, grads_list, value


def test_value_passthrough():
    assert value(GradVal(2.5)) == 2.5
    assert value(3) == 3


def test_grad_single_input():
    assert grad(lambda x: x * x, 3.0) == 6.0
    assert grad(lambda x: (x * 2).log(), 1.0) == pytest.approx(1.0, rel=1e-6)


def test_grad_accepts_existing_handle():
    x = GradVal(4.0)
    assert grad(lambda v: v * v * v, x) == 48.0
    assert x.grad == 48.0


def test_grads_dict():
    f = lambda v: v["x"] * v["y"] + v["x"]
    out = grads(f, {"x": 2.0, "y": 5.0})
    assert out == {"x": 6.0, "y": 2.0}
    assert list(out) == ["x", "y"]


def test_grads_list():
    f = lambda xs: xs[0] * xs[0] + 3 * xs[1]
    assert grads_list(f, [2.0, 4.0]) == [4.0, 3.0]


def test_constant_function_has_zero_grads():
    assert grad(lambda x: 5.0, 1.0) == 0.0
    assert grads_list(lambda xs: 1.0, [1.0, 2.0]) == [0.0, 0.0]


def test_unused_input_has_zero_grad():
    out = grads(lambda v: v["x"] * 2, {"x": 1.0, "y": 1.0})
    assert out == {"x": 2.0, "y": 0.0}


def test_stale_grad_on_held_handle_is_not_reported():
    x = GradVal(4.0)
    (x * x).backward()
    assert x.grad == 8.0

    c = GradVal(2.0)
    assert grad(lambda v: c * 3, x) == 0.0
    assert x.grad is None

    (x * x).backward()
    assert grads(lambda v: v["y"] * 2, {"x": x, "y": 1.0}) == {"x": 0.0, "y": 2.0}
