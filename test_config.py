import math

import pytest

from gradval import (
    GradVal,
    EngineConfig,
    NonFiniteError,
    GradValError,
    backward,
    get_config,
    use_config,
)


def test_default_policy_propagates():
    assert get_config().nonfinite == "propagate"
    x = GradVal(-1.0)
    y = x.log()
    y.backward()
    assert math.isnan(y.value)
    assert x.grad == -1.0


def test_raise_policy_on_forward_values():
    with use_config(nonfinite="raise") as cfg:
        assert cfg.nonfinite == "raise"
        assert get_config() is cfg
        with pytest.raises(NonFiniteError):
            GradVal(-1.0).log()
        with pytest.raises(FloatingPointError):
            GradVal(0.0).log()
        with pytest.raises(GradValError):
            GradVal(100.0).exp()
        # finite results are unaffected
        assert GradVal(1.0).log().value == 0.0

    assert get_config().nonfinite == "propagate"


def test_raise_policy_on_gradients():
    x = GradVal(-2.0)
    y = x ** 2
    with use_config(nonfinite="raise"):
        with pytest.raises(NonFiniteError) as info:
            y.backward()
    assert info.value.op_tag == "POW"
    assert info.value.where == "gradient"


def test_config_restored_after_error():
    with pytest.raises(RuntimeError):
        with use_config(fd_step=0.5):
            assert get_config().fd_step == 0.5
            raise RuntimeError("boom")
    assert get_config().fd_step == EngineConfig().fd_step


def test_invalid_config():
    with pytest.raises(ValueError):
        EngineConfig(nonfinite="ignore")
    with pytest.raises(ValueError):
        EngineConfig(fd_step=0.0)
    with pytest.raises(ValueError):
        EngineConfig(fd_tolerance=-1.0)
    with pytest.raises(ValueError):
        with use_config(nonfinite="warn"):
            pass
    with pytest.raises(ValueError):
        with use_config(verbose=True):
            pass
    assert get_config() == EngineConfig()


def test_raise_policy_on_overflowing_gradient_sum():
    x = GradVal(1.0)
    # each path contributes 3e38; their sum overflows float32
    y = x * 3e38 + x * 3e38
    with use_config(nonfinite="raise"):
        with pytest.raises(NonFiniteError) as info:
            y.backward()
    assert info.value.where == "gradient"

    y.backward()
    assert math.isinf(x.grad)


def test_raise_policy_on_seed():
    with use_config(nonfinite="raise"):
        with pytest.raises(NonFiniteError):
            backward(GradVal(1.0), seed=float("inf"))


def test_raise_policy_on_overflowing_leaf():
    with use_config(nonfinite="raise"):
        with pytest.raises(NonFiniteError) as info:
            GradVal(1e39)
        assert info.value.where == "value"
        # explicitly non-finite inputs are accepted as given
        assert math.isinf(GradVal(float("inf")).value)
    assert math.isinf(GradVal(1e39).value)
