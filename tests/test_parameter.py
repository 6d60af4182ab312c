"""
Tests for time-varying parameters.
"""

import copy

import numpy as np
import pytest

from quantmath.integration.parameter import MovedFromError, Parameter
from quantmath.integration.strategies import (
    AnalyticIntegration,
    DiscreteDataIntegration,
    IntegrationStrategy,
    NumericIntegration,
)


class ConstantIntegral(IntegrationStrategy):
    """Strategy returning a fixed integral regardless of the interval."""

    def __init__(self, value):
        self.value = value

    def integrate(self, t1, t2):
        return self.value


class TestParameter:
    """Test integration and averaging through the bound strategy."""

    def test_integrate_delegates(self):
        """Test that integrate forwards to the strategy."""
        param = Parameter(0.2, AnalyticIntegration(lambda t: t * t))
        assert param.integrate(1.0, 3.0) == 8.0

    def test_mean(self):
        """Test integral 10 over [0, 5] gives mean 2."""
        param = Parameter(10.0, ConstantIntegral(10.0))
        assert param.mean(0.0, 5.0) == 2.0

    def test_mean_of_constant_volatility(self):
        """Test that a constant rate has itself as mean."""
        sigma = 0.25
        param = Parameter(sigma, NumericIntegration(lambda t: sigma))
        assert param.mean(0.0, 2.0) == pytest.approx(sigma, rel=1e-12)

    def test_mean_reversed_interval(self):
        """Test that reversing the interval leaves the mean unchanged."""
        param = Parameter(1.0, AnalyticIntegration(lambda t: t * t))
        assert param.mean(3.0, 1.0) == param.mean(1.0, 3.0) == 4.0

    def test_mean_zero_width_interval(self):
        """Test that a zero-width interval is rejected."""
        param = Parameter(1.0, AnalyticIntegration(lambda t: t))
        with pytest.raises(ValueError, match="zero-width interval"):
            param.mean(1.0, 1.0)

    def test_vector_mean(self):
        """Test averaging of an array-valued parameter."""
        param = Parameter(np.zeros(2), DiscreteDataIntegration([[1.0, 2.0], [3.0, 4.0]]))
        np.testing.assert_allclose(param.mean(0.0, 4.0), [2.0, 3.0])

    def test_requires_strategy(self):
        """Test that the strategy must be an IntegrationStrategy."""
        with pytest.raises(ValueError, match="strategy must be an IntegrationStrategy"):
            Parameter(1.0, lambda t: t)

    def test_accessors(self):
        """Test object and strategy accessors."""
        strategy = ConstantIntegral(1.0)
        param = Parameter(0.3, strategy)
        assert param.object == 0.3
        assert param.strategy is strategy
        assert not param.is_moved


class TestCopySemantics:
    """Test that implicit duplication is refused."""

    def test_copy_refused(self):
        """Test copy.copy raises TypeError."""
        param = Parameter(1.0, ConstantIntegral(1.0))
        with pytest.raises(TypeError, match="use clone"):
            copy.copy(param)

    def test_deepcopy_refused(self):
        """Test copy.deepcopy raises TypeError."""
        param = Parameter(1.0, ConstantIntegral(1.0))
        with pytest.raises(TypeError, match="use clone"):
            copy.deepcopy(param)


class TestClone:
    """Test explicit deep cloning."""

    def test_clone_matches_original(self):
        """Test that a clone integrates identically."""
        param = Parameter(0.2, DiscreteDataIntegration([2.0, 4.0, 6.0]))
        clone = param.clone()
        assert clone.integrate(0.0, 3.0) == param.integrate(0.0, 3.0) == 12.0

    def test_clone_owns_new_value_and_strategy(self):
        """Test that the clone shares nothing mutable with the original."""
        value = np.array([1.0, 2.0])
        param = Parameter(value, DiscreteDataIntegration([[1.0, 1.0]]))
        clone = param.clone()

        assert clone.object is not param.object
        assert clone.strategy is not param.strategy
        clone.object[0] = 99.0
        assert param.object[0] == 1.0

    def test_reassigning_clone_leaves_original(self):
        """Test that move-assigning into the clone does not affect the original."""
        param = Parameter(1.0, AnalyticIntegration(lambda t: t * t))
        clone = param.clone()

        clone.assign(Parameter(5.0, ConstantIntegral(-1.0)))

        assert clone.integrate(1.0, 3.0) == -1.0
        assert param.integrate(1.0, 3.0) == 8.0
        assert param.object == 1.0


class TestMoveSemantics:
    """Test ownership transfer."""

    def test_move_preserves_behaviour(self):
        """Test that the target integrates as the source did before the move."""
        source = Parameter(0.2, AnalyticIntegration(lambda t: t * t))
        expected = source.integrate(1.0, 3.0)

        target = source.move()

        assert target.integrate(1.0, 3.0) == expected
        assert target.object == 0.2

    def test_moved_from_state(self):
        """Test that the moved-from parameter holds nothing and refuses use."""
        source = Parameter(0.2, AnalyticIntegration(lambda t: t * t))
        target = source.move()

        assert source.is_moved
        assert not target.is_moved
        assert "moved-from" in repr(source)
        for operation in (
            lambda: source.integrate(0.0, 1.0),
            lambda: source.mean(0.0, 1.0),
            lambda: source.clone(),
            lambda: source.move(),
            lambda: source.object,
            lambda: source.strategy,
        ):
            with pytest.raises(MovedFromError):
                operation()

    def test_move_does_not_alias(self):
        """Test that the target owns the strategy exclusively."""
        strategy = ConstantIntegral(3.0)
        source = Parameter(1.0, strategy)
        target = source.move()

        assert target.strategy is strategy
        assert source._strategy is None

    def test_assign_replaces_value_and_strategy(self):
        """Test move-assignment replaces both fields together."""
        target = Parameter(1.0, ConstantIntegral(1.0))
        source = Parameter(2.0, ConstantIntegral(7.0))

        result = target.assign(source)

        assert result is target
        assert target.object == 2.0
        assert target.integrate(0.0, 1.0) == 7.0
        assert source.is_moved

    def test_assign_into_moved_from(self):
        """Test that a moved-from parameter can be reassigned."""
        source = Parameter(1.0, ConstantIntegral(1.0))
        source.move()

        source.assign(Parameter(4.0, ConstantIntegral(8.0)))

        assert not source.is_moved
        assert source.mean(0.0, 2.0) == 4.0

    def test_self_assignment(self):
        """Test that assigning a parameter to itself is a no-op."""
        param = Parameter(1.0, ConstantIntegral(2.0))
        param.assign(param)
        assert param.integrate(0.0, 1.0) == 2.0
        assert not param.is_moved

    def test_assign_requires_parameter(self):
        """Test that only a Parameter can be move-assigned."""
        target = Parameter(1.0, ConstantIntegral(1.0))
        with pytest.raises(ValueError, match="other must be a Parameter"):
            target.assign(3.0)
        assert target.object == 1.0

    def test_assign_from_moved_from(self):
        """Test that a moved-from source cannot be assigned from."""
        target = Parameter(1.0, ConstantIntegral(1.0))
        source = Parameter(2.0, ConstantIntegral(2.0))
        source.move()

        with pytest.raises(MovedFromError):
            target.assign(source)
        assert target.object == 1.0
