"""
Unit tests for activation functions and their derivatives.

Derivatives take the ACTIVATED value y = f(z) as argument; the tests check them
against a numerical derivative of the forward function.
"""

import pytest
import numpy as np
from evonet.activations.basic_activations import (
    Activation,
    activations,
    activation_codes,
    get_activation,
    sigmoid_activation,
    sigmoid_derivative,
    tanh_activation,
    tanh_derivative,
    relu_activation,
    relu_derivative,
    identity_activation,
    identity_derivative,
)


# Fixtures
@pytest.fixture
def sample_1d_array():
    """Standard 1D array for testing."""
    return np.array([-2.0, -1.0, -0.5, 0.5, 1.0, 2.0])


class TestActivationsDictionary:
    """Test the activation registry."""

    def test_expected_names(self):
        assert set(activations) == {'sigmoid', 'tanh', 'relu', 'identity'}

    def test_entries_are_activation_pairs(self):
        for name, activation in activations.items():
            assert isinstance(activation, Activation)
            assert activation.name == name
            assert callable(activation.function)
            assert callable(activation.derivative)

    def test_every_activation_has_a_code(self):
        assert set(activation_codes) == set(activations)
        assert all(len(code) == 3 for code in activation_codes.values())

    def test_activation_is_immutable(self):
        with pytest.raises(AttributeError):
            activations['sigmoid'].derivative = relu_derivative


class TestGetActivation:

    def test_by_name(self):
        assert get_activation('tanh') is activations['tanh']

    def test_activation_passes_through(self):
        custom = Activation('custom', identity_activation, identity_derivative)
        assert get_activation(custom) is custom

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown activation"):
            get_activation('softmax')

    def test_unhashable_raises_value_error(self):
        with pytest.raises(ValueError):
            get_activation(['sigmoid'])


class TestSigmoid:

    def test_zero(self):
        assert sigmoid_activation(0.0) == pytest.approx(0.5)

    def test_known_value(self):
        assert sigmoid_activation(1.0) == pytest.approx(1.0 / (1.0 + np.exp(-1.0)))

    def test_range(self, sample_1d_array):
        y = sigmoid_activation(sample_1d_array)
        assert np.all((y > 0.0) & (y < 1.0))

    def test_extreme_inputs_do_not_overflow(self):
        with np.errstate(over='raise'):
            y = sigmoid_activation(np.array([-1e6, 1e6]))
        assert y[0] == pytest.approx(0.0)
        assert y[1] == pytest.approx(1.0)

    def test_derivative_in_terms_of_output(self):
        assert sigmoid_derivative(0.5) == pytest.approx(0.25)
        assert sigmoid_derivative(0.0) == 0.0
        assert sigmoid_derivative(1.0) == 0.0


class TestTanh:

    def test_values(self, sample_1d_array):
        assert np.allclose(tanh_activation(sample_1d_array), np.tanh(sample_1d_array))

    def test_derivative_in_terms_of_output(self):
        assert tanh_derivative(0.0) == pytest.approx(1.0)
        assert tanh_derivative(0.5) == pytest.approx(0.75)


class TestRelu:

    def test_values(self, sample_1d_array):
        assert np.array_equal(relu_activation(sample_1d_array), np.maximum(0.0, sample_1d_array))

    def test_derivative(self):
        assert np.array_equal(relu_derivative(np.array([0.0, 0.5, 3.0])), np.array([0.0, 1.0, 1.0]))


class TestIdentity:

    def test_values(self, sample_1d_array):
        assert np.array_equal(identity_activation(sample_1d_array), sample_1d_array)

    def test_derivative(self, sample_1d_array):
        assert np.array_equal(identity_derivative(sample_1d_array), np.ones_like(sample_1d_array))


class TestDerivativeMatchesFunction:
    """The derivative of each pair, applied to f(z), must equal df/dz at z."""

    @pytest.mark.parametrize("name", ['sigmoid', 'tanh', 'relu', 'identity'])
    def test_numerical_derivative(self, name, sample_1d_array):
        activation = activations[name]
        h = 1e-6
        z = sample_1d_array
        numerical = (activation.function(z + h) - activation.function(z - h)) / (2 * h)
        analytical = activation.derivative(activation.function(z))
        assert np.allclose(analytical, numerical, atol=1e-5)
