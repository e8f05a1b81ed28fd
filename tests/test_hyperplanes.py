import pytest

from core.exceptions import AffineHyperplaneError, HyperplaneError, NotAHyperplaneError, ParameterError
from cherednik.hyperplanes import (elimination_map, hyperplane_coefficients, restrict_to_hyperplane,
                                   specialize_in_hyperplane)
from cherednik.parameter_space import cherednik_parameter_space
from cherednik.parameters import cherednik_parameter, full_cherednik_parameter, parameter_from_values


def test_restrict_single_generator(b2):
    c = cherednik_parameter(b2)
    r = restrict_to_hyperplane(c, "2*k2_1")
    Q = r.codomain
    assert Q.names == ("k1_1",)
    assert not Q.rational
    (k,) = Q.gens
    assert r(1) == 2 * k
    assert r(2) == Q.zero

def test_restrict_equal_parameters(b2):
    c = cherednik_parameter(b2)
    r = restrict_to_hyperplane(c, "k1_1 - k2_1")
    (k,) = r.codomain.gens
    assert r.codomain.names == ("k2_1",)
    assert r(1) == 2 * k
    assert r(2) == 2 * k

def test_pivot_is_first_nonzero_coefficient(g312):
    c = cherednik_parameter(g312)
    f, pivot = elimination_map(c.codomain, "3*k2_1 + k2_2", rational=False)
    assert pivot == 1
    Q = f.codomain
    assert Q.names == ("k1_1", "k2_2")
    k11, k22 = Q.gens
    K = Q.base
    assert f.images == (k11, Q.ground(K.rational(-1, 3)) * k22, k22)

def test_normalization_by_pivot_coefficient(g312):
    c = cherednik_parameter(g312)
    f, pivot = elimination_map(c.codomain, "2*k1_1 - 4*k2_2", rational=False)
    assert pivot == 0
    k21, k22 = f.codomain.gens
    assert f.images[0] == 2 * k22

def test_restricted_values(g312):
    c = cherednik_parameter(g312)
    r = restrict_to_hyperplane(c, "3*k2_1 + k2_2")
    Q = r.codomain
    K = Q.base
    z = K.root
    (_, k22) = Q.gens
    assert r(1) == 2 * Q.gen("k1_1")
    # (z^-1 - 1) * (z * (-k2_2 / 3) + z^2 * k2_2)
    scale = (K.inverse(z) - K.one) * (z ** 2 - z * K.rational(1, 3))
    assert r(2) == Q.ground(scale) * k22

def test_specialize_agrees_with_restrict(g312):
    c = cherednik_parameter(g312)
    r = restrict_to_hyperplane(c, "k1_1 + z*k2_2")
    s = specialize_in_hyperplane(c, "k1_1 + z*k2_2")
    F = s.codomain
    assert F.rational
    assert F.names == r.codomain.names == ("k2_1", "k2_2")
    include = r.codomain.inclusion(F)
    assert s == r.apply(include)

def test_specialize_rational_parameter(b2):
    c = cherednik_parameter(b2, rational=True)
    s = specialize_in_hyperplane(c, "k1_1 + k2_1")
    (k,) = s.codomain.gens
    assert s(1) == -2 * k
    assert s(2) == 2 * k

def test_specialize_repeatedly_down_to_a_point(b2):
    c = cherednik_parameter(b2)
    s = specialize_in_hyperplane(c, "k1_1 - k2_1")
    s = specialize_in_hyperplane(s, "k2_1")
    assert s.codomain.ngens == 0
    assert s(1) == s.codomain.zero
    assert s(2) == s.codomain.zero

def test_input_parameter_is_unchanged(b2):
    c = cherednik_parameter(b2)
    before = c.images
    restrict_to_hyperplane(c, "k1_1")
    assert c.images == before
    assert c.codomain.names == ("k1_1", "k2_1")

def test_ring_element_as_hyperplane(b2):
    c = cherednik_parameter(b2)
    k1, k2 = c.codomain.gens
    r = restrict_to_hyperplane(c, k1 + k2)
    (k,) = r.codomain.gens
    assert r(1) == -2 * k

def test_hyperplane_coefficients(g312):
    P = cherednik_parameter(g312).codomain
    K = P.base
    assert hyperplane_coefficients(P, "k2_2 - z*k1_1") == [-K.root, K.zero, K.one]

@pytest.mark.parametrize("equation", ["k1_1**2", "k1_1*k2_1", "0", "5"])
def test_not_a_hyperplane(b2, equation):
    c = cherednik_parameter(b2)
    with pytest.raises(NotAHyperplaneError):
        restrict_to_hyperplane(c, equation)

def test_affine_hyperplane(b2):
    c = cherednik_parameter(b2)
    with pytest.raises(AffineHyperplaneError, match="affine"):
        specialize_in_hyperplane(c, "k1_1 + 1")

def test_hyperplane_errors_share_a_base(b2):
    c = cherednik_parameter(b2)
    for equation in ("k1_1 + 1", "k1_1**2"):
        with pytest.raises(HyperplaneError):
            restrict_to_hyperplane(c, equation)

def test_unknown_generator(b2):
    c = cherednik_parameter(b2)
    with pytest.raises(ParameterError):
        restrict_to_hyperplane(c, "k3_1")

def test_non_ring_codomain():
    c = parameter_from_values([1, 2])
    with pytest.raises(ParameterError, match="parameter ring"):
        restrict_to_hyperplane(c, "k1_1")

def test_constant_denominator_in_rational_ring(b2):
    c = cherednik_parameter(b2, rational=True)
    s = specialize_in_hyperplane(c, "(k1_1 - k2_1)/2")
    (k,) = s.codomain.gens
    assert s(1) == 2 * k

def test_non_constant_denominator_is_not_a_hyperplane(b2):
    c = cherednik_parameter(b2, rational=True)
    with pytest.raises(NotAHyperplaneError):
        specialize_in_hyperplane(c, "k1_1/k2_1")

def test_specialize_with_hyperplane_from_parameter_space(g312):
    k11, k21, k22 = cherednik_parameter_space(g312).ring.gens
    c = cherednik_parameter(g312, rational=True)
    s = specialize_in_hyperplane(c, k21 - k22)
    F = s.codomain
    assert F.rational
    assert F.names == ("k1_1", "k2_2")
    assert s == specialize_in_hyperplane(c, "k2_1 - k2_2")

def test_full_parameter_with_polynomial_hyperplane(b2):
    t, c = full_cherednik_parameter(b2)
    P = c.codomain.with_names(c.codomain.names, rational=False)
    s = specialize_in_hyperplane(c, P.gen("k1_1") - P.gen("k2_1"))
    assert s.codomain.names == ("t", "k2_1")
    k = s.codomain.gen("k2_1")
    assert s(1) == 2 * k
    assert s(2) == 2 * k

def test_restrict_with_hyperplane_from_fraction_field(b2):
    c = cherednik_parameter(b2)
    F = c.codomain.with_names(c.codomain.names, rational=True)
    k1, k2 = F.gens
    r = restrict_to_hyperplane(c, (k1 + k2) / 2)
    (k,) = r.codomain.gens
    assert not r.codomain.rational
    assert r(1) == -2 * k
    with pytest.raises(NotAHyperplaneError):
        restrict_to_hyperplane(c, k1 / k2)
