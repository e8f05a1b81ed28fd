from fractions import Fraction

import pytest

from core.exceptions import DimensionMismatchError, ParameterError, UnrecognizedTypeError
from cherednik.parameters import (cherednik_parameter, cherednik_parameter_at, full_cherednik_parameter,
                                  parameter_from_values, parameter_ring)
from cherednik.types import ParameterType, get_parameter_type, register_parameter_type
from groups.reflections import reflection_library


@pytest.mark.parametrize("param_type", ["EG", "BR", "GGOR"])
def test_generator_count(param_type, mu3, mu4, s3, b2, g312):
    for group in (mu3, mu4, s3, b2, g312):
        library = reflection_library(group)
        ring = parameter_ring(group, param_type)
        if param_type == "GGOR":
            assert ring.ngens == sum(e - 1 for e in library.e_omegas)
        else:
            assert ring.ngens == len(library.classes)

def test_generator_names(g312):
    assert parameter_ring(g312, "GGOR").names == ("k1_1", "k2_1", "k2_2")
    assert parameter_ring(g312, "EG").names == ("c1", "c2", "c3")
    assert parameter_ring(g312, "BR").names == ("C1", "C2", "C3")

def test_domain_is_reflection_classes(g312):
    c = cherednik_parameter(g312)
    assert list(c) == [1, 2, 3]

def test_ggor_closed_form_for_cyclic_group_of_order_three(mu3):
    c = cherednik_parameter(mu3, "GGOR")
    P = c.codomain
    assert P.names == ("k1_1", "k1_2")
    K = mu3.base_field
    k11, k12 = P.gens
    det = K.root
    expected = P.ground(K.inverse(det) - K.one) * (P.ground(det) * k11 + P.ground(det ** 2) * k12)
    assert c(1) == expected
    # (z^-1 - 1) z = 1 - z and (z^-1 - 1) z^2 = z - z^2
    assert P.linear_coefficients(c(1)) == [K.one - det, det - det ** 2]
    assert P.constant_coefficient(c(1)) == K.zero

def test_ggor_second_class_uses_inverse_eigenvalue(mu3):
    c = cherednik_parameter(mu3, "GGOR")
    P = c.codomain
    K = mu3.base_field
    det = K.power(K.root, 2)
    assert P.linear_coefficients(c(2)) == [(K.inverse(det) - K.one) * det,
                                          (K.inverse(det) - K.one) * det ** 2]

def test_ggor_real_reflection(s3):
    c = cherednik_parameter(s3)
    (k,) = c.codomain.gens
    # det = -1: (-1 - 1) * (-1) * k
    assert c(1) == 2 * k

def test_eg_is_identity(b2):
    c = cherednik_parameter(b2, "EG")
    assert tuple(c.values()) == c.codomain.gens

def test_br_scales_by_eigenvalue(b2):
    c = cherednik_parameter(b2, "BR")
    C1, C2 = c.codomain.gens
    assert c(1) == -2 * C1
    assert c(2) == -2 * C2

def test_type_tags_are_case_insensitive(s3):
    assert cherednik_parameter(s3, "ggor") == cherednik_parameter(s3, "GGOR")

def test_unrecognized_type(s3):
    with pytest.raises(UnrecognizedTypeError, match="Unknown Cherednik parameter type: completed"):
        cherednik_parameter(s3, "completed")
    with pytest.raises(UnrecognizedTypeError):
        get_parameter_type(3)

def test_register_parameter_type(s3):
    class Doubled(ParameterType):
        type_name = "DOUBLED"

        def generator_names(self, library):
            return [f"d{s.index}" for s in library.classes]

        def parameter_values(self, library, ring):
            return [2 * g for g in ring.gens]

    register_parameter_type(Doubled)
    c = cherednik_parameter(s3, "doubled")
    assert c(1) == 2 * c.codomain.gens[0]
    with pytest.raises(ParameterError, match="must subclass ParameterType"):
        register_parameter_type(int)

def test_rational_parameter(b2):
    c = cherednik_parameter(b2, "GGOR", rational=True)
    assert c.codomain.rational
    k1, k2 = c.codomain.gens
    assert c(1) == 2 * k1

def test_parameter_at_values(g312):
    K = g312.base_field
    c = cherednik_parameter_at(g312, [1, Fraction(1, 2), "z"])
    generic = cherednik_parameter(g312)
    assert c.codomain is K
    # class 1 (det = -1): 2 * k1_1
    assert c(1) == K.convert(2)
    z = K.root
    expected = (K.inverse(z) - K.one) * (z * K.convert(Fraction(1, 2)) + z ** 2 * z)
    assert c(2) == expected
    assert len(c) == len(generic)

def test_parameter_at_dimension_mismatch(g312):
    with pytest.raises(DimensionMismatchError):
        cherednik_parameter_at(g312, [1, 2])

def test_full_parameter_prepends_t(g312):
    t, c = full_cherednik_parameter(g312)
    L = c.codomain
    base = cherednik_parameter(g312, rational=True)
    assert L.names == ("t",) + base.codomain.names
    assert L.ngens == base.codomain.ngens + 1
    assert t == L.gens[0]
    assert L.rational
    assert c(1) == 2 * L.gen("k1_1")

def test_full_parameter_polynomial(s3):
    t, c = full_cherednik_parameter(s3, "EG", rational=False)
    assert not c.codomain.rational
    assert c(1) == c.codomain.gen("c1")

def test_parameter_from_values():
    c = parameter_from_values([Fraction(1, 2), 3])
    assert dict(c) == {1: Fraction(1, 2), 2: 3}
