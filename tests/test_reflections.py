import pytest

from groups.reflections import is_reflection, reflection_library


def test_cyclic_group_of_order_three(mu3):
    library = reflection_library(mu3)
    assert library.e_omegas == [3]
    assert len(library.classes) == 2
    z = mu3.base_field.root
    assert [s.eigenvalue for s in library.classes] == [z, z ** 2]
    assert [s.id for s in library.classes] == [(1, 1), (1, 2)]

def test_symmetric_group(s3):
    library = reflection_library(s3)
    assert library.e_omegas == [2]
    assert len(library.classes) == 1
    (s,) = library.classes
    assert s.eigenvalue == s3.base_field.convert(-1)
    # Three transpositions, three reflecting hyperplanes.
    assert s.size == 3
    assert library.orbits[0].size == 3

def test_b2_has_two_orbits(b2):
    library = reflection_library(b2)
    assert library.e_omegas == [2, 2]
    assert [s.orbit for s in library.classes] == [1, 2]
    assert all(orbit.size == 2 for orbit in library.orbits)

def test_g312_orbit_order_follows_enumeration(g312):
    library = reflection_library(g312)
    # s_1 is met before t, so the e_Omega = 2 orbit comes first.
    assert library.e_omegas == [2, 3]
    assert [s.id for s in library.classes] == [(1, 1), (2, 1), (2, 2)]
    K = g312.base_field
    assert [s.eigenvalue for s in library.classes] == [K.convert(-1), K.root, K.power(K.root, 2)]
    assert [o.size for o in library.orbits] == [3, 2]

def test_class_count_matches_orbit_data(g312, b2, mu4, s3):
    for group in (g312, b2, mu4, s3):
        library = reflection_library(group)
        assert len(library.classes) == sum(e - 1 for e in library.e_omegas)
        assert [s.index for s in library.classes] == list(range(1, len(library.classes) + 1))

def test_stabilizer_is_cyclic_of_order_e(mu4):
    library = reflection_library(mu4)
    (orbit,) = library.orbits
    assert orbit.e_omega == 4
    assert len(orbit.stabilizer) == 3
    assert all(is_reflection(g, mu4) for g in orbit.stabilizer)

def test_identity_is_not_a_reflection(s3):
    assert not is_reflection(s3.identity, s3)

def test_library_is_cached(b2):
    assert reflection_library(b2) is reflection_library(b2)

def test_class_representatives(g312, mu4):
    for group in (g312, mu4):
        for s in reflection_library(group).classes:
            assert is_reflection(s.representative, group)
            assert s.representative.det() == s.eigenvalue
            assert s.representative in group
