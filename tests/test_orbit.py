import itertools

import pytest
import sympy as sym

from spaceGroups.structure import (
    AffinePhase,
    ComplexOrbit,
    DimensionMismatchError,
    ExtinctOrbit,
    FormalOrbit,
    RealOrbit,
    SpaceGroupElement,
    SpaceGroupQuotient,
    TypeConstraintError,
    act_on_phase,
    make_orbit )

from conftest import M1, R2, T1

class Test_AffinePhase:

    @pytest.mark.parametrize("phi, expected", [
        (0, 0), ("1/2", "1/2"), ("-1/4", "3/4"), ("5/4", "1/4"), (3, 0) ])
    def test_phase_reduced(self, phi, expected):
        ap = AffinePhase([1, 0], phi)
        assert ap.phi == sym.Rational(expected)
        assert 0 <= ap.phi < 1

    def test_inexact_phase(self):
        with pytest.raises(TypeConstraintError):
            AffinePhase([1, 0], 0.5)
        with pytest.raises(TypeConstraintError):
            AffinePhase([0.5, 0])

    def test_equality(self):
        assert AffinePhase([1, 2], "1/3") == AffinePhase((1, 2), "4/3")
        assert AffinePhase([1, 2]) != AffinePhase([2, 1])
        assert str(AffinePhase([1, 2], "1/3")) == "AP([1, 2], 1/3)"

    def test_act_on_phase(self):
        g = SpaceGroupElement([[0, -1], [1, 0]], ["1/4", "1/2"])
        ap = act_on_phase(g, AffinePhase([1, 2], "1/2"))
        # transpose(a).k = (2, -1), shift b.k = 5/4
        assert ap.k == (2, -1)
        assert ap.phi == sym.Rational(3, 4)

    def test_act_errors(self):
        with pytest.raises(TypeError):
            act_on_phase(M1, AffinePhase([1, 0]))
        with pytest.raises(DimensionMismatchError):
            act_on_phase(SpaceGroupElement(dim=3), AffinePhase([1, 0]))

class Test_MakeOrbit:
    """
    Orbit classification.

    Glide group p1g1, x -> (-x, y + 1/2):
        [1,-1] complex, [1,0] real, [0,1] extinct.
    """

    def test_complex(self, p1g1):
        orbit = make_orbit([1, -1], p1g1)
        assert isinstance(orbit, ComplexOrbit)
        assert orbit.isPhysical
        assert len(orbit) == 2
        assert set(orbit) == {AffinePhase([1, -1], 0), AffinePhase([-1, -1], "1/2")}
        assert str(orbit) == "ComplexOrbit with 2 elements"

    def test_real(self, p1g1):
        orbit = make_orbit([1, 0], p1g1)
        assert isinstance(orbit, RealOrbit)
        assert sorted(orbit.waveVectors) == [(-1, 0), (1, 0)]
        assert str(orbit) == "RealOrbit with 2 elements"

    def test_extinct(self, p1g1):
        orbit = make_orbit([0, 1], p1g1)
        assert isinstance(orbit, ExtinctOrbit)
        assert not orbit.isPhysical
        # antipode added since the group does not produce it
        assert orbit.waveVectors == [(0, 1), (0, -1)]
        assert str(orbit) == "ExtinctOrbit with 2 elements"

    def test_extinct_with_antipode(self, wallpaper):
        orbit = make_orbit([0, 1], wallpaper["pmg"])
        assert isinstance(orbit, ExtinctOrbit)
        assert sorted(orbit.waveVectors) == [(0, -1), (0, 1)]

    def test_real_phases(self):
        G = SpaceGroupQuotient([SpaceGroupElement(R2, ["1/2", 0])])
        orbit = make_orbit([1, 0], G)
        assert isinstance(orbit, RealOrbit)
        phases = {ap.k : ap.phi for ap in orbit}
        assert phases == {(1, 0) : sym.Rational(3, 4), (-1, 0) : sym.Rational(1, 4)}
        # antipodal phases cancel, so the pair sums to a real wave
        assert fractional(phases[(1, 0)] + phases[(-1, 0)]) == 0

    def test_trivial_group(self, wallpaper):
        orbit = make_orbit([2, 3], wallpaper["p1"])
        assert isinstance(orbit, ComplexOrbit)
        assert orbit.phases == [AffinePhase([2, 3])]

    def test_zero_vector(self, wallpaper):
        orbit = make_orbit([0, 0], wallpaper["pgg"])
        assert isinstance(orbit, RealOrbit)
        assert orbit.waveVectors == [(0, 0)]

    def test_orbit_covers_all_images(self, wallpaper):
        G = wallpaper["p6m"]
        orbit = make_orbit([1, 0], G)
        assert isinstance(orbit, RealOrbit)
        assert len(orbit) == 6
        images = {act_on_phase(g, AffinePhase([1, 0])).k for g in G}
        assert set(orbit.waveVectors) == images

    def test_deterministic(self, wallpaper):
        G = wallpaper["p4g"]
        for k in ([1, 0], [1, 1], [2, 1]):
            assert make_orbit(k, G) == make_orbit(k, G)

    def test_phases_consistent(self, wallpaper):
        # outside extinct orbits, each wave vector is reached with one phase
        for G in wallpaper.values():
            for k in itertools.product(range(-3, 4), repeat=2):
                orbit = make_orbit(k, G)
                if not orbit.isPhysical:
                    continue
                reached = {}
                for g in G:
                    ap = act_on_phase(g, AffinePhase(k))
                    reached.setdefault(ap.k, set()).add(ap.phi)
                assert all(len(p) == 1 for p in reached.values())
                assert set(reached) == set(orbit.waveVectors)

    def test_abstract_base(self):
        with pytest.raises(TypeError):
            FormalOrbit()

    def test_icosahedral(self, icosahedral):
        k = [1, 0, 0, 0, 0, 0]
        orbit = make_orbit(k, icosahedral["PIh"])
        assert isinstance(orbit, RealOrbit)
        assert len(orbit) == 12

    def test_errors(self, p1g1):
        with pytest.raises(DimensionMismatchError):
            make_orbit([1, 0, 0], p1g1)
        with pytest.raises(TypeError):
            make_orbit([1, 0], list(p1g1))

def fractional(x):
    return x - sym.floor(x)
