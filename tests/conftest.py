import pytest

from spaceGroups.structure import SpaceGroupElement, SpaceGroupQuotient

## Two-dimensional space groups (wallpaper groups)

# Rotations
R2 = [[-1, 0], [0, -1]] # Two-fold rotation, or central symmetry
R3 = [[-1, -1], [1, 0]] # Three-fold rotation
R4 = [[0, -1], [1, 0]]  # Four-fold rotation
R6 = [[0, -1], [1, 1]]  # Six-fold rotation

# Mirror operations
M1 = [[-1, 0], [0, 1]]
M2 = [[1, 0], [0, -1]]
M3 = [[0, 1], [1, 0]]
M4 = [[0, -1], [-1, 0]]

# Translations
T1 = [0, "1/2"]
T2 = ["1/2", "1/2"]

def _wallpaper_groups():
    s2 = SpaceGroupElement(R2)
    s3 = SpaceGroupElement(R3)
    s4 = SpaceGroupElement(R4)
    s6 = SpaceGroupElement(R6)
    sm1 = SpaceGroupElement(M1)
    sm2 = SpaceGroupElement(M2)
    sm3 = SpaceGroupElement(M3)
    sm4 = SpaceGroupElement(M4)
    # Glide reflections
    g1 = SpaceGroupElement(M1, T1)
    g2 = SpaceGroupElement(M1, T2)
    g3 = SpaceGroupElement(M3, T2)
    return {
        "p1"   : SpaceGroupQuotient(dim=2),
        "p2"   : SpaceGroupQuotient([s2]),
        "p3"   : SpaceGroupQuotient([s3]),
        "p4"   : SpaceGroupQuotient([s4]),
        "p6"   : SpaceGroupQuotient([s6]),
        "pm"   : SpaceGroupQuotient([sm1]),
        "pg"   : SpaceGroupQuotient([g1]),
        "cm"   : SpaceGroupQuotient([sm3]),
        "pmm"  : SpaceGroupQuotient([sm1, sm2]),
        "pmg"  : SpaceGroupQuotient([sm2, g1]),
        "pgg"  : SpaceGroupQuotient([s2, g2]),
        "cmm"  : SpaceGroupQuotient([sm3, sm4]),
        "p4m"  : SpaceGroupQuotient([s4, sm1]),
        "p4g"  : SpaceGroupQuotient([s4, g3]),
        "p3m1" : SpaceGroupQuotient([s3, sm3]),
        "p31m" : SpaceGroupQuotient([s3, sm4]),
        "p6m"  : SpaceGroupQuotient([s6, sm3]),
    }

## Six-dimensional icosahedral groups

# Three-fold rotation
ICO_R3 = [[0, 0, 1, 0, 0, 0],
          [1, 0, 0, 0, 0, 0],
          [0, 1, 0, 0, 0, 0],
          [0, 0, 0, 0, 0, 1],
          [0, 0, 0, 1, 0, 0],
          [0, 0, 0, 0, 1, 0]]

# Five-fold rotation
ICO_R5 = [[1, 0, 0, 0, 0, 0],
          [0, 0, 0, 0, 1, 0],
          [0, 1, 0, 0, 0, 0],
          [0, 0, 1, 0, 0, 0],
          [0, 0, 0, 0, 0, -1],
          [0, 0, 0, -1, 0, 0]]

# Central symmetry
ICO_C = [[-1 if i == j else 0 for j in range(6)] for i in range(6)]

# Translations for non-symmorphic icosahedral groups
ICO_T1 = ["1/5", 0, "-1/5", 0, 0, "-1/5"]
ICO_T2 = [0, 0, 0, 0, "1/2", "-1/2"]

def _icosahedral_groups():
    s3 = SpaceGroupElement(ICO_R3)
    s5 = SpaceGroupElement(ICO_R5)
    sc = SpaceGroupElement(ICO_C)
    s5_1 = SpaceGroupElement(ICO_R5, ICO_T1)
    s5_2 = SpaceGroupElement(ICO_R5, ICO_T2)
    return {
        "PI"    : SpaceGroupQuotient([s3, s5]),         # symmorphic, non-centrosymmetric
        "PIh"   : SpaceGroupQuotient([s3, s5, sc]),     # symmorphic, centrosymmetric
        "PI_n"  : SpaceGroupQuotient([s3, s5_1]),       # non-symmorphic, non-centrosymmetric
        "PIh_n" : SpaceGroupQuotient([s3, s5_2, sc]),   # non-symmorphic, centrosymmetric
    }

@pytest.fixture(scope="session")
def wallpaper():
    """ The 17 wallpaper groups, keyed by short name. """
    return _wallpaper_groups()

@pytest.fixture(scope="session")
def icosahedral():
    """ Four icosahedral quasicrystal groups in six dimensions. """
    return _icosahedral_groups()

@pytest.fixture
def p1g1():
    """ A glide group: x -> (-x, y + 1/2). """
    g = SpaceGroupElement(M1, T1)
    return SpaceGroupQuotient([g])
