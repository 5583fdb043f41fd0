import pytest

from algoshelf.quadratic import solve_quadratic


def test_distinct_real_roots():
    roots = solve_quadratic(1, -3, 2)
    assert roots.is_real
    assert not roots.is_repeated
    assert {roots.x1, roots.x2} == {2.0, 1.0}


def test_repeated_root():
    roots = solve_quadratic(1, -2, 1)
    assert roots.is_repeated
    assert roots.x1 == 1.0


def test_complex_roots():
    roots = solve_quadratic(1, 0, 1)
    assert not roots.is_real
    assert roots.x1 == 1j
    assert roots.x2 == roots.x1.conjugate()


@pytest.mark.parametrize(
    "a, b, c",
    [(2, 5, -3), (1, 1, 1), (-4, 2, 7), (3, 6, 3), (0.5, -1.5, 4)],
)
def test_vieta_and_substitution(a, b, c):
    roots = solve_quadratic(a, b, c)
    assert roots.x1 + roots.x2 == pytest.approx(-b / a)
    assert roots.x1 * roots.x2 == pytest.approx(c / a)
    for x in (roots.x1, roots.x2):
        assert abs(a * x * x + b * x + c) == pytest.approx(0, abs=1e-9)


def test_zero_leading_coefficient_raises():
    with pytest.raises(ValueError):
        solve_quadratic(0, 2, 1)