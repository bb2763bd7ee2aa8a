import pytest

from squaremat.matrix import SquareMat


def sequential(size):
    m = SquareMat(size)
    for i in range(size):
        for j in range(size):
            m[i][j] = i * size + j + 1
    return m


def test_constructor_and_invalid_cases():
    with pytest.raises(ValueError):
        SquareMat(0)
    with pytest.raises(ValueError):
        SquareMat(-3)
    m = SquareMat(1)
    assert m.size == 1
    assert m[0][0] == 0.0


def test_copy_and_assignment():
    a = sequential(3)
    b = a.copy()
    assert a == b
    c = SquareMat(3)
    c.assign(a)
    assert c == a
    d = SquareMat(2)
    d.assign(a)
    assert d == a
    assert d.size == 3


def test_copy_is_independent():
    a = sequential(2)
    b = a.copy()
    b[0][0] = 100
    assert a[0][0] == 1


def test_addition_subtraction_negation():
    a = sequential(2)
    b = sequential(2)
    c = a + b
    assert c[0][0] == 2
    assert (a - b)[1][1] == 0
    d = -a
    assert d[0][0] == -1


def test_add_size_mismatch():
    with pytest.raises(ValueError):
        sequential(2) + SquareMat(3)
    with pytest.raises(ValueError):
        sequential(2) - SquareMat(3)


def test_matrix_multiplication():
    a = sequential(2)
    b = sequential(2)
    result = a * b
    assert result[0][0] == 7
    assert result[1][1] == 22
    with pytest.raises(ValueError):
        a * SquareMat(3)


def test_scalar_operations():
    a = sequential(2)
    assert (a * 2)[0][0] == 2
    assert (2 * a)[1][1] == 8
    assert (a / 2)[1][0] == 1.5
    with pytest.raises(ZeroDivisionError):
        a / 0


def test_scalar_special_values():
    a = sequential(2)
    assert (a * 0)[1][1] == 0
    assert (a * 1)[1][1] == 4
    assert (a * -1)[1][1] == -4


def test_modulo_operations():
    a = sequential(2)
    assert (a % 2)[0][0] == 1
    assert (a % 2)[1][0] == 1
    with pytest.raises(ValueError):
        a % 0
    b = sequential(2)
    assert (a % b)[0][0] == 1
    with pytest.raises(ValueError):
        a % SquareMat(3)


def test_modulo_truncates_toward_zero():
    a = SquareMat(1)
    a[0][0] = -7.9
    assert (a % 3)[0][0] == -1


def test_increment_and_decrement():
    a = sequential(2)
    b = a.post_increment()
    assert b[0][0] == 1
    assert a[0][0] == 2
    c = a.decrement()
    assert c[0][0] == 1
    assert c is a


def test_post_decrement_and_increment():
    a = sequential(2)
    old = a.post_decrement()
    assert old[0][0] == 1
    assert a[0][0] == 0
    assert a.increment()[1][1] == 4


def test_transpose():
    a = sequential(2)
    b = ~a
    assert b[0][1] == a[1][0]
    assert b[1][0] == a[0][1]
    assert a.transpose()[0][1] == 3


def test_comparison_operators():
    a = sequential(2)
    b = sequential(2)
    assert a == b
    b[0][0] = 99
    assert a != b
    assert b > a
    assert b >= a
    assert not (a > b)
    assert a <= b
    assert a < b


def test_power_operator():
    a = SquareMat(2)
    a[0][0] = 2
    a[1][1] = 2
    b = a ^ 3
    assert b[0][0] == 8
    assert (a ** 3)[1][1] == 8
    with pytest.raises(ValueError):
        a ^ -1


def test_power_zero_is_identity():
    a = sequential(3)
    ident = a ** 0
    assert [ident[i][i] for i in range(3)] == [1, 1, 1]
    assert ident[0][1] == 0
    assert (a ** 1) * 1 == a


def test_determinant():
    a = SquareMat(2)
    a[0][0] = 1
    a[0][1] = 2
    a[1][0] = 3
    a[1][1] = 4
    assert a.determinant() == pytest.approx(-2.0)


def test_determinant_larger():
    assert sequential(3).determinant() == 0
    ident = SquareMat(4) ** 0
    assert ident.determinant() == 1
    single = SquareMat(1)
    single[0][0] = 5
    assert single.determinant() == 5


def test_minor_extraction():
    a = sequential(3)
    m = a.minor(0, 0)
    assert m.size == 2
    assert m[0][0] == 5
    with pytest.raises(IndexError):
        a.minor(3, 0)


def test_compound_assignment_operators():
    a = sequential(2)
    b = sequential(2)
    c = a.copy()
    c += b
    assert c[0][0] == 2
    c -= b
    assert c[0][0] == 1
    c *= b
    assert c[0][0] == 7
    c %= 3
    assert c[0][0] == 1
    c /= 1.0
    assert c[0][0] == 1


def test_compound_scalar_and_elementwise():
    c = sequential(2)
    c *= 3
    assert c[1][1] == 12
    c %= sequential(2)
    assert c[1][1] == 48
    c *= 0
    assert c[1][1] == 0
    with pytest.raises(ZeroDivisionError):
        c /= 0
    with pytest.raises(ValueError):
        c += SquareMat(3)


def test_index_access_and_out_of_bounds():
    a = sequential(2)
    assert a[0][1] == 2
    with pytest.raises(IndexError):
        a[-1]
    with pytest.raises(IndexError):
        a[2]


def test_str_format():
    assert str(sequential(2)) == "Matrix (2x2)\n|  1   2 |\n|  3   4 |\n"


def test_large_matrix_addition():
    n = 100
    a = SquareMat(n)
    b = SquareMat(n)
    for i in range(n):
        for j in range(n):
            a[i][j] = i + j
            b[i][j] = i - j
    c = a + b
    assert c[0][0] == 0
    assert c[n - 1][n - 1] == 2 * (n - 1)


def test_very_large_matrix_multiplication():
    n = 300
    a = SquareMat(n)
    b = SquareMat(n)
    for i in range(n):
        a[i][:] = [1.0] * n
        b[i][:] = [1.0] * n
    c = a * b
    assert c[0][0] == pytest.approx(n)
    assert c[n - 1][n - 1] == pytest.approx(n)