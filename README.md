# squaremat

A small library of square matrices of floating-point numbers, driven through
Python's operators. It has no dependencies outside the standard library.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Using it

```python
from squaremat.matrix import SquareMat

a = SquareMat(2)
a[0][0], a[0][1] = 1, 2
a[1][0], a[1][1] = 3, 4

b = SquareMat(2)
b[0][0], b[0][1] = 5, 6
b[1][0], b[1][1] = 7, 8

print(a + b)            # element-wise sum
print(a - b)            # element-wise difference
print(-a)               # every element negated
print(a * b)            # matrix product
print(a * 2, 2 * a)     # product with a scalar
print(a % b)            # element-wise product
print(a % 3)            # each element truncated to an integer, then modulo 3
print(a / 2)            # division by a scalar
print(a ** 2)           # matrix power (a ^ 2 works too)
print(~a)               # transpose (also a.transpose())
print(a.determinant())  # -2.0
print(a.minor(0, 1))    # the matrix without row 0 and column 1
```

### Creating and indexing

`SquareMat(size)` makes a `size` x `size` matrix filled with zeros. The size
must be an integer (otherwise `TypeError`) of at least 1 (otherwise
`ValueError`). The `size` property gives the number of rows, which is also
`len(a)`.

`a[i]` returns row `i` as a mutable list, so `a[i][j] = x` sets an element.
A row index outside `0 .. size - 1`, negative ones included, raises
`IndexError`. Iterating over a matrix yields its rows.

`copy()` returns an independent copy, and `a.assign(other)` makes `a` take on
a copy of `other`'s size and contents and returns `a`.

### Operators and errors

- Operations on two matrices of different sizes raise `ValueError`.
- `a / 0` and `a /= 0` raise `ZeroDivisionError`.
- A negative exponent raises `ValueError`; `a ** 0` is the identity matrix.
- `a % n` needs a positive integer `n`, otherwise `ValueError`. Each element
  is truncated toward zero and the remainder takes the sign of that value, so
  `-7.5 % 3` gives `-1.0`.
- `a.minor(row, col)` raises `IndexError` for an index outside the matrix,
  and `ValueError` on a 1x1 matrix.
- `determinant()` expands along the first row. For matrices larger than 2x2
  the running total is truncated to an integer after every term, so the
  result is a whole number.

### In-place operations

`+=`, `-=`, `*=`, `%=` and `/=` change the matrix they are applied to.
Multiplying a 1x1 matrix in place by a non-zero scalar leaves it unchanged.

`increment()` and `decrement()` add or subtract 1 from every element and
return the matrix itself; `post_increment()` and `post_decrement()` do the
same but return a copy taken before the change.

### Comparison

Matrices compare by the sum of their elements: `a == b` holds when both sums
are equal, and `<`, `<=`, `>` and `>=` order by that sum. Matrices are not
hashable.

### Printing

`str(a)` gives a readable layout:

    Matrix (2x2)
    |  1   2 |
    |  3   4 |

## Demo

    squaremat-demo

prints a walk through the operators on two 2x2 matrices. The functions it
uses, `demo_arithmetic`, `demo_advanced_ops` and `demo_comparisons` in
`squaremat.demo`, write to any text stream given to them;
`demo_advanced_ops` works on a copy and leaves its argument unchanged.