
"""

Euclidean Algorithm:

The GCD of two numbers does not change when the larger one is replaced by its
remainder modulo the smaller one. Repeating (a, b) -> (b, a % b) until b is 0
leaves the GCD in a.

"""

import io
from contextlib import redirect_stdout

MIN = 0
MAX = 2**32-1


class Solution:
    def gcd(self, a: int, b: int) -> int:
        """
        GCD logic
        """

        for name, x in (("a", a), ("b", b)):
            if isinstance(x, bool) or not isinstance(x, int):
                raise TypeError(f"{name} must be an int, got {type(x).__name__}")
            if not MIN<=x<=MAX:
                raise ValueError(f"{name} out of unsigned 32-bit range: {x}")

        while b != 0:
            a, b = b, a%b

        return a


def find_gcd(a: int, b: int) -> int:
    return Solution().gcd(a, b)


# ------------------ Basic Tests ------------------
def run_tests():
    sol = Solution()

    test_cases = [
        (120, 48, 24),
        (48, 120, 24),
        (17, 13, 1),
        (0, 5, 5),
        (5, 0, 5),
        (0, 0, 0),
        (1, 1, 1),
        (12, 18, 6),
        (270, 192, 6),
        (MAX, MAX, MAX),
        (MAX, 1, 1),
        (MAX, 0, MAX),
        (2**31, 2**16, 2**16),
    ]

    for a, b, expected in test_cases:
        result = sol.gcd(a, b)
        assert result == expected, (
            f"FAILED: gcd({a}, {b})\n"
            f"Expected: {expected}\n"
            f"Got: {result}"
        )

    # divides both, order independent, zero is the identity
    for a in range(0, 60):
        for b in range(0, 60):
            g = sol.gcd(a, b)
            assert g == sol.gcd(b, a), f"FAILED: gcd({a}, {b}) != gcd({b}, {a})"
            if g:
                assert a%g == 0 == b%g, f"FAILED: gcd({a}, {b}) = {g} does not divide both"
                assert all(a%d or b%d for d in range(g+1, max(a, b)+1)), (
                    f"FAILED: gcd({a}, {b}) = {g} is not the largest common divisor"
                )
            else:
                assert a == b == 0, f"FAILED: gcd({a}, {b}) returned 0"
        assert sol.gcd(a, 0) == a == sol.gcd(0, a), f"FAILED: gcd({a}, 0)"

    # scaling law
    for k in (1, 2, 3, 7, 1000):
        for a, b in ((120, 48), (17, 13), (0, 9), (270, 192)):
            assert sol.gcd(k*a, k*b) == k*sol.gcd(a, b), (
                f"FAILED: gcd({k}*{a}, {k}*{b}) != {k}*gcd({a}, {b})"
            )

    assert find_gcd(120, 48) == 24, "FAILED: find_gcd(120, 48)"

    # driver prints exactly one line
    from find_gcd.main import main

    out = io.StringIO()
    with redirect_stdout(out):
        main()
    assert out.getvalue() == "24\n", (
        "FAILED: main()\n"
        "Expected: '24\\n'\n"
        f"Got: {out.getvalue()!r}"
    )

    for a, b, error in [
        (-1, 5, ValueError),
        (5, -1, ValueError),
        (MAX+1, 1, ValueError),
        (1, 2**40, ValueError),
        (1.5, 3, TypeError),
        ("12", 3, TypeError),
        (True, 3, TypeError),
    ]:
        try:
            sol.gcd(a, b)
        except error:
            continue
        raise AssertionError(f"FAILED: gcd({a!r}, {b!r}) did not raise {error.__name__}")

    print("✅ All tests passed")


if __name__ == "__main__":
    run_tests()
