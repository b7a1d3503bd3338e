"""Binomial coefficients for alternate-airport combination counts."""


def binomial_coefficient(n: int, k: int) -> int:
    """Number of ways to choose k items from n.

    Uses the multiplicative form over the smaller of k and n - k:
    C(n, k) = prod(i = 1..k) (n - k + i) / i. Each running product is
    divisible by i, so integer division stays exact.

    Args:
        n: Pool size (>= 0)
        k: Selection size (>= 0)

    Returns:
        C(n, k), or 0 when k > n or k < 0

    Examples:
        >>> binomial_coefficient(5, 2)
        10
        >>> binomial_coefficient(10, 3)
        120
    """
    if k < 0 or k > n:
        return 0
    if k == 0 or k == n:
        return 1
    if k == 1:
        return n

    k = min(k, n - k)

    result = 1
    for i in range(1, k + 1):
        result = result * (n - k + i) // i

    return result
