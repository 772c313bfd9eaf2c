# combinatorics.py


def n_choose_k(n, k):
    """
    组合数 C(n, k)，用于给棋块位置的组合编号。
    n < k 时返回 0 (不可能的选择)，负数参数抛 ValueError。
    """
    if n < 0 or k < 0:
        raise ValueError(f"n_choose_k 参数不能为负: n={n}, k={k}")
    if n < k:
        return 0
    # C(n, k) == C(n, n-k)，取较小的 k 减少循环次数
    if k > n // 2:
        k = n - k

    result = 1
    denom = 1
    # 乘一次除一次，每一步都能整除
    for i in range(n, n - k, -1):
        result *= i
        result //= denom
        denom += 1
    return result
