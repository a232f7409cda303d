"""Contest problems: bribing prisoners, crazy rows, the millionaire game, scalar products."""

_TOTAL_MONEY = 1_000_000


def bribe_prisoners(prisoner_count, releases):
    """Fewest gold coins to release the prisoners in ``releases`` from cells
    ``1..prisoner_count``.

    Releasing a prisoner costs one coin for every other prisoner still held in
    the unbroken run of occupied cells around it. The release order is chosen
    to minimise the total cost.
    """
    cells = [0, *sorted(releases), prisoner_count + 1]
    span = len(cells)
    cost = [[0] * span for _ in range(span)]
    for width in range(2, span):
        for left in range(span - width):
            right = left + width
            cost[left][right] = (
                min(cost[left][mid] + cost[mid][right] for mid in range(left + 1, right))
                + cells[right]
                - cells[left]
                - 2
            )
    return cost[0][span - 1]


def crazy_rows(matrix):
    """Fewest swaps of adjacent rows that leave no 1 above the main diagonal."""
    last_ones = [
        max((column for column, cell in enumerate(row) if cell == 1), default=-1)
        for row in matrix
    ]
    remaining = list(last_ones)
    swaps = 0
    for target in range(len(last_ones)):
        chosen = next(
            (index for index, last in enumerate(remaining) if last <= target), None
        )
        if chosen is None:
            continue
        swaps += chosen
        del remaining[chosen]
    return swaps


def millionaire(rounds, probability, money):
    """Best chance of ending ``rounds`` bets with at least 1,000,000.

    Each round any part of the current money may be staked; a bet wins with
    ``probability`` and doubles the stake, otherwise the stake is lost.
    """
    if rounds < 0:
        raise ValueError(f"rounds must not be negative, got {rounds}")
    if not 0 <= probability <= 1:
        raise ValueError(f"probability must lie in [0, 1], got {probability}")
    if not 0 <= money <= _TOTAL_MONEY:
        raise ValueError(f"money must lie in 0..{_TOTAL_MONEY}, got {money}")
    steps = 1 << rounds
    chance = [0.0] * steps + [1.0]
    for _ in range(rounds):
        chance = [
            max(
                probability * chance[level + stake]
                + (1 - probability) * chance[level - stake]
                for stake in range(min(level, steps - level) + 1)
            )
            for level in range(steps + 1)
        ]
    return chance[money * steps // _TOTAL_MONEY]


def minimum_scalar_product(v1, v2):
    """Smallest scalar product of ``v1`` and ``v2`` over all reorderings of each."""
    return sum(
        a * b for a, b in zip(sorted(v1), sorted(v2, reverse=True), strict=True)
    )