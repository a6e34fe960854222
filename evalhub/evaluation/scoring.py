"""
Weighted scoring of an evaluation.
"""


def compute_weighted_score(criteria, criteria_scores):
    """
    Weighted average of the criterion scores.

    Every criterion in ``criteria`` counts, whether or not it was scored; an
    unscored criterion counts as 0. Weights are normalized by their sum here,
    so they do not need to add up to anything in particular.

    Args:
        criteria (iterable): Objects with ``id`` and ``weight`` attributes,
            normally the currently active :class:`Criteria`.
        criteria_scores (dict): Criterion id to raw score.

    Returns:
        float: The weighted score, or 0.0 if the total weight is 0 (including
        when there are no criteria at all).

    Examples:
        >>> compute_weighted_score([a_weight_30, b_weight_20], {a.id: 8, b.id: 5})
        6.8
    """
    total = 0.0
    total_weight = 0.0
    for criterion in criteria:
        score = criteria_scores.get(criterion.id, 0)
        total += score * criterion.weight
        total_weight += criterion.weight
    if total_weight <= 0:
        return 0.0
    return total / total_weight
