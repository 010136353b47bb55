def clear_span_in(span_ft: float, cover_in: float) -> float:
    """
    Member dimension in inches minus concrete cover at both ends.

    Not clamped: cover deeper than half the span gives a negative value,
    which the cut list treats as "no bars".
    """
    return span_ft * 12.0 - 2.0 * cover_in


def clear_span_ft(span_ft: float, cover_in: float) -> float:
    return clear_span_in(span_ft, cover_in) / 12.0
