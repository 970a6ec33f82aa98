"""Textual description of multi-objective problem metadata."""

from math import ceil
from typing import Any

BAR_WIDTH = 20


def histline(label: str, value: int, max_value: int) -> str:
    """Return a labelled bar of ``value`` relative to ``max_value``."""
    if max_value <= 0:
        filled = 0
    else:
        filled = min(BAR_WIDTH, max(0, ceil(BAR_WIDTH * value / max_value)))
    bar = "█" * filled + "⋅" * (BAR_WIDTH - filled)
    return f"{label:>16}: {bar} {value:<6}"


def sparsityline(label: str, value: float, max_value: float) -> str:
    """Return a labelled sparsity ratio of ``value`` nonzeros out of ``max_value`` entries."""
    if max_value <= 0:
        text = "(------% sparsity)"
    else:
        text = f"({100.0 * (1.0 - value / max_value):6.2f}% sparsity)"
    return f"{label:>16}: {text:<{BAR_WIDTH}} {int(value):<6}"


def lines_of_hist(labels: list[str], values: list[int]) -> list[str]:
    """Histogram lines, scaled to the first value (the total)."""
    return [histline(label, value, values[0]) for label, value in zip(labels, values)]


def lines_of_description(meta: Any) -> list[str]:
    """
    Describe variables and constraints of a problem side by side.

    Parameters
    ----------
    meta : MultiObjectiveMeta
        The problem metadata to describe.

    Returns
    -------
    list[str]
        Lines with the variable description on the left and the constraint
        description on the right.
    """
    counts = [
        len(meta.ifree),
        len(meta.ilow),
        len(meta.iupp),
        len(meta.irng),
        len(meta.ifix),
        len(meta.iinf),
    ]
    labels = ["All variables", "free", "lower", "upper", "low/upp", "fixed", "infeas"]
    var_lines = lines_of_hist(labels, [sum(counts)] + counts)
    var_lines.append(sparsityline("nnzh", meta.nnzh, meta.nvar * (meta.nvar + 1) / 2))

    counts = [
        len(meta.jfree),
        len(meta.jlow),
        len(meta.jupp),
        len(meta.jrng),
        len(meta.jfix),
        len(meta.jinf),
    ]
    labels = ["All constraints", "free", "lower", "upper", "low/upp", "fixed", "infeas"]
    con_lines = lines_of_hist(labels, [sum(counts)] + counts)
    con_lines.append(histline("linear", meta.nlin, meta.ncon))
    con_lines.append(histline("nonlinear", meta.nnln, meta.ncon))
    con_lines.append(sparsityline("nnzj", meta.nnzj, meta.nvar * meta.ncon))

    width = len(var_lines[0])
    var_lines.extend([" " * width] * (len(con_lines) - len(var_lines)))

    return [left + "  " + right for left, right in zip(var_lines, con_lines)]
