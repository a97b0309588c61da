"""
Show name inference across a batch of episode filenames.

This module aggregates the candidate names extracted from each filename into
a single best guess and classifies how much the batch agrees on it.

Functions:
- infer_show_name: Picks the most common candidate name and a confidence tier.
- confidence_message: Renders a prompt message appropriate to the tier.
- _classify: Maps an agreement percentage to a confidence tier.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from episodes.rename import parser
from episodes.utils import (
    CONFIDENCE_HIGH,
    CONFIDENCE_LOW,
    CONFIDENCE_MEDIUM,
    HIGH_CONFIDENCE_PERCENT,
    MEDIUM_CONFIDENCE_PERCENT,
    LogLevel,
    logger,
)


@dataclass(frozen=True)
class InferenceResult:
    """Best-guess show name for a batch and the confidence tier behind it."""

    show_name: str | None
    confidence: str
    conflicting_names: tuple[str, ...] | None = None


def infer_show_name(filenames: Iterable[str]) -> InferenceResult:
    """
    Infer the show name shared by a batch of episode filenames.

    Each filename goes through `parser.extract_show_name_from_filename`; files
    without a marker or without a usable name are ignored. The most common
    candidate wins. On equal counts the name seen first wins, since `Counter`
    keeps first-seen order and `max` returns the first maximal key.

    Parameters:
    - filenames (Iterable[str]): Raw filenames, in any order, duplicates allowed.

    Returns:
    InferenceResult:
    - show_name: Winning candidate, or None when no file yielded a name.
    - confidence: "high" when every candidate agrees, "medium" at 80% or more,
      "low" otherwise (and whenever show_name is None).
    - conflicting_names: The other distinct candidates in first-seen order, or
      None when there are none (always None for "high").
    """
    candidates = [
        name for name in (parser.extract_show_name_from_filename(f) for f in filenames) if name is not None
    ]
    if not candidates:
        logger.log("infer.result", LogLevel.DEBUG, show_name=None, confidence=CONFIDENCE_LOW, candidates=0)
        return InferenceResult(show_name=None, confidence=CONFIDENCE_LOW)

    counts = Counter(candidates)
    show_name = max(counts, key=counts.get)
    match_percentage = counts[show_name] / len(candidates) * 100
    confidence = _classify(match_percentage)

    others = tuple(name for name in counts if name != show_name)
    conflicting = others or None

    logger.log(
        "infer.result",
        LogLevel.DEBUG,
        show_name=show_name,
        confidence=confidence,
        candidates=len(candidates),
        match_percentage=round(match_percentage, 1),
        conflicting=list(conflicting or ()),
    )
    return InferenceResult(show_name=show_name, confidence=confidence, conflicting_names=conflicting)


def confidence_message(result: InferenceResult) -> str:
    """
    Build the prompt message shown when asking the user to confirm a show name.

    Examples:
    - high:   "Detected show name:"
    - medium: "Most files match (also found: Wonder Man). Show name:"
    - low:    "Could not confidently detect show name (found: The Rookie, Wonder Man). Show name:"
    - none:   "Could not detect show name. Enter show name:"
    """
    if result.show_name is None:
        return "Could not detect show name. Enter show name:"
    if result.confidence == CONFIDENCE_HIGH:
        return "Detected show name:"
    if result.confidence == CONFIDENCE_MEDIUM:
        others = ", ".join(result.conflicting_names or ())
        return f"Most files match (also found: {others}). Show name:"
    found = ", ".join((result.show_name, *(result.conflicting_names or ())))
    return f"Could not confidently detect show name (found: {found}). Show name:"


def _classify(match_percentage: float) -> str:
    """
    Map the winner's share of candidates (0-100, float) to a confidence tier.

    The comparisons are done on the float percentage so 4 of 5 (80.0) is
    "medium" and 2 of 3 (66.66...) is "low".
    """
    if match_percentage == HIGH_CONFIDENCE_PERCENT:
        return CONFIDENCE_HIGH
    if match_percentage >= MEDIUM_CONFIDENCE_PERCENT:
        return CONFIDENCE_MEDIUM
    return CONFIDENCE_LOW
