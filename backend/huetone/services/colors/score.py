"""
Theme seed scoring.

Ranks quantized image colors by how well they would work as the source color
of a theme: colors whose hue neighborhood covers a large part of the image and
whose chroma is close to a typical accent chroma score highest, and the chosen
set is spread out in hue as far as the candidates allow.
"""

import math
from dataclasses import dataclass
from typing import Dict, List

from loguru import logger

from .hct import Hct
from .utils.math_utils import difference_degrees, round_half_away, sanitize_degrees_int

TARGET_CHROMA = 48.0
WEIGHT_PROPORTION = 0.7
WEIGHT_CHROMA_ABOVE = 0.3
WEIGHT_CHROMA_BELOW = 0.1
CUTOFF_CHROMA = 5.0
CUTOFF_EXCITED_PROPORTION = 0.01

DEFAULT_FALLBACK_COLOR = 0xff4285f4
DEFAULT_DESIRED = 4

MAX_HUE_DIFFERENCE = 90
MIN_HUE_DIFFERENCE = 15


@dataclass(frozen=True)
class ScoredColor:
    """A candidate seed color and its suitability score."""

    argb: int
    score: float


def score(
    colors_to_population: Dict[int, int],
    desired: int = DEFAULT_DESIRED,
    fallback_color_argb: int = DEFAULT_FALLBACK_COLOR,
    filter_colors: bool = True,
) -> List[ScoredColor]:
    """
    Rank colors by suitability as a theme source color.

    Args:
        colors_to_population: ARGB color to pixel count, e.g. quantizer output
        desired: Maximum number of colors to return
        fallback_color_argb: Returned, with score 0, when no color qualifies
        filter_colors: Drop colors with too little chroma or hue coverage

    Returns:
        Between 1 and `desired` colors, best first. Equal scores keep the
        order of descending population.
    """
    # Population order first so that the stable score sort breaks ties by it.
    entries = sorted(colors_to_population.items(), key=lambda item: -item[1])

    colors_hct: List[Hct] = []
    hue_population = [0] * 360
    population_sum = 0.0
    for argb, population in entries:
        hct = Hct.from_int(argb)
        colors_hct.append(hct)
        hue = int(math.floor(hct.hue)) % 360
        hue_population[hue] += population
        population_sum += population

    # Hues with more usage in the neighboring 30 degree slice get a larger number.
    hue_excited_proportions = [0.0] * 360
    if population_sum > 0:
        for hue in range(360):
            proportion = hue_population[hue] / population_sum
            for i in range(hue - 14, hue + 16):
                hue_excited_proportions[sanitize_degrees_int(i)] += proportion

    scored: List[ScoredColor] = []
    scored_hcts: List[Hct] = []
    for hct in colors_hct:
        proportion = hue_excited_proportions[sanitize_degrees_int(round_half_away(hct.hue))]
        if filter_colors and (hct.chroma < CUTOFF_CHROMA or proportion <= CUTOFF_EXCITED_PROPORTION):
            continue

        proportion_score = proportion * 100.0 * WEIGHT_PROPORTION
        chroma_weight = WEIGHT_CHROMA_BELOW if hct.chroma < TARGET_CHROMA else WEIGHT_CHROMA_ABOVE
        chroma_score = (hct.chroma - TARGET_CHROMA) * chroma_weight
        scored.append(ScoredColor(hct.to_int(), proportion_score + chroma_score))
        scored_hcts.append(hct)

    order = sorted(range(len(scored)), key=lambda index: -scored[index].score)

    # Start with the widest hue spread that could fit the desired count and
    # relax it until enough colors are chosen.
    chosen: List[int] = []
    for difference in range(MAX_HUE_DIFFERENCE, MIN_HUE_DIFFERENCE - 1, -1):
        chosen.clear()
        for index in order:
            hue = scored_hcts[index].hue
            if not any(difference_degrees(hue, scored_hcts[other].hue) < difference for other in chosen):
                chosen.append(index)
            if len(chosen) >= desired:
                break
        if len(chosen) >= desired:
            break

    if not chosen:
        logger.debug(f"No color qualified as a seed; falling back to {fallback_color_argb:#010x}")
        return [ScoredColor(fallback_color_argb, 0.0)]

    ranked = [scored[index] for index in chosen]
    logger.debug(f"Scored {len(colors_to_population)} colors, chose {[f'{c.argb:#010x}' for c in ranked]}")
    return ranked

