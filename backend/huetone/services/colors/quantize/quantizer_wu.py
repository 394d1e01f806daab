"""
Wu's color quantizer.

Pixels are binned into a 33x33x33 RGB histogram (5 bits per channel plus a
zero border). Cumulative moment tables let the weight, channel sums and
squared-magnitude sum of any box be read in constant time, so boxes can be
split at the plane that maximizes the between-class variance. The box with the
largest variance is always split next until the requested number of boxes
exists or no box can be split further.

Xiaolin Wu, "Efficient Statistical Computations for Optimal Color
Quantization", Graphics Gems II, 1991.
"""

import heapq
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Tuple

import numpy as np
from loguru import logger

from .quantizer_map import QuantizerMap
from .quantizer_result import QuantizerResult

INDEX_BITS = 5
INDEX_COUNT = (1 << INDEX_BITS) + 1


class Direction(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


@dataclass
class Box:
    """Half-open RGB index box: (r0, r1] x (g0, g1] x (b0, b1]."""

    r0: int = 0
    r1: int = 0
    g0: int = 0
    g1: int = 0
    b0: int = 0
    b1: int = 0
    vol: int = 0


class QuantizerWu:
    """
    Deterministic median-cut style quantizer with variance-driven splits.

    Instances hold the moment tables of the last run and are not meant to be
    shared between threads.
    """

    def __init__(self):
        self.weights: List = []
        self.moments_r: List = []
        self.moments_g: List = []
        self.moments_b: List = []
        self.moments: List = []

    def quantize(self, pixels: Iterable[int], max_colors: int) -> QuantizerResult:
        """
        Reduce pixels to at most `max_colors` box averages.

        Args:
            pixels: ARGB pixels; non-opaque pixels are ignored
            max_colors: Upper bound on the number of colors returned

        Returns:
            Box average colors with the pixel weight of each box
        """
        color_to_count = QuantizerMap().quantize(pixels).color_to_count
        if not color_to_count or max_colors <= 0:
            return QuantizerResult()

        self._construct_histogram(color_to_count)
        boxes = self._create_boxes(max_colors)
        result = self._create_result(boxes)
        logger.debug(
            f"Wu reduced {len(color_to_count)} distinct colors to {len(result)} "
            f"(requested {max_colors})"
        )
        return result

    def _construct_histogram(self, color_to_count: Dict[int, int]) -> None:
        size = len(color_to_count)
        colors = np.fromiter(color_to_count.keys(), dtype=np.int64, count=size)
        counts = np.fromiter(color_to_count.values(), dtype=np.int64, count=size)
        red = (colors >> 16) & 0xFF
        green = (colors >> 8) & 0xFF
        blue = colors & 0xFF

        bits_to_remove = 8 - INDEX_BITS
        index = (
            (red >> bits_to_remove) + 1,
            (green >> bits_to_remove) + 1,
            (blue >> bits_to_remove) + 1,
        )
        shape = (INDEX_COUNT, INDEX_COUNT, INDEX_COUNT)

        weights = np.zeros(shape, dtype=np.int64)
        moments_r = np.zeros(shape, dtype=np.int64)
        moments_g = np.zeros(shape, dtype=np.int64)
        moments_b = np.zeros(shape, dtype=np.int64)
        moments = np.zeros(shape, dtype=np.float64)
        np.add.at(weights, index, counts)
        np.add.at(moments_r, index, counts * red)
        np.add.at(moments_g, index, counts * green)
        np.add.at(moments_b, index, counts * blue)
        np.add.at(moments, index, (counts * (red * red + green * green + blue * blue)).astype(np.float64))

        # Python ints from here on so the variance sums cannot overflow.
        self.weights = _cumulative(weights).tolist()
        self.moments_r = _cumulative(moments_r).tolist()
        self.moments_g = _cumulative(moments_g).tolist()
        self.moments_b = _cumulative(moments_b).tolist()
        self.moments = _cumulative(moments).tolist()

    def _create_boxes(self, max_colors: int) -> List[Box]:
        last = INDEX_COUNT - 1
        boxes = [Box(r1=last, g1=last, b1=last, vol=last * last * last)]
        heap: List[Tuple[float, int]] = []
        next_index = 0
        while len(boxes) < max_colors:
            current = boxes[next_index]
            candidate = Box()
            if self._cut(current, candidate):
                boxes.append(candidate)
                heapq.heappush(heap, (-self._box_variance(current), next_index))
                heapq.heappush(heap, (-self._box_variance(candidate), len(boxes) - 1))
            else:
                heapq.heappush(heap, (-0.0, next_index))
            negative_variance, next_index = heapq.heappop(heap)
            if -negative_variance <= 0.0:
                break
        return boxes

    def _create_result(self, boxes: List[Box]) -> QuantizerResult:
        result = QuantizerResult()
        counts = result.color_to_count
        for box in boxes:
            weight = _volume(box, self.weights)
            if weight <= 0:
                continue
            r = _volume(box, self.moments_r) // weight
            g = _volume(box, self.moments_g) // weight
            b = _volume(box, self.moments_b) // weight
            color = (255 << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)
            counts[color] = counts.get(color, 0) + weight
        return result

    def _box_variance(self, box: Box) -> float:
        if box.vol <= 1:
            return 0.0
        return self._variance(box)

    def _variance(self, box: Box) -> float:
        dr = _volume(box, self.moments_r)
        dg = _volume(box, self.moments_g)
        db = _volume(box, self.moments_b)
        xx = _volume(box, self.moments)
        hypotenuse = dr * dr + dg * dg + db * db
        volume = _volume(box, self.weights)
        return xx - hypotenuse / volume

    def _cut(self, one: Box, two: Box) -> bool:
        """Split `one` in place, writing the upper half into `two`."""
        whole_r = _volume(one, self.moments_r)
        whole_g = _volume(one, self.moments_g)
        whole_b = _volume(one, self.moments_b)
        whole_w = _volume(one, self.weights)
        wholes = (whole_r, whole_g, whole_b, whole_w)

        cut_r, max_r = self._maximize(one, Direction.RED, one.r0 + 1, one.r1, *wholes)
        cut_g, max_g = self._maximize(one, Direction.GREEN, one.g0 + 1, one.g1, *wholes)
        cut_b, max_b = self._maximize(one, Direction.BLUE, one.b0 + 1, one.b1, *wholes)

        if max_r >= max_g and max_r >= max_b:
            if cut_r < 0:
                return False
            direction = Direction.RED
        elif max_g >= max_r and max_g >= max_b:
            direction = Direction.GREEN
        else:
            direction = Direction.BLUE

        two.r1, two.g1, two.b1 = one.r1, one.g1, one.b1
        if direction == Direction.RED:
            one.r1 = cut_r
            two.r0, two.g0, two.b0 = one.r1, one.g0, one.b0
        elif direction == Direction.GREEN:
            one.g1 = cut_g
            two.r0, two.g0, two.b0 = one.r0, one.g1, one.b0
        else:
            one.b1 = cut_b
            two.r0, two.g0, two.b0 = one.r0, one.g0, one.b1

        one.vol = (one.r1 - one.r0) * (one.g1 - one.g0) * (one.b1 - one.b0)
        two.vol = (two.r1 - two.r0) * (two.g1 - two.g0) * (two.b1 - two.b0)
        return True

    def _maximize(
        self,
        box: Box,
        direction: Direction,
        first: int,
        last: int,
        whole_r: int,
        whole_g: int,
        whole_b: int,
        whole_w: int,
    ) -> Tuple[int, float]:
        """
        Best cut plane along one axis.

        Returns:
            (cut position or -1, between-class variance at that position)
        """
        bottom_r = _bottom(box, direction, self.moments_r)
        bottom_g = _bottom(box, direction, self.moments_g)
        bottom_b = _bottom(box, direction, self.moments_b)
        bottom_w = _bottom(box, direction, self.weights)

        maximum = 0.0
        cut = -1
        for position in range(first, last):
            half_r = bottom_r + _top(box, direction, position, self.moments_r)
            half_g = bottom_g + _top(box, direction, position, self.moments_g)
            half_b = bottom_b + _top(box, direction, position, self.moments_b)
            half_w = bottom_w + _top(box, direction, position, self.weights)
            if half_w == 0:
                continue
            temp = (half_r * half_r + half_g * half_g + half_b * half_b) / half_w

            half_r = whole_r - half_r
            half_g = whole_g - half_g
            half_b = whole_b - half_b
            half_w = whole_w - half_w
            if half_w == 0:
                continue
            temp += (half_r * half_r + half_g * half_g + half_b * half_b) / half_w

            if temp > maximum:
                maximum = temp
                cut = position
        return cut, maximum


def _cumulative(table: np.ndarray) -> np.ndarray:
    """3-D prefix sums; entry [r][g][b] covers every bin at or below it."""
    return table.cumsum(axis=0).cumsum(axis=1).cumsum(axis=2)


def _volume(box: Box, moment: List) -> float:
    return (
        moment[box.r1][box.g1][box.b1]
        - moment[box.r1][box.g1][box.b0]
        - moment[box.r1][box.g0][box.b1]
        + moment[box.r1][box.g0][box.b0]
        - moment[box.r0][box.g1][box.b1]
        + moment[box.r0][box.g1][box.b0]
        + moment[box.r0][box.g0][box.b1]
        - moment[box.r0][box.g0][box.b0]
    )


def _bottom(box: Box, direction: Direction, moment: List) -> float:
    if direction == Direction.RED:
        return (
            -moment[box.r0][box.g1][box.b1]
            + moment[box.r0][box.g1][box.b0]
            + moment[box.r0][box.g0][box.b1]
            - moment[box.r0][box.g0][box.b0]
        )
    if direction == Direction.GREEN:
        return (
            -moment[box.r1][box.g0][box.b1]
            + moment[box.r1][box.g0][box.b0]
            + moment[box.r0][box.g0][box.b1]
            - moment[box.r0][box.g0][box.b0]
        )
    return (
        -moment[box.r1][box.g1][box.b0]
        + moment[box.r1][box.g0][box.b0]
        + moment[box.r0][box.g1][box.b0]
        - moment[box.r0][box.g0][box.b0]
    )


def _top(box: Box, direction: Direction, position: int, moment: List) -> float:
    if direction == Direction.RED:
        return (
            moment[position][box.g1][box.b1]
            - moment[position][box.g1][box.b0]
            - moment[position][box.g0][box.b1]
            + moment[position][box.g0][box.b0]
        )
    if direction == Direction.GREEN:
        return (
            moment[box.r1][position][box.b1]
            - moment[box.r1][position][box.b0]
            - moment[box.r0][position][box.b1]
            + moment[box.r0][position][box.b0]
        )
    return (
        moment[box.r1][box.g1][position]
        - moment[box.r1][box.g0][position]
        - moment[box.r0][box.g1][position]
        + moment[box.r0][box.g0][position]
    )
