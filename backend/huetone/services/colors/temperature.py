"""
Color temperature theory.

Warm colors sit around orange, cool ones around blue. Temperature is derived
from the L*a*b* hue and chroma of a color and is used to find complements and
analogous colors that keep a consistent feel rather than a fixed hue offset.
"""

import math
from typing import Dict, List, Optional

from .hct import Hct
from .utils import color_utils
from .utils.math_utils import round_half_away, sanitize_degrees_double, sanitize_degrees_int


class TemperatureCache:
    """
    Lazily computed temperature data for one input color.

    Args:
        input_hct: Color whose complement and analogues are requested
    """

    def __init__(self, input_hct: Hct):
        self.input = input_hct
        self._hcts_by_temp: Optional[List[Hct]] = None
        self._hcts_by_hue: Optional[List[Hct]] = None
        self._temps_by_argb: Optional[Dict[int, float]] = None
        self._input_relative_temperature = -1.0
        self._complement: Optional[Hct] = None

    @property
    def coldest(self) -> Hct:
        return self.hcts_by_temp[0]

    @property
    def warmest(self) -> Hct:
        return self.hcts_by_temp[-1]

    def complement(self) -> Hct:
        """
        The color with the opposite relative temperature.

        Searches the other side of the coldest-warmest arc for the hue whose
        relative temperature is closest to 1 minus the input's.
        """
        if self._complement is not None:
            return self._complement

        coldest_hue = self.coldest.hue
        coldest_temp = self.temps_by_argb[self.coldest.argb]
        warmest_hue = self.warmest.hue
        warmest_temp = self.temps_by_argb[self.warmest.argb]
        temp_range = warmest_temp - coldest_temp

        start_hue_is_coldest_to_warmest = _is_between(self.input.hue, coldest_hue, warmest_hue)
        start_hue = warmest_hue if start_hue_is_coldest_to_warmest else coldest_hue
        end_hue = coldest_hue if start_hue_is_coldest_to_warmest else warmest_hue
        direction_of_rotation = 1.0
        smallest_error = 1000.0
        answer = self.hcts_by_hue[round_half_away(self.input.hue)]

        complement_relative_temp = 1.0 - self.input_relative_temperature()
        # With no temperature range every candidate is equally far; keep the input hue.
        if temp_range != 0.0:
            for hue_addend in range(361):
                hue = sanitize_degrees_double(start_hue + direction_of_rotation * hue_addend)
                if not _is_between(hue, start_hue, end_hue):
                    continue
                possible_answer = self.hcts_by_hue[round_half_away(hue)]
                relative_temp = (self.temps_by_argb[possible_answer.argb] - coldest_temp) / temp_range
                error = abs(complement_relative_temp - relative_temp)
                if error < smallest_error:
                    smallest_error = error
                    answer = possible_answer

        self._complement = answer
        return answer

    def analogous(self, count: int = 5, divisions: int = 12) -> List[Hct]:
        """
        Colors evenly spaced in temperature around the input.

        Args:
            count: Number of colors to return, the input included
            divisions: Number of temperature steps in the full hue circle

        Returns:
            `count` colors with the input in the middle
        """
        start_hue = round_half_away(self.input.hue)
        start_hct = self.hcts_by_hue[start_hue]
        last_temp = self.relative_temperature(start_hct)

        all_colors = [start_hct]

        absolute_total_temp_delta = 0.0
        for i in range(360):
            hue = sanitize_degrees_int(start_hue + i)
            hct = self.hcts_by_hue[hue]
            temp = self.relative_temperature(hct)
            absolute_total_temp_delta += abs(temp - last_temp)
            last_temp = temp

        hue_addend = 1
        temp_step = absolute_total_temp_delta / divisions
        total_temp_delta = 0.0
        last_temp = self.relative_temperature(start_hct)
        while len(all_colors) < divisions:
            hue = sanitize_degrees_int(start_hue + hue_addend)
            hct = self.hcts_by_hue[hue]
            temp = self.relative_temperature(hct)
            total_temp_delta += abs(temp - last_temp)

            desired_total_temp_delta_for_index = len(all_colors) * temp_step
            index_satisfied = total_temp_delta >= desired_total_temp_delta_for_index
            index_addend = 1
            # A hue may fill several steps at once, e.g. black and white have
            # no analogues at all.
            while index_satisfied and len(all_colors) < divisions:
                all_colors.append(hct)
                desired_total_temp_delta_for_index = (len(all_colors) + index_addend) * temp_step
                index_satisfied = total_temp_delta >= desired_total_temp_delta_for_index
                index_addend += 1

            last_temp = temp
            hue_addend += 1
            if hue_addend > 360:
                while len(all_colors) < divisions:
                    all_colors.append(hct)
                break

        answers = [self.input]

        ccw_count = int(math.floor((count - 1.0) / 2.0))
        for i in range(1, ccw_count + 1):
            index = (0 - i) % len(all_colors)
            answers.insert(0, all_colors[index])

        cw_count = count - ccw_count - 1
        for i in range(1, cw_count + 1):
            index = i % len(all_colors)
            answers.append(all_colors[index])

        return answers

    def relative_temperature(self, hct: Hct) -> float:
        """Temperature of `hct` scaled so the coldest hue is 0 and the warmest 1."""
        temps = self.temps_by_argb
        coldest_temp = temps[self.coldest.argb]
        temp_range = temps[self.warmest.argb] - coldest_temp
        if temp_range == 0.0:
            return 0.5
        return (temps[hct.argb] - coldest_temp) / temp_range

    def input_relative_temperature(self) -> float:
        if self._input_relative_temperature < 0.0:
            self._input_relative_temperature = self.relative_temperature(self.input)
        return self._input_relative_temperature

    @property
    def hcts_by_hue(self) -> List[Hct]:
        """The input's chroma and tone at every integer hue 0-360."""
        if self._hcts_by_hue is None:
            self._hcts_by_hue = [
                Hct.from_hct(float(hue), self.input.chroma, self.input.tone)
                for hue in range(361)
            ]
        return self._hcts_by_hue

    @property
    def hcts_by_temp(self) -> List[Hct]:
        """Hues by temperature plus the input, coldest first."""
        if self._hcts_by_temp is None:
            hcts = list(self.hcts_by_hue)
            hcts.append(self.input)
            temps = self.temps_by_argb
            hcts.sort(key=lambda hct: temps[hct.argb])
            self._hcts_by_temp = hcts
        return self._hcts_by_temp

    @property
    def temps_by_argb(self) -> Dict[int, float]:
        if self._temps_by_argb is None:
            temps = {}
            for hct in self.hcts_by_hue + [self.input]:
                temps[hct.argb] = raw_temperature(hct)
            self._temps_by_argb = temps
        return self._temps_by_argb


def raw_temperature(color: Hct) -> float:
    """
    Temperature of a color on an open scale.

    Roughly -0.5 for achromatic colors, lower for cool and higher for warm
    ones, following Ou, Woodcock and Wright's model in L*a*b*.
    """
    lab = color_utils.lab_from_argb(color.argb)
    hue = sanitize_degrees_double(math.degrees(math.atan2(lab[2], lab[1])))
    chroma = math.hypot(lab[1], lab[2])
    return -0.5 + 0.02 * chroma ** 1.07 * math.cos(
        math.radians(sanitize_degrees_double(hue - 50.0))
    )


def _is_between(angle: float, a: float, b: float) -> bool:
    if a < b:
        return a <= angle <= b
    return a <= angle or angle <= b
