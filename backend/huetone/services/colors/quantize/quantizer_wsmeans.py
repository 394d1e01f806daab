"""
Weighted square means (WSMeans) k-means refinement.

Each distinct input color is a weighted point in L*a*b*. Points start at their
nearest starting cluster; on every pass a point moves to its nearest cluster
only when that brings it noticeably closer, then clusters are recomputed as
weighted centroids. Passes stop once nothing moves or the iteration cap is
hit.

M. Emre Celebi, "Improving the Performance of K-Means for Color
Quantization", 2011. https://arxiv.org/abs/1101.0395
"""

from typing import Dict, Iterable, Optional, Sequence, Tuple

import numpy as np
from loguru import logger

from .point_provider import PointProviderLab
from .quantizer_result import QuantizerResult

MAX_ITERATIONS = 10
MIN_MOVEMENT_DISTANCE = 3.0
# Points per distance block; bounds memory at CHUNK_SIZE x clusters floats.
CHUNK_SIZE = 16384


class QuantizerWsmeans:
    """K-means over distinct colors, weighted by pixel count."""

    def __init__(self, point_provider: Optional[PointProviderLab] = None):
        self.point_provider = point_provider or PointProviderLab()

    def quantize(
        self,
        input_pixels: Iterable[int],
        max_colors: int,
        starting_clusters: Sequence[int] = (),
    ) -> QuantizerResult:
        """
        Refine clusters for the given pixels.

        Args:
            input_pixels: ARGB pixels, duplicates allowed
            max_colors: Upper bound on the number of clusters
            starting_clusters: Initial cluster colors, typically Wu output.
                When empty, the most frequent distinct colors are used.

        Returns:
            Cluster colors with the pixel weight assigned to each, in cluster
            order. Empty clusters are dropped; clusters that land on the same
            color are merged.
        """
        pixel_to_count: Dict[int, int] = {}
        for pixel in input_pixels:
            pixel_to_count[pixel] = pixel_to_count.get(pixel, 0) + 1
        if not pixel_to_count or max_colors <= 0:
            return QuantizerResult()

        pixels = list(pixel_to_count)
        counts = np.array([pixel_to_count[pixel] for pixel in pixels], dtype=np.float64)
        points = np.array([self.point_provider.from_int(pixel) for pixel in pixels], dtype=np.float64)

        cluster_count = min(max_colors, len(pixels))
        if starting_clusters:
            cluster_count = min(cluster_count, len(starting_clusters))
            seeds = list(starting_clusters)[:cluster_count]
        else:
            seeds = sorted(pixels, key=lambda pixel: -pixel_to_count[pixel])[:cluster_count]
        clusters = np.array([self.point_provider.from_int(seed) for seed in seeds], dtype=np.float64)

        assignments = _nearest_clusters(points, clusters)[0]
        population = np.zeros(cluster_count, dtype=np.float64)
        iteration = 0
        for iteration in range(MAX_ITERATIONS):
            nearest, nearest_distance, previous_distance = _nearest_clusters(points, clusters, assignments)
            movement = np.abs(np.sqrt(nearest_distance) - np.sqrt(previous_distance))
            moved = (nearest_distance < previous_distance) & (movement > MIN_MOVEMENT_DISTANCE)
            points_moved = int(np.count_nonzero(moved))
            assignments = np.where(moved, nearest, assignments)

            if points_moved == 0 and iteration != 0:
                break

            population = np.bincount(assignments, weights=counts, minlength=cluster_count)
            for component in range(3):
                sums = np.bincount(assignments, weights=points[:, component] * counts, minlength=cluster_count)
                clusters[:, component] = np.divide(
                    sums, population, out=np.zeros(cluster_count), where=population > 0
                )

        result = QuantizerResult()
        color_to_count = result.color_to_count
        for index in range(cluster_count):
            count = int(round(population[index]))
            if count == 0:
                continue
            color = self.point_provider.to_int(clusters[index].tolist())
            color_to_count[color] = color_to_count.get(color, 0) + count
        logger.debug(
            f"WSMeans settled {len(pixels)} distinct colors into {len(result)} clusters "
            f"after {iteration + 1} passes"
        )
        return result


def _nearest_clusters(
    points: np.ndarray,
    clusters: np.ndarray,
    assignments: Optional[np.ndarray] = None,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Nearest cluster of every point, computed CHUNK_SIZE points at a time.

    Args:
        points: Lab points, one row per distinct color
        clusters: Lab cluster centers
        assignments: Current cluster of every point, if any

    Returns:
        Index of the nearest cluster, squared distance to it and squared
        distance to the currently assigned cluster (equal to the nearest
        distance when no assignments are given)
    """
    count = len(points)
    nearest = np.empty(count, dtype=np.intp)
    nearest_distance = np.empty(count, dtype=np.float64)
    previous_distance = np.empty(count, dtype=np.float64)
    cluster_norms = np.sum(clusters * clusters, axis=1)
    for start in range(0, count, CHUNK_SIZE):
        stop = min(start + CHUNK_SIZE, count)
        distances = _squared_distances(points[start:stop], clusters, cluster_norms)
        rows = np.arange(stop - start)
        chunk_nearest = np.argmin(distances, axis=1)
        nearest[start:stop] = chunk_nearest
        nearest_distance[start:stop] = distances[rows, chunk_nearest]
        if assignments is None:
            previous_distance[start:stop] = nearest_distance[start:stop]
        else:
            previous_distance[start:stop] = distances[rows, assignments[start:stop]]
    return nearest, nearest_distance, previous_distance


def _squared_distances(points: np.ndarray, clusters: np.ndarray, cluster_norms: np.ndarray) -> np.ndarray:
    """Matrix of squared Lab distances, one row per point, one column per cluster."""
    squared = (
        np.sum(points * points, axis=1)[:, np.newaxis]
        - 2.0 * points @ clusters.T
        + cluster_norms[np.newaxis, :]
    )
    return np.maximum(squared, 0.0)
