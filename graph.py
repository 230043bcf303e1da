import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Node:
    id: int
    x: float
    y: float


def build_distance_matrix(nodes):
    """Matriz NxN simetrica de distancias euclidianas (diagonal zero)"""
    n = len(nodes)
    if n == 0:
        return np.zeros((0, 0))

    coords = np.array([[node.x, node.y] for node in nodes], dtype=float)
    diff = coords[:, np.newaxis, :] - coords[np.newaxis, :, :]
    matrix = np.hypot(diff[..., 0], diff[..., 1])

    # hypot(a, b) == hypot(-a, -b), entao a simetria ja e exata
    np.fill_diagonal(matrix, 0.0)
    return matrix


class Graph:
    def __init__(self, points):
        self.nodes = []
        for idx, point in enumerate(points):
            try:
                x, y = point
                x, y = float(x), float(y)
            except (TypeError, ValueError):
                raise ValueError(f"Ponto {idx} invalido: {point!r}")
            if not (math.isfinite(x) and math.isfinite(y)):
                raise ValueError(f"Ponto {idx} com coordenada nao finita: ({x}, {y})")
            self.nodes.append(Node(idx, x, y))

        self.n = len(self.nodes)
        self.distance_matrix = build_distance_matrix(self.nodes)
        self.distance_matrix.flags.writeable = False

        # Copia em listas para acesso rapido no laco interno dos solvers
        self._rows = self.distance_matrix.tolist()

    def get_distance(self, i, j):
        return self._rows[i][j]

    def get_neighbors(self, i):
        return [j for j in range(self.n) if j != i]

    def get_size(self):
        return self.n

    def coordinates(self):
        return [(node.x, node.y) for node in self.nodes]

    def tour_length(self, tour):
        """Custo do ciclo: soma das arestas consecutivas mais a volta ao inicio"""
        if len(tour) < 2:
            return math.inf
        rows = self._rows
        total = 0.0
        for idx in range(len(tour) - 1):
            total += rows[tour[idx]][tour[idx + 1]]
        total += rows[tour[-1]][tour[0]]
        return total
