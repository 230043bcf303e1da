import numpy as np


class PheromoneField:
    def __init__(self, n, initial_intensity=0.0):
        self.n = n
        self.matrix = np.empty((n, n), dtype=float)
        self.initialize(n, initial_intensity)

    def initialize(self, n, initial_intensity):
        """Preenche todas as celulas NxN com a intensidade inicial"""
        self.n = n
        self.matrix = np.full((n, n), float(initial_intensity))

    def reinforce(self, tour, delta):
        # Inclui a aresta de volta (ultimo -> primeiro)
        for idx in range(len(tour)):
            i = tour[idx]
            j = tour[(idx + 1) % len(tour)]
            self.matrix[i, j] += delta
            self.matrix[j, i] += delta

    def decay(self, factor):
        self.matrix *= factor

    def get(self, i, j):
        return self.matrix[i, j]

    def snapshot(self):
        """Copia somente leitura da matriz (para visualizacao)"""
        snap = self.matrix.copy()
        snap.flags.writeable = False
        return snap
