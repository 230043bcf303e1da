import math
import threading


class BestSolution:
    """
    Melhor tour encontrado ate agora e seu custo.

    Atualizado apenas quando um custo estritamente menor aparece, entao em
    caso de empate o primeiro tour encontrado e mantido.
    """

    def __init__(self):
        self.lock = threading.Lock()
        self.tour = None
        self.length = math.inf

    def reset(self):
        with self.lock:
            self.tour = None
            self.length = math.inf

    def try_update(self, tour, length):
        with self.lock:
            if length < self.length:
                self.length = length
                self.tour = tuple(tour)
                return True
            return False

    def current(self):
        with self.lock:
            return self.tour, self.length

    def has_tour(self):
        with self.lock:
            return self.tour is not None


def rotate_tour(tour, anchor=0):
    """Gira o tour ciclico para comecar no no `anchor`"""
    tour = list(tour)
    if anchor not in tour:
        return tour
    start = tour.index(anchor)
    return tour[start:] + tour[:start]


def format_tour(tour, anchor=0):
    # Ids 1-based, fechando o ciclo no no inicial: [1, 3, 2, 1]
    rotated = [node + 1 for node in rotate_tour(tour, anchor)]
    if rotated:
        rotated.append(rotated[0])
    return str(rotated)
