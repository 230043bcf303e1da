import math
import random
from dataclasses import dataclass


def _safe_pow(base, exponent):
    # math.pow levanta OverflowError em vez de devolver inf
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf


@dataclass
class ACOParams:
    '''
    Parametros da colonia de formigas

    Attributes:
        iterations: numero de rodadas
        num_ants: formigas lancadas por rodada
        degradation: fator multiplicativo de evaporacao aplicado a cada rodada
        alpha: peso do feromonio
        beta: peso heuristico (inverso da distancia)
        initial_pheromone: intensidade inicial em todas as arestas
        q: quantidade de feromonio depositada por tour (dividida pelo custo)
    '''
    iterations: int = 100
    num_ants: int = 50
    degradation: float = 0.8
    alpha: float = 1.1
    beta: float = 1.6
    initial_pheromone: float = 0.01
    q: float = 0.0001

    def validate(self):
        for name in ("iterations", "num_ants"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} deve ser um inteiro >= 0 (recebido: {value!r})")

        for name in ("degradation", "alpha", "beta", "initial_pheromone", "q"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} deve ser finito e >= 0 (recebido: {value!r})")


class ACO:
    def __init__(self, context, params=None, seed=None, rng=None, verbose=False):
        self.context = context
        self.graph = context.graph
        self.pheromone = context.pheromone
        self.best = context.best
        self.params = params or ACOParams()
        self.params.validate()
        self.rng = rng if rng is not None else random.Random(seed)
        self.verbose = verbose

        # Melhor custo global ao fim de cada iteracao
        self.history = []

    def edge_value(self, i, j):
        tau = _safe_pow(float(self.pheromone.get(i, j)), self.params.alpha)
        eta = _safe_pow(self.graph.get_distance(i, j), self.params.beta)
        if eta == 0:
            # Cidades coincidentes, ou d ** beta abaixo do menor float
            return math.inf
        if math.isinf(eta):
            return math.inf if math.isinf(tau) else 0.0
        return tau / eta

    def get_probabilities(self, current, candidates):
        """
        Distribuicao de probabilidade sobre os candidatos, na mesma ordem.

        Retorna None quando a soma dos valores e zero e a distribuicao
        nao esta definida.
        """
        values = [self.edge_value(current, j) for j in candidates]
        total = sum(values)

        if math.isinf(total):
            infinite = [math.isinf(v) for v in values]
            count = sum(infinite)
            if count:
                return [1.0 / count if flag else 0.0 for flag in infinite]

            # Soma estourou com valores finitos: reescala pelo maior
            peak = max(values)
            values = [v / peak for v in values]
            total = sum(values)

        if not total > 0:
            return None

        return [v / total for v in values]

    def choose_next(self, current, candidates):
        r = self.rng.random()
        probs = self.get_probabilities(current, candidates)

        if probs is not None:
            cumulative = 0.0
            for next_node, p in zip(candidates, probs):
                cumulative += p
                if r < cumulative:
                    return next_node

        # Denominador zero ou massa acumulada < r por arredondamento
        return candidates[0]

    def run_ant(self, start_node=0):
        n = self.graph.get_size()
        visited = {start_node}
        tour = [start_node]
        current = start_node

        while len(tour) < n:
            neighbors = [j for j in self.graph.get_neighbors(current) if j not in visited]
            next_node = self.choose_next(current, neighbors)

            visited.add(next_node)
            tour.append(next_node)
            current = next_node

        return tour, self.graph.tour_length(tour)

    def run_iteration(self):
        n = self.graph.get_size()

        for _ in range(self.params.num_ants):
            start_node = self.rng.randrange(n)
            path, cost = self.run_ant(start_node)

            # Custo zero so ocorre com todas as cidades no mesmo ponto
            if cost > 0:
                self.pheromone.reinforce(path, self.params.q / cost)

            if self.best.try_update(path, cost) and self.verbose:
                print(f"[ACO] *** NOVA MELHOR SOLUCAO *** | Custo: {cost:.5f} | Caminho: {path}")

        self.pheromone.decay(self.params.degradation)

    def run_colony(self):
        n = self.graph.get_size()
        self.best.reset()
        self.pheromone.initialize(n, self.params.initial_pheromone)
        self.history = []

        if n < 2:
            if self.verbose:
                print(f"[ACO] Grafo com {n} no(s): nenhum tour definido")
            return self.best.current()

        for it in range(self.params.iterations):
            self.run_iteration()
            _, best_cost = self.best.current()
            self.history.append(best_cost)

            if self.verbose:
                print(f"[ACO] Iteracao {it + 1}/{self.params.iterations} | Melhor custo: {best_cost:.5f}")

        return self.best.current()
