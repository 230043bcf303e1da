from dataclasses import dataclass, field
from typing import Optional

from best_solution import BestSolution
from graph import Graph
from pheromone import PheromoneField


@dataclass
class TSPContext:
    """Estado de uma execucao: grafo, feromonios e melhor solucao"""
    graph: Graph
    best: BestSolution = field(default_factory=BestSolution)
    pheromone: Optional[PheromoneField] = None

    def __post_init__(self):
        if self.pheromone is None:
            self.pheromone = PheromoneField(self.graph.get_size())

    @classmethod
    def from_points(cls, points):
        return cls(Graph(points))
