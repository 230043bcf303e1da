import math
import random

import numpy as np
import pytest

from aco import ACO, ACOParams
from context import TSPContext


def make_aco(points, seed=0, **overrides):
    settings = {"iterations": 20, "num_ants": 10}
    settings.update(overrides)
    params = ACOParams(**settings)
    return ACO(TSPContext.from_points(points), params, seed=seed)


def test_finds_unit_square_perimeter(square_context):
    solver = ACO(square_context, ACOParams(iterations=10, num_ants=10), seed=1)
    tour, length = solver.run_colony()
    assert length == pytest.approx(4.0)
    assert sorted(tour) == [0, 1, 2, 3]


def test_best_length_matches_recomputed_tour(random_points):
    solver = make_aco(random_points)
    tour, length = solver.run_colony()
    assert sorted(tour) == list(range(7))
    assert solver.graph.tour_length(tour) == length


def test_history_is_non_increasing(random_points):
    solver = make_aco(random_points, seed=5)
    solver.run_colony()
    assert len(solver.history) == 20
    assert all(b <= a for a, b in zip(solver.history, solver.history[1:]))


def test_same_seed_reproduces_run(random_points):
    first = make_aco(random_points, seed=42)
    second = make_aco(random_points, seed=42)
    assert first.run_colony() == second.run_colony()
    assert first.history == second.history
    assert np.array_equal(first.pheromone.matrix, second.pheromone.matrix)


def test_injected_rng(random_points):
    context = TSPContext.from_points(random_points)
    solver = ACO(context, ACOParams(iterations=2, num_ants=3), rng=random.Random(7))
    tour, _ = solver.run_colony()
    assert tour is not None


def test_pheromone_stays_symmetric(random_points):
    solver = make_aco(random_points)
    solver.run_colony()
    m = solver.pheromone.matrix
    assert np.allclose(m, m.T)
    assert np.all(m >= 0)


def test_ant_tour_visits_every_node_once(random_points):
    solver = make_aco(random_points)
    solver.pheromone.initialize(7, 0.01)
    tour, cost = solver.run_ant(3)
    assert tour[0] == 3
    assert sorted(tour) == list(range(7))
    assert cost == solver.graph.tour_length(tour)


def test_single_iteration_reinforces_then_decays():
    points = [(0, 0), (0, 1), (1, 1)]
    solver = make_aco(points, num_ants=1, iterations=1, degradation=0.5, initial_pheromone=1.0, q=3.0)
    tour, length = solver.run_colony()

    # Triangulo: toda aresta pertence ao tour
    delta = 3.0 / length
    m = solver.pheromone.matrix
    assert m[0, 1] == pytest.approx((1.0 + delta) * 0.5)
    assert m[0, 0] == pytest.approx(0.5)


def test_alpha_zero_ignores_pheromone(random_points):
    solver = make_aco(random_points, alpha=0.0)
    candidates = [1, 2, 3, 4]

    solver.pheromone.initialize(7, 0.01)
    low = solver.get_probabilities(0, candidates)
    solver.pheromone.reinforce([0, 3, 1, 2, 4, 5, 6], 50.0)
    high = solver.get_probabilities(0, candidates)

    assert low == pytest.approx(high)


def test_beta_zero_ignores_distance():
    solver = make_aco([(0, 0), (1, 0), (50, 0), (0, 7)], beta=0.0)
    solver.pheromone.initialize(4, 0.2)
    probs = solver.get_probabilities(0, [1, 2, 3])
    assert probs == pytest.approx([1 / 3, 1 / 3, 1 / 3])


def test_probabilities_prefer_closer_nodes():
    solver = make_aco([(0, 0), (1, 0), (10, 0)], alpha=1.0, beta=2.0)
    solver.pheromone.initialize(3, 1.0)
    near, far = solver.get_probabilities(0, [1, 2])
    assert near + far == pytest.approx(1.0)
    assert near == pytest.approx(100 / 101)


def test_zero_initial_pheromone_falls_back_to_first_unvisited(random_points):
    solver = make_aco(random_points, initial_pheromone=0.0, alpha=1.0)
    solver.pheromone.initialize(7, 0.0)

    assert solver.get_probabilities(2, [0, 1, 3]) is None
    assert solver.choose_next(2, [1, 3, 5]) == 1

    tour, _ = solver.run_ant(4)
    assert tour == [4, 0, 1, 2, 3, 5, 6]


def test_zero_initial_pheromone_run_completes(random_points):
    solver = make_aco(random_points, initial_pheromone=0.0, alpha=1.0)
    tour, length = solver.run_colony()
    assert sorted(tour) == list(range(7))
    assert math.isfinite(length)


def test_rounding_shortfall_falls_back_to_first_candidate():
    class HighDraw:
        def random(self):
            return 0.9

    context = TSPContext.from_points([(0, 0), (1, 0), (2, 0)])
    solver = ACO(context, ACOParams(), rng=HighDraw())
    solver.pheromone.initialize(3, 1.0)
    solver.get_probabilities = lambda current, candidates: [0.3, 0.3]
    assert solver.choose_next(0, [1, 2]) == 1


def test_coincident_cities_are_chosen_first():
    solver = make_aco([(0, 0), (5, 5), (0, 0)])
    solver.pheromone.initialize(3, 1.0)
    assert solver.get_probabilities(0, [1, 2]) == [0.0, 1.0]
    assert solver.choose_next(0, [1, 2]) == 2


def test_all_cities_coincident_does_not_crash():
    solver = make_aco([(1, 1), (1, 1), (1, 1)])
    tour, length = solver.run_colony()
    assert length == 0.0
    assert sorted(tour) == [0, 1, 2]


@pytest.mark.parametrize("points", [[], [(0.5, 0.5)]])
def test_degenerate_instance_reports_no_tour(points):
    solver = make_aco(points)
    assert solver.run_colony() == (None, math.inf)
    assert solver.history == []


@pytest.mark.parametrize("overrides", [
    {"iterations": -1},
    {"num_ants": 2.5},
    {"alpha": -1.0},
    {"beta": -0.5},
    {"degradation": -0.1},
    {"initial_pheromone": math.nan},
    {"q": -1.0},
])
def test_invalid_params_fail_fast(overrides):
    with pytest.raises(ValueError):
        ACOParams(**overrides).validate()


def test_degradation_at_or_above_one_is_accepted():
    ACOParams(degradation=1.0).validate()
    ACOParams(degradation=1.5).validate()
    ACOParams(degradation=0.0).validate()


def test_large_beta_on_long_edges_does_not_overflow():
    points = [(0, 0), (100, 0), (0, 100), (100, 100)]
    solver = ACO(TSPContext.from_points(points), ACOParams(iterations=2, num_ants=2, beta=200.0), seed=1)
    solver.pheromone.initialize(4, 0.01)

    # 100 ** 200 estoura: valor da aresta vira zero, sem distribuicao definida
    assert solver.edge_value(0, 1) == 0.0
    assert solver.get_probabilities(0, [1, 2, 3]) is None

    tour, length = solver.run_colony()
    assert sorted(tour) == [0, 1, 2, 3]
    assert math.isfinite(length)


def test_runaway_pheromone_with_large_alpha_does_not_overflow():
    points = [(0, 0), (0.001, 0), (0.001, 0.001), (0, 0.001)]
    solver = ACO(TSPContext.from_points(points), ACOParams(iterations=5, num_ants=5, alpha=400.0, q=1.0), seed=1)
    tour, length = solver.run_colony()

    assert sorted(tour) == [0, 1, 2, 3]
    assert length == solver.graph.tour_length(tour)
    assert math.isfinite(length)


def test_extreme_exponents_with_growing_pheromone_complete(random_points):
    params = ACOParams(iterations=15, num_ants=8, alpha=300.0, beta=300.0, degradation=1.5, q=10.0)
    solver = ACO(TSPContext.from_points(random_points), params, seed=4)
    tour, length = solver.run_colony()

    assert sorted(tour) == list(range(7))
    assert length == solver.graph.tour_length(tour)
    assert all(b <= a for a, b in zip(solver.history, solver.history[1:]))


def test_infinite_pheromone_over_infinite_distance_weight():
    solver = make_aco([(0, 0), (100, 0), (0, 100)], alpha=2.0, beta=200.0)
    solver.pheromone.initialize(3, 1.0)
    solver.pheromone.matrix[0, 1] = math.inf

    assert solver.edge_value(0, 1) == math.inf
    assert solver.edge_value(0, 2) == 0.0
    assert solver.choose_next(0, [1, 2]) == 1


def test_overflowing_sum_of_finite_values_is_rescaled():
    solver = make_aco([(0, 0), (1, 0), (2, 0)])
    solver.edge_value = lambda i, j: 1e308
    assert solver.get_probabilities(0, [1, 2]) == pytest.approx([0.5, 0.5])
