import time
import argparse

from aco import ACO, ACOParams
from best_solution import format_tour
from bruteforce import BruteForce
from context import TSPContext
from utils_gen_points import load_points_from_file
from utils_plot import plot_convergence, plot_solution

METHOD_NAMES = {
    'bf': 'Forca Bruta',
    'aco': 'Otimizacao por Colonia de Formigas',
}


def build_argparser():
    defaults = ACOParams()
    parser = argparse.ArgumentParser(description='TSP: Forca Bruta ou Colonia de Formigas')
    parser.add_argument('--points', type=str, default='points/4_nodes.txt', help='Arquivo com as coordenadas (x,y por linha ou JSON)')
    parser.add_argument('--method', choices=['bf', 'aco'], default='aco', help='Metodo de solucao (padrao: aco)')
    parser.add_argument('--seed', type=int, default=None, help='Seed para reprodutibilidade')
    parser.add_argument('--verbose', action='store_true', help='Mostra o progresso')

    aco = parser.add_argument_group('Parametros ACO')
    aco.add_argument('--iterations', type=int, default=defaults.iterations, help='Numero de iteracoes')
    aco.add_argument('--ants', type=int, default=defaults.num_ants, help='Formigas por iteracao')
    aco.add_argument('--degradation', type=float, default=defaults.degradation, help='Fator de degradacao do feromonio')
    aco.add_argument('--alpha', type=float, default=defaults.alpha, help='Peso do feromonio')
    aco.add_argument('--beta', type=float, default=defaults.beta, help='Peso heuristico (1/d)')
    aco.add_argument('--initial-pheromone', type=float, default=defaults.initial_pheromone, help='Intensidade inicial do feromonio')
    aco.add_argument('--q', type=float, default=defaults.q, help='Quantidade de feromonio por tour')

    bf = parser.add_argument_group('Parametros Forca Bruta')
    bf.add_argument('--skip-mirrors', action='store_true', help='Nao avalia o reverso de um tour ja avaliado')

    out = parser.add_argument_group('Saida')
    out.add_argument('--plot', type=str, default=None, help='Salva o desenho da solucao (png)')
    out.add_argument('--print', dest='which_print', choices=['path', 'pheromones'], default='path',
                     help='O que desenhar: menor caminho ou feromonios (so ACO)')
    out.add_argument('--history', type=str, default=None, help='Salva o grafico de convergencia do ACO (png)')
    return parser


def solve(context, args):
    if args.method == 'bf':
        solver = BruteForce(context, skip_mirrors=args.skip_mirrors, verbose=args.verbose)
        return solver.run(), None

    params = ACOParams(
        iterations=args.iterations,
        num_ants=args.ants,
        degradation=args.degradation,
        alpha=args.alpha,
        beta=args.beta,
        initial_pheromone=args.initial_pheromone,
        q=args.q,
    )
    solver = ACO(context, params, seed=args.seed, verbose=args.verbose)
    return solver.run_colony(), solver.history


def print_shortest_path(method, tour, length, elapsed):
    print(f"Metodo: {METHOD_NAMES[method]}")
    print(f"Menor distancia: {length:.5f}")
    print(f"Menor caminho: {format_tour(tour)}")
    print(f"Tempo para encontrar o menor caminho: {elapsed:.2f} segundos.")


def main(argv=None):
    parser = build_argparser()
    args = parser.parse_args(argv)

    try:
        points = load_points_from_file(args.points)
        context = TSPContext.from_points(points)
    except FileNotFoundError:
        print(f"ERRO: Arquivo '{args.points}' nao encontrado.")
        return 1
    except ValueError as e:
        print(f"ERRO: {e}")
        return 1

    if context.graph.get_size() < 2:
        print(f"ERRO: sao necessarias ao menos 2 cidades (recebido: {context.graph.get_size()}).")
        return 1

    start_time = time.time()
    try:
        (tour, length), history = solve(context, args)
    except ValueError as e:
        print(f"ERRO: {e}")
        return 1
    elapsed = time.time() - start_time

    if tour is None:
        print("ERRO: nenhum tour encontrado.")
        return 1

    print_shortest_path(args.method, tour, length, elapsed)

    if args.plot:
        coordinates = context.graph.coordinates()
        if args.which_print == 'pheromones' and args.method == 'aco':
            plot_solution(args.plot, coordinates, pheromone_matrix=context.pheromone.snapshot(),
                          title='Trilhas de feromonio')
        else:
            plot_solution(args.plot, coordinates, tour=tour, title=f"Menor caminho: {length:.5f}")

    if args.history and history:
        plot_convergence(args.history, history)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
