def permutations(items):
    """
    Gera todas as permutacoes de `items` por trocas recursivas.

    Gerador preguicoso; cada chamada comeca do zero sobre uma copia da
    lista, entao `items` nao e alterado.
    """
    return _permute(list(items), 0)


def _permute(arr, k):
    if k >= len(arr) - 1:
        yield tuple(arr)
        return

    # Troca a posicao k com cada posicao >= k, permuta o resto e desfaz a troca
    for i in range(k, len(arr)):
        arr[k], arr[i] = arr[i], arr[k]
        yield from _permute(arr, k + 1)
        arr[k], arr[i] = arr[i], arr[k]


class BruteForce:
    """
    Busca exata: fixa o no 0 como inicio/fim e avalia todas as
    permutacoes das demais cidades. Custo O((n-1)!).

    Por padrao um tour e o seu reverso sao avaliados separadamente
    (mesmo custo). Com `skip_mirrors=True` so a orientacao em que o
    segundo no e menor que o ultimo e avaliada.
    """

    def __init__(self, context, skip_mirrors=False, verbose=False):
        self.context = context
        self.skip_mirrors = skip_mirrors
        self.verbose = verbose
        self.evaluated = 0

    def run(self):
        graph = self.context.graph
        best = self.context.best
        best.reset()
        self.evaluated = 0

        n = graph.get_size()
        if n < 2:
            if self.verbose:
                print(f"[BF] Grafo com {n} no(s): nenhum tour definido")
            return best.current()

        if self.verbose:
            print(f"[BF] Iniciando forca bruta com {n} cidades")

        for perm in permutations(range(1, n)):
            if self.skip_mirrors and perm[0] > perm[-1]:
                continue

            tour = (0,) + perm
            cost = graph.tour_length(tour)
            self.evaluated += 1

            if best.try_update(tour, cost) and self.verbose:
                print(f"[BF] *** NOVO MELHOR *** | Custo: {cost:.5f} | Caminho: {list(tour)}")

        if self.verbose:
            print(f"[BF] {self.evaluated} tours avaliados")
        return best.current()
