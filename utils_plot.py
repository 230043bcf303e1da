import os

import matplotlib.pyplot as plt
import numpy as np


def draw_points(ax, coordinates):
    """Desenha as cidades numeradas a partir de 1; a cidade 1 em destaque"""
    for idx, (x, y) in enumerate(coordinates):
        color = '#ff8f00' if idx == 0 else 'lightgray'
        ax.scatter(x, y, s=300, color=color, zorder=3)
        ax.annotate(str(idx + 1), (x, y), ha='center', va='center', fontsize=8, zorder=4)


def draw_tour(ax, coordinates, tour):
    if not tour:
        return
    # Fecha o ciclo voltando ao primeiro no
    closed = list(tour) + [tour[0]]
    xs = [coordinates[i][0] for i in closed]
    ys = [coordinates[i][1] for i in closed]
    ax.plot(xs, ys, color='black', linewidth=2, zorder=2)


def draw_pheromones(ax, coordinates, pheromone_matrix, max_width=6.0):
    """Trilhas com espessura proporcional a intensidade do feromonio"""
    matrix = np.asarray(pheromone_matrix)
    peak = matrix.max() if matrix.size else 0.0
    if peak <= 0:
        return

    n = len(coordinates)
    for i in range(n - 1):
        for j in range(i + 1, n):
            width = max_width * matrix[i, j] / peak
            if width <= 0:
                continue
            ax.plot([coordinates[i][0], coordinates[j][0]],
                    [coordinates[i][1], coordinates[j][1]],
                    color='black', linewidth=width, zorder=1)


def plot_solution(filepath, coordinates, tour=None, pheromone_matrix=None, title=None):
    fig, ax = plt.subplots(figsize=(6, 6))

    if pheromone_matrix is not None:
        draw_pheromones(ax, coordinates, pheromone_matrix)
    if tour is not None:
        draw_tour(ax, coordinates, tour)
    draw_points(ax, coordinates)

    ax.set_aspect('equal')
    if title:
        plt.title(title, weight='bold')

    _ensure_parent_dir(filepath)
    plt.savefig(filepath, dpi=150, bbox_inches='tight')
    print(f"Grafico salvo em: {filepath}")
    plt.close(fig)


def plot_convergence(filepath, history):
    """Gera grafico do melhor custo por iteracao do ACO"""
    plt.figure(figsize=(10, 6))
    plt.plot(range(1, len(history) + 1), history, marker='o', color='green', linewidth=2)

    plt.xlabel('Iteracao', fontsize=12)
    plt.ylabel('Melhor custo', fontsize=12)
    plt.title('Convergencia do ACO', fontsize=14, weight='bold')
    plt.grid(True, linestyle=':', alpha=0.6)

    _ensure_parent_dir(filepath)
    plt.savefig(filepath, dpi=150)
    print(f"Grafico salvo em: {filepath}")
    plt.close()


def _ensure_parent_dir(filepath):
    directory = os.path.dirname(filepath)
    if directory and not os.path.exists(directory):
        os.makedirs(directory)
