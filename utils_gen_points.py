import os
import json
import random


def load_points_from_file(file_path):
    """
    Le coordenadas de um arquivo.

    `.json`: lista de pares [x, y]. Outros: uma linha "x,y" por cidade;
    linhas em branco sao ignoradas.
    """
    with open(file_path, 'r') as f:
        if file_path.endswith('.json'):
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Arquivo '{file_path}' nao e um JSON valido: {e}")
            return [_parse_record(record, idx + 1) for idx, record in enumerate(data)]

        points = []
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            points.append(_parse_record(line.split(','), line_number))
        return points


def _parse_record(record, line_number):
    if not isinstance(record, (list, tuple)) or len(record) != 2:
        raise ValueError(f"Linha {line_number}: esperado 'x,y', recebido {record!r}")
    try:
        return float(record[0]), float(record[1])
    except (TypeError, ValueError):
        raise ValueError(f"Linha {line_number}: coordenada invalida {record!r}")


def generate_random_points(n, seed=None):
    # Pontos no quadrado unitario, mesma escala usada no desenho
    rng = random.Random(seed)
    return [(rng.random(), rng.random()) for _ in range(n)]


def save_points(file_path, points):
    with open(file_path, 'w') as f:
        for x, y in points:
            f.write(f"{x},{y}\n")
    print(f"Gerado: {file_path}")


def main():
    if not os.path.exists("points"):
        os.makedirs("points")

    square = [(0.25, 0.25), (0.25, 0.75), (0.75, 0.75), (0.75, 0.25)]
    save_points(os.path.join("points", "4_nodes.txt"), square)

    # Forca bruta ainda viavel
    save_points(os.path.join("points", "9_nodes.txt"), generate_random_points(9, seed=9))

    # Forca bruta demora bastante
    save_points(os.path.join("points", "11_nodes.txt"), generate_random_points(11, seed=11))

    # So o ACO termina em tempo habil
    save_points(os.path.join("points", "30_nodes.txt"), generate_random_points(30, seed=30))


if __name__ == "__main__":
    main()
