"""Interactive menus for every lesson: trees, sorting, searching, graphs and basic records."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections import deque
from typing import Callable, Iterable, NamedTuple, Optional, TextIO

from edaulas.advanced_sorts import heap_sort, merge_sort, quick_sort
from edaulas.avl import insert_avl, insert_left, rotate_left, rotate_left_right, rotate_right, rotate_right_left
from edaulas.bst import SAMPLE_VALUES, in_order, post_order, pre_order, sample_tree, search
from edaulas.grades import NUM_STUDENTS, NUM_SUBJECTS, GRADES_PER_STUDENT, VECTOR_SIZE, Student, average
from edaulas.graphs import NUM_VERTICES, CaveSystem, bfs, random_adjacency
from edaulas.searching import binary_search, descending_values, exchange_sort, indexed_search, sequential_search
from edaulas.shell import compare_shell_insertion, knuth_gaps, render_bars, shell_sort, shell_sort_steps
from edaulas.simple_sorts import (
    bubble_sort,
    cocktail_shaker_sort,
    format_values,
    insertion_sort,
    random_values,
    selection_sort,
)
from edaulas.words import FRUITS, binary_search_words, compare_ordinal, compare_words, sort_words

MAX_ELEMENTS = 100000
UNREACHABLE = 2147483647


class _Console:
    """Reads whitespace-separated tokens from a stream and writes text to another."""

    def __init__(self, stream: TextIO, out: TextIO) -> None:
        self._stream = stream
        self._out = out
        self._tokens: deque[str] = deque()

    def write(self, text: str) -> None:
        self._out.write(text)

    def _next(self) -> str:
        while not self._tokens:
            self._out.flush()
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def read_int(self) -> int:
        return int(self._next())

    def read_float(self) -> float:
        return float(self._next())

    def read_word(self) -> str:
        return self._next()

    def read_option(self) -> Optional[int]:
        token = self._next()
        try:
            return int(token)
        except ValueError:
            return None


def _tabbed(values: Iterable[int]) -> str:
    return "".join(f"{value} \t" for value in values)


# Binary search tree traversals and search.

_TREE_MENU = (
    "\n======= MENU =======\n"
    "1 - Caminhamento Pre-Ordem\n"
    "2 - Caminhamento Em-Ordem\n"
    "3 - Caminhamento Pos-Ordem\n"
    "123 - Comparacao dos Caminhamentos\n"
    "4 - Busca Arvore Binaria \n"
    "5 - Busca Arvore Balanceada \n"
    "0 - Sair\n"
    "====================\n"
    "Escolha uma opcao: "
)


def _tree_lesson(con: _Console, rng: random.Random) -> int:
    def traversal(order) -> str:
        return _tabbed(order(sample_tree())) + "\n"

    while True:
        con.write(_TREE_MENU)
        option = con.read_option()
        if option == 1:
            con.write("\nCaminhamento Pre-Ordem:\n" + traversal(pre_order) + "\n")
        elif option == 2:
            con.write("\nCaminhamento Em-Ordem:\n" + traversal(in_order) + "\n")
        elif option == 3:
            con.write("\nCaminhamento Pos-Ordem:\n" + traversal(post_order) + "\n")
        elif option == 123:
            con.write("\nComparacao dos Caminhamentos:\n")
            con.write("Pre-Ordem: " + traversal(pre_order))
            con.write("\nEm-Ordem: " + traversal(in_order))
            con.write("\nPos-Ordem: " + traversal(post_order) + "\n")
        elif option in (4, 5, 0):
            # Options 4 and 5 run on into the following ones, as the menu always has.
            if option == 4:
                con.write("Busca Arvore Binaria \n")
                con.write("Digite um numero para buscar na arvore: ")
                wanted = con.read_int()
                node = search(sample_tree(), wanted)
                if node is not None:
                    con.write(f"Valor {node.value} encontrado na árvore.\n")
                else:
                    con.write(f"Valor {wanted} não encontrado na árvore.\n")
                con.write("\n")
            if option in (4, 5):
                root = None
                for value in SAMPLE_VALUES:
                    root = insert_avl(root, value)
                con.write("Busca Arvore Balanceada\n")
                con.write("Arvore AVL (Em-Ordem):\n" + _tabbed(in_order(root)) + "\n")
                con.write("\n")
            con.write("Saindo do programa...\n")
        else:
            con.write("Opcao invalida! Tente novamente.\n")
        if option == 0:
            return 0


# AVL rotations on a left-skewed tree.

_ROTATION_MENU = (
    "\n=== MENU ===\n"
    "1 - Inserir em Arvore Normal (Desbalanceada)\n"
    "2 - Aplicar Rotacao Simples a Direita \n"
    "3 - Aplicar Rotacao Simples a Esquerda \n"
    "4 - Aplicar Rotacao Dupla Esquerda-Direita \n"
    "5 - Aplicar Rotacao Dupla Direita-Esquerda \n"
    "0 - Sair\n"
    "Escolha uma opcao: "
)

_ROTATIONS = {
    2: ("left", rotate_right, "Rotacao Simples a Direita aplicada!"),
    3: ("right", rotate_left, "Rotacao Simples a Esquerda aplicada!"),
    4: ("left", rotate_left_right, "Rotacao Dupla Esquerda-Direita aplicada!"),
    5: ("right", rotate_right_left, "Rotacao Dupla Direita-Esquerda aplicada!"),
}


def _rotation_lesson(con: _Console, rng: random.Random) -> int:
    root = None
    while True:
        con.write(_ROTATION_MENU)
        option = con.read_option()
        if option == 1:
            con.write("Digite um valor para inserir: ")
            root = insert_left(root, con.read_int())
            con.write("\nArvore atual (Pre-Ordem): " + format_values(list(pre_order(root))) + "\n")
        elif option in _ROTATIONS:
            side, rotation, message = _ROTATIONS[option]
            if root is not None and getattr(root, side) is not None:
                root = rotation(root)
                con.write(f"\n{message}\n")
            else:
                con.write("\nNao e possivel aplicar rotacao, arvore invalida!\n")
            con.write(format_values(list(pre_order(root))))
        elif option == 0:
            con.write("\nSaindo...\n")
            return 0
        else:
            con.write("\nOpcao invalida!\n")


# Elementary sorts.

_SIMPLE_SORT_MENU = (
    "\n=== MENU DE ORDENACAO ===\n"
    "1 - Executar Bubble Sort\n"
    "2 - Executar Selection Sort\n"
    "3 - Executar Insertion Sort\n"
    "4 - Executar Cocktail Shaker Sort\n"
    "0 - Sair\n"
    "Escolha uma opcao: "
)

_SIMPLE_SORTS: dict[int, tuple[str, Callable[[Iterable[int]], list[int]]]] = {
    1: ("Bubble Sort", bubble_sort),
    2: ("Selection Sort", selection_sort),
    3: ("Insertion Sort", insertion_sort),
    4: ("Cocktail Shaker Sort", cocktail_shaker_sort),
}


def _simple_sort_lesson(con: _Console, rng: random.Random) -> int:
    while True:
        con.write(_SIMPLE_SORT_MENU)
        option = con.read_option()
        if option in _SIMPLE_SORTS:
            name, sort = _SIMPLE_SORTS[option]
            con.write(f"\nExecutando {name}...\n")
            con.write("Gerando lista de numeros aleatorios...\n")
            values = random_values(rng=rng)
            con.write("\nArray antes da ordenacao: " + format_values(values) + "\n")
            con.write("Array apos a ordenacao: " + format_values(sort(values)) + "\n")
        elif option == 0:
            con.write("\nSaindo do programa...\n")
            return 0
        else:
            con.write("\nOpcao invalida! Escolha novamente.\n")


# Shell sort.

_SHELL_MENU = (
    "\n=== COMPARACAO DE ALGORITMOS DE ORDENACAO ===\n"
    "1 - Executar apenas o ShellSort\n"
    "2 - Comparar ShellSort com InsertionSort\n"
    "3 - Exemplo com barras\n"
    "0 - Sair do programa\n"
    "Escolha uma opcao: "
)


def _bracketed(values: Iterable[int]) -> str:
    return "[ " + "".join(f"{value} " for value in values) + "]\n"


def _shell_only(con: _Console, rng: random.Random) -> None:
    values = [rng.randrange(100) for _ in range(10)]
    con.write("Vetor original:\n" + _bracketed(values))
    run = shell_sort(values)
    con.write("\nVetor ordenado com ShellSort:\n" + _bracketed(run.values))
    con.write(f"\nTotal de iteracoes: {run.iterations}\n")


def _shell_versus_insertion(con: _Console, rng: random.Random) -> None:
    shell, insertion = compare_shell_insertion(rng=rng)
    con.write("ShellSort:\n")
    con.write(f"Tempo de execucao: {shell.seconds:.4f} segundos\n")
    con.write(f"Iteracoes: {shell.iterations}\n\n")
    con.write("InsertionSort:\n")
    con.write(f"Tempo de execucao: {insertion.seconds:.4f} segundos\n")
    con.write(f"Iteracoes: {insertion.iterations}\n")


def _shell_bars(con: _Console, rng: random.Random) -> None:
    values = [rng.randrange(20) + 1 for _ in range(10)]
    con.write(render_bars(values, "Vetor Original:"))
    final = list(values)
    current_gap = None
    for gap, index, snapshot in shell_sort_steps(values):
        if gap != current_gap:
            con.write(f"\n>>> GAP = {gap}\n")
            current_gap = gap
        con.write(render_bars(snapshot, f"Passo (gap={gap}, i={index}):"))
        final = snapshot
    con.write(render_bars(final, "Vetor Ordenado:"))


def _shell_lesson(con: _Console, rng: random.Random) -> int:
    while True:
        con.write(_SHELL_MENU)
        option = con.read_option()
        if option == 1:
            _shell_only(con, rng)
        elif option == 2:
            _shell_versus_insertion(con, rng)
        elif option == 3:
            _shell_bars(con, rng)
        elif option == 0:
            con.write("Encerrando o programa...\n")
            return 0
        else:
            con.write("Opcao invalida. Por favor, tente novamente.\n")


# Merge sort, quicksort and heapsort with timing.

_ADVANCED_MENU = (
    "\nEscolha o algoritmo de ordenacao:\n"
    "1. Criar novo array aleatorio\n"
    "2. Criar array no pior caso (decrescente)\n"
    "3. Mergesort\n"
    "4. Quicksort\n"
    "5. Heapsort\n"
    "0. Sair\n"
    "Escolha: "
)

_ADVANCED_SORTS: dict[int, tuple[str, Callable[[Iterable[int]], list[int]]]] = {
    3: ("Mergesort", merge_sort),
    4: ("Quicksort", quick_sort),
    5: ("Heapsort", heap_sort),
}


def _advanced_sort_lesson(con: _Console, rng: random.Random) -> int:
    original: list[int] = []
    show = True
    while True:
        con.write(_ADVANCED_MENU)
        option = con.read_option()
        if option == 0:
            return 0
        if option in (1, 2):
            con.write(f"\nDigite o numero de elementos (max {MAX_ELEMENTS}): ")
            count = con.read_int()
            if not 0 < count <= MAX_ELEMENTS:
                con.write("Numero invalido! Tente novamente.\n")
                continue
            if option == 1:
                original = [rng.randrange(1000) for _ in range(count)]
                show = True
                con.write("\nNovo array gerado com sucesso!\n")
                con.write(format_values(original) + "\n")
            else:
                original = descending_values(count)
                con.write("\nArray no pior caso (decrescente) gerado com sucesso!\n")
                show = False
        elif option in _ADVANCED_SORTS:
            name, sort = _ADVANCED_SORTS[option]
            start = time.perf_counter()
            con.write(f"\nOrdenando com {name}...\n")
            result = sort(original)
            elapsed = time.perf_counter() - start
            if show:
                con.write("\nArray ordenado: " + format_values(result) + "\n")
            con.write(f"Tempo de execucao: {elapsed:.6f} segundos\n")
        else:
            con.write("\nOpcao invalida! Tente novamente.\n")


# Searching.

_SEARCH_MENU = (
    "\n===== MENU DE BUSCA =====\n"
    "1 - Busca Sequencial\n"
    "2 - Busca Sequencial Indexada\n"
    "3 - Busca Binaria\n"
    "4 - Busca Binaria Palavras Manual\n"
    "5 - Busca Binaria Palavras Funcoes\n"
    "6 - Gerar novo vetor decrescente\n"
    "0 - Sair\n"
    "Escolha uma opcao: "
)


def _word_search(con: _Console, compare, sorted_title: str, missing: str) -> None:
    con.write("Palavras antes da ordenacao:\n" + "".join(f"{word}\n" for word in FRUITS))
    words = sort_words(FRUITS, compare)
    con.write(f"\n{sorted_title}\n" + "".join(f"{word}\n" for word in words))
    con.write("\nDigite a palavra a ser buscada: ")
    target = con.read_word()
    start = time.perf_counter()
    position = binary_search_words(words, target, compare)
    con.write(f"Tempo gasto: {time.perf_counter() - start:.6f} segundos\n")
    if position is not None:
        con.write(f"Palavra encontrada na posicao {position}\n")
    else:
        con.write(missing)


def _search_lesson(con: _Console, rng: random.Random) -> int:
    values: Optional[list[int]] = None
    while True:
        con.write(_SEARCH_MENU)
        option = con.read_option()
        if option == 0:
            break
        if option == 6:
            con.write("Digite a quantidade de elementos a gerar: ")
            size = con.read_int()
            if size < 0:
                con.write("Erro de alocacao!\n")
                return 1
            values = descending_values(size)
            con.write("Vetor gerado (decrescente): ")
            continue
        if values is None:
            con.write("Você precisa gerar um vetor primeiro! Use a opção 6.\n")
            continue
        if option in (1, 2, 3):
            con.write("Digite o valor a ser buscado: ")
            target = con.read_int()
            if option == 1:
                result = sequential_search(values, target)
            elif option == 2:
                result = indexed_search(values, target)
            else:
                values = exchange_sort(values)
                result = binary_search(values, target)
            values = result.values
            con.write(f"Tempo gasto: {result.milliseconds:.3f} ms\n")
            if result.found:
                con.write(f"Valor encontrado na posicao {result.index}\n")
            else:
                con.write("Valor NAO encontrado.\n")
        elif option == 4:
            _word_search(
                con, compare_words, "Palavras apos a ordenacao manual:", "Palavra NAO encontrada.\n"
            )
        elif option == 5:
            _word_search(
                con, compare_ordinal, "Palavras apos a ordenacao:", "Palavra NAO encontrada no vetor.\n"
            )
        else:
            con.write("Opcao invalida!\n")
    con.write("Encerrando...\n")
    return 0


# Vectors, matrices and records.

_BASICS_MENU = (
    "\nMenu:\n"
    "1. Funcao Vetor\n"
    "2. Funcao Matriz\n"
    "3. Funcao Registro\n"
    "0. Sair\n"
    "Escolha uma opcao: "
)


def _vector_example(con: _Console) -> None:
    con.write("Iniciando Vetor\n")
    con.write(f"Digite {VECTOR_SIZE} numeros:\n")
    numbers = []
    for position in range(1, VECTOR_SIZE + 1):
        con.write(f"Numero {position}: ")
        numbers.append(con.read_int())
    con.write("\nValores do vetor:\n" + format_values(numbers))
    con.write(f"\n\nMedia dos valores: {average(numbers):.2f}\n")


def _matrix_example(con: _Console) -> None:
    con.write("Iniciando Matriz\n")
    con.write("Digite as notas dos alunos:\n")
    grades = []
    for student in range(1, NUM_STUDENTS + 1):
        con.write(f"Aluno {student}:\n")
        row = []
        for subject in range(1, NUM_SUBJECTS + 1):
            con.write(f"Nota da disciplina {subject}: ")
            row.append(con.read_float())
        grades.append(row)
    con.write("\nMedia de cada aluno:\n")
    for student, row in enumerate(grades, start=1):
        con.write(f"Aluno {student}: {average(row):.2f}\n")


def _record_example(con: _Console) -> None:
    con.write("Iniciando Registro\n")
    con.write("Digite o nome do estudante: ")
    name = con.read_word()
    con.write("Digite a idade do estudante: ")
    age = con.read_int()
    con.write("Digite o numero de identificacao do estudante: ")
    id_number = con.read_int()
    con.write(f"Digite as notas do estudante em {GRADES_PER_STUDENT} disciplinas:\n")
    grades = []
    for subject in range(1, GRADES_PER_STUDENT + 1):
        con.write(f"Nota da disciplina {subject}: ")
        grades.append(con.read_float())
    con.write(Student(name, age, id_number, grades).describe())


def _basics_lesson(con: _Console, rng: random.Random) -> int:
    con.write("Iniciando o programa\n")
    while True:
        con.write(_BASICS_MENU)
        option = con.read_option()
        if option == 1:
            _vector_example(con)
        elif option == 2:
            _matrix_example(con)
        elif option == 3:
            _record_example(con)
        elif option == 0:
            con.write("Saindo do programa. Obrigado!\n")
            return 0
        else:
            con.write("Opcao invalida. Por favor, escolha uma opcao valida.\n")


# Graphs.

_GRAPH_MENU = (
    "\nMenu:\n"
    "1. Exemplo BFS\n"
    "2. Exemplo Dijkstra\n"
    "0. Sair\n"
    "Escolha uma opcao: "
)

_CAVE_MENU = (
    "\nSistema de Navegacao em Cavernas:\n"
    "1. Criar Sistema de Cavernas\n"
    "2. Exibir Nos e Arestas\n"
    "3. Calcular Menor Distancia\n"
    "0. Sair\n"
    "Escolha uma opcao: "
)


def _bfs_example(con: _Console, rng: random.Random) -> None:
    matrix = random_adjacency(NUM_VERTICES, rng)
    con.write("Resultado da Busca em Largura (BFS):\n")
    con.write("".join(f"Visitando vertice {vertex}\n" for vertex in bfs(matrix, 0)))
    con.write("\nPressione Enter para voltar ao menu principal...\n")


def _shortest_path(con: _Console, caves: CaveSystem) -> None:
    con.write("Digite a caverna de origem: ")
    origin = con.read_int()
    con.write("Digite a caverna de destino: ")
    destination = con.read_int()
    if not (0 <= origin < caves.size and 0 <= destination < caves.size):
        con.write("Cavernas invalidas!\n")
        return
    result = caves.shortest_path(origin, destination)
    distance = UNREACHABLE if result.distance is None else result.distance
    con.write(f"Menor distancia da caverna {origin} para caverna {destination}: peso {distance}\n")
    con.write("Caminho: " + format_values(result.path[::-1]) + "\n")
    con.write("Pesos das arestas no caminho:\n")
    for before, after, weight in reversed(result.steps):
        con.write(f"Peso entre caverna {before} e caverna {after}: {weight}\n")
    con.write(f"Peso total do caminho: {result.total_weight}\n")


def _dijkstra_example(con: _Console, rng: random.Random) -> None:
    caves = CaveSystem()
    while True:
        con.write(_CAVE_MENU)
        option = con.read_option()
        if option == 1:
            caves = CaveSystem()
            caves.create_random_passages(rng)
            con.write("Sistema de cavernas criado com sucesso!\n")
        elif option == 2:
            con.write("Nos e arestas do sistema de cavernas:\n")
            for origin, destination, weight in caves.edges():
                con.write(f"Caverna {origin} -> Caverna {destination} com peso {weight}\n")
        elif option == 3:
            _shortest_path(con, caves)
        elif option == 0:
            con.write("Saindo...\n")
            return
        else:
            con.write("Opcao invalida!\n")


def _graph_lesson(con: _Console, rng: random.Random) -> int:
    while True:
        con.write(_GRAPH_MENU)
        option = con.read_option()
        if option == 1:
            _bfs_example(con, rng)
        elif option == 2:
            _dijkstra_example(con, rng)
        elif option == 0:
            con.write("Saindo...\n")
            return 0
        else:
            con.write("Opcao invalida!\n")


class _Lesson(NamedTuple):
    title: str
    run: Callable[[_Console, random.Random], int]


LESSONS: dict[str, _Lesson] = {
    "registros": _Lesson("Vetores, matrizes e registros", _basics_lesson),
    "arvores": _Lesson("Caminhamentos e busca em arvores", _tree_lesson),
    "rotacoes": _Lesson("Rotacoes AVL", _rotation_lesson),
    "ordenacao": _Lesson("Ordenacoes elementares", _simple_sort_lesson),
    "shellsort": _Lesson("ShellSort", _shell_lesson),
    "ordenacao-avancada": _Lesson("Mergesort, Quicksort e Heapsort", _advanced_sort_lesson),
    "busca": _Lesson("Algoritmos de busca", _search_lesson),
    "grafos": _Lesson("BFS e Dijkstra", _graph_lesson),
}


def _choose_lesson(con: _Console, rng: random.Random) -> int:
    names = list(LESSONS)
    menu = "\n=== AULAS ===\n" + "".join(
        f"{number} - {LESSONS[name].title}\n" for number, name in enumerate(names, start=1)
    ) + "0 - Sair\nEscolha uma opcao: "
    while True:
        con.write(menu)
        option = con.read_option()
        if option == 0:
            return 0
        if option is not None and 1 <= option <= len(names):
            status = LESSONS[names[option - 1]].run(con, rng)
            if status:
                return status
        else:
            con.write("Opcao invalida!\n")


def main(argv: Optional[list[str]] = None) -> int:
    """Run one lesson's menu, or a menu of all lessons when none is named."""
    parser = argparse.ArgumentParser(prog="edaulas", description="Data structure lessons.")
    parser.add_argument("lesson", nargs="?", choices=list(LESSONS), help="lesson to open")
    parser.add_argument("--seed", type=int, default=None, help="seed for random data")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    con = _Console(sys.stdin, sys.stdout)
    try:
        if args.lesson is None:
            return _choose_lesson(con, rng)
        return LESSONS[args.lesson].run(con, rng)
    except EOFError:
        return 0
    except ValueError:
        print("Entrada invalida.", file=sys.stderr)
        return 1
    finally:
        sys.stdout.flush()


if __name__ == "__main__":
    sys.exit(main())