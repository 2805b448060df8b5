import io
import random

import pytest

from edaulas.avl import insert_left, rotate_right
from edaulas.bst import pre_order, sample_tree
from edaulas.cli import main
from edaulas.grades import Student, average, row_averages
from edaulas.graphs import CaveSystem, bfs, random_adjacency
from edaulas.searching import binary_search, descending_values
from edaulas.simple_sorts import format_values
from edaulas.words import FRUITS, binary_search_words, compare_ordinal, sort_words


def run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    status = main(argv)
    return status, capsys.readouterr().out


def values_after(output, prefix):
    for line in output.splitlines():
        if line.startswith(prefix):
            return [int(token) for token in line[len(prefix):].split()]
    raise AssertionError(f"no line starting with {prefix!r}")


def test_tree_pre_order(monkeypatch, capsys):
    status, out = run(monkeypatch, capsys, ["arvores"], "1\n0\n")
    expected = "".join(f"{v} \t" for v in pre_order(sample_tree()))
    assert status == 0
    assert "\nCaminhamento Pre-Ordem:\n" + expected in out


def test_tree_search_runs_on_into_avl_and_exit_message(monkeypatch, capsys):
    status, out = run(monkeypatch, capsys, ["arvores"], "4\n40\n0\n")
    assert "Valor 40 encontrado na árvore." in out
    assert "Arvore AVL (Em-Ordem):" in out
    assert out.count("Saindo do programa...") == 2


def test_tree_search_missing(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["arvores"], "4\n99\n0\n")
    assert "Valor 99 não encontrado na árvore." in out


def test_tree_invalid_option(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["arvores"], "9\nabc\n0\n")
    assert out.count("Opcao invalida! Tente novamente.") == 2


def test_rotation_right(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["rotacoes"], "1\n3\n1\n2\n1\n1\n2\n0\n")
    root = None
    for value in (3, 2, 1):
        root = insert_left(root, value)
    expected = format_values(list(pre_order(rotate_right(root))))
    assert "Rotacao Simples a Direita aplicada!\n" + expected in out


def test_rotation_left_rejected_on_left_skewed_tree(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["rotacoes"], "1\n3\n1\n2\n3\n0\n")
    assert "Nao e possivel aplicar rotacao, arvore invalida!" in out


@pytest.mark.parametrize("option", ["1", "2", "3", "4"])
def test_simple_sorts_sort_generated_values(monkeypatch, capsys, option):
    _, out = run(monkeypatch, capsys, ["ordenacao", "--seed", "3"], f"{option}\n0\n")
    before = values_after(out, "Array antes da ordenacao: ")
    after = values_after(out, "Array apos a ordenacao: ")
    assert len(before) == 10
    assert after == sorted(before)


def test_seed_makes_runs_repeatable(monkeypatch, capsys):
    _, first = run(monkeypatch, capsys, ["ordenacao", "--seed", "11"], "1\n0\n")
    _, second = run(monkeypatch, capsys, ["ordenacao", "--seed", "11"], "1\n0\n")
    assert first == second


def test_shell_bars_end_sorted(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["shellsort", "--seed", "4"], "3\n0\n")
    tail = out.split("Vetor Ordenado:\n")[1].splitlines()[:10]
    numbers = [int(line.split(":")[0]) for line in tail]
    assert numbers == sorted(numbers)
    assert ">>> GAP = 1" in out


def test_advanced_sort_random(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["ordenacao-avancada", "--seed", "1"], "1\n6\n4\n0\n")
    generated = [int(t) for t in out.split("Novo array gerado com sucesso!\n")[1].splitlines()[0].split()]
    ordered = values_after(out, "Array ordenado: ")
    assert ordered == sorted(generated)
    assert "Tempo de execucao:" in out


def test_advanced_sort_worst_case_hides_array(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["ordenacao-avancada"], "2\n5\n3\n0\n")
    assert "Ordenando com Mergesort..." in out
    assert "Array ordenado:" not in out


def test_advanced_sort_rejects_bad_size(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["ordenacao-avancada"], "1\n0\n0\n")
    assert "Numero invalido! Tente novamente." in out


def test_search_needs_vector(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["busca"], "1\n0\n")
    assert "Você precisa gerar um vetor primeiro! Use a opção 6." in out
    assert out.endswith("Encerrando...\n")


def test_binary_search_option(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["busca"], "6\n10\n3\n7\n0\n")
    expected = binary_search(descending_values(10), 7).index
    assert f"Valor encontrado na posicao {expected}" in out


def test_sequential_search_missing(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["busca"], "6\n10\n1\n50\n0\n")
    assert "Valor NAO encontrado." in out


def test_word_search_by_code(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["busca"], "6\n3\n5\nuva\n0\n")
    expected = binary_search_words(sort_words(FRUITS, compare_ordinal), "uva", compare_ordinal)
    assert f"Palavra encontrada na posicao {expected}" in out


def test_negative_vector_size_fails(monkeypatch, capsys):
    status, out = run(monkeypatch, capsys, ["busca"], "6\n-1\n")
    assert status == 1
    assert "Erro de alocacao!" in out


def test_vector_average(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["registros"], "1\n1 2 3 4 5\n0\n")
    assert f"Media dos valores: {average([1, 2, 3, 4, 5]):.2f}" in out
    assert out.endswith("Saindo do programa. Obrigado!\n")


def test_matrix_averages(monkeypatch, capsys):
    rows = [[1.0, 2.0, 3.0, 4.0], [5.0, 5.0, 5.0, 5.0], [0.0, 10.0, 2.5, 7.5]]
    text = "2\n" + "\n".join(" ".join(str(v) for v in row) for row in rows) + "\n0\n"
    _, out = run(monkeypatch, capsys, ["registros"], text)
    for number, mean in enumerate(row_averages(rows), start=1):
        assert f"Aluno {number}: {mean:.2f}" in out


def test_record(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["registros"], "3\nAna 20 1234 7 8 9 10 6.5\n0\n")
    assert Student("Ana", 20, 1234, [7, 8, 9, 10, 6.5]).describe() in out


def test_bad_number_reports_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\nAna vinte\n"))
    status = main(["registros"])
    assert status == 1
    assert "Entrada invalida." in capsys.readouterr().err


def test_bfs_example(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["grafos", "--seed", "5"], "1\n0\n")
    visited = [int(line.split()[-1]) for line in out.splitlines() if line.startswith("Visitando vertice")]
    assert visited == bfs(random_adjacency(rng=random.Random(5)), 0)


def test_dijkstra_example(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["grafos", "--seed", "8"], "2\n1\n3\n0\n5\n0\n0\n")
    caves = CaveSystem()
    caves.create_random_passages(random.Random(8))
    result = caves.shortest_path(0, 5)
    assert f"Peso total do caminho: {result.total_weight}" in out
    assert "Caminho: " + format_values(result.path[::-1]) in out


def test_dijkstra_invalid_caves(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["grafos"], "2\n3\n25\n0\n0\n0\n")
    assert "Cavernas invalidas!" in out


def test_dijkstra_edges_empty_before_creation(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["grafos"], "2\n2\n0\n0\n")
    assert "Nos e arestas do sistema de cavernas:" in out
    assert "Caverna 0 ->" not in out


def test_lesson_chooser_exits(monkeypatch, capsys):
    status, out = run(monkeypatch, capsys, [], "0\n")
    assert status == 0
    assert "=== AULAS ===" in out


def test_end_of_input_exits_cleanly(monkeypatch, capsys):
    status, _ = run(monkeypatch, capsys, ["ordenacao"], "")
    assert status == 0


def test_unknown_lesson_rejected(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit):
        main(["nada"])