import random

import numpy as np
import pytest

from ukkonen_index.core.edge_table import Edge, EdgeTable
from ukkonen_index.exceptions import (
    ConstructionInvariantError, DuplicateEdgeError, EdgeTableFullError
)

# Text index i holds code i, so an edge's first code equals its first index.
CODES = np.arange(32, dtype=np.int64)


def make_table(modulus=7, max_edges=40):
    return EdgeTable(CODES, modulus=modulus, shift=0, max_edges=max_edges)


def test_insert_and_find():
    table = make_table()
    edge = Edge(0, 1, 3, 9)
    table.insert(edge)
    assert table.find(0, 3) == edge
    assert table.find(0, 4) is None
    assert table.find(1, 3) is None
    assert len(table) == 1


def test_colliding_keys_are_probed():
    table = make_table()
    first, second, third = Edge(0, 1, 0, 5), Edge(7, 2, 0, 5), Edge(1, 3, 0, 5)
    for edge in (first, second, third):
        table.insert(edge)
    # (0, 0) and (7, 0) share home slot 0; (1, 0) is pushed past slot 1.
    assert table.home(0, 0) == table.home(7, 0) == 0
    assert [edge.end_node for edge in table] == [1, 2, 3]
    assert table.find(7, 0) == second
    assert table.find(1, 0) == third


def test_remove_shifts_probe_run_back():
    table = make_table()
    first, second, third = Edge(0, 1, 0, 5), Edge(7, 2, 0, 5), Edge(1, 3, 0, 5)
    for edge in (first, second, third):
        table.insert(edge)
    table.remove(first)
    assert table.find(0, 0) is None
    assert table.find(7, 0) == second
    assert table.find(1, 0) == third
    assert [edge.end_node for edge in table] == [2, 3]
    assert len(table) == 2


def test_remove_keeps_entries_at_their_home():
    table = make_table()
    edges = [Edge(0, 1, 0, 1), Edge(0, 2, 2, 3), Edge(0, 3, 1, 4)]
    for edge in edges:
        table.insert(edge)
    table.remove(edges[0])
    # Slot 1 holds (0, 1) whose home is slot 1, so it must not move into slot 0.
    assert table.find(0, 1) == edges[2]
    assert table.find(0, 2) == edges[1]


def test_remove_across_wraparound():
    table = make_table()
    edges = [Edge(6, 1, 0, 1), Edge(13, 2, 0, 1), Edge(20, 3, 0, 1)]
    for edge in edges:
        table.insert(edge)  # home 6, then slots 0 and 1 after wrapping
    table.remove(edges[0])
    assert table.find(13, 0) == edges[1]
    assert table.find(20, 0) == edges[2]


def test_duplicate_first_character_is_rejected():
    table = make_table()
    table.insert(Edge(0, 1, 3, 5))
    with pytest.raises(DuplicateEdgeError):
        table.insert(Edge(0, 2, 3, 8))


def test_full_table_is_rejected():
    table = make_table(modulus=3)
    table.insert(Edge(0, 1, 0, 1))
    table.insert(Edge(0, 2, 1, 1))
    with pytest.raises(EdgeTableFullError):
        table.insert(Edge(0, 3, 2, 2))


def test_removing_missing_edge_is_an_invariant_error():
    table = make_table()
    with pytest.raises(ConstructionInvariantError):
        table.remove(Edge(0, 1, 0, 1))


def test_children_are_grouped_and_sorted():
    table = make_table(modulus=11)
    for edge in (Edge(0, 1, 9, 9), Edge(0, 2, 4, 6), Edge(2, 3, 7, 8), Edge(0, 4, 5, 5)):
        table.insert(edge)
    children = table.children()
    assert [edge.end_node for edge in children[0]] == [2, 4, 1]
    assert [edge.end_node for edge in children[2]] == [3]
    assert 1 not in children


def test_random_insert_remove_matches_dict_model():
    rng = random.Random(42)
    table = make_table(modulus=23, max_edges=2000)
    model = {}
    next_id = 1
    for _ in range(2000):
        if model and (len(model) >= 18 or rng.random() < 0.45):
            key = rng.choice(sorted(model))
            table.remove(model.pop(key))
        else:
            key = (rng.randrange(40), rng.randrange(len(CODES)))
            if key in model:
                continue
            edge = Edge(key[0], next_id, key[1], key[1])
            next_id += 1
            table.insert(edge)
            model[key] = edge
        assert len(table) == len(model)
        for (node, code), edge in model.items():
            assert table.find(node, code) == edge
    for node in range(40):
        for code in range(len(CODES)):
            if (node, code) not in model:
                assert table.find(node, code) is None


def test_edge_span_and_length():
    edge = Edge(0, 1, 4, 6)
    assert edge.span == 2
    assert len(edge) == 3
    assert "end_node=1" in repr(edge)
