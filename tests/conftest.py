"""Shared fixtures for the graph, analyzer and scorer tests."""

import pytest

from graph import Graph


def build(n, edges=(), tops=(), preds=None, pos=None, senses=None,
          id="#20001001"):
    """A graph over n tokens with the given (src, tgt, lab) edges.

    Unless preds is given, every edge source is flagged as a predicate.
    """
    if preds is None:
        preds = {src for src, _, _ in edges if src != 0}
    pos = pos or {}
    senses = senses or {}
    graph = Graph(id)
    for i in range(1, n + 1):
        graph.add_node(form="w%d" % i, lemma="w%d" % i,
                       pos=pos.get(i, "NN"), top=i in tops,
                       pred=i in preds, sense=senses.get(i))
    for src, tgt, lab in edges:
        graph.add_edge(src, tgt, lab)
    return graph


@pytest.fixture
def make_graph():
    """Factory for small graphs, see build()."""
    return build


@pytest.fixture
def chain():
    """1 -> 2 -> 3, with node 1 as the only top."""
    return build(3, [(1, 2, "X"), (2, 3, "Y")], tops={1})


@pytest.fixture
def edgeless():
    """Three tokens and no edges at all."""
    return build(3)


SDP2015 = """#SDP 2015
#20001001
1\tMs.\tMs.\tNNP\t-\t+\t_\t_\t_
2\tHaag\tHaag\tNNP\t-\t-\t_\tcompound\tARG1
3\tplays\tplay\tVBZ\t+\t+\tv:e-i-p\t_\t_

"""

SDP2014 = """#20001001
1\tMs.\tMs.\tNNP\t-\t+\t_\t_
2\tHaag\tHaag\tNNP\t-\t-\tcompound\tARG1
3\tplays\tplay\tVBZ\t+\t+\t_\t_

"""


@pytest.fixture
def sdp2015():
    return SDP2015


@pytest.fixture
def sdp2014():
    return SDP2014
