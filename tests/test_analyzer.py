"""Tests for the structural analyzer and dataset statistics."""

import io

from analyzer import DepthFirstSearch, InspectedGraph, Statistics, analyze


class TestDepthFirstSearch:
    """Enter and leave timestamps of the depth-first search."""

    def test_timestamps_follow_recursive_order(self, chain):
        dfs = DepthFirstSearch(chain)
        # the wall node forms a run of its own
        assert (dfs.enter(0), dfs.leave(0)) == (0, 1)
        assert [dfs.enter(i) for i in (1, 2, 3)] == [2, 3, 4]
        assert [dfs.leave(i) for i in (3, 2, 1)] == [5, 6, 7]
        assert dfs.n_runs == 2
        assert dfs.run(0) == 0 and dfs.run(3) == 1

    def test_siblings_are_visited_in_edge_order(self, make_graph):
        graph = make_graph(3, [(1, 3, "A"), (1, 2, "B")])
        dfs = DepthFirstSearch(graph)
        assert dfs.enter(3) < dfs.enter(2)
        assert dfs.leave(3) < dfs.enter(2)

    def test_undirected_search_follows_incoming_edges(self, make_graph):
        graph = make_graph(3, [(2, 1, "A"), (2, 3, "B")])
        assert DepthFirstSearch(graph).n_runs == 3
        assert DepthFirstSearch(graph, undirected=True).n_runs == 2

    def test_back_edge(self, make_graph):
        graph = make_graph(2, [(1, 2, "A"), (2, 1, "B")])
        dfs = DepthFirstSearch(graph)
        forward, backward = graph.edges
        assert not dfs.is_back_edge(forward)
        assert dfs.is_back_edge(backward)

    def test_long_chain(self, make_graph):
        n = 5000
        graph = make_graph(n, [(i, i + 1, "A") for i in range(1, n)])
        dfs = DepthFirstSearch(graph)
        assert dfs.enter(n) == n + 1
        assert dfs.leave(1) == 2 * n + 1


class TestInspectedGraph:
    """Graph-theoretic properties of single graphs."""

    def test_counts(self, make_graph):
        graph = make_graph(5, [(1, 3, "A"), (2, 3, "B"), (3, 4, "C")],
                           tops={1, 2})
        inspected = InspectedGraph(graph)
        assert inspected.n_non_wall_nodes() == 5
        assert inspected.n_singletons() == 1
        assert inspected.is_singleton(5)
        assert inspected.n_root_nodes() == 3
        assert inspected.n_leaf_nodes() == 2
        assert inspected.n_top_nodes() == 2
        assert inspected.n_reentrant_nodes() == 1
        assert inspected.maximal_indegree() == 2
        assert inspected.maximal_outdegree() == 1

    def test_cyclic(self, make_graph):
        assert InspectedGraph(
            make_graph(3, [(1, 2, "A"), (2, 3, "B"), (3, 1, "C")])).is_cyclic()
        assert not InspectedGraph(
            make_graph(3, [(1, 2, "A"), (1, 3, "B"), (2, 3, "C")])).is_cyclic()

    def test_loop_is_cyclic(self, make_graph):
        inspected = InspectedGraph(make_graph(2, [(1, 1, "A")]))
        assert inspected.is_cyclic()
        assert not inspected.is_forest()

    def test_tree(self, make_graph):
        inspected = InspectedGraph(make_graph(3, [(1, 2, "A"), (1, 3, "B")],
                                              tops={1}))
        assert inspected.is_tree()
        assert inspected.is_forest()
        assert not inspected.is_cyclic()

    def test_forest_with_two_roots(self, make_graph):
        inspected = InspectedGraph(make_graph(4, [(1, 2, "A"), (3, 4, "B")]))
        assert inspected.is_forest()
        assert not inspected.is_tree()

    def test_singletons_do_not_count_as_roots_of_a_tree(self, make_graph):
        inspected = InspectedGraph(make_graph(4, [(1, 2, "A")]))
        assert inspected.n_singletons() == 2
        assert inspected.is_tree()

    def test_reentrancy_breaks_forest(self, make_graph):
        inspected = InspectedGraph(make_graph(3, [(1, 3, "A"), (2, 3, "B")]))
        assert not inspected.is_cyclic()
        assert not inspected.is_forest()
        assert not inspected.is_tree()

    def test_tree_implies_forest_implies_acyclic(self, make_graph):
        graphs = [
            make_graph(3, [(1, 2, "A"), (2, 3, "B")]),
            make_graph(3, [(1, 2, "A"), (2, 1, "B")]),
            make_graph(3, [(1, 3, "A"), (2, 3, "B")]),
            make_graph(4, [(1, 2, "A"), (3, 4, "B")]),
            make_graph(3),
        ]
        for graph in graphs:
            inspected = InspectedGraph(graph)
            if inspected.is_tree():
                assert inspected.is_forest()
            if inspected.is_forest():
                assert not inspected.is_cyclic()

    def test_components(self, make_graph):
        # the wall node is a component of its own
        connected = InspectedGraph(make_graph(3, [(1, 2, "A"), (3, 2, "B")],
                                              tops={1}))
        assert connected.n_components() == 2
        assert not connected.is_fragmented()

        split = InspectedGraph(make_graph(4, [(1, 2, "A"), (3, 4, "B")]))
        assert split.n_components() == 3
        assert split.is_fragmented()

    def test_edges_from_the_wall_join_its_component(self, make_graph):
        inspected = InspectedGraph(make_graph(2, [(0, 1, "A"), (1, 2, "B")]))
        assert inspected.n_components() == 1

    def test_singletons_do_not_fragment(self, make_graph):
        inspected = InspectedGraph(make_graph(3, [(1, 2, "A")]))
        assert inspected.n_components() == 3
        assert not inspected.is_fragmented()

    def test_components_of_wall_only_graph(self, make_graph):
        assert InspectedGraph(make_graph(0)).n_components() == 1

    def test_crossing_edges(self, make_graph):
        inspected = InspectedGraph(make_graph(4, [(1, 3, "A"), (2, 4, "B")]))
        assert not inspected.is_noncrossing()
        assert not inspected.is_projective()

    def test_nested_edges_are_noncrossing(self, make_graph):
        inspected = InspectedGraph(make_graph(4, [(1, 4, "A"), (2, 3, "B")]))
        assert inspected.is_noncrossing()

    def test_covered_root_is_not_projective(self, make_graph):
        inspected = InspectedGraph(make_graph(3, [(1, 3, "A"), (2, 3, "B")]))
        assert inspected.is_noncrossing()
        assert not inspected.is_projective()

    def test_covered_singleton_is_projective(self, make_graph):
        inspected = InspectedGraph(make_graph(3, [(1, 3, "A")]))
        assert inspected.is_singleton(2)
        assert inspected.is_projective()

    def test_projective_chain(self, chain):
        assert InspectedGraph(chain).is_projective()

    def test_edgeless_graph(self, edgeless):
        inspected = InspectedGraph(edgeless)
        assert inspected.n_singletons() == 3
        assert not inspected.is_cyclic()
        assert inspected.is_forest()
        assert inspected.is_noncrossing()
        assert inspected.is_projective()
        assert inspected.n_components() == 4

    def test_queries_are_idempotent(self, make_graph):
        graph = make_graph(4, [(1, 3, "A"), (2, 4, "B"), (4, 2, "C")],
                           tops={1})
        inspected = InspectedGraph(graph)
        queries = [inspected.is_cyclic, inspected.is_forest,
                   inspected.is_tree, inspected.is_fragmented,
                   inspected.is_noncrossing, inspected.is_projective,
                   inspected.n_components, inspected.n_singletons,
                   inspected.n_root_nodes, inspected.maximal_indegree]
        first = [query() for query in queries]
        second = [query() for query in queries]
        assert first == second
        assert len(graph.edges) == 3


class TestStatistics:
    """Aggregate statistics over a collection of graphs."""

    def test_report(self, make_graph, chain):
        statistics = Statistics()
        statistics.update(chain)
        statistics.update(make_graph(4, [(1, 3, "A"), (2, 4, "B")]))
        json = statistics.report()
        assert json["graphs"] == 2
        assert json["nodes"] == 7
        assert json["edges"] == 4
        assert json["labels"] == 4
        assert json["trees"] == 0.5
        assert json["noncrossing"] == 0.5
        assert json["topless"] == 0.5
        assert json["tops"] == 0.5
        assert json["indegree"] == 1

    def test_empty_collection(self):
        json = Statistics().report()
        assert json["graphs"] == 0
        assert json["density"] is None
        assert json["cyclic"] is None

    def test_analyze_prints_numbered_lines(self, chain, edgeless):
        stream = io.StringIO()
        json = analyze([chain, edgeless], stream=stream)
        lines = stream.getvalue().splitlines()
        assert lines[0] == "(01)\tnumber of graphs\t2"
        assert lines[1] == "(02)\tnumber of non-wall nodes\t6"
        assert json["singletons"] == 0.5
        assert lines[3].endswith("\t50.00")

    def test_analyze_empty_input(self):
        stream = io.StringIO()
        analyze([], stream=stream)
        lines = stream.getvalue().splitlines()
        assert lines[0].endswith("\t0")
        assert lines[3].endswith("\t--")
