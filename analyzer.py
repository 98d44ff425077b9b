# Semantic Dependency Graph Analyzer

import itertools
import sys


class DepthFirstSearch(object):

    def __init__(self, graph, undirected=False):
        self._graph = graph
        self._undirected = undirected

        self._enter = dict()
        self._leave = dict()
        self._run = dict()
        self.n_runs = 0

        timestamp = itertools.count()
        for node in self._graph.nodes:
            if not node.id in self._enter:
                self._compute_timestamps(node.id, timestamp)
                self.n_runs += 1

    def _successors(self, node):
        node = self._graph.find_node(node)
        for edge in node.outgoing_edges:
            yield edge.tgt
        if self._undirected:
            for edge in node.incoming_edges:
                yield edge.src

    def _compute_timestamps(self, start, timestamp):
        # iterative rendition of the recursive search; a node is entered when
        # first pushed and left once its successor iterator is exhausted, which
        # yields the same preorder and postorder numbering.
        self._visit(start, timestamp)
        stack = [(start, self._successors(start))]
        while stack:
            node, successors = stack[-1]
            for successor in successors:
                if not successor in self._enter:
                    self._visit(successor, timestamp)
                    stack.append((successor, self._successors(successor)))
                    break
            else:
                stack.pop()
                self._leave[node] = next(timestamp)

    def _visit(self, node, timestamp):
        self._run[node] = self.n_runs
        self._enter[node] = next(timestamp)

    def enter(self, node):
        return self._enter[node]

    def leave(self, node):
        return self._leave[node]

    def run(self, node):
        return self._run[node]

    def is_back_edge(self, edge):
        return \
            self._enter[edge.tgt] < self._enter[edge.src] and \
            self._leave[edge.src] < self._leave[edge.tgt]


class InspectedGraph(object):

    def __init__(self, graph):
        self.graph = graph
        self.n_nodes = len(graph.nodes)
        self._singletons = {node.id for node in graph.nodes
                            if node.is_singleton()}
        self.dfs = DepthFirstSearch(graph)
        self.undirected_dfs = DepthFirstSearch(graph, undirected=True)

    def n_non_wall_nodes(self):
        return self.n_nodes - 1

    def is_singleton(self, id):
        return id in self._singletons

    def n_singletons(self):
        return len(self._singletons)

    def n_root_nodes(self):
        return sum(1 for node in self.graph.nodes
                   if node.is_root() and not node.is_wall())

    def n_leaf_nodes(self):
        return sum(1 for node in self.graph.nodes
                   if node.is_leaf() and not node.is_wall())

    def n_top_nodes(self):
        return sum(1 for node in self.graph.nodes if node.is_top)

    def n_reentrant_nodes(self):
        return sum(1 for node in self.graph.nodes if node.indegree() > 1)

    def maximal_indegree(self):
        return max((node.indegree() for node in self.graph.nodes), default=0)

    def maximal_outdegree(self):
        return max((node.outdegree() for node in self.graph.nodes), default=0)

    def n_components(self):
        # the wall node and every singleton are components of their own
        return self.undirected_dfs.n_runs

    def is_fragmented(self):
        return self.n_components() - 1 - self.n_singletons() != 1

    def is_cyclic(self):
        for edge in self.graph.edges:
            if edge.is_loop() or self.dfs.is_back_edge(edge):
                return True
        return False

    def is_forest(self):
        return not self.is_cyclic() and self.maximal_indegree() <= 1

    def is_tree(self):
        return self.is_forest() \
            and self.n_root_nodes() - self.n_singletons() == 1

    def _crossing_pairs(self):
        for edge1 in self.graph.edges:
            min1, max1 = edge1.endpoints()
            for edge2 in self.graph.edges:
                min2, max2 = edge2.endpoints()
                if min1 < min2 and min2 < max1 and max1 < max2:
                    yield (min1, max1), (min2, max2)

    def is_noncrossing(self):
        for _, _ in self._crossing_pairs():
            return False
        return True

    def is_projective(self):
        if not self.is_noncrossing():
            return False
        for edge in self.graph.edges:
            for i in range(edge.min() + 1, edge.max()):
                if not self.is_singleton(i) and self.graph.nodes[i].is_root():
                    return False
        return True


class Statistics(object):

    def __init__(self):
        self.n_graphs = 0
        self.n_nodes = 0
        self.n_edges = 0
        self.labels = set()
        self.n_singletons = 0
        self.n_cyclic = 0
        self.n_forests = 0
        self.n_trees = 0
        self.n_fragmented = 0
        self.n_noncrossing = 0
        self.n_projective = 0
        self.n_reentrant_nodes = 0
        self.n_topless = 0
        self.n_top_nodes = 0
        self.n_roots_nontop = 0
        self.max_indegree = 0
        self.max_outdegree = 0

    def update(self, graph):
        inspected_graph = InspectedGraph(graph)

        self.n_graphs += 1
        self.n_nodes += inspected_graph.n_non_wall_nodes()
        self.n_edges += len(graph.edges)
        for edge in graph.edges:
            self.labels.add(edge.lab)
        self.n_singletons += inspected_graph.n_singletons()

        self.n_cyclic += inspected_graph.is_cyclic()
        self.n_forests += inspected_graph.is_forest()
        self.n_trees += inspected_graph.is_tree()
        self.n_fragmented += inspected_graph.is_fragmented()
        self.n_noncrossing += inspected_graph.is_noncrossing()
        self.n_projective += inspected_graph.is_projective()

        self.n_reentrant_nodes += inspected_graph.n_reentrant_nodes()
        n_top_nodes = inspected_graph.n_top_nodes()
        self.n_top_nodes += n_top_nodes
        self.n_topless += n_top_nodes == 0
        for node in graph.nodes:
            if not node.is_wall() and not inspected_graph.is_singleton(node.id) \
               and node.is_root() and not node.is_top:
                self.n_roots_nontop += 1

        self.max_indegree = max(self.max_indegree,
                                inspected_graph.maximal_indegree())
        self.max_outdegree = max(self.max_outdegree,
                                 inspected_graph.maximal_outdegree())
        return inspected_graph

    def report(self):
        n_nonsingletons = self.n_nodes - self.n_singletons

        def ratio(numerator, denominator):
            return numerator / denominator if denominator else None

        json = {}
        json["graphs"] = self.n_graphs
        json["nodes"] = self.n_nodes
        json["edges"] = self.n_edges
        json["labels"] = len(self.labels)
        json["singletons"] = ratio(self.n_singletons, self.n_nodes)
        json["density"] = ratio(self.n_edges, n_nonsingletons)
        json["cyclic"] = ratio(self.n_cyclic, self.n_graphs)
        json["forests"] = ratio(self.n_forests, self.n_graphs)
        json["trees"] = ratio(self.n_trees, self.n_graphs)
        json["fragmented"] = ratio(self.n_fragmented, self.n_graphs)
        json["reentrant"] = ratio(self.n_reentrant_nodes, n_nonsingletons)
        json["topless"] = ratio(self.n_topless, self.n_graphs)
        json["tops"] = ratio(self.n_top_nodes, self.n_graphs)
        json["roots"] = ratio(self.n_roots_nontop, n_nonsingletons)
        json["noncrossing"] = ratio(self.n_noncrossing, self.n_graphs)
        json["projective"] = ratio(self.n_projective, self.n_graphs)
        json["indegree"] = self.max_indegree
        json["outdegree"] = self.max_outdegree
        return json


def analyze(graphs, stream=sys.stdout):
    statistics = Statistics()
    for graph in graphs:
        statistics.update(graph)

    counter = itertools.count(1)

    def report(msg, val):
        print("(%02d)\t%s\t%s" % (next(counter), msg, val), file=stream)

    def percentage(value):
        return "--" if value is None else "%.2f" % (100 * value)

    def fraction(value):
        return "--" if value is None else "%.4f" % value

    json = statistics.report()
    report("number of graphs", "%d" % json["graphs"])
    report("number of non-wall nodes", "%d" % json["nodes"])
    report("number of distinct labels", "%d" % json["labels"])
    report("percentage of singleton nodes (over all non-wall nodes)",
           percentage(json["singletons"]))
    report("edge density (proportion of edge counts to non-singleton nodes)",
           fraction(json["density"]))
    report("percentage of cyclic graphs", percentage(json["cyclic"]))
    report("percentage of graphs that are forests",
           percentage(json["forests"]))
    report("percentage of graphs that are trees", percentage(json["trees"]))
    report("percentage of graphs that are fragmented",
           percentage(json["fragmented"]))
    report("percentage of (non-singleton) nodes that are reentrant",
           percentage(json["reentrant"]))
    report("percentage of topless graphs", percentage(json["topless"]))
    report("average number of top nodes per graph", fraction(json["tops"]))
    report("percentage of (non-singleton) nodes with indegree = 0 "
           "that are not top", percentage(json["roots"]))
    report("percentage of noncrossing graphs",
           percentage(json["noncrossing"]))
    report("percentage of projective graphs", percentage(json["projective"]))
    report("maximal indegree", "%d" % json["indegree"])
    report("maximal outdegree", "%d" % json["outdegree"])
    return json