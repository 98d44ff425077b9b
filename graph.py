# -*- coding: utf-8; -*-

# Semantic Dependency Graphs
#
# one graph per sentence; node 0 is the artificial wall node, all other nodes
# correspond to tokens, in surface order.

#
# sentinel values on the wall node, as in the 2015 release of the data
#
WALL_FORM = "$$_FORM";
WALL_LEMMA = "$$_LEMMA";
WALL_POS = "$$_POS";
WALL_SENSE = "$$_SENSE";

class Node(object):

    def __init__(self, id, form = None, lemma = None, pos = None,
                 top = False, pred = False, sense = None):
        self.id = id;
        self.form = form;
        self.lemma = lemma;
        self.pos = pos;
        self.is_top = top;
        self.is_pred = pred;
        self.sense = sense;
        self.incoming_edges = [];
        self.outgoing_edges = [];

    def is_wall(self):
        return self.id == 0

    def is_root(self):
        return len(self.incoming_edges) == 0

    def is_leaf(self):
        return len(self.outgoing_edges) == 0

    def is_singleton(self):
        return not self.is_wall() and self.is_root() and self.is_leaf() \
            and not self.is_top

    def indegree(self):
        return len(self.incoming_edges)

    def outdegree(self):
        return len(self.outgoing_edges)

    def __repr__(self):
        return "Node({}, {!r}, {!r}{}{})".format(self.id, self.form, self.pos,
                                                 ", top" if self.is_top else "",
                                                 ", pred" if self.is_pred else "");

class Edge(object):

    def __init__(self, id, src, tgt, lab):
        self.id = id;
        self.src = src;
        self.tgt = tgt;
        self.lab = lab;

    def is_loop(self):
        return self.src == self.tgt

    def min(self):
        return min(self.src, self.tgt)

    def max(self):
        return max(self.src, self.tgt)

    def endpoints(self):
        return self.min(), self.max()

    def length(self):
        return self.max() - self.min()

    #
    # edges sort by target first, then source; equality stays by identity.
    #
    def __key(self):
        return self.tgt, self.src

    def __lt__(self, other):
        return self.__key() < other.__key()

    def __repr__(self):
        return "Edge({}, {} -{}-> {})".format(self.id, self.src,
                                              self.lab, self.tgt);

class Graph(object):

    def __init__(self, id):
        self.id = id;
        self.nodes = [];
        self.edges = [];
        self.add_node(form = WALL_FORM, lemma = WALL_LEMMA, pos = WALL_POS,
                      sense = WALL_SENSE);

    def size(self):
        return len(self.nodes);

    def add_node(self, form = None, lemma = None, pos = None,
                 top = False, pred = False, sense = None):
        node = Node(len(self.nodes), form = form, lemma = lemma, pos = pos,
                    top = top, pred = pred, sense = sense);
        self.nodes.append(node);
        return node;

    def find_node(self, id):
        if isinstance(id, int) and 0 <= id < len(self.nodes):
            return self.nodes[id];

    def add_edge(self, src, tgt, lab):
        source = self.find_node(src);
        if source is None:
            raise ValueError("Graph.add_edge(): graph {}: "
                             "invalid source node {}."
                             "".format(self.id, src));
        target = self.find_node(tgt);
        if target is None:
            raise ValueError("Graph.add_edge(): graph {}: "
                             "invalid target node {}."
                             "".format(self.id, tgt));
        edge = Edge(len(self.edges), src, tgt, lab);
        self.edges.append(edge);
        source.outgoing_edges.append(edge);
        target.incoming_edges.append(edge);
        return edge;

    def tops(self):
        return [node for node in self.nodes if node.is_top];

    def predicates(self):
        return [node for node in self.nodes if node.is_pred];

    def tokens(self):
        return [node.form for node in self.nodes[1:]];

    def skeleton(self):
        #
        # a copy with the same tokens but neither edges nor top or predicate
        # flags; used in place of missing system output.
        #
        graph = Graph(self.id);
        for node in self.nodes[1:]:
            graph.add_node(form = node.form, lemma = node.lemma,
                           pos = node.pos, sense = node.sense);
        return graph;

    def __repr__(self):
        return "Graph({}, {} nodes, {} edges)".format(self.id,
                                                       len(self.nodes),
                                                       len(self.edges));
