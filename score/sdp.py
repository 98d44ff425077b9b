# Semantic Dependency Parsing: Scorer

import math
import sys
from dataclasses import dataclass
from typing import Callable

from score.core import fscore, is_punctuation, pair

UNLABELED = "-UNLABELED-"
# virtual edges from the wall node to top nodes; some releases say PSEUDO
VIRTUAL = "-VIRTUAL-"
PSEUDO = "-PSEUDO-"
NO_SENSE = "-NOSENSE-"


def argument_predicate_all(label):
    return True


PAS_CORE_ARGUMENTS = frozenset("""
    verb_arg1 verb_arg12 verb_arg123 verb_arg1234
    verb_mod_arg1 verb_mod_arg12 verb_mod_arg123 verb_mod_arg1234
    adj_arg1 adj_arg12 adj_mod_arg1 adj_mod_arg12
    coord_arg12 prep_arg12 prep_arg123 prep_mod_arg12 prep_mod_arg123
    """.split())


def argument_predicate_pas(label):
    return label in PAS_CORE_ARGUMENTS


def argument_predicate_psd(label):
    return label.endswith("-arg")


def argument_predicate_list(labels):
    labels = frozenset(labels)

    def argument_predicate(label):
        return label in labels
    return argument_predicate


def read_arguments(stream):
    return argument_predicate_list(line.strip() for line in stream
                                   if line.strip())


ARGUMENT_PREDICATES = {
    "dm": argument_predicate_all,
    "pas": argument_predicate_pas,
    "psd": argument_predicate_psd,
}


@dataclass(frozen=True)
class Configuration:
    """Which edges enter the pools, and how they are compared."""
    labels: bool = True
    tops: bool = True
    punctuation: bool = True
    undirected: bool = False
    arguments: Callable[[str], bool] = argument_predicate_all
    virtual: str = VIRTUAL


def quantize(length):
    if length <= 4:
        return str(length)
    elif length < 10:
        return "5-9"
    else:
        return "10-"


QUANTIZED_LENGTHS = ("1", "2", "3", "4", "5-9", "10-")


class ScorerEdge(object):

    def __init__(self, graph, src, tgt, lab, undirected=False):
        self.graph = graph
        self.src = src
        self.tgt = tgt
        self.lab = lab
        self.undirected = undirected

    def length(self):
        return abs(self.src - self.tgt)

    def __key(self):
        if self.undirected:
            return (True, self.graph, min(self.src, self.tgt),
                    max(self.src, self.tgt), self.lab)
        return (False, self.graph, self.src, self.tgt, self.lab)

    def __eq__(self, other):
        return self.__key() == other.__key()

    def __hash__(self):
        return hash(self.__key())

    def __repr__(self):
        return "ScorerEdge({}, {} -{}-> {})".format(self.graph, self.src,
                                                    self.lab, self.tgt)


class SemanticFrame(object):

    def __init__(self, graph, node, sense, arguments):
        self.graph = graph
        self.node = node
        self.sense = sense
        self.arguments = frozenset(arguments)

    def __key(self):
        return self.graph, self.node, self.sense, self.arguments

    def __eq__(self, other):
        return self.__key() == other.__key()

    def __hash__(self):
        return hash(self.__key())


class Measure(object):

    def __init__(self):
        self.gold = set()
        self.system = set()

    def update(self, g_items, s_items):
        self.gold |= g_items
        self.system |= s_items

    def common(self):
        return self.gold & self.system

    def g(self):
        return len(self.gold)

    def s(self):
        return len(self.system)

    def c(self):
        return len(self.common())

    def prf(self):
        return fscore(self.g(), self.s(), self.c())

    def p(self):
        return self.prf()[0]

    def r(self):
        return self.prf()[1]

    def f(self):
        return self.prf()[2]

    def restrict(self, test):
        g_items = {item for item in self.gold if test(item)}
        s_items = {item for item in self.system if test(item)}
        c = len(g_items & s_items)
        p, r, _ = fscore(len(g_items), len(s_items), c)
        return {"g": len(g_items), "s": len(s_items), "c": c, "p": p, "r": r}

    def report(self):
        json = {}
        json["g"] = self.g()
        json["s"] = self.s()
        json["c"] = self.c()
        json["p"], json["r"], json["f"] = self.prf()
        return json


class Scorer(object):

    def __init__(self, configuration=None, quiet=False):
        if configuration is None:
            configuration = Configuration()
        self.configuration = configuration
        self.quiet = quiet
        self.n_graphs = 0
        self.n_exact_matches = 0
        self.n_skipped = 0
        self.edges = Measure()
        self.frames = Measure()
        self.predications = Measure()
        self.senses = Measure()

    def admissible(self, graph, src, tgt):
        if self.configuration.punctuation:
            return True
        return not is_punctuation(graph.nodes[src]) \
            and not is_punctuation(graph.nodes[tgt])

    def make_edge(self, src, tgt, lab):
        return ScorerEdge(self.n_graphs, src, tgt, lab,
                          self.configuration.undirected)

    def get_edges(self, graph):
        result = set()
        for edge in graph.edges:
            if self.admissible(graph, edge.src, edge.tgt):
                label = edge.lab if self.configuration.labels else UNLABELED
                result.add(self.make_edge(edge.src, edge.tgt, label))
        if self.configuration.tops:
            for node in graph.nodes:
                if node.is_top and self.admissible(graph, 0, node.id):
                    result.add(self.make_edge(0, node.id,
                                              self.configuration.virtual))
        return result

    @staticmethod
    def has_scorable_predicate(node):
        return node.is_pred and node.pos is not None \
            and node.pos.startswith("V")

    def get_arguments(self, node):
        return {ScorerEdge(self.n_graphs, edge.src, edge.tgt, edge.lab)
                for edge in node.outgoing_edges
                if self.configuration.arguments(edge.lab)}

    def get_frames(self, graph, sense=None):
        result = set()
        for node in graph.nodes:
            if self.has_scorable_predicate(node):
                result.add(SemanticFrame(self.n_graphs, node.id,
                                         node.sense if sense is None else sense,
                                         self.get_arguments(node)))
        return result

    def get_senses(self, graph):
        return {(self.n_graphs, node.id, node.sense)
                for node in graph.nodes if self.has_scorable_predicate(node)}

    def update(self, gold, system):
        if len(gold.nodes) != len(system.nodes):
            self.n_skipped += 1
            if not self.quiet:
                print("score.sdp.update(): ignoring graph {} "
                      "({} gold vs. {} system nodes)"
                      "".format(gold.id, len(gold.nodes), len(system.nodes)),
                      file=sys.stderr)
            return False
        g_edges = self.get_edges(gold)
        s_edges = self.get_edges(system)
        self.edges.update(g_edges, s_edges)
        self.frames.update(self.get_frames(gold), self.get_frames(system))
        self.predications.update(self.get_frames(gold, NO_SENSE),
                                 self.get_frames(system, NO_SENSE))
        self.senses.update(self.get_senses(gold), self.get_senses(system))
        self.n_exact_matches += g_edges == s_edges
        self.n_graphs += 1
        return True

    def p(self):
        return self.edges.p()

    def r(self):
        return self.edges.r()

    def f(self):
        return self.edges.f()

    def m(self):
        return self.n_exact_matches / self.n_graphs \
            if self.n_graphs != 0 else float("NaN")

    def labels(self):
        return sorted({edge.lab for edge in self.edges.gold}
                      | {edge.lab for edge in self.edges.system})

    def by_label(self, label):
        return self.edges.restrict(lambda edge: edge.lab == label)

    def by_length(self, quantized):
        return self.edges.restrict(
            lambda edge: quantize(edge.length()) == quantized)

    def report(self):
        json = self.edges.report()
        json["m"] = self.m()
        json["labels"] = {label: self.by_label(label)
                          for label in self.labels()}
        json["lengths"] = {length: self.by_length(length)
                           for length in QUANTIZED_LENGTHS}
        json["predications"] = self.predications.report()
        json["frames"] = self.frames.report()
        json["senses"] = self.senses.report()
        return json


def evaluate(golds, systems, punctuation=True, undirected=False,
             arguments=argument_predicate_all, virtual=VIRTUAL, quiet=False):
    scorers = dict()
    for tops in (True, False):
        for labels in (True, False):
            configuration = Configuration(labels=labels, tops=tops,
                                          punctuation=punctuation,
                                          undirected=undirected,
                                          arguments=arguments,
                                          virtual=virtual)
            scorers[tops, labels] \
                = Scorer(configuration, quiet=quiet or not (tops and labels))
    n = 0
    for g, s in pair(golds, systems, quiet=quiet):
        for scorer in scorers.values():
            scorer.update(g, s)
        n += 1
    result = {"n": n}
    for tops, key in ((True, "tops"), (False, "notops")):
        result[key] = {"labeled": scorers[tops, True].report(),
                       "unlabeled": scorers[tops, False].report()}
    result["skipped"] = scorers[True, True].n_skipped
    return result


def write_report(result, stream=sys.stderr):

    def LOG(msg=""):
        print(msg, file=stream)

    def number(value):
        return "NaN" if math.isnan(value) else "%f" % value

    for key, title in (("tops", "including"), ("notops", "excluding")):
        labeled = result[key]["labeled"]
        unlabeled = result[key]["unlabeled"]

        LOG("## Scores %s virtual dependencies to top nodes" % title)
        LOG()
        LOG("Number of edges in gold standard: %d" % labeled["g"])
        LOG("Number of edges in system output: %d" % labeled["s"])
        LOG("Number of edges in common, labeled: %d" % labeled["c"])
        LOG("Number of edges in common, unlabeled: %d" % unlabeled["c"])
        LOG()

        LOG("### Labeled scores")
        LOG()
        LOG("LP: %s" % number(labeled["p"]))
        LOG("LR: %s" % number(labeled["r"]))
        LOG("LF: %s" % number(labeled["f"]))
        LOG("LM: %s" % number(labeled["m"]))
        LOG()

        LOG("### Breakdown by label type")
        LOG()
        LOG("Label type,Number of edges in gold standard,"
            "Number of edges in system output,Precision,Recall")
        for label, scores in labeled["labels"].items():
            LOG("%s,%d,%d,%s,%s" % (label, scores["g"], scores["s"],
                                    number(scores["p"]), number(scores["r"])))
        LOG()

        LOG("### Breakdown by edge length")
        LOG()
        LOG("Edge length,Number of edges in gold standard,"
            "Number of edges in system output,Precision,Recall")
        for length, scores in labeled["lengths"].items():
            LOG("%s,%d,%d,%s,%s" % (length, scores["g"], scores["s"],
                                    number(scores["p"]), number(scores["r"])))
        LOG()

        LOG("### Unlabeled scores")
        LOG()
        LOG("UP: %s" % number(unlabeled["p"]))
        LOG("UR: %s" % number(unlabeled["r"]))
        LOG("UF: %s" % number(unlabeled["f"]))
        LOG("UM: %s" % number(unlabeled["m"]))
        LOG()

        LOG("### Core predications")
        LOG()
        LOG("Number of core predications in gold standard: %d"
            % labeled["predications"]["g"])
        LOG("Number of core predications in system output: %d"
            % labeled["predications"]["s"])
        LOG()
        LOG("PP: %s" % number(labeled["predications"]["p"]))
        LOG("PR: %s" % number(labeled["predications"]["r"]))
        LOG("PF: %s" % number(labeled["predications"]["f"]))
        LOG()

        LOG("### Semantic frames")
        LOG()
        LOG("Number of semantic frames in gold standard: %d"
            % labeled["frames"]["g"])
        LOG("Number of semantic frames in system output: %d"
            % labeled["frames"]["s"])
        LOG()
        LOG("FP: %s" % number(labeled["frames"]["p"]))
        LOG("FR: %s" % number(labeled["frames"]["r"]))
        LOG("FF: %s" % number(labeled["frames"]["f"]))
        if key == "tops":
            LOG()
