import re;
import sys;

from graph import WALL_FORM, WALL_LEMMA, WALL_POS;
from validate.utilities import report;

IDENTIFIER = re.compile(r"^#2[0-9]{7}$");

def test(graph, stream = sys.stderr):
  n = 0;
  if not isinstance(graph.id, str) or not IDENTIFIER.match(graph.id):
    n += 1;
    report(graph,
           "missing or invalid identifier",
           stream = stream);

  if len(graph.nodes) == 0:
    n += 1;
    report(graph, "missing wall node", stream = stream);
    return n;

  wall = graph.nodes[0];
  if (wall.form, wall.lemma, wall.pos) != (WALL_FORM, WALL_LEMMA, WALL_POS):
    n += 1;
    report(graph,
           "invalid wall node",
           node = wall, stream = stream);
  if wall.is_top or wall.is_pred:
    n += 1;
    report(graph,
           "wall node flagged as top or predicate",
           node = wall, stream = stream);

  for i, node in enumerate(graph.nodes):
    if node.id != i:
      n += 1;
      report(graph,
             "invalid identifier (expected {})".format(i),
             node = node, stream = stream);
    if node.is_pred and len(node.outgoing_edges) == 0:
      n += 1;
      report(graph,
             "predicate without arguments",
             node = node, stream = stream);

  #
  # the reader only creates edges between existing nodes, out of predicates;
  # graphs built in code need not obey either constraint.
  #
  l = len(graph.nodes);
  for edge in graph.edges:
    if not isinstance(edge.src, int) or not 0 <= edge.src < l:
      n += 1;
      report(graph,
             "invalid source",
             edge = edge, stream = stream);
    elif not graph.nodes[edge.src].is_pred:
      n += 1;
      report(graph,
             "source is not a predicate",
             edge = edge, stream = stream);
    if not isinstance(edge.tgt, int) or not 0 <= edge.tgt < l:
      n += 1;
      report(graph,
             "invalid target",
             edge = edge, stream = stream);

  return n;
