import sys;

#
# parts of speech that mark a token as punctuation, in the PTB tag set
#
PUNCTUATION = frozenset({".", ",", ":", "(", ")"});

def is_punctuation(node):
  return node.pos in PUNCTUATION;

def pair(golds, systems, quiet = False):
  #
  # alignment is by position only: the i-th gold graph goes with the i-th
  # system graph, whatever their identifiers.
  #
  systems = iter(systems);
  i = 0;
  for gold in golds:
    system = next(systems, None);
    if system is None:
      if not quiet:
        print("score.pair(): missing system graph #{} ({})"
              .format(i, gold.id), file = sys.stderr);
      #
      # manufacture an empty graph as the system graph
      #
      system = gold.skeleton();
    elif system.id != gold.id and not quiet:
      print("score.pair(): graph #{}: gold {} vs. system {}"
            .format(i, gold.id, system.id), file = sys.stderr);
    yield gold, system;
    i += 1;

  for system in systems:
    if not quiet:
      print("score.pair(): ignoring system graph #{} ({}) with no gold graph"
            .format(i, system.id), file = sys.stderr);
    i += 1;

def fscore(gold, system, correct):
  #
  # an empty denominator is not an error: the value is NaN, as in the
  # reference reports.
  #
  p = correct / system if system else float("NaN");
  r = correct / gold if gold else float("NaN");
  f = 2 * p * r / (p + r) if p + r != 0 else float("NaN");
  return p, r, f;
