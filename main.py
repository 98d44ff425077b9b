#!/usr/bin/env python3

# -*- coding: utf-8; -*-

import argparse;
import json;
import sys;
import time;

import codec.sdp;
import score.bootstrap;
import score.sdp;
import validate.core;
from analyzer import analyze;
from score.core import pair;

ENCODING = "utf-8";
FORMATS = {"sdp": None, "sdp2014": 2014, "sdp2015": 2015};

def read_graphs(stream, format = "sdp", n = None, id = None):
  graphs = [];
  generator = codec.sdp.read(stream, version = FORMATS[format]);
  for graph in generator:
    if id is None or graph.id == id:
      graphs.append(graph);
    if n is not None and 0 < n <= len(graphs):
      break;
  return graphs;

def load(stream, format, n = None, id = None):
  try:
    return read_graphs(stream, format = format, n = n, id = id);
  except ValueError as error:
    print("main.py(): unable to read graphs from {}: {}; exit."
          "".format(getattr(stream, "name", "<stream>"), error),
          file = sys.stderr);
    sys.exit(1);

def main():
  parser = argparse.ArgumentParser(description = "SDP Graph Toolkit");
  parser.add_argument("--analyze", action = "store_true");
  parser.add_argument("--validate", action = "store_true");
  parser.add_argument("--gold",
                      type = argparse.FileType("r", encoding = ENCODING));
  parser.add_argument("--bootstrap",
                      type = argparse.FileType("r", encoding = ENCODING));
  parser.add_argument("--format");
  parser.add_argument("--score");
  parser.add_argument("--read", default = "sdp");
  parser.add_argument("--write");
  parser.add_argument("--representation");
  parser.add_argument("--arguments",
                      type = argparse.FileType("r", encoding = ENCODING));
  parser.add_argument("--exclude-punctuation", action = "store_true");
  parser.add_argument("--undirected", action = "store_true");
  parser.add_argument("--pseudo", action = "store_true");
  parser.add_argument("--samples", type = int,
                      default = score.bootstrap.SAMPLES);
  parser.add_argument("--seed", type = int, default = score.bootstrap.SEED);
  parser.add_argument("--n", type = int);
  parser.add_argument("--id");
  parser.add_argument("--quiet", action = "store_true");
  parser.add_argument("--trace", "-t", action = "count", default = 0);
  parser.add_argument("input", nargs = "?",
                      type = argparse.FileType("r", encoding = ENCODING),
                      default = sys.stdin);
  parser.add_argument("output", nargs = "?",
                      type = argparse.FileType("w", encoding = ENCODING),
                      default = sys.stdout);
  arguments = parser.parse_args();

  if arguments.read not in FORMATS:
    print("main.py(): invalid input format: {}; exit."
          "".format(arguments.read), file = sys.stderr);
    sys.exit(1);

  if arguments.format is not None and arguments.format not in FORMATS:
    print("main.py(): invalid gold format: {}; exit."
          "".format(arguments.format), file = sys.stderr);
    sys.exit(1);

  if arguments.write is not None and \
     arguments.write not in {"json", "txt", "id", "sdp2014", "sdp2015"}:
    print("main.py(): invalid output format: {}; exit."
          "".format(arguments.write), file = sys.stderr);
    sys.exit(1);

  if arguments.score is not None and arguments.score != "sdp":
    print("main.py(): invalid evaluation metric: {}; exit."
          "".format(arguments.score), file = sys.stderr);
    sys.exit(1);

  if (arguments.score or arguments.bootstrap) and arguments.gold is None:
    print("main.py(): option ‘--score’ and ‘--bootstrap’ require ‘--gold’; "
          "exit.", file = sys.stderr);
    sys.exit(1);

  virtual = score.sdp.PSEUDO if arguments.pseudo else score.sdp.VIRTUAL;
  predicate = score.sdp.argument_predicate_all;
  if arguments.representation is not None:
    representation = arguments.representation.lower();
    if representation not in score.sdp.ARGUMENT_PREDICATES:
      print("main.py(): invalid representation: {}; exit."
            "".format(arguments.representation), file = sys.stderr);
      sys.exit(1);
    predicate = score.sdp.ARGUMENT_PREDICATES[representation];
  if arguments.arguments is not None:
    if not arguments.quiet:
      print("Reading core arguments from {}"
            "".format(arguments.arguments.name), file = sys.stderr);
    predicate = score.sdp.read_arguments(arguments.arguments);

  graphs = load(arguments.input, arguments.read,
                n = arguments.n, id = arguments.id);

  if arguments.validate:
    n = 0;
    for graph in graphs:
      n += validate.core.test(graph, stream = sys.stderr);
    if n and not arguments.quiet:
      print("main.py(): {} validation error(s) in {} graph(s)."
            "".format(n, len(graphs)), file = sys.stderr);

  if arguments.analyze:
    analyze(graphs, stream = arguments.output);

  gold = None;
  if arguments.gold is not None:
    if arguments.format is None: arguments.format = arguments.read;
    gold = load(arguments.gold, arguments.format,
                n = arguments.n, id = arguments.id);

  if arguments.bootstrap:
    others = load(arguments.bootstrap, arguments.read,
                  n = arguments.n, id = arguments.id);
    items = [(g, s1, s2) for (g, s1), (_, s2)
             in zip(pair(gold, graphs, quiet = arguments.quiet),
                    pair(gold, others, quiet = arguments.quiet))];
    configuration \
      = score.sdp.Configuration(punctuation = not arguments.exclude_punctuation,
                                undirected = arguments.undirected,
                                virtual = virtual);
    delta, p = score.bootstrap.significance(items,
                                            samples = arguments.samples,
                                            seed = arguments.seed,
                                            configuration = configuration,
                                            trace = arguments.trace);
    json.dump({"n": len(items), "delta": delta, "p": p},
              arguments.output, indent = None);
    print(file = arguments.output);
    sys.exit(0);

  if arguments.score:
    launch = time.time(), time.process_time();
    result = score.sdp.evaluate(gold, graphs,
                                punctuation = not arguments.exclude_punctuation,
                                undirected = arguments.undirected,
                                arguments = predicate,
                                virtual = virtual,
                                quiet = arguments.quiet);
    if arguments.write == "txt":
      print("# Evaluation", file = arguments.output);
      print(file = arguments.output);
      print("Gold standard file: {}".format(arguments.gold.name),
            file = arguments.output);
      print("System output file: {}".format(arguments.input.name),
            file = arguments.output);
      print(file = arguments.output);
      score.sdp.write_report(result, arguments.output);
    else:
      result["time"] = time.time() - launch[0];
      result["cpu"] = time.process_time() - launch[1];
      json.dump(result, arguments.output, indent = None);
      print(file = arguments.output);
    sys.exit(0);

  if arguments.write in {"sdp2014", "sdp2015"}:
    version = 2014 if arguments.write == "sdp2014" else 2015;
    codec.sdp.header(arguments.output, version);
    for graph in graphs:
      codec.sdp.write(graph, arguments.output, version);
  elif arguments.write == "id":
    for graph in graphs:
      print("{}".format(graph.id), file = arguments.output);
  elif arguments.write == "txt":
    for graph in graphs:
      print("{}\t{}".format(graph.id, " ".join(graph.tokens())),
            file = arguments.output);

if __name__ == "__main__":
  main();
