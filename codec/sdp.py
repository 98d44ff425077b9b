from graph import Graph;

HEADER = "#SDP 2015";
SEPARATOR = "\t";
UNDEFINED = "_";

def read_matrix(file):
    rows = [];
    for line in file:
        line = line.rstrip("\r\n");
        if len(line) == 0:
            if rows: return rows;
        else:
            rows.append(line);
    return rows or None;

def read_matrices(file):
    #
    # the 2015 release opens with a format header; in the 2014 format, the
    # first line already is the identifier of the first graph.
    #
    line = file.readline();
    while line and line.strip() == "":
        line = file.readline();
    if not line:
        return None, iter(());
    line = line.rstrip("\r\n");
    version = 2015 if line.startswith("#SDP") else 2014;
    first = [] if version == 2015 else [line];
    def matrices():
        matrix = read_matrix(file);
        if first:
            matrix = first + (matrix or []);
        while matrix:
            yield matrix;
            matrix = read_matrix(file);
    return version, matrices();

def matrix2graph(matrix, version = 2015):
    id = matrix[0];
    if not id.startswith("#"):
        raise ValueError("codec.sdp.read(): missing graph identifier: "
                         "‘{}’".format(id));
    graph = Graph(id);
    n = 7 if version == 2015 else 6;
    rows = [];
    predicates = [];
    for line in matrix[1:]:
        row = line.split(SEPARATOR);
        if len(row) < n \
           or row[4] not in {"+", "-"} or row[5] not in {"+", "-"}:
            raise ValueError("codec.sdp.read(): graph {}: invalid line: ‘{}’"
                             "".format(id, line));
        sense = row[6] if version == 2015 else None;
        node = graph.add_node(form = row[1], lemma = row[2], pos = row[3],
                              top = row[4] == "+", pred = row[5] == "+",
                              sense = sense);
        if str(node.id) != row[0]:
            raise ValueError("codec.sdp.read(): graph {}: expected node #{}, "
                             "got ‘{}’".format(id, node.id, row[0]));
        if node.is_pred:
            predicates.append(node.id);
        rows.append(row);
    for tgt, row in enumerate(rows, start = 1):
        if len(row) != n + len(predicates):
            raise ValueError("codec.sdp.read(): graph {}: node #{}: "
                             "{} argument columns for {} predicates"
                             "".format(id, tgt, len(row) - n, len(predicates)));
        for pred, label in enumerate(row[n:]):
            if label != UNDEFINED:
                graph.add_edge(predicates[pred], tgt, label);
    return graph;

def read(fp, version = None):
    detected, matrices = read_matrices(fp);
    for matrix in matrices:
        yield matrix2graph(matrix, version or detected);

def header(stream, version = 2015):
    if version == 2015:
        print(HEADER, file = stream);

def write(graph, stream, version = 2015):
    labels = {(edge.src, edge.tgt): edge.lab for edge in graph.edges};
    predicates = [node.id for node in graph.nodes[1:] if node.is_pred];
    print(graph.id, file = stream);
    for node in graph.nodes[1:]:
        row = [str(node.id), node.form, node.lemma, node.pos,
               "+" if node.is_top else "-", "+" if node.is_pred else "-"];
        if version == 2015:
            row.append(node.sense if node.sense is not None else UNDEFINED);
        for pred in predicates:
            row.append(labels.get((pred, node.id), UNDEFINED));
        print(SEPARATOR.join(row), file = stream);
    print(file = stream);
