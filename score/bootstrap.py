# Paired bootstrap test for the difference in labeled F1 between two systems

import sys

import numpy as np

from score.sdp import Configuration, Scorer

SAMPLES = 10000
SEED = 42


def delta(items, configuration=None, quiet=False):
    """LF of the second system minus LF of the first, over (gold, system1,
    system2) triples."""
    if configuration is None:
        configuration = Configuration(labels=True, tops=True)
    scorer1 = Scorer(configuration, quiet=quiet)
    scorer2 = Scorer(configuration, quiet=quiet)
    for gold, system1, system2 in items:
        scorer1.update(gold, system1)
        scorer2.update(gold, system2)
    return scorer2.f() - scorer1.f()


def significance(items, samples=SAMPLES, seed=SEED, configuration=None,
                 trace=0, stream=sys.stderr):
    items = list(items)
    delta0 = delta(items, configuration)
    if delta0 == 0:
        return 0.0, None
    generator = np.random.default_rng(seed)
    n = len(items)
    s = 0
    for i in range(samples):
        sample = [items[j] for j in generator.integers(0, n, size=n)]
        s += delta(sample, configuration, quiet=True) > 2 * delta0
        if trace:
            print("\rComputing ... (no. of samples = %d, p = %f)"
                  % (i + 1, s / (i + 1)), end="", file=stream)
    if trace:
        print(file=stream)
    return delta0, s / samples
