import numpy as np
import pandas as pd

# field for the line demo: x in [-320, 320), y in [-180, 180)
AREA = {"width": 640, "height": 360}

# (input, expected) pairs, bipolar labels
KERBAL_SAMPLES = [
    ({"courage": 10, "stupidity": 10}, 1),
    ({"courage": 1, "stupidity": 1}, -1),
    ({"courage": 5, "stupidity": 1}, -1),
]

# pure red -> True, pure blue -> False (unipolar labels)
RGB_SAMPLES = [
    ({"r": 1, "g": 0, "b": 0}, True),
    ({"r": 0, "g": 0, "b": 1}, False),
]

LETTER_PATTERNS = {
    "T": np.array([
        [1, 1, 1],
        [0, 1, 0],
        [0, 1, 0],
    ]),
    "C": np.array([
        [0, 1, 1],
        [1, 0, 0],
        [0, 1, 1],
    ]),
}

# still a T, never used for training
BADLY_WRITTEN_T = np.array([
    [1, 1, 1],
    [0, 1, 0],
    [0, 0, 0],
])

_GATES = {
    "AND": [0, 0, 0, 1],
    "OR": [0, 1, 1, 1],
    "XOR": [0, 1, 1, 0],
}


def to_bipolar(x01: np.ndarray) -> np.ndarray:
    # 0/1 -> -1/+1
    return np.where(np.asarray(x01) > 0, 1, -1).astype(int)


def logic_gate_samples(gate):
    gate = gate.upper()
    if gate not in _GATES:
        raise ValueError(f"unknown gate {gate!r}, expected one of {sorted(_GATES)}")

    X = np.array([
        [0, 0],
        [0, 1],
        [1, 0],
        [1, 1],
    ], dtype=float)
    y = to_bipolar(np.array(_GATES[gate]))

    return [({"a": float(a), "b": float(b)}, int(t)) for (a, b), t in zip(X, y)]


def line_formula(x):
    return 2 * x + 1


def sample_line_points(n, seed=42, area=AREA):
    """
    Random points in the area, labelled -1 below y = 2x + 1 and +1 above.
    The unit only sees x and y, never the formula.
    """
    rng = np.random.default_rng(seed)
    xs = rng.random(n) * area["width"] - area["width"] / 2
    ys = rng.random(n) * area["height"] - area["height"] / 2

    samples = []
    for x, y in zip(xs, ys):
        answer = -1 if y < line_formula(x) else 1
        samples.append(({"x": float(x), "y": float(y)}, answer))
    return samples


def samples_to_frame(samples, target="expected"):
    # [(dict, label), ...] -> one row per sample, one column per feature
    rows = []
    for x, y in samples:
        row = dict(x)
        row[target] = y
        rows.append(row)
    return pd.DataFrame(rows)
