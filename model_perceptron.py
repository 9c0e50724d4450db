# FILE: model_perceptron.py
# Perceptron FROM SCRATCH with named inputs (dict feature -> value).
# Sigmoid squashing + online delta rule. Demo: logic gates, kerbals, red detector.

import math
import numbers
from collections.abc import Mapping

import numpy as np
import pandas as pd
from sklearn.metrics import accuracy_score

from utils_data import KERBAL_SAMPLES, RGB_SAMPLES, logic_gate_samples

BIPOLAR = "bipolar"  # output in (-1, +1), decision -1/+1
UNIPOLAR = "unipolar"  # output in (0, 1), decision True/False

# reserved feature name, always fed with 1.0
BIAS_KEY = "bias"

DEFAULT_LR = {
    BIPOLAR: 0.01,
    UNIPOLAR: 1.0,
}


class PerceptronError(Exception):
    pass


class InvalidInput(PerceptronError, ValueError):
    """Feature mapping is not a mapping of names to finite numbers."""


class InvalidExpectation(PerceptronError, TypeError):
    """Expected label does not match the label type of the unit."""


class NotReady(PerceptronError, RuntimeError):
    """decision()/train() called before any forward pass."""


def sigmoid(x: float) -> float:
    # two branches so exp() never sees a large positive argument
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


class Perceptron:
    """
    Single unit with a lazily grown weight mapping.

    forward(x)    -> output (bipolar: 2*sigmoid(sum)-1, unipolar: sigmoid(sum))
    decision()    -> +1/-1 (bipolar) or True/False (unipolar), from cached output
    train(y)      -> delta rule on the last input, returns the new output

    Weights of unseen features start at 0.0. The bias is a normal weight
    bound to BIAS_KEY with a constant input of 1.0.

    Not thread safe: weights and the last input are updated separately,
    so one instance must not be used from several threads without a lock.
    """

    def __init__(self, lr=None, mode=BIPOLAR, verbose=False):
        if mode not in DEFAULT_LR:
            raise ValueError(f"unknown mode {mode!r}, expected one of {sorted(DEFAULT_LR)}")
        if lr is None:
            lr = DEFAULT_LR[mode]
        if isinstance(lr, bool) or not isinstance(lr, numbers.Real) or not math.isfinite(lr) or lr <= 0:
            raise ValueError(f"learning rate must be a positive finite number, got {lr!r}")

        self.lr = float(lr)
        self.mode = mode
        self.verbose = verbose

        self.weights = {}
        self.input = None  # last input (copy, bias included)
        self.output = None

    def __repr__(self):
        return f"Perceptron(lr={self.lr}, mode={self.mode!r}, n_weights={len(self.weights)})"

    def _snapshot(self, x):
        if not isinstance(x, Mapping):
            raise InvalidInput(f"input must be a mapping of feature name -> number, got {type(x).__name__}")

        features = {}
        for name, value in x.items():
            if not isinstance(name, str):
                raise InvalidInput(f"feature names must be strings, got {name!r}")
            if name == BIAS_KEY:
                raise InvalidInput(f"feature name {BIAS_KEY!r} is reserved for the bias")
            if isinstance(value, (bool, np.bool_)):
                value = int(value)
            if not isinstance(value, numbers.Real):
                raise InvalidInput(f"feature {name!r} has non numeric value {value!r}")
            value = float(value)
            if not math.isfinite(value):
                raise InvalidInput(f"feature {name!r} has non finite value {value}")
            features[name] = value

        features[BIAS_KEY] = 1.0
        return features

    def _evaluate(self, features):
        self.input = features

        total = 0.0
        for name, value in features.items():
            if name not in self.weights:
                self.weights[name] = 0.0
            total += self.weights[name] * value

        squashed = sigmoid(total)
        if self.mode == BIPOLAR:
            self.output = 2.0 * squashed - 1.0
        else:
            self.output = squashed
        return self.output

    def forward(self, x):
        return self._evaluate(self._snapshot(x))

    def decision(self):
        if self.output is None:
            raise NotReady("no forward pass yet, call forward() first")
        if self.mode == BIPOLAR:
            return 1 if self.output > 0 else -1
        return self.output > 0.5

    def _check_expected(self, expected):
        if self.mode == BIPOLAR:
            if isinstance(expected, (bool, np.bool_)) or not isinstance(expected, numbers.Real):
                raise InvalidExpectation(f"bipolar unit expects -1 or +1, got {expected!r}")
            if expected not in (-1, 1):
                raise InvalidExpectation(f"bipolar unit expects -1 or +1, got {expected!r}")
            return int(expected)

        if not isinstance(expected, (bool, np.bool_)):
            raise InvalidExpectation(f"unipolar unit expects True/False, got {expected!r}")
        return bool(expected)

    def train(self, expected):
        if self.input is None:
            raise NotReady("nothing to train on, call forward() first")
        expected = self._check_expected(expected)

        if self.decision() == expected:
            return self.output

        error = float(expected) - self.output
        for name, value in self.input.items():
            self.weights[name] += self.lr * error * value

        if self.verbose:
            print("Learning new weights:", {k: round(v, 4) for k, v in self.weights.items()})

        return self._evaluate(self.input)

    def predict(self, x):
        self.forward(x)
        return self.decision()

    def fit(self, samples, n_epochs=50, shuffle=False, seed=42):
        """
        Online training over (input, expected) pairs, one train() per sample.
        Stops after the first epoch without mistakes.
        Returns the number of mistakes per epoch.
        """
        samples = list(samples)
        rng = np.random.default_rng(seed)
        history = []

        for _ in range(n_epochs):
            order = rng.permutation(len(samples)) if shuffle else range(len(samples))
            errors = 0
            for i in order:
                x, y = samples[i]
                self.forward(x)
                if self.decision() != self._check_expected(y):
                    errors += 1
                    self.train(y)
            history.append(errors)
            if errors == 0:
                break

        return history


def accuracy(unit, samples):
    samples = list(samples)
    y_true = [y for _, y in samples]
    y_pred = [unit.predict(x) for x, _ in samples]
    return float(accuracy_score(y_true, y_pred))


def run_gate(name, samples):
    p = Perceptron(lr=0.1)
    history = p.fit(samples, n_epochs=200)
    pred = [p.predict(x) for x, _ in samples]
    acc = accuracy(p, samples)
    print(f"{name} -> pred={pred} acc={acc:.2f} epochs={len(history)} w={p.weights}")
    return acc, len(history)


def main():
    print("=== PERCEPTRON FROM SCRATCH (LOGIC GATES) ===")

    rows = []
    for gate in ("AND", "OR", "XOR"):
        label = gate if gate != "XOR" else "XOR (should fail)"
        acc, epochs = run_gate(label, logic_gate_samples(gate))
        rows.append({"model": f"perceptron_{gate.lower()}", "split": "train", "accuracy": acc, "epochs": epochs})

    print("\n=== KERBALS: courage + stupidity -> excitement ===")
    p = Perceptron(lr=0.1, verbose=True)
    history = p.fit(KERBAL_SAMPLES, n_epochs=1000)
    print("Epochs until clean:", len(history))
    for x in ({"courage": 10, "stupidity": 10}, {"courage": 1, "stupidity": 1}, {"courage": 4, "stupidity": 1}):
        answer = "I like to test dangerous new stuff!" if p.predict(x) == 1 else "I'd prefer staying on solid ground..."
        print(x, "->", answer)

    print("\n=== RED DETECTOR (unipolar) ===")
    p_red = Perceptron(mode=UNIPOLAR)
    for x, y in RGB_SAMPLES:
        p_red.forward(x)
        p_red.train(y)
    for x in ({"r": 1, "g": 0, "b": 0}, {"r": 0, "g": 0, "b": 1}, {"r": 0.25, "g": 0, "b": 0}):
        print(x, "-> red" if p_red.predict(x) else "-> not red", f"(output={p_red.output:.3f})")

    metrics = pd.DataFrame(rows)
    metrics.to_csv("metrics_perceptron.csv", index=False)
    print("\nSaved: metrics_perceptron.csv")


if __name__ == "__main__":
    main()
