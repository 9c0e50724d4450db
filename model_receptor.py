# FILE: model_receptor.py
# Receptor = perceptrons in a row.
# Stage 1: one perceptron decides "is this pixel painted".
# Stage 2: one perceptron per letter reads the stage 1 answers for every pixel.
# Output: receptor_letters.png, metrics_receptor.csv

import time
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from model_perceptron import Perceptron, accuracy
from utils_data import BADLY_WRITTEN_T, LETTER_PATTERNS


def train_painted_detector(n_steps=20, lr=None):
    # alternate unpainted (0 -> -1) and painted (1 -> +1) pixels
    p = Perceptron(lr=lr)
    for i in range(n_steps):
        paint = i % 2
        p.forward({"paint": paint})
        p.train(1 if paint == 1 else -1)
    return p


def encode_pattern(detector, pattern, use_decision=True, feature="paint", prefix="px"):
    """
    Run every cell of a pixel grid through the stage 1 detector.

    Each cell is forwarded on its own; the answer (or the soft output when
    use_decision=False) goes into slot prefix+index, row-major.
    """
    features = {}
    for i, value in enumerate(np.asarray(pattern, dtype=float).reshape(-1)):
        detector.forward({feature: float(value)})
        if use_decision:
            features[f"{prefix}{i}"] = float(detector.decision())
        else:
            features[f"{prefix}{i}"] = detector.output
    return features


def train_one_vs_rest(detectors, encoded, n_epochs=10):
    """
    detectors: {label: Perceptron}, encoded: {label: features}.
    Every detector learns +1 on its own pattern and -1 on all the others.
    Returns the number of corrections per epoch.
    """
    history = []
    for _ in range(n_epochs):
        errors = 0
        for label, unit in detectors.items():
            for other, features in encoded.items():
                expected = 1 if other == label else -1
                unit.forward(features)
                if unit.decision() != expected:
                    errors += 1
                    unit.train(expected)
        history.append(errors)
    return history


def recognize(detectors, features):
    return {label: unit.predict(features) for label, unit in detectors.items()}


def show_pattern(ax, x01, title):
    ax.imshow(x01, cmap="gray_r", vmin=0, vmax=1)
    ax.set_title(title)
    ax.axis("off")


def main():
    t0 = time.time()
    print("=== RECEPTOR: painted pixels -> letters ===")

    p_painted = train_painted_detector(n_steps=20)
    print("Unpainted ->", p_painted.predict({"paint": 0}), "(expected -1)")
    print("Painted   ->", p_painted.predict({"paint": 1}), "(expected +1)")

    encoded = {label: encode_pattern(p_painted, pattern) for label, pattern in LETTER_PATTERNS.items()}
    detectors = {label: Perceptron() for label in LETTER_PATTERNS}

    print("\n=== TRAINING (one detector per letter) ===")
    history = train_one_vs_rest(detectors, encoded, n_epochs=10)
    print("Corrections per epoch:", history)

    print("\n=== CHECK ===")
    rows = []
    for label, unit in detectors.items():
        samples = [(features, 1 if other == label else -1) for other, features in encoded.items()]
        acc = accuracy(unit, samples)
        rows.append({"model": f"receptor_{label}", "split": "train", "accuracy": acc, "epochs": len(history)})
        for other, features in encoded.items():
            out = unit.forward(features)
            print(f"detector {label} on {other}: output={out:+.3f} answer={unit.decision():+d}")

    bad_t = encode_pattern(p_painted, BADLY_WRITTEN_T)
    answers = recognize(detectors, bad_t)
    print("\nBadly written T ->", answers)
    rows.append({
        "model": "receptor_badly_written_T",
        "split": "unseen",
        "accuracy": float(answers["T"] == 1 and all(v == -1 for k, v in answers.items() if k != "T")),
        "epochs": len(history),
    })

    fig, axes = plt.subplots(1, len(LETTER_PATTERNS) + 1, figsize=(3 * (len(LETTER_PATTERNS) + 1), 3))
    for ax, (label, pattern) in zip(axes, LETTER_PATTERNS.items()):
        show_pattern(ax, pattern, f"Pattern {label}")
    show_pattern(axes[-1], BADLY_WRITTEN_T, "Badly written T")
    plt.tight_layout()
    plt.savefig("receptor_letters.png", dpi=150)
    plt.show()

    metrics = pd.DataFrame(rows)
    metrics["runtime_sec"] = round(time.time() - t0, 3)
    metrics.to_csv("metrics_receptor.csv", index=False)
    print("Saved: receptor_letters.png, metrics_receptor.csv")


if __name__ == "__main__":
    main()
