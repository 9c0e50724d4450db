# FILE: model_line_separator.py
# Perceptron learns on which side of y = 2x + 1 a point lies,
# seeing only the (x, y) coordinates.
# Output: line_separator.png, line_separator_predictions.csv, metrics_line_separator.csv

import time
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from model_perceptron import Perceptron, accuracy
from utils_data import AREA, line_formula, sample_line_points, samples_to_frame


def train_line_separator(n_train=2000, n_epochs=1, lr=0.01, seed=42):
    p = Perceptron(lr=lr)
    train = sample_line_points(n_train, seed=seed)
    history = p.fit(train, n_epochs=n_epochs)
    return p, train, history


def main():
    t0 = time.time()
    print("=== MODEL: PERCEPTRON (above / below y = 2x + 1) ===")

    p, train, history = train_line_separator(n_train=2000, n_epochs=1, seed=42)
    print("Mistakes during training:", history)
    print("Weights:", p.weights)

    test = sample_line_points(500, seed=7)
    acc_train = accuracy(p, train)
    acc_test = accuracy(p, test)
    print(f"TRAIN acc={acc_train:.3f}  TEST acc={acc_test:.3f}")

    # print a few single checks
    for x, answer in test[:20]:
        position = "(below)" if answer == -1 else "(above)"
        verdict = "Correct" if p.predict(x) == answer else "Wrong"
        print(f"{verdict} answer for: {x['x']:.1f} / {x['y']:.1f} {position}")

    df_test = samples_to_frame(test)
    df_test["predicted"] = [p.predict(x) for x, _ in test]
    df_test.to_csv("line_separator_predictions.csv", index=False)

    xs = np.linspace(-AREA["width"] / 2, AREA["width"] / 2, 200)
    plt.figure()
    plt.scatter(df_test["x"], df_test["y"], c=df_test["predicted"], cmap="coolwarm", s=8)
    plt.plot(xs, line_formula(xs), "k--", label="y = 2x + 1")
    plt.ylim(-AREA["height"] / 2, AREA["height"] / 2)
    plt.title(f"Perceptron side of line (TEST acc={acc_test:.3f})")
    plt.xlabel("x")
    plt.ylabel("y")
    plt.legend()
    plt.tight_layout()
    plt.savefig("line_separator.png", dpi=150)
    plt.show()

    metrics = pd.DataFrame([
        {"model": "perceptron_line", "split": "train", "accuracy": acc_train, "epochs": len(history)},
        {"model": "perceptron_line", "split": "test", "accuracy": acc_test, "epochs": len(history)},
    ])
    metrics["runtime_sec"] = round(time.time() - t0, 3)
    metrics.to_csv("metrics_line_separator.csv", index=False)
    print("Saved: line_separator.png, line_separator_predictions.csv, metrics_line_separator.csv")


if __name__ == "__main__":
    main()
