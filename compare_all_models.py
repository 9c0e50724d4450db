# FILE: compare_all_models.py
# Unifica metricele din toate demo-urile si face comparatii (accuracy).
# Output:
#  - metrics_all_models.csv
#  - plot_compare_accuracy.png

import os
import pandas as pd
import matplotlib.pyplot as plt

METRIC_FILES = [
    "metrics_perceptron.csv",
    "metrics_line_separator.csv",
    "metrics_receptor.csv",
]

COLUMNS = ["model", "split", "accuracy", "epochs", "runtime_sec", "source_file"]


def load_metrics_file(path):
    if not os.path.exists(path):
        return None

    df = pd.read_csv(path)
    if df.empty:
        return None

    df["source_file"] = os.path.basename(path)
    for col in COLUMNS:
        if col not in df.columns:
            df[col] = float("nan")
    df["accuracy"] = pd.to_numeric(df["accuracy"], errors="coerce")
    return df[COLUMNS]


def plot_bar(df, metric_col, title, out_png):
    dfp = df.dropna(subset=[metric_col]).copy()
    if dfp.empty:
        print(f"[WARN] Nu am valori pentru {metric_col}, sar peste plot.")
        return

    dfp = dfp.sort_values(metric_col, ascending=True)
    labels = dfp["model"].astype(str) + " (" + dfp["split"].astype(str) + ")"

    plt.figure(figsize=(10, 5))
    plt.bar(labels, dfp[metric_col].astype(float))
    plt.title(title)
    plt.xlabel("Model")
    plt.ylabel(metric_col)
    plt.ylim(0, 1.05)
    plt.xticks(rotation=35, ha="right")
    plt.tight_layout()
    plt.savefig(out_png, dpi=150)
    plt.show()
    print("Saved:", out_png)


def main(paths=METRIC_FILES):
    frames = []
    for path in paths:
        df = load_metrics_file(path)
        if df is None:
            print("[MISS]", path)
        else:
            print("[OK]  ", path, "->", len(df), "rows")
            frames.append(df)

    if not frames:
        print("Nu am gasit niciun fisier de metrici. Ruleaza mai intai demo-urile.")
        return None

    allm = pd.concat(frames, ignore_index=True)
    allm.to_csv("metrics_all_models.csv", index=False)
    print("\nSaved: metrics_all_models.csv")

    view = allm.sort_values("accuracy", ascending=False)
    print("\n=== RANK (best accuracy first) ===")
    print(view.to_string(index=False))

    plot_bar(allm, "accuracy", "Comparatie accuracy pe modele", "plot_compare_accuracy.png")
    return allm


if __name__ == "__main__":
    main()
