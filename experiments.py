"""
Experiment runner for the canonical Huffman encoder

Encodes synthetic printable-ASCII datasets and measures how close the canonical
code gets to the entropy bound, how long encoding and decoding take, and whether
every payload decodes back to its input.

Outputs (in --outdir):
  - metrics.csv     (raw row per run per dataset)
  - summary.csv     (grouped mean/stdev)
  - *.png           (charts)

How to run:
  python experiments.py --outdir results --runs 5
  python experiments.py --outdir results --runs 3 --size_kb 64 --generators uniform,zipf,english_like
"""

from __future__ import annotations

import argparse
import csv
import math
import random
import statistics
import string
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Tuple

import matplotlib.pyplot as plt

import encoder

PRINTABLE = "".join(chr(c) for c in range(32, 127))


# Utilities

def now_ns() -> int:
    return time.perf_counter_ns()

def ns_to_ms(ns: int) -> float:
    return ns / 1_000_000.0

def shannon_entropy(frequencies: Dict[str, int]) -> float:
    """
    Bits per symbol lower bound for the given distribution
    """
    total = sum(frequencies.values())
    return -sum((f / total) * math.log2(f / total) for f in frequencies.values())

def average_code_length(frequencies: Dict[str, int], code_lengths: Dict[str, int]) -> float:
    total = sum(frequencies.values())
    return sum(frequencies[s] * code_lengths[s] for s in frequencies) / total


# Synthetic dataset generators (printable ASCII only)

def _sample(rng: random.Random, alphabet: str, weights: List[float], size: int) -> str:
    return "".join(rng.choices(alphabet, weights=weights, k=size))

def gen_uniform(size: int, seed: int = 0) -> str:
    rng = random.Random(seed)
    return _sample(rng, PRINTABLE, [1.0] * len(PRINTABLE), size)

def gen_zipf(size: int, s: float = 1.2, seed: int = 0) -> str:
    rng = random.Random(seed)
    weights = [1.0 / ((rank + 1) ** s) for rank in range(len(PRINTABLE))]
    return _sample(rng, PRINTABLE, weights, size)

def gen_repetitive(size: int, dominant: str = "A", dom_frac: float = 0.9, seed: int = 0) -> str:
    rng = random.Random(seed)
    others = [ch for ch in PRINTABLE if ch != dominant]
    return "".join(dominant if rng.random() < dom_frac else rng.choice(others) for _ in range(size))

def gen_english_like(size: int, seed: int = 0) -> str:
    rng = random.Random(seed)
    alphabet = " " + string.ascii_lowercase + string.ascii_uppercase + ".,"
    weights = []
    for ch in alphabet:
        if ch == " ":
            weights.append(13.0)
        elif ch in ".,":
            weights.append(1.0)
        elif ch.lower() in "etaoinshrdlu":
            weights.append(6.0 if ch.islower() else 0.6)
        else:
            weights.append(2.0 if ch.islower() else 0.2)
    return _sample(rng, alphabet, weights, size)

GENERATOR_REGISTRY: Dict[str, Callable[[int, int], str]] = {
    "uniform": lambda size, seed: gen_uniform(size, seed=seed),
    "zipf": lambda size, seed: gen_zipf(size, s=1.2, seed=seed),
    "zipf_steep": lambda size, seed: gen_zipf(size, s=2.0, seed=seed),
    "repetitive90": lambda size, seed: gen_repetitive(size, dom_frac=0.90, seed=seed),
    "repetitive99": lambda size, seed: gen_repetitive(size, dom_frac=0.99, seed=seed),
    "english_like": lambda size, seed: gen_english_like(size, seed=seed),
}

def generate_dataset(name: str, size: int, seed: int) -> Tuple[str, str]:
    """
    Unknown dataset names fall back to uniform so a typo does not abort a long run
    """
    fn = GENERATOR_REGISTRY.get(name)
    if fn is None:
        return f"{name}_fallback_uniform", gen_uniform(size, seed=seed)
    return name, fn(size, seed)


# Experiment runner

@dataclass
class MetricRow:
    exp_name: str
    dataset_name: str
    input_chars: int
    run_id: int
    unique_symbols: int

    build_ms: float  # frequencies, tree, lengths and canonical table
    encode_ms: float  # bit packing and hex only
    decode_ms: float
    total_ms: float

    original_bits: int
    compressed_bits: int
    compression_ratio: float

    entropy_bits: float  # per symbol
    avg_code_bits: float  # per symbol
    code_efficiency: float  # entropy / average code length
    correctness_ok: int  # 1 or 0


def run_one(text: str) -> MetricRow:
    t0 = now_ns()
    codebook = encoder.build_codebook(text)
    t1 = now_ns()
    result = encoder.encode_with(codebook, text)
    t2 = now_ns()
    decoded = encoder.decode(result)
    t3 = now_ns()

    build_ms = ns_to_ms(t1 - t0)
    encode_ms = ns_to_ms(t2 - t1)
    decode_ms = ns_to_ms(t3 - t2)
    entropy = shannon_entropy(result.frequencies)
    avg_len = average_code_length(result.frequencies, result.code_lengths)

    return MetricRow(
        exp_name="",
        dataset_name="",
        input_chars=len(text),
        run_id=0,
        unique_symbols=len(result.frequencies),
        build_ms=build_ms,
        encode_ms=encode_ms,
        decode_ms=decode_ms,
        total_ms=build_ms + encode_ms + decode_ms,
        original_bits=result.stats.original_size,
        compressed_bits=result.bit_count,
        compression_ratio=result.stats.ratio,
        entropy_bits=entropy,
        avg_code_bits=avg_len,
        code_efficiency=entropy / avg_len if avg_len else 0.0,
        correctness_ok=1 if "".join(decoded) == text else 0,
    )


def write_csv(path: Path, rows: List[MetricRow]) -> None:
    fields = list(MetricRow.__dataclass_fields__.keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for r in rows:
            w.writerow({k: getattr(r, k) for k in fields})


def mean_stdev(vals: List[float]) -> Tuple[float, float]:
    if len(vals) == 1:
        return vals[0], 0.0
    return statistics.mean(vals), statistics.stdev(vals)


SUMMARY_METRICS = ("compression_ratio", "code_efficiency", "build_ms", "encode_ms", "decode_ms", "total_ms")

def group_summary(rows: List[MetricRow], out_path: Path) -> None:
    """
    Group by exp_name, dataset_name, input_chars and compute mean/stdev per metric
    """
    key_to: Dict[Tuple[str, str, int], List[MetricRow]] = {}
    for r in rows:
        key_to.setdefault((r.exp_name, r.dataset_name, r.input_chars), []).append(r)

    fields = ["exp_name", "dataset_name", "input_chars", "n_runs"]
    for m in SUMMARY_METRICS:
        fields += [f"{m}_mean", f"{m}_stdev"]
    fields.append("correctness_ok_rate")

    with out_path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for (exp_name, dataset_name, size), items in sorted(key_to.items()):
            row = {
                "exp_name": exp_name,
                "dataset_name": dataset_name,
                "input_chars": size,
                "n_runs": len(items),
                "correctness_ok_rate": sum(x.correctness_ok for x in items) / len(items),
            }
            for m in SUMMARY_METRICS:
                row[f"{m}_mean"], row[f"{m}_stdev"] = mean_stdev([getattr(x, m) for x in items])
            w.writerow(row)


# Plotting

def plot_distributions(rows: List[MetricRow], outdir: Path) -> None:
    exp_rows = [r for r in rows if r.exp_name == "exp1_distribution"]
    if not exp_rows:
        return

    datasets = sorted(set(r.dataset_name for r in exp_rows))
    x = list(range(len(datasets)))

    def mean_for(dataset: str, field: str) -> float:
        return statistics.mean(getattr(r, field) for r in exp_rows if r.dataset_name == dataset)

    plt.figure()
    plt.bar(x, [mean_for(d, "compression_ratio") for d in datasets])
    plt.xticks(x, datasets, rotation=20, ha="right")
    plt.ylabel("Compressed Bits / Original Bits")
    plt.title("Compression Ratio by Distribution")
    plt.tight_layout()
    plt.savefig(outdir / "exp1_compression_ratio.png", dpi=200)
    plt.close()

    plt.figure()
    plt.plot(x, [mean_for(d, "entropy_bits") for d in datasets], marker="o", label="entropy")
    plt.plot(x, [mean_for(d, "avg_code_bits") for d in datasets], marker="o", label="avg code length")
    plt.xticks(x, datasets, rotation=20, ha="right")
    plt.ylabel("Bits per Symbol")
    plt.title("Average Code Length vs Entropy")
    plt.legend()
    plt.tight_layout()
    plt.savefig(outdir / "exp1_code_efficiency.png", dpi=200)
    plt.close()


def plot_size_scaling(rows: List[MetricRow], outdir: Path) -> None:
    exp_rows = [r for r in rows if r.exp_name == "exp2_size_scaling"]
    if not exp_rows:
        return

    plt.figure()
    for dist in sorted(set(r.dataset_name for r in exp_rows)):
        dist_rows = [r for r in exp_rows if r.dataset_name == dist]
        sizes = sorted(set(r.input_chars for r in dist_rows))
        y = [statistics.mean(r.encode_ms for r in dist_rows if r.input_chars == s) for s in sizes]
        plt.plot(sizes, y, marker="o", label=dist)
    plt.xlabel("Input Size (characters)")
    plt.ylabel("Encode Time (ms)")
    plt.title("Encode Time vs Size")
    plt.legend()
    plt.tight_layout()
    plt.savefig(outdir / "exp2_encode_time.png", dpi=200)
    plt.close()


# Main

def parse_csv_list(s: str) -> List[str]:
    return [x.strip() for x in s.split(",") if x.strip()]

def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--outdir", type=str, default="results", help="Output directory for CSV and plots")
    ap.add_argument("--runs", type=int, default=5, help="Repetitions per configuration")
    ap.add_argument("--seed", type=int, default=123, help="Base random seed")
    ap.add_argument("--size_kb", type=int, default=64, help="Fixed input size in KB for the distribution experiment")
    ap.add_argument("--max_kb", type=int, default=256, help="Largest input size in KB for the size scaling experiment")
    ap.add_argument("--generators", type=str, default="uniform,zipf,repetitive90,english_like",
                    help="Comma-separated dataset generator names")
    ap.add_argument("--no_plots", action="store_true", help="Only write the CSV files")
    args = ap.parse_args(argv)

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    gen_names = parse_csv_list(args.generators)
    rows: List[MetricRow] = []

    # Experiment 1: distributions (fixed size)
    fixed_size = max(1, args.size_kb) * 1024
    for gen_name in gen_names:
        for run_id in range(1, args.runs + 1):
            dataset_name, text = generate_dataset(gen_name, fixed_size, args.seed + run_id)
            row = run_one(text)
            row.exp_name = "exp1_distribution"
            row.dataset_name = dataset_name
            row.run_id = run_id
            rows.append(row)

    # Experiment 2: size scaling (powers of 2 from 1 KB)
    sizes: List[int] = []
    s = 1024
    while s <= max(1, args.max_kb) * 1024:
        sizes.append(s)
        s *= 2
    for gen_name in gen_names:
        for size in sizes:
            for run_id in range(1, args.runs + 1):
                dataset_name, text = generate_dataset(gen_name, size, args.seed + 10_000 + size + run_id)
                row = run_one(text)
                row.exp_name = "exp2_size_scaling"
                row.dataset_name = dataset_name
                row.run_id = run_id
                rows.append(row)

    metrics_csv = outdir / "metrics.csv"
    summary_csv = outdir / "summary.csv"
    write_csv(metrics_csv, rows)
    group_summary(rows, summary_csv)

    if not args.no_plots:
        plot_distributions(rows, outdir)
        plot_size_scaling(rows, outdir)

    ok_rate = sum(r.correctness_ok for r in rows) / max(1, len(rows))
    print(f"Wrote {len(rows)} rows to {metrics_csv}")
    print(f"Wrote grouped summary to {summary_csv}")
    print(f"Round-trip correctness across all runs: {ok_rate:.3f}")
    if not args.no_plots:
        print("Charts saved in:", outdir.resolve())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
