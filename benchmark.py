# benchmark.py
# ------------------------------------------------------------
# Sorting benchmark harness.
# Checks every algorithm once on a small sample, then times
# Selection, Insertion, Bubble, Merge and both Heap Sorts on
# fresh random arrays of growing size. Each size is averaged
# over many trials; one series per algorithm is exported as
# a line of space-separated nanoseconds (plus a CSV summary).
# ------------------------------------------------------------

import os, sys, time, json, platform
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

# third-party libs
import numpy as np
import pandas as pd
import psutil

from sorting import ALGORITHMS, HEAPIFIERS, LABELS, is_max_heap

INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)


# =========================
# Errors
# =========================
class CorrectnessViolation(AssertionError):
    """An algorithm (or a heap construction) produced a wrong result."""


class IOFailure(OSError):
    """An output file could not be created or written."""


# =========================
# Configuration
# =========================
@dataclass(frozen=True)
class BenchmarkConfig:
    """
    Everything the run depends on. Passed explicitly to the driver so
    tests can use tiny settings (trial_count=1, a couple of sizes).
    """
    trial_count: int = 2_000    # trials per size, averaged to suppress noise
    min_size: int = 20          # 0 means "start at step"
    max_size: int = 2_000       # inclusive
    step: int = 20
    sample_size: int = 20       # self-check array
    sample_low: int = -100
    sample_high: int = 100
    seed: Optional[int] = None
    outdir: str = "results"

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if self.trial_count < 1:
            raise ValueError(f"trial_count must be >= 1, got {self.trial_count}")
        if self.step < 1:
            raise ValueError(f"step must be >= 1, got {self.step}")
        if self.min_size < 0:
            raise ValueError(f"min_size must be >= 0, got {self.min_size}")
        first = self.min_size or self.step
        if self.max_size < first:
            raise ValueError(f"max_size {self.max_size} is below the first size {first}")
        if self.sample_size < 1:
            raise ValueError(f"sample_size must be >= 1, got {self.sample_size}")
        if self.sample_low > self.sample_high:
            raise ValueError(f"empty sample range [{self.sample_low}, {self.sample_high}]")


DEFAULT_CONFIG = BenchmarkConfig()


def gen_sizes(config: BenchmarkConfig) -> Tuple[int, ...]:
    """Sizes to benchmark: min_size (or step if that is 0) to max_size, inclusive."""
    first = config.min_size if config.min_size != 0 else config.step
    return tuple(range(first, config.max_size + 1, config.step))


# =========================
# Dataset generation
# =========================
def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def generate_dataset(n: int, rng: np.random.Generator,
                     low: int = INT32_MIN, high: int = INT32_MAX) -> List[int]:
    """
    n uniform ints from the closed range [low, high].
    Defaults to the whole int32 range; returned as plain Python ints.
    """
    return rng.integers(low, high, size=n, endpoint=True, dtype=np.int32).tolist()


# =========================
# Measurement
# =========================
def benchmark(a: List, func: Callable[[List], None],
              timer: Callable[[], int] = time.perf_counter_ns) -> int:
    """
    Times one call of func on a, in nanoseconds. a is left sorted,
    so pass a copy if the unsorted data is still needed.
    """
    start = timer()
    func(a)
    end = timer()
    return end - start


# =========================
# Self-check
# =========================
def self_check(config: BenchmarkConfig, rng: np.random.Generator,
               algorithms: Dict[str, Callable[[List], None]] = ALGORITHMS,
               verbose: bool = True) -> None:
    """
    One-shot correctness gate, run before any timing.
    Both heap constructions must give a valid max-heap and every algorithm
    must agree with the built-in sort on a small random sample.
    Raises CorrectnessViolation naming the culprit.
    """
    sample = generate_dataset(config.sample_size, rng, config.sample_low, config.sample_high)
    if verbose:
        print(f"Array:\n{sample}")

    for label, heapify in HEAPIFIERS.items():
        heap = list(sample)
        heapify(heap)
        if verbose:
            print(f"Heapification ({label}):\n{heap}")
        if not is_max_heap(heap):
            raise CorrectnessViolation(f"{label} heapification is incorrect: {heap}")

    expected = sorted(sample)
    if verbose:
        print(f"Default sorted:\n{expected}")

    outputs: Dict[str, List] = {}
    for name, func in algorithms.items():
        out = list(sample)
        func(out)
        outputs[name] = out
        if verbose:
            print(f"{LABELS.get(name, name).capitalize()} sorted:\n{out}")

    for name, out in outputs.items():
        if out != expected:
            raise CorrectnessViolation(
                f"{LABELS.get(name, name)} sort is incorrect: got {out}, expected {expected}"
            )

    if verbose:
        print("Tests passed! All implementations agree with the built-in sort.\n")


# =========================
# Results
# =========================
@dataclass
class ResultSet:
    """
    Per-size averages (ns) for every algorithm.
    Entry k of each series belongs to sizes[k].
    """
    names: Tuple[str, ...]
    sizes: Tuple[int, ...] = ()
    series: Dict[str, List[int]] = field(default_factory=dict)

    def __post_init__(self):
        for name in self.names:
            self.series.setdefault(name, [])

    def add(self, size: int, averages: Dict[str, int]) -> None:
        self.sizes = self.sizes + (size,)
        for name in self.names:
            self.series[name].append(averages[name])

    def is_aligned(self) -> bool:
        return all(len(self.series[name]) == len(self.sizes) for name in self.names)

    def to_frame(self) -> pd.DataFrame:
        df = pd.DataFrame({"size": list(self.sizes)})
        for name in self.names:
            df[name] = self.series[name]
        return df


# =========================
# Experiment driver
# =========================
def run_experiment(config: BenchmarkConfig, rng: np.random.Generator,
                   algorithms: Dict[str, Callable[[List], None]] = ALGORITHMS,
                   timer: Callable[[], int] = time.perf_counter_ns,
                   verbose: bool = True) -> ResultSet:
    """
    For every size: trial_count fresh random arrays, each algorithm timed
    on its own copy, totals averaged with integer division.
    Copying and data generation stay outside the timed call.
    """
    result = ResultSet(names=tuple(algorithms))

    for size in gen_sizes(config):
        totals = {name: 0 for name in algorithms}
        work: List[int] = [0] * size

        for _ in range(config.trial_count):
            work[:] = generate_dataset(size, rng)
            for name, func in algorithms.items():
                totals[name] += benchmark(list(work), func, timer)

        averages = {name: total // config.trial_count for name, total in totals.items()}
        result.add(size, averages)

        if verbose:
            parts = ", ".join(f"{LABELS.get(name, name)} = {avg}" for name, avg in averages.items())
            print(f"size = {size}, {parts}")

    return result


# =========================
# Output
# =========================
def format_series(values: Sequence[int]) -> str:
    return " ".join(str(v) for v in values) + "\n"


def save_series(values: Sequence[int], name: str, outdir: str) -> Path:
    """
    Prints the series and writes it to outdir/name.
    Any filesystem error is fatal and surfaces as IOFailure.
    """
    text = format_series(values)
    sys.stdout.write(text)
    path = Path(outdir) / name
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as exc:
        raise IOFailure(f"cannot write {path}: {exc}") from exc
    return path


def write_results(result: ResultSet, outdir: str, env: Optional[dict] = None) -> List[Path]:
    """
    sizes.txt, one <algorithm>_totals.txt per series, and a CSV summary
    (env line as a comment on top, when given).
    """
    try:
        os.makedirs(outdir, exist_ok=True)
    except OSError as exc:
        raise IOFailure(f"cannot create output directory {outdir}: {exc}") from exc

    paths = [save_series(result.sizes, "sizes.txt", outdir)]
    for name in result.names:
        paths.append(save_series(result.series[name], f"{name}_totals.txt", outdir))

    summary_csv = Path(outdir) / "benchmark_summary.csv"
    try:
        with open(summary_csv, "w", newline="", encoding="utf-8") as f:
            if env is not None:
                f.write("# environment: " + json.dumps(env) + "\n")
            result.to_frame().to_csv(f, index=False)
    except OSError as exc:
        raise IOFailure(f"cannot write {summary_csv}: {exc}") from exc
    paths.append(summary_csv)
    return paths


# =========================
# Env capture
# =========================
def environment_info() -> dict:
    """Basic machine info (useful to show the setup next to the numbers)."""
    return {
        "platform": platform.platform(),
        "python_version": platform.python_version(),
        "processor": platform.processor(),
        "total_ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
        "logical_cores": psutil.cpu_count(logical=True),
        "physical_cores": psutil.cpu_count(logical=False),
    }


def capture_environment(outdir: str, info: Optional[dict] = None) -> dict:
    """
    Saves machine info to outdir/environment_info.json.
    """
    if info is None:
        info = environment_info()
    path = os.path.join(outdir, "environment_info.json")
    try:
        os.makedirs(outdir, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(info, f, indent=2)
    except OSError as exc:
        raise IOFailure(f"cannot write {path}: {exc}") from exc
    return info


# =========================
# Main
# =========================
def main(config: BenchmarkConfig = DEFAULT_CONFIG) -> int:
    """
    Main flow:
      1) print the machine banner
      2) self-check all algorithms (abort on any mismatch, nothing written)
      3) run the size sweep
      4) write series files, summary CSV and environment info
    """
    rng = make_rng(config.seed)
    sizes = gen_sizes(config)
    env = environment_info()

    print("=== Sorting Benchmarks ===")
    print(f"Machine : {env.get('platform','?')} | Python {env.get('python_version','?')}")
    if env.get("logical_cores") is not None:
        print(f"Cores   : {env['logical_cores']} logical ({env.get('physical_cores','?')} physical)")
    print(f"Algos   : {list(ALGORITHMS)}")
    print(f"Sizes   : {sizes[0]}..{sizes[-1]} step {config.step} ({len(sizes)} sizes)")
    print(f"Trials  : {config.trial_count}\n")

    try:
        self_check(config, rng)

        print("Running...\n")
        result = run_experiment(config, rng)

        print()
        paths = write_results(result, config.outdir, env={**env, "config": asdict(config)})
        capture_environment(config.outdir, env)
    except (CorrectnessViolation, IOFailure) as exc:
        print(f"\nFATAL: {exc}")
        sys.exit(1)

    print(f"\nSaved {len(paths) + 1} files -> {config.outdir}")
    return 0


if __name__ == "__main__":
    main()
