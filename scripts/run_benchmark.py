import os
import time
import logging
import argparse
import multiprocessing
import numpy as np
import pandas as pd
from datetime import datetime
from typing import List, Dict
from dataclasses import dataclass, asdict

from crypto_primality import (
    U1024,
    U4096,
    U8192,
    SeededRandomSource,
    Uint,
    UintCapability,
    generate_probable_prime,
    is_composite,
)

logger = logging.getLogger(__name__)

# --- 1. Define Benchmark Configurations ---
# "generate" searches for a probable prime, "test" runs the test on a random candidate.
AVAILABLE_CONFIGURATIONS = {
    "generate_1024":           {"operation": "generate", "bits": 1024, "capability": U1024},
    "generate_1024_oversized": {"operation": "generate", "bits": 1024, "capability": U4096},
    "test_1024":               {"operation": "test",     "bits": 1024, "capability": U4096},
    "test_2048":               {"operation": "test",     "bits": 2048, "capability": U8192},
}


# --- 2. Data Structures for the Benchmark ---
@dataclass
class BenchmarkConfig:
    """Configuration for a single timed run."""
    run_id: str
    config_name: str
    operation: str
    bits: int
    capability_limbs: int
    trials: int
    seed: int


@dataclass
class RunResult:
    """Result of a single timed run."""
    run_id: str
    config_name: str
    operation: str
    bits: int
    capability_bits: int
    trials: int
    elapsed: float
    outcome: str


# --- 3. Worker Function for Multiprocessing (must be top-level) ---
def _benchmark_worker(config: BenchmarkConfig) -> RunResult:
    """Times one operation. Each worker owns its random source."""
    rng = SeededRandomSource(config.seed)
    capability = UintCapability(config.capability_limbs)

    start_time = time.perf_counter()
    if config.operation == "generate":
        prime = generate_probable_prime(config.bits, config.trials, rng, capability=capability)
        outcome = f"{prime.bit_length()} bits"
    else:
        candidate = Uint.random_bits(rng, config.bits, capability)
        verdict = is_composite(candidate, config.trials, rng)
        outcome = "composite" if verdict.is_composite else "probably prime"
    elapsed = time.perf_counter() - start_time

    return RunResult(
        run_id=config.run_id,
        config_name=config.config_name,
        operation=config.operation,
        bits=config.bits,
        capability_bits=capability.bits,
        trials=config.trials,
        elapsed=elapsed,
        outcome=outcome,
    )


# --- 4. Main Benchmark Orchestrator ---
class BenchmarkRunner:
    """Orchestrates the benchmark campaign."""

    def __init__(self, configurations: Dict[str, Dict], output_root: str = "results"):
        self.configurations = configurations
        self.campaign_id = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.output_dir = os.path.join(output_root, f"benchmark_{self.campaign_id}")
        os.makedirs(self.output_dir, exist_ok=True)

    def run_campaign(self, repeats: int, trials: int, seed: int, workers: int):
        print("Starting Primality Benchmark Campaign")
        print("=" * 50)
        print(f"Campaign ID: {self.campaign_id}")
        print(f"Results will be saved in: {self.output_dir}")
        print("-" * 50)
        print("Parameters:")
        print(f"  - Configurations: {list(self.configurations.keys())}")
        print(f"  - Repeats per Config: {repeats}")
        print(f"  - Miller-Rabin Trials: {trials}")
        print(f"  - Worker Processes: {workers}")
        print(f"  - Initial Random Seed: {seed}")
        print("=" * 50)

        configs = self._generate_configs(repeats, trials, seed)
        results = self._run_all(configs, workers)
        self._generate_report(results)

        print("\nCampaign finished successfully.")

    def _generate_configs(self, repeats: int, trials: int, initial_seed: int) -> List[BenchmarkConfig]:
        configs = []
        seed = initial_seed
        for name, cfg in self.configurations.items():
            for run in range(repeats):
                configs.append(BenchmarkConfig(
                    run_id=f"{name}_run{run:02d}",
                    config_name=name,
                    operation=cfg["operation"],
                    bits=cfg["bits"],
                    capability_limbs=cfg["capability"].limbs,
                    trials=trials,
                    seed=seed,
                ))
                seed += 1
        return configs

    def _run_all(self, configs: List[BenchmarkConfig], workers: int) -> List[RunResult]:
        logger.info("Running %d timed operations on %d workers", len(configs), workers)
        with multiprocessing.Pool(processes=workers) as pool:
            return pool.map(_benchmark_worker, configs)

    def _generate_report(self, results: List[RunResult]):
        print("\n   Generating reports...")
        if not results:
            print("    -> No results to report.")
            return

        df = pd.DataFrame([asdict(r) for r in results])

        detailed_filename = os.path.join(self.output_dir, "detailed_results.csv")
        df.to_csv(detailed_filename, index=False)
        print(f"    -> Detailed results saved to {detailed_filename}")

        self._print_summary_report(df)

    def _print_summary_report(self, df: pd.DataFrame):
        """Calculates and prints a summary table of the campaign results."""
        summary = df.groupby(['config_name', 'bits', 'capability_bits']).agg(
            runs=('elapsed', 'size'),
            mean=('elapsed', 'mean'),
            median=('elapsed', 'median'),
            std=('elapsed', 'std'),
            p95=('elapsed', lambda s: np.percentile(s, 95)),
        )

        print("\n" + "=" * 80)
        print("BENCHMARK SUMMARY (seconds per operation)")
        print("=" * 80)
        print(summary.to_string(float_format='{:.4f}'.format))
        print("-" * 80)


# --- 5. Script Entry Point and Argument Parsing ---
def main():
    parser = argparse.ArgumentParser(description="Run a primality benchmark campaign.")
    parser.add_argument('--configs', nargs='+', default=list(AVAILABLE_CONFIGURATIONS.keys()),
                        choices=AVAILABLE_CONFIGURATIONS.keys(), help="List of benchmark configurations to run.")
    parser.add_argument('--repeats', type=int, default=10, help="Number of timed runs per configuration.")
    parser.add_argument('--trials', type=int, default=10, help="Number of Miller-Rabin trials (t).")
    parser.add_argument('--seed', type=int, default=42, help="Initial random seed for reproducibility.")
    parser.add_argument('--workers', type=int, default=os.cpu_count() or 1, help="Number of worker processes.")
    parser.add_argument('--output-dir', default="results", help="Directory receiving the campaign results.")
    parser.add_argument('--verbose', action='store_true', help="Enable debug logging.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    selected_configs = {name: AVAILABLE_CONFIGURATIONS[name] for name in args.configs}
    runner = BenchmarkRunner(selected_configs, output_root=args.output_dir)
    runner.run_campaign(
        repeats=args.repeats,
        trials=args.trials,
        seed=args.seed,
        workers=args.workers,
    )


if __name__ == '__main__':
    main()
