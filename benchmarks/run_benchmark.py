"""
CLI entry point for comparing scheduling policies.

Usage:
    python -m benchmarks.run_benchmark                           # all policies, 100 tasks
    python -m benchmarks.run_benchmark --policy sjf              # single policy
    python -m benchmarks.run_benchmark --num-tasks 500 --seed 7  # bigger, reproducible
    python -m benchmarks.run_benchmark --tie-break heap          # unstable heap ties

No server needed — the engine runs in-process on the simulated clock.
"""

import argparse
import json
import logging

from benchmarks.policy_comparison import PolicyComparison, generate_workload
from config.settings import settings
from models.enums import TieBreak
from scheduler.registry import available_policies

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def main():
    parser = argparse.ArgumentParser(description="CPU Scheduling Policy Comparison")
    parser.add_argument(
        "--num-tasks", type=int, default=100,
        help="Number of tasks in the workload (default: 100)",
    )
    parser.add_argument(
        "--policy", type=str, default="all",
        choices=available_policies() + ["all"],
        help="Which policy to run (default: all)",
    )
    parser.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for the workload (default: 42)",
    )
    parser.add_argument(
        "--tie-break", type=str, default=TieBreak.ARRIVAL.value,
        choices=[t.value for t in TieBreak],
        help="How equal keys are ordered in the heaps (default: arrival)",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the raw results as JSON",
    )
    args = parser.parse_args()

    print(f"=== CPU Scheduling Policy Comparison ===")
    print(
        f"Tasks: {args.num_tasks} | Policy: {args.policy} | Seed: {args.seed} | "
        f"exec {settings.MIN_EXECUTION_TIME}-{settings.MAX_EXECUTION_TIME}, "
        f"priority {settings.MIN_PRIORITY}-{settings.MAX_PRIORITY}\n"
    )

    workload = generate_workload(args.num_tasks, seed=args.seed)
    comparison = PolicyComparison(workload, tie_break=TieBreak(args.tie_break))

    if args.policy == "all":
        results = comparison.run_all_policies()
    else:
        results = [comparison.run(args.policy)]

    if args.json:
        print(json.dumps(results, indent=2))
        return

    # Summary table
    print("{:<10} {:>9} {:>10} {:>12} {:>10} {:>8}".format(
        "Policy", "Makespan", "Avg wait", "Avg turnar.", "Avg resp.", "CPU %"
    ))
    print("-" * 64)
    for r in results:
        print("{:<10} {:>9} {:>10.2f} {:>12.2f} {:>10.2f} {:>8.2f}".format(
            r["policy"], r["makespan"], r["avg_waiting_time"],
            r["avg_turnaround_time"], r["avg_response_time"], r["cpu_utilization"],
        ))


if __name__ == "__main__":
    main()
