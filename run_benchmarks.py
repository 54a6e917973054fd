#!/usr/bin/env python3
"""
Benchmark runner script for red-black trees.

This script provides a convenient interface for running the ASV benchmark
scenarios with appropriate configurations for robust performance testing.
"""

import argparse
import subprocess
import sys
from pathlib import Path


def run_command(cmd, description=""):
    """Run a command and handle errors."""
    print(f"\n🚀 {description}")
    print(f"Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd, check=True, capture_output=True, text=True)
        if result.stdout:
            print(result.stdout)
        return True
    except subprocess.CalledProcessError as e:
        print(f"❌ Error: {e}")
        if e.stderr:
            print(f"stderr: {e.stderr}")
        return False


def main():
    parser = argparse.ArgumentParser(
        description="Run benchmarks for red-black trees",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_benchmarks.py --setup                    # Initial setup
  python run_benchmarks.py --quick                    # Quick development test
  python run_benchmarks.py --full                     # Full benchmark suite
  python run_benchmarks.py --insert --search          # Insert and search benchmarks
  python run_benchmarks.py --range                    # Range query benchmarks
  python run_benchmarks.py --report                   # Generate HTML report
        """
    )

    parser.add_argument('--setup', action='store_true',
                        help='Initialize ASV environment (run once)')

    parser.add_argument('--quick', action='store_true',
                        help='Run quick development benchmarks')
    parser.add_argument('--full', action='store_true',
                        help='Run full benchmark suite')

    parser.add_argument('--insert', action='store_true',
                        help='Run insert benchmarks only')
    parser.add_argument('--search', action='store_true',
                        help='Run search benchmarks only')
    parser.add_argument('--delete', action='store_true',
                        help='Run delete benchmarks only')
    parser.add_argument('--range', action='store_true',
                        help='Run range query benchmarks only')

    parser.add_argument('--report', action='store_true',
                        help='Generate HTML report from existing results')
    parser.add_argument('--show', action='store_true',
                        help='Show latest results in terminal')

    parser.add_argument('--verbose', action='store_true',
                        help='Verbose output')
    parser.add_argument('--machine', type=str,
                        help='Specify machine name for results')

    args = parser.parse_args()

    if not Path('asv.conf.json').exists():
        print("❌ Error: asv.conf.json not found. Please run from project root.")
        return 1

    asv = [sys.executable, '-m', 'asv']

    if args.setup:
        print("🔧 Setting up ASV environment...")
        if not run_command(asv + ['machine', '--yes'], "Configuring ASV machine info"):
            return 1
        print("✅ ASV setup complete!")
        return 0

    if args.report:
        print("📊 Generating HTML report...")
        if run_command(asv + ['publish'], "Publishing results"):
            run_command(asv + ['preview'], "Opening report in browser")
        return 0

    if args.show:
        run_command(asv + ['show'], "Showing latest results")
        return 0

    base_cmd = asv + ['run']
    if args.machine:
        base_cmd.extend(['--machine', args.machine])
    if args.verbose:
        base_cmd.append('--verbose')

    patterns = []
    if args.quick:
        patterns.append('--quick')
        description = "Quick development benchmarks"
    elif args.full:
        description = "Full benchmark suite"
    else:
        selected = {
            'RBTreeInsertBenchmarks': args.insert,
            'RBTreeSearchBenchmarks': args.search,
            'RBTreeDeleteBenchmarks': args.delete,
            'RBTreeRangeQueryBenchmarks': args.range,
        }
        for class_name, enabled in selected.items():
            if enabled:
                patterns.extend(['-b', class_name])

        if patterns:
            description = f"Targeted benchmarks: {' '.join(patterns)}"
        else:
            description = "All benchmarks"

    success = run_command(base_cmd + patterns, description)

    if success:
        print("\n✅ Benchmarks completed successfully!")
        print("\n📋 Next steps:")
        print("  • View results: python run_benchmarks.py --show")
        print("  • Generate report: python run_benchmarks.py --report")
        print("  • Compare with previous: asv compare HEAD~1 HEAD")
    else:
        print("\n❌ Benchmarks failed!")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
