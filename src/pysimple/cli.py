#!/usr/bin/env python3
"""
SIMPLE Python CLI

A command-line interface for running the bundled SIMPLE sample programs
with any of the three interpretation strategies.

Usage:
    python -m pysimple.cli [sample] [options]
    pysimple [sample] [options]

Examples:
    pysimple --list
    pysimple loop --mode machine --trace
    pysimple conditional --mode compile
    pysimple
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from typing import List, Literal, Optional, Union

from pysimple.types import Node, is_boolean, is_number, is_statement
from pysimple.env import Environment
from pysimple.errors import SimpleError
from pysimple.evaluator import EvalOptions, Evaluator
from pysimple.compiler import Compiler
from pysimple.machine import Machine, MachineOptions
from pysimple.samples import SAMPLES, Sample, samples_by_name


#==============================================================================
# Type Aliases
#==============================================================================

Mode = Literal["machine", "evaluate", "compile", "all"]
MODES: List[str] = ["machine", "evaluate", "compile", "all"]


#==============================================================================
# CLI Output Formatting
#==============================================================================

class Colors:
    """ANSI color codes for terminal output"""
    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"
    DIM = "\x1b[2m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"


def print_msg(msg: str, color: str = Colors.RESET) -> None:
    """Print a message with optional color"""
    print(f"{color}{msg}{Colors.RESET}")


def format_result(result: Union[Node, Environment]) -> str:
    """Format a value or environment for display"""
    if isinstance(result, Environment):
        inner = ", ".join(
            f"{name}: {format_result(value)}" for name, value in result.items()
        )
        return f"{{{inner}}}"
    if is_number(result):
        return f"{Colors.CYAN}{result}{Colors.RESET}"
    if is_boolean(result):
        return f"{Colors.MAGENTA}{result}{Colors.RESET}"
    return f"{Colors.YELLOW}{result!r}{Colors.RESET}"


#==============================================================================
# Strategies
#==============================================================================

def run_machine(sample: Sample, trace: bool, max_steps: Optional[int]) -> Union[Node, Environment]:
    """Run a sample on the small-step machine"""
    machine = Machine(sample.node, sample.environment, MachineOptions(max_steps=max_steps))
    try:
        final = machine.run()
    finally:
        if trace:
            for state in machine.trace:
                print_msg(f"  {state}", Colors.DIM)
    if is_statement(final.statement):
        return final.environment
    return final.statement


def run_evaluate(sample: Sample, max_steps: Optional[int]) -> Union[Node, Environment]:
    """Evaluate a sample big-step"""
    return Evaluator().evaluate(sample.node, sample.environment, EvalOptions(max_steps=max_steps))


def run_compile(sample: Sample) -> Union[Node, Environment]:
    """Compile a sample and invoke the closure"""
    return Compiler().compile(sample.node)(sample.environment)


#==============================================================================
# Main CLI
#==============================================================================

def run_sample(
    sample: Sample,
    mode: Mode = "all",
    trace: bool = False,
    max_steps: Optional[int] = None,
    verbose: bool = False,
) -> int:
    """
    Run one sample program.

    Args:
        sample: Sample to run
        mode: Strategy to use, or "all" for every strategy
        trace: Print the machine trace
        max_steps: Step bound for machine and evaluator (optional)
        verbose: Show tracebacks on failure

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    print_msg(f"\n{Colors.BOLD}{sample.name}:{Colors.RESET} {sample.description}")
    print_msg(f"  {sample.node!r} under {sample.environment}", Colors.DIM)

    modes = ["machine", "evaluate", "compile"] if mode == "all" else [mode]

    for current in modes:
        try:
            if current == "machine":
                result = run_machine(sample, trace, max_steps)
            elif current == "evaluate":
                result = run_evaluate(sample, max_steps)
            else:
                result = run_compile(sample)
        except SimpleError as e:
            print_msg(f"{Colors.RED}{current} error:{Colors.RESET} {e.code.value}: {e}", Colors.RED)
            if verbose:
                traceback.print_exc()
            return 1
        print_msg(f"{Colors.GREEN}✓ {current}:{Colors.RESET} {format_result(result)}")

    return 0


def list_samples() -> None:
    """Print the available samples"""
    print_msg(f"\n{Colors.BOLD}Samples:{Colors.RESET}")
    for sample in SAMPLES:
        print(f"  {sample.name:<12} {sample.description}")
    print()


def show_help() -> None:
    """Show help message"""
    print_msg(f"\n{Colors.BOLD}SIMPLE Python CLI{Colors.RESET}\n")
    print_msg(f"{Colors.BOLD}Usage:{Colors.RESET}")
    print("  pysimple [sample] [options]\n")
    print_msg(f"{Colors.BOLD}Examples:{Colors.RESET}")
    print("  pysimple --list")
    print("  pysimple loop --mode machine --trace")
    print("  pysimple conditional --mode compile")
    print()
    print_msg(f"{Colors.BOLD}Options:{Colors.RESET}")
    print("  --mode <mode>           machine, evaluate, compile or all (default: all)")
    print("  --trace                 Print every machine state")
    print("  --max-steps <n>         Fail with NonTermination after n steps")
    print("  --list                  List the sample programs")
    print("  -v, --verbose           Debug logging and tracebacks")
    print("  -h, --help              Show this help message")
    print()


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="SIMPLE Python CLI - Run SIMPLE sample programs",
        add_help=False,  # We'll handle help ourselves
    )

    parser.add_argument(
        "sample",
        nargs="?",
        help="Name of the sample to run (default: all samples)",
    )

    parser.add_argument(
        "--mode",
        choices=MODES,
        default="all",
        help="Interpretation strategy",
    )

    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print every machine state",
    )

    parser.add_argument(
        "--max-steps",
        type=int,
        dest="max_steps",
        help="Step bound for the machine and the evaluator",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List the sample programs",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging and tracebacks",
    )

    parser.add_argument(
        "-h", "--help",
        action="store_true",
        help="Show help message",
    )

    args = parser.parse_args(argv)

    if args.help:
        show_help()
        return 0

    if args.list:
        list_samples()
        return 0

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.sample:
        sample = samples_by_name().get(args.sample)
        if sample is None:
            print_msg(f"Error: Unknown sample: {args.sample}", Colors.RED)
            list_samples()
            return 1
        selected = [sample]
    else:
        selected = SAMPLES

    status = 0
    for sample in selected:
        status |= run_sample(
            sample,
            mode=args.mode,
            trace=args.trace,
            max_steps=args.max_steps,
            verbose=args.verbose,
        )
    return status


if __name__ == "__main__":
    sys.exit(main())
