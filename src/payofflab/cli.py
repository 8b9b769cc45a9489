"""
Command-line interface for PayoffLab.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace

from payofflab import __version__
from payofflab.core.currency import format_amount
from payofflab.core.errors import ConfigError
from payofflab.core.kinds import Outcome, Strategy
from payofflab.core.plan_loader import PayoffPlan, load_plan
from payofflab.core.results import PayoffReport
from payofflab.core.simulator import compare_strategies, simulate
from payofflab.kpi import debt_free_month, interest_savings, payoff_duration

EXAMPLE_PLAN = {
    "strategy": "avalanche",
    "monthly_budget": 300.0,
    "currency": "USD",
    "start": "2026-01",
    "accounts": [
        {
            "id": "card_1",
            "name": "Card 1",
            "balance": 5000.0,
            "annual_rate": 18.99,
            "minimum_payment": 100.0,
        },
        {
            "id": "card_2",
            "name": "Card 2",
            "balance": 3000.0,
            "annual_rate": 22.99,
            "minimum_payment": 60.0,
        },
    ],
    "simulation": {"max_periods": 600, "cascade_surplus": False},
}


def _save_json(path: str, data: dict) -> None:
    """Save data as JSON to file path."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _apply_overrides(plan: PayoffPlan, args) -> PayoffPlan:
    """Apply the shared plan overrides (budget, bound, cascading)."""
    if args.budget is not None:
        plan.monthly_budget = args.budget
    if args.max_periods is not None:
        plan.config = replace(plan.config, max_periods=args.max_periods)
    if args.cascade:
        plan.config = replace(plan.config, cascade_surplus=True)
    return plan


def _format_report(report: PayoffReport, plan: PayoffPlan) -> list[str]:
    """Human-readable summary lines for one report."""
    label = report.strategy.value if report.strategy else "-"
    lines = [f"Strategy: {label}"]
    lines.append(f"  Monthly budget:   {format_amount(report.monthly_budget, plan.currency)}")
    lines.append(f"  Minimum payments: {format_amount(report.total_minimum, plan.currency)}")

    if report.outcome is Outcome.INFEASIBLE:
        lines.append("  Result: budget is below the total minimum payments")
        return lines
    if report.outcome is Outcome.ABORTED:
        years, _ = payoff_duration(report.periods_simulated)
        lines.append(
            f"  Result: payoff plan exceeds {report.periods_simulated} months "
            f"(~{years} years)"
        )
        lines.append(
            f"  Remaining after bound: {format_amount(report.final_balance, plan.currency)}"
        )
        return lines

    years, months = payoff_duration(report.months_to_payoff)
    lines.append(
        f"  Months to payoff: {report.months_to_payoff} ({years} years, {months} months)"
    )
    if plan.start is not None:
        lines.append(f"  Debt-free month:  {debt_free_month(report, plan.start)}")
    lines.append(
        f"  Total interest:   {format_amount(report.total_interest_paid, plan.currency)}"
    )
    lines.append(f"  Total paid:       {format_amount(report.total_paid, plan.currency)}")
    if report.payoff_order:
        order = ", ".join(f"{e.account_id}@{e.period}" for e in report.payoff_order)
        lines.append(f"  Payoff order:     {order}")
    return lines


def cmd_example(_) -> int:
    """Print a minimal working payoff plan as JSON."""
    json.dump(EXAMPLE_PLAN, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def cmd_run(args) -> int:
    """Run a payoff plan and print a summary (optionally export JSON)."""
    try:
        plan = _apply_overrides(load_plan(args.input), args)
        if args.strategy:
            plan.strategy = Strategy.parse(args.strategy)
        report = simulate(
            plan.accounts, plan.strategy, plan.monthly_budget, config=plan.config
        )

        print("\n".join(_format_report(report, plan)))

        if args.output:
            _save_json(args.output, report.to_dict())
            print(f"Results saved to {args.output}")
        return 0

    except (ConfigError, FileNotFoundError, ValueError) as e:
        print(f"Error running plan: {e}", file=sys.stderr)
        return 1


def cmd_compare(args) -> int:
    """Run every strategy on a plan and print them side by side."""
    try:
        plan = _apply_overrides(load_plan(args.input), args)
        reports = compare_strategies(
            plan.accounts, plan.monthly_budget, config=plan.config
        )

        for report in reports.values():
            print("\n".join(_format_report(report, plan)))

        avalanche = reports[Strategy.AVALANCHE]
        snowball = reports[Strategy.SNOWBALL]
        if avalanche.completed and snowball.completed:
            saved = interest_savings(snowball, avalanche)
            print(
                f"Avalanche saves {format_amount(saved, plan.currency)} "
                "in interest versus snowball"
            )

        if args.output:
            _save_json(
                args.output, {s.value: r.to_dict() for s, r in reports.items()}
            )
            print(f"Results saved to {args.output}")
        return 0

    except (ConfigError, FileNotFoundError, ValueError) as e:
        print(f"Error comparing strategies: {e}", file=sys.stderr)
        return 1


def _add_plan_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-i", "--input", required=True, help="Input plan file (YAML or JSON)"
    )
    parser.add_argument("-o", "--output", help="Output results JSON file")
    parser.add_argument("--budget", type=float, help="Override the monthly budget")
    parser.add_argument(
        "--max-periods", type=int, help="Override the simulation period bound"
    )
    parser.add_argument(
        "--cascade",
        action="store_true",
        help="Cascade leftover surplus to the next account within a period",
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="payoff", description="PayoffLab - Debt payoff simulation engine"
    )
    parser.add_argument("--version", action="version", version=f"PayoffLab {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(
        dest="cmd", required=True, help="Available commands"
    )

    example_parser = subparsers.add_parser(
        "example", help="Print a minimal working payoff plan"
    )
    example_parser.set_defaults(func=cmd_example)

    run_parser = subparsers.add_parser("run", help="Simulate a payoff plan")
    _add_plan_arguments(run_parser)
    run_parser.add_argument(
        "--strategy",
        choices=Strategy.all_kinds(),
        help="Override the plan's strategy",
    )
    run_parser.set_defaults(func=cmd_run)

    compare_parser = subparsers.add_parser(
        "compare", help="Simulate every strategy on a plan"
    )
    _add_plan_arguments(compare_parser)
    compare_parser.set_defaults(func=cmd_compare)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
