import argparse
import sys

import config.config as cfg
from core.params import SimulationParameters
from core.validate import SchemeError, InsufficientCapital
from plots import plot_all
from services import logger
from services.formatting import parse_money, parse_percent, analytic_table, money
from services.storage import load_form, save_form
from simulation.sim import simulate


def parse_args(argv=None):
    stored = {**cfg.DEFAULT_FORM, **load_form()}
    p = argparse.ArgumentParser(description="Unit reinvestment growth simulator")
    p.add_argument("--investimento", default=stored["investimento"], help="initial capital, e.g. 'R$ 1.000,00'")
    p.add_argument("--custo", default=stored["custo"], help="unit cost")
    p.add_argument("--ganho", default=stored["ganho"], help="unit revenue")
    p.add_argument("--target", default=stored["target"], help="monthly net profit target")
    p.add_argument("--variacao", default=stored["variacao"], help="revenue variance, e.g. '10%%'")
    p.add_argument("--seed", type=int, default=cfg.SEED)
    p.add_argument("--max-periods", type=int, default=cfg.MAX_PERIODS)
    p.add_argument("--out-csv", type=str, default="simulation_periods.csv")
    p.add_argument("--plot", action="store_true")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    form = {k: getattr(args, k) for k in cfg.DEFAULT_FORM}

    try:
        params = SimulationParameters(
            initial_capital=parse_money(args.investimento),
            unit_cost=parse_money(args.custo),
            unit_revenue=parse_money(args.ganho),
            target_net_profit=parse_money(args.target),
            yield_variance=parse_percent(args.variacao),
        )
    except ValueError as e:
        logger.error(str(e))
        return 2
    save_form(form)

    try:
        df_periods, last = simulate(params, seed=args.seed, max_periods=args.max_periods)
    except InsufficientCapital as e:
        logger.warning(f"Minimum investment: {money(e.min_viable_capital)}")
        return 1
    except SchemeError as e:
        logger.error(str(e))
        return 1

    for row in df_periods.itertuples(index=False):
        logger.outcome(row)
    if last is not None and last.terminated:
        logger.target_reached(last)
    else:
        logger.warning(f"Target not reached after {len(df_periods)} months")

    df_periods.to_csv(args.out_csv, index=False)
    print(analytic_table(df_periods).to_string(index=False))

    if args.plot:
        plot_all(df_periods)
    return 0


if __name__ == "__main__":
    sys.exit(main())
