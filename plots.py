import matplotlib.pyplot as plt


def plot_profits(df_periods, ax=None):
    """
    Gross profit, capital increment and net profit per month.
    Expects columns: period_index, gross_profit, increment, net_profit.
    """
    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.figure
    x = df_periods["period_index"]
    ax.plot(x, df_periods["gross_profit"].round(2), label="Gross Profit", color="#4ade80", linewidth=2)
    ax.plot(x, df_periods["increment"].round(2), label="Increment", color="#3b82f6", linewidth=2)
    ax.plot(x, df_periods["net_profit"].round(2), label="Net Profit", color="#facc15", linewidth=2)
    ax.set_xlabel("Month"); ax.set_ylabel("Value"); ax.legend(); ax.set_title("Profit per month")
    ax.grid(True)
    return fig


def plot_extras(df_periods, ax=None):
    """Extra units bought per month."""
    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.figure
    ax.plot(df_periods["period_index"], df_periods["extra_units"], label="Extra Units per Month",
            color="#ec4899", linewidth=2)
    ax.set_ylim(bottom=0)
    ax.set_xlabel("Month"); ax.set_ylabel("Units"); ax.legend(); ax.set_title("Extra units")
    ax.grid(True)
    return fig


def plot_all(df_periods):
    if df_periods.empty:
        return
    plot_profits(df_periods)
    plot_extras(df_periods)
    plt.show()
