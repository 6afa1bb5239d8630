
import os
from dotenv import load_dotenv

load_dotenv()

# ---------------- CONFIG ----------------
SEED = int(os.getenv("SIM_SEED", "7"))
PACING_S = float(os.getenv("SIM_PACING_S", "0.5"))     # delay between periods (seconds)
MAX_PERIODS = int(os.getenv("SIM_MAX_PERIODS", "0")) or None   # None = run until target

# ----- EXTRAS (reinvestment) -----
MAX_EXTRAS = 30          # hard ceiling of extra units per period
EXTRAS_DIVISOR = 10      # one extra unit for every 10 held

# ----- MINIMUM CAPITAL RULE -----
OVERHEAD = 120.0         # fixed monthly overhead assumption
SAFETY_FACTOR = 2        # margin of safety, in multiples of unit cost

# ----- DISPLAY -----
CURRENCY = "R$"

# ----- PERSISTED FORM -----
STORAGE_KEY = "simuladorParams"
FORM_STORE = os.getenv("SIM_FORM_STORE", ".simulator_form.json")

# ----- LOGGING -----
LOG_FILE = os.getenv("SIM_LOG_FILE", "simulator.log")
LOG_CONSOLE = os.getenv("SIM_LOG_CONSOLE", "True").lower() == "true"

# ----- FORM DEFAULTS -----
DEFAULT_FORM = {
    "investimento": "R$ 1.000,00",
    "custo": "R$ 10,00",
    "ganho": "R$ 15,00",
    "target": "R$ 10.000,00",
    "variacao": "0%",
}
