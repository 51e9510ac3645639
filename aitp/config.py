# AITP Evaluation Configuration
# Centralized configuration for all sweep parameters and constants

# Run Parameters (defaults, overridable from the command line)
DEFAULT_N_STA = 500
DEFAULT_SIM_TIME = 10.0  # seconds
DEFAULT_DP_EPSILON = 1.0

# Sweep Definition
STRATEGIES = ["AITP", "CAIP", "NAP"]
REFERENCE_STRATEGY = "CAIP"
N_STA_VALUES = [50, 100, 200, 300, 400, 500]

# Metric identifiers, in report order. Also used as result file suffixes.
METRICS = ["latency", "throughput", "energy", "privacy", "robustness"]

# Strategy factors: (latency, throughput, energy, privacy, robustness)
STRATEGY_FACTORS = {
    "AITP": (0.9683, 1.117, 1.27, 0.875, 1.335),
    "CAIP": (1.0, 1.0, 1.0, 1.0, 1.0),
    "NAP": (1.35, 0.5462, 0.78, 1.2, 0.8),
}

# Output
OUTPUT_DATA_DIR = "./output/data"
OUTPUT_FIGURES_DIR = "./output/figures"
RESULT_FILE_PREFIX = "results"
HEADER_LABEL = "nSta"

# Network Scaffold
WIFI_SSID = "ns3-wifi"
WIFI_STANDARD = "802.11ax"
WIFI_RATE_MANAGER = "IdealWifiManager"
STA_MOBILITY_MODEL = "RandomWaypoint"
AP_MOBILITY_MODEL = "ConstantPosition"
IPV4_NETWORK = "10.1.3.0/24"
AP_SUPPLY_VOLTAGE_V = 3.0

# Statistical Analysis
CONFIDENCE_LEVEL = 0.95

# Plotting
FIGURE_DPI = 300
