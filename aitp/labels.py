# aitp/labels.py
STRATEGY_LABEL = {
    "AITP": "AITP (Adaptive)",
    "CAIP": "CAIP (Reference)",
    "NAP": "NAP (No Privacy)",
}
METRIC_LABEL = {
    "latency": "Latency (ms)",
    "throughput": "Throughput (Mbps)",
    "energy": "Energy Efficiency",
    "privacy": "Privacy Loss",
    "robustness": "Robustness",
}

def label_strategy(x: str) -> str: return STRATEGY_LABEL.get(x, x)
def label_metric(x: str) -> str:   return METRIC_LABEL.get(x, x)
