# aitp/network.py
"""
Wireless network scaffold the sweep runs inside.

Holds the topology of the evaluated deployment (stations around a single
access point) so a run has a concrete environment to report. Nothing here
feeds the metric models.
"""

import ipaddress
import logging
from dataclasses import dataclass, field

from .config import (
    WIFI_SSID,
    WIFI_STANDARD,
    WIFI_RATE_MANAGER,
    STA_MOBILITY_MODEL,
    AP_MOBILITY_MODEL,
    IPV4_NETWORK,
    AP_SUPPLY_VOLTAGE_V,
)
from .params import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class NetworkEnvironment:
    n_sta: int
    ssid: str = WIFI_SSID
    standard: str = WIFI_STANDARD
    rate_manager: str = WIFI_RATE_MANAGER
    sta_mobility: str = STA_MOBILITY_MODEL
    ap_mobility: str = AP_MOBILITY_MODEL
    network: str = IPV4_NETWORK
    supply_voltage_v: float = AP_SUPPLY_VOLTAGE_V
    addresses: dict = field(default_factory=dict)
    elapsed: float = 0.0
    _built: bool = field(default=False, init=False, repr=False)

    def build(self) -> None:
        """Assign addresses: stations first, then the access point."""
        net = ipaddress.ip_network(self.network)
        hosts = net.hosts()
        needed = self.n_sta + 1
        if needed > net.num_addresses - 2:
            logger.debug(
                "%d nodes exceed %s; addressing the first %d",
                needed, self.network, net.num_addresses - 2,
            )
        self.addresses = {}
        for i in range(self.n_sta):
            addr = next(hosts, None)
            if addr is None:
                break
            self.addresses[f"sta{i}"] = str(addr)
        ap_addr = next(hosts, None)
        if ap_addr is not None:
            self.addresses["ap"] = str(ap_addr)
        self._built = True
        logger.debug(
            "Network: %d STA + 1 AP, ssid=%s, %s, %s, %.1f V source on AP",
            self.n_sta, self.ssid, self.standard, self.rate_manager, self.supply_voltage_v,
        )

    def run(self, sim_time: float) -> float:
        if not self._built:
            raise ConfigurationError("network must be built before it is run")
        self.elapsed = float(sim_time)
        logger.debug("Network ran for %.1f s", self.elapsed)
        return self.elapsed
