#!/usr/bin/env python
"""
Zabbix Client Example

Logs in to a Zabbix API using settings from the environment
(ZABBIX_URL, ZABBIX_USER, ZABBIX_PASSWORD, ...) and lists a few hosts.
"""

import json
import logging
import sys

from zabbix_rpc import ClientConfig, ZabbixAPI, ZabbixError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

def main():
    config = ClientConfig.from_env()
    wire_logger = logging.getLogger("zabbix.wire")

    with ZabbixAPI.from_config(config, diagnostic_logger=wire_logger) as api:
        try:
            logger.info(f"API version: {api.version()}")
            api.login(config.user or "", config.password or "")
            response = api.call_with_error("host.get", {"output": ["hostid", "host"], "limit": 5})
        except ZabbixError as e:
            logger.error(f"Zabbix API request failed: {e}")
            return 1

    logger.info(f"Hosts: {json.dumps(response.result, indent=2)}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
