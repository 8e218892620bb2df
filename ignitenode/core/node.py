import asyncio
import signal
import sys

from ignitenode.collectors.network import get_sampler
from ignitenode.config.loader import load_config
from ignitenode.core.accumulator import Accumulator
from ignitenode.core.client import AuthenticationError, IgniteClient
from ignitenode.core.delta import DeltaEngine
from ignitenode.core.scheduler import ReportScheduler
from ignitenode.utils.logger import setup_logger


def _interrupt(signum, frame):
    raise KeyboardInterrupt


class Node:
    def __init__(self, email=None, password=None):
        self.config = load_config()
        if email:
            self.config["EMAIL"] = email
        if password:
            self.config["PASSWORD"] = password

        self.logger = setup_logger(level=self.config["LOG_LEVEL"])

        if not (self.config["EMAIL"] and self.config["PASSWORD"]):
            raise RuntimeError("Email and password required.")

        self.client = IgniteClient(
            self.config["API_URL"],
            timeout=self.config["REQUEST_TIMEOUT"],
        )
        self.sampler = get_sampler()
        self.accumulator = Accumulator()
        self.scheduler = ReportScheduler(
            DeltaEngine(self.sampler),
            self.accumulator,
            self.client,
            report_interval=self.config["REPORT_INTERVAL"],
            warmup_delay=self.config["WARMUP_DELAY"],
            status_interval=self.config["STATUS_INTERVAL"],
        )

    def login(self) -> bool:
        self.logger.info("Logging in to Ignite Network...")
        try:
            user = self.client.login(self.config["EMAIL"], self.config["PASSWORD"])
        except AuthenticationError as e:
            self.logger.error(f"Login failed: {e}")
            return False

        self.logger.info(f"Logged in as: {user.get('email', self.config['EMAIL'])}")
        return True

    def run(self) -> int:
        if not self.login():
            self.logger.error("Failed to authenticate. Please check your credentials.")
            return 1

        self.logger.info("Node started! Monitoring real network bandwidth...")
        self.logger.info(f"Platform detected: {self.sampler.name}")
        print("Press Ctrl+C to stop.\n")

        signal.signal(signal.SIGTERM, _interrupt)
        try:
            asyncio.run(self.scheduler.run())
        except KeyboardInterrupt:
            print("\n\nShutting down Ignite Node...")
            self.scheduler.show_status()
            print("Thank you for contributing to the Ignite Network!")

        return 0


def run_node(email=None, password=None) -> int:
    try:
        node = Node(email, password)
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Usage: ignite-node --email <email> --password <password>", file=sys.stderr)
        return 1
    return node.run()
