import argparse
import sys

from ignitenode.core.node import run_node

BANNER = """
  IGNITE NETWORK NODE v1.1.0
  Contribute bandwidth. Earn rewards.
"""

EPILOG = """
Environment Variables:
  IGNITE_EMAIL     Your account email
  IGNITE_PASSWORD  Your account password
  IGNITE_API_URL   API base URL (optional)
"""


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="ignite-node",
        description="Ignite Network Node",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--email", help="Your Ignite account email")
    parser.add_argument("--password", help="Your Ignite account password")

    args = parser.parse_args(argv)

    print(BANNER)
    sys.exit(run_node(args.email, args.password))

if __name__ == "__main__":
    main()
