"""
Command line interface for gammusms.

Wraps the feature managers in subcommands and prints results as JSON.
"""

import sys
import json
import logging
from typing import Optional

from .phone import GammuPhone
from .core import GammuConfig, list_serial_ports, render_gammurc
from .version import __version__
from .exceptions import GammuError


class GammuCLI:
    """Subcommand dispatcher."""

    def __init__(self, config: GammuConfig, phone: Optional[GammuPhone] = None):
        """
        Initialize CLI.

        Args:
            config: Gammu location and configuration
            phone: Pre-built phone (for testing); created lazily otherwise
        """
        self.config = config
        self._phone = phone

    @property
    def phone(self) -> GammuPhone:
        if self._phone is None:
            self._phone = GammuPhone(self.config)
        return self._phone

    def run(self, args) -> int:
        """Run the selected subcommand."""
        try:
            handler = getattr(self, f"_cmd_{args.command.replace('-', '_')}")
            handler(args)
        except GammuError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            logging.exception("CLI error")
            return 1

        return 0

    def _print(self, data) -> None:
        print(json.dumps(data, indent=2, ensure_ascii=False))

    def _cmd_identify(self, args) -> None:
        self._print(self.phone.device.identify())

    def _cmd_messages(self, args) -> None:
        messages = self.phone.sms.get_messages()
        if messages.get("inbox") == "empty":
            self._print(messages)
            return

        self._print({
            folder: {str(index): record.to_dict() for index, record in records.items()}
            for folder, records in messages.items()
        })

    def _cmd_phonebook(self, args) -> None:
        contacts = self.phone.phonebook.get_phonebook(args.memory)
        self._print([contact.to_dict() for contact in contacts])

    def _cmd_send(self, args) -> None:
        print(self.phone.sms.send_sms(args.number, args.text))

    def _cmd_delete(self, args) -> None:
        print(self.phone.sms.delete_sms(args.folder, args.start, args.stop))

    def _cmd_delete_all(self, args) -> None:
        print(self.phone.sms.delete_all_sms(args.folder))

    def _cmd_ports(self, args) -> None:
        ports = list_serial_ports()
        if args.gammurc:
            for number, port in enumerate(ports):
                print(render_gammurc(port.device, section=number or None))
            return

        self._print([
            {"device": p.device, "description": p.description, "hwid": p.hwid}
            for p in ports
        ])


def build_parser():
    """Build the argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        description=f"gammusms CLI v{__version__} - read SMS and phonebooks through Gammu",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gammusms-cli messages
  gammusms-cli -c ~/.gammurc -s 1 phonebook --memory ME
  gammusms-cli send +1234567890 "Hello, World!"
  gammusms-cli delete 1 5 10
  gammusms-cli ports --gammurc
        """
    )

    env = GammuConfig.from_env()

    parser.add_argument(
        "-g", "--gammu",
        default=env.binary,
        help=f"Gammu executable (default: {env.binary}, env GAMMU_BIN)"
    )
    parser.add_argument(
        "-c", "--config",
        default=env.config_file,
        help="Gammu config file (env GAMMU_CONFIG)"
    )
    parser.add_argument(
        "-s", "--section",
        default=env.section,
        help="Gammu config section (env GAMMU_SECTION)"
    )
    parser.add_argument(
        "-t", "--timeout",
        type=float,
        default=env.timeout,
        help=f"Seconds to wait for Gammu (default: {env.timeout:g})"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("identify", help="Show device identity and monitor values")
    commands.add_parser("messages", help="List all SMS messages by folder")

    phonebook = commands.add_parser("phonebook", help="List phonebook contacts")
    phonebook.add_argument(
        "-m", "--memory",
        default="SM",
        help="Memory bank (default: SM, the SIM card)"
    )

    send = commands.add_parser("send", help="Send a text message")
    send.add_argument("number", help="Destination number")
    send.add_argument("text", help="Message text")

    delete = commands.add_parser("delete", help="Delete a range of messages")
    delete.add_argument("folder", help="Folder number")
    delete.add_argument("start", type=int, help="First location")
    delete.add_argument("stop", type=int, nargs="?", help="Last location (default: start)")

    delete_all = commands.add_parser("delete-all", help="Delete all messages in a folder")
    delete_all.add_argument("folder", help="Folder number")

    ports = commands.add_parser("ports", help="List serial devices")
    ports.add_argument(
        "--gammurc",
        action="store_true",
        help="Print a gammurc section per device instead of JSON"
    )

    return parser


def main(argv=None):
    """Main entry point for CLI."""
    args = build_parser().parse_args(argv)

    # Setup logging
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    else:
        logging.basicConfig(
            level=logging.WARNING,
            format='%(levelname)s: %(message)s'
        )

    config = GammuConfig(
        binary=args.gammu,
        config_file=args.config,
        section=args.section,
        timeout=args.timeout
    )

    return GammuCLI(config).run(args)


if __name__ == "__main__":
    sys.exit(main())
