"""Interactive hotel management menu.

Usage:
    hotel-cli <dbname> <port> <user> [--host HOST] [--password PASSWORD]

Opens one connection, then loops over a numbered menu until the user picks
EXIT or input runs out. The connection is always closed on the way out.
"""

import argparse
import logging
import sys

from .connection import HotelDatabase, get_host, get_password, open_database
from .log_config import setup_logging
from .prompt import Prompter
from . import operations

logger = logging.getLogger(__name__)

# (menu label, handler) in menu order; choice N runs MENU_ITEMS[N - 1]
MENU_ITEMS = [
    ("Add new customer", operations.add_customer),
    ("Add new room", operations.add_room),
    ("Add new maintenance company", operations.add_maintenance_company),
    ("Add new repair", operations.add_repair),
    ("Add new Booking", operations.book_room),
    ("Assign house cleaning staff to a room", operations.assign_house_cleaning_to_room),
    ("Raise a repair request", operations.repair_request),
    ("Get number of available rooms", operations.number_of_available_rooms),
    ("Get number of booked rooms", operations.number_of_booked_rooms),
    ("Get hotel bookings for a week", operations.list_hotel_room_bookings_for_a_week),
    ("Get top k rooms with highest price for a date range",
     operations.top_k_highest_room_price_for_a_date_range),
    ("Get top k highest booking price for a customer",
     operations.top_k_highest_price_bookings_for_a_customer),
    ("Get customer total cost occurred for a give date range",
     operations.total_cost_for_customer),
    ("List the repairs made by maintenance company", operations.list_repairs_made),
    ("Get top k maintenance companies based on repair count",
     operations.top_k_maintenance_company),
    ("Get number of repairs occurred per year for a given hotel room",
     operations.number_of_repairs_for_each_room_per_year),
]

OPERATION_HANDLERS = {
    number: handler for number, (_, handler) in enumerate(MENU_ITEMS, start=1)
}

EXIT_CHOICE = len(MENU_ITEMS) + 1


def greeting(out=None):
    out = out if out is not None else sys.stdout
    print(
        "\n\n*******************************************************\n"
        "              User Interface                        \n"
        "*******************************************************\n",
        file=out,
    )


def print_menu(out=None):
    out = out if out is not None else sys.stdout
    print("MAIN MENU", file=out)
    print("---------", file=out)
    for number, (label, _) in enumerate(MENU_ITEMS, start=1):
        print(f"{number}. {label}", file=out)
    print(f"{EXIT_CHOICE}. < EXIT", file=out)


def run_menu(db: HotelDatabase, prompter: Prompter, handlers=None):
    """Show the menu and dispatch choices until EXIT or end of input."""
    handlers = handlers if handlers is not None else OPERATION_HANDLERS

    while True:
        print_menu(prompter.out)
        try:
            choice = prompter.read_choice()
        except EOFError:
            logger.info("Input closed, leaving menu")
            print(file=prompter.out)
            return

        if choice == EXIT_CHOICE:
            return

        handler = handlers.get(choice)
        if handler is None:
            print("Unrecognized choice!", file=prompter.out)
            continue

        logger.info("Menu choice %d: %s", choice, handler.__name__)
        try:
            handler(db, prompter)
        except EOFError:
            logger.info("Input closed during %s", handler.__name__)
            print(file=prompter.out)
            return


def main(argv=None):
    """CLI entry point for the hotel management menu."""
    parser = argparse.ArgumentParser(description="Hotel management database menu")
    parser.add_argument("dbname", help="Database name")
    parser.add_argument("port", help="Database server port")
    parser.add_argument("user", help="Database user")
    parser.add_argument("--host", default=get_host(), help="Database server host")
    parser.add_argument("--password", default=get_password(), help="Database password")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    parser.add_argument("--log-dir", default="logs", help="Directory for log files")

    args = parser.parse_args(argv)

    setup_logging(level=args.log_level.upper(), log_dir=args.log_dir)

    greeting()
    db = open_database(args.dbname, args.port, args.user, password=args.password, host=args.host)
    prompter = Prompter()

    try:
        run_menu(db, prompter)
    except Exception as e:
        logger.exception("Menu loop aborted")
        print(e, file=sys.stderr)
    finally:
        print("Disconnecting from database...", end="")
        db.cleanup()
        print("Done\n\nBye !")


if __name__ == "__main__":
    main()
