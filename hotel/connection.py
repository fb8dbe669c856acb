"""Database connection manager and statement executor."""

import logging
import os
import sys
from typing import Optional

import psycopg2
from psycopg2 import sql

logger = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PASSWORD = "12345"


def get_host() -> str:
    """Database host from environment, falling back to localhost."""
    return os.environ.get("HOTEL_DB_HOST", DEFAULT_HOST)


def get_password() -> str:
    """Database password from environment, falling back to the built-in one."""
    return os.environ.get("HOTEL_DB_PASSWORD", DEFAULT_PASSWORD)


def format_value(value) -> str:
    if value is None:
        return "null"
    return str(value)


class HotelDatabase:
    """A single open connection plus the execute helpers every menu action uses.

    Query results are printed to `out` as tab-separated text. Driver errors
    (`psycopg2.Error`) propagate to the caller untouched.
    """

    def __init__(self, connection=None, out=None):
        self._connection = connection
        self.out = out if out is not None else sys.stdout

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    def execute_update(self, statement, params=None) -> None:
        """Run a mutation statement (INSERT, UPDATE, DELETE, DDL)."""
        with self._connection.cursor() as cur:
            cur.execute(statement, params)
            logger.debug("Mutation affected %s rows", cur.rowcount)

    def execute_query(self, statement, params=None) -> int:
        """Run a query, print its result table and return the row count.

        The header of column names is printed even when no rows match.
        """
        with self._connection.cursor() as cur:
            cur.execute(statement, params)
            columns = [col[0] for col in cur.description]
            rows = cur.fetchall()

        print("\t".join(columns), file=self.out)
        for row in rows:
            print("\t".join(format_value(v) for v in row), file=self.out)
        return len(rows)

    def fetch_value(self, statement, params=None):
        """Return the first column of the first row, or None when empty."""
        with self._connection.cursor() as cur:
            cur.execute(statement, params)
            row = cur.fetchone()
        if row is None:
            return None
        return row[0]

    def get_next_id(self, field: str, table: str) -> int:
        """Emulate auto-increment: current maximum of `field` in `table` plus one.

        Not safe under concurrent writers; two clients can read the same max.
        """
        query = sql.SQL("SELECT MAX({}) FROM {}").format(
            sql.Identifier(field.lower()), sql.Identifier(table.lower())
        )
        current = self.fetch_value(query)
        return (current or 0) + 1

    def cleanup(self) -> None:
        """Close the connection if it is open. Close errors are ignored."""
        if self._connection is None:
            return
        try:
            self._connection.close()
        except psycopg2.Error as e:
            logger.warning("Error closing connection: %s", e)
        finally:
            self._connection = None


def open_database(
    dbname: str,
    port: str,
    user: str,
    password: Optional[str] = None,
    host: Optional[str] = None,
    out=None,
) -> HotelDatabase:
    """Connect to PostgreSQL or terminate the process with a diagnostic."""
    out = out if out is not None else sys.stdout
    host = host or get_host()
    password = password if password is not None else get_password()

    print("Connecting to database...", end="", file=out)
    try:
        url = f"postgresql://{host}:{port}/{dbname}"
        print(f"Connection URL: {url}\n", file=out)

        connection = psycopg2.connect(
            dbname=dbname, user=user, password=password, host=host, port=port
        )
        connection.autocommit = True
        print("Done", file=out)
    except Exception as e:
        logger.error("Unable to connect to %s:%s/%s: %s", host, port, dbname, e)
        print(f"Error - Unable to Connect to Database: {e}", file=sys.stderr)
        print("Make sure you started postgres on this machine", file=out)
        sys.exit(-1)

    return HotelDatabase(connection, out=out)
