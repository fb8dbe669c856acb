"""Menu actions: each reads its fields and runs one statement.

Every handler takes the open `HotelDatabase` and a `Prompter`. Driver errors
are reported to the user and logged; they never end the menu loop.
"""

import logging
from datetime import timedelta

import psycopg2

from .connection import HotelDatabase
from .prompt import Prompter

logger = logging.getLogger(__name__)

QUERY_ERROR = "There was an error."


def _report_query_error(action: str, db: HotelDatabase, error: Exception):
    logger.warning("%s failed: %s", action, error)
    print(QUERY_ERROR, file=db.out)


# --- Inserts ---

def add_customer(db: HotelDatabase, prompter: Prompter):
    """Add a customer from name, address, phone, date of birth and gender."""
    name = prompter.read_text("Enter name: ")
    last_name = prompter.read_text("Enter last name: ")
    address = prompter.read_text("Enter Address: ")
    phone = prompter.read_int("Enter phone number: ")
    dob = prompter.read_text("Enter date of birth: ")
    gender = prompter.read_text("Enter Gender: ")

    try:
        customer_id = db.get_next_id("customerID", "Customer")
        db.execute_update("""
            INSERT INTO Customer (customerID, fName, lName, Address, phNo, DOB, gender)
            VALUES (%s, %s, %s, %s, %s, %s, %s)
        """, (customer_id, name, last_name, address, phone, dob, gender))
        print("The customer was successfully added!", file=db.out)
    except psycopg2.Error as e:
        logger.warning("Add customer failed: %s", e)
        print(
            "The customer couldn't be added.\nMake sure that name and last name "
            "are at most 30 characters long, phone number contains only numbers, "
            "date of birth is in the format MM/DD/YYYY and gender is Male, "
            "Female or Other.",
            file=db.out,
        )


def add_room(db: HotelDatabase, prompter: Prompter):
    hotel_id = prompter.read_int("\tEnter hotelID: ")
    room_type = prompter.read_text("\tEnter room type: ")

    try:
        room_no = db.get_next_id("roomNo", "Room")
        db.execute_update("""
            INSERT INTO Room (hotelID, roomNo, roomType)
            VALUES (%s, %s, %s)
        """, (hotel_id, room_no, room_type))
        print("The room was successfully added!", file=db.out)
    except psycopg2.Error as e:
        logger.warning("Add room failed: %s", e)
        print(f"The room couldn't be added: {e}", file=db.out)


def add_maintenance_company(db: HotelDatabase, prompter: Prompter):
    name = prompter.read_text("Name of the Company: ")
    address = prompter.read_text("Address: ")
    is_certified = prompter.read_yes_no("Is it certified? (yes/no): ")

    try:
        company_id = db.get_next_id("cmpID", "MaintenanceCompany")
        db.execute_update("""
            INSERT INTO MaintenanceCompany (cmpID, name, address, isCertified)
            VALUES (%s, %s, %s, %s)
        """, (company_id, name, address, is_certified))
        print(f"{name} was successfully added!", file=db.out)
    except psycopg2.Error as e:
        logger.warning("Add maintenance company failed: %s", e)
        print(
            "The company couldn't be added.\nMake sure that the name is at "
            "most 30 characters long.",
            file=db.out,
        )


def add_repair(db: HotelDatabase, prompter: Prompter):
    hotel_id = prompter.read_int("\tEnter hotelID: ")
    room_no = prompter.read_int("\tEnter room number: ")
    company_id = prompter.read_int("\tEnter maintenance company id: ")
    repair_date = prompter.read_text("\tEnter repair date: ")
    description = prompter.read_text("\tEnter repair description: ")
    repair_type = prompter.read_text("\tEnter repair type: ")

    try:
        repair_id = db.get_next_id("rID", "Repair")
        db.execute_update("""
            INSERT INTO Repair (rID, hotelID, roomNo, mCompany, repairDate, description, repairType)
            VALUES (%s, %s, %s, %s, %s, %s, %s)
        """, (repair_id, hotel_id, room_no, company_id, repair_date, description, repair_type))
        print("The repair was successfully added!", file=db.out)
    except psycopg2.Error as e:
        logger.warning("Add repair failed: %s", e)
        print(f"The repair couldn't be added: {e}", file=db.out)


def book_room(db: HotelDatabase, prompter: Prompter):
    """Book a room for an existing customer looked up by first and last name."""
    hotel_id = prompter.read_int("Enter hotel ID: ")
    room_no = prompter.read_int("Enter room number: ")
    first_name = prompter.read_text("Enter Customer first name: ")
    last_name = prompter.read_text("Enter Customer last name: ")
    booking_date = prompter.read_text("Enter booking date: ")
    people = prompter.read_int("Enter number of people: ")
    price = round(prompter.read_float("Enter price: "), 2)

    try:
        booking_id = db.get_next_id("bID", "Booking")
        db.execute_update("""
            INSERT INTO Booking (bID, customer, hotelID, roomNo, bookingDate, noOfPeople, price)
            SELECT %s, c.customerID, %s, %s, %s, %s, %s
            FROM Customer c
            WHERE c.fName = %s AND c.lName = %s
            LIMIT 1
        """, (booking_id, hotel_id, room_no, booking_date, people, price, first_name, last_name))
        print("The booking was successfully created!", file=db.out)
    except psycopg2.Error as e:
        logger.warning("Book room failed: %s", e)
        print("The booking couldn't be created.", file=db.out)


def assign_house_cleaning_to_room(db: HotelDatabase, prompter: Prompter):
    staff_id = prompter.read_int("\tEnter staff id: ")
    hotel_id = prompter.read_int("\tEnter hotelID: ")
    room_no = prompter.read_int("\tEnter room number: ")

    try:
        assignment_id = db.get_next_id("asgID", "Assigned")
        db.execute_update("""
            INSERT INTO Assigned (asgID, staffID, hotelID, roomNo)
            VALUES (%s, %s, %s, %s)
        """, (assignment_id, staff_id, hotel_id, room_no))
        print("The staff member was successfully assigned!", file=db.out)
    except psycopg2.Error as e:
        logger.warning("Assign house cleaning failed: %s", e)
        print(f"The staff member couldn't be assigned: {e}", file=db.out)


def repair_request(db: HotelDatabase, prompter: Prompter):
    """Raise a repair request on behalf of a manager."""
    manager_ssn = prompter.read_int("Enter SSN: ")
    repair_id = prompter.read_int("Enter repair ID: ")
    request_date = prompter.read_text("Enter date: ")
    description = prompter.read_text("Enter description: ")

    try:
        request_id = db.get_next_id("reqID", "Request")
        db.execute_update("""
            INSERT INTO Request (reqID, managerID, repairID, requestDate, description)
            VALUES (%s, %s, %s, %s, %s)
        """, (request_id, manager_ssn, repair_id, request_date, description))
        print("The request was successfully created!", file=db.out)
    except psycopg2.Error as e:
        logger.warning("Repair request failed: %s", e)
        print("The request couldn't be created.", file=db.out)


# --- Reports ---

def number_of_available_rooms(db: HotelDatabase, prompter: Prompter):
    """Count the hotel's rooms that have no booking at all."""
    hotel_id = prompter.read_int("\tEnter Hotel ID: ")
    try:
        db.execute_query("""
            SELECT COUNT(*) FROM Room R
            WHERE R.hotelID = %s
              AND R.roomNo NOT IN (SELECT B.roomNo FROM Booking B WHERE B.hotelID = %s)
        """, (hotel_id, hotel_id))
    except psycopg2.Error as e:
        _report_query_error("Available rooms", db, e)


def number_of_booked_rooms(db: HotelDatabase, prompter: Prompter):
    hotel_id = prompter.read_int("Enter hotel ID: ")
    try:
        db.execute_query("""
            SELECT COUNT(*) AS TotalBookings FROM Booking WHERE hotelID = %s
        """, (hotel_id,))
    except psycopg2.Error as e:
        _report_query_error("Booked rooms", db, e)


def list_hotel_room_bookings_for_a_week(db: HotelDatabase, prompter: Prompter):
    """Bookings from the given date through the same weekday one week later."""
    hotel_id = prompter.read_int("\tEnter hotelID: ")
    start = prompter.read_date("\tEnter date(mm/dd/yyyy): ")
    end = start + timedelta(days=7)
    try:
        db.execute_query("""
            SELECT * FROM Booking
            WHERE hotelID = %s AND bookingDate BETWEEN %s AND %s
        """, (hotel_id, start, end))
    except psycopg2.Error as e:
        _report_query_error("Weekly bookings", db, e)


def top_k_highest_room_price_for_a_date_range(db: HotelDatabase, prompter: Prompter):
    k = prompter.read_int("Enter k: ")
    start = prompter.read_text("Enter starting date: ")
    end = prompter.read_text("Enter ending date: ")
    try:
        db.execute_query("""
            SELECT hotelID, roomNo, price, bookingDate FROM Booking
            WHERE bookingDate BETWEEN %s AND %s
            ORDER BY price DESC
            LIMIT %s
        """, (start, end, k))
    except psycopg2.Error as e:
        _report_query_error("Top k room prices", db, e)


def top_k_highest_price_bookings_for_a_customer(db: HotelDatabase, prompter: Prompter):
    first_name = prompter.read_text("\tEnter customer's first name: ")
    last_name = prompter.read_text("\tEnter customer's last name: ")
    k = prompter.read_int("\tEnter k: ")
    try:
        db.execute_query("""
            SELECT B.price FROM Booking B, Customer C
            WHERE C.customerID = B.customer AND C.fName = %s AND C.lName = %s
            ORDER BY B.price DESC
            LIMIT %s
        """, (first_name, last_name, k))
    except psycopg2.Error as e:
        _report_query_error("Top k customer bookings", db, e)


def total_cost_for_customer(db: HotelDatabase, prompter: Prompter):
    """Total spent by a customer at one hotel within a date range.

    An unknown customer resolves to id 0, which yields a total of 0.
    """
    hotel_id = prompter.read_int("Enter hotel ID: ")
    first_name = prompter.read_text("Enter customer's first name: ")
    last_name = prompter.read_text("Enter customer's last name: ")
    start = prompter.read_text("Enter start date: ")
    end = prompter.read_text("Enter end date: ")
    try:
        customer_id = db.fetch_value("""
            SELECT customerID FROM Customer WHERE fName = %s AND lName = %s LIMIT 1
        """, (first_name, last_name)) or 0
        db.execute_query("""
            SELECT COALESCE(SUM(price), 0) AS TotalIncurred FROM Booking
            WHERE hotelID = %s AND customer = %s AND bookingDate BETWEEN %s AND %s
        """, (hotel_id, customer_id, start, end))
    except psycopg2.Error as e:
        _report_query_error("Customer total cost", db, e)


def list_repairs_made(db: HotelDatabase, prompter: Prompter):
    company = prompter.read_text("\tEnter Maintenance company name: ")
    try:
        db.execute_query("""
            SELECT r.rID, r.hotelID, r.roomNo, r.repairType
            FROM MaintenanceCompany mc, Repair r
            WHERE mc.name = %s AND mc.cmpID = r.mCompany
        """, (company,))
    except psycopg2.Error as e:
        _report_query_error("Repairs by company", db, e)


def top_k_maintenance_company(db: HotelDatabase, prompter: Prompter):
    k = prompter.read_int("Enter k: ")
    try:
        db.execute_query("""
            SELECT m.name, COUNT(m.cmpID) AS RepairCount
            FROM MaintenanceCompany m, Repair r
            WHERE m.cmpID = r.mCompany
            GROUP BY m.cmpID, m.name
            ORDER BY RepairCount DESC
            LIMIT %s
        """, (k,))
    except psycopg2.Error as e:
        _report_query_error("Top k maintenance companies", db, e)


def number_of_repairs_for_each_room_per_year(db: HotelDatabase, prompter: Prompter):
    hotel_id = prompter.read_int("\tEnter Hotel ID: ")
    room_no = prompter.read_int("\tEnter room number: ")
    try:
        db.execute_query("""
            SELECT COUNT(*) AS number_of_repairs, DATE_PART('year', repairDate) AS year
            FROM Repair r
            WHERE r.hotelID = %s AND r.roomNo = %s
            GROUP BY DATE_PART('year', repairDate)
            ORDER BY year
        """, (hotel_id, room_no))
    except psycopg2.Error as e:
        _report_query_error("Repairs per year", db, e)
