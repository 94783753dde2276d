import csv
import os
import random
from typing import Dict, List, Optional

from tqdm import tqdm

# --- Name material ---
FIRST_NAMES = [
    "Diane", "Mary", "Jeff", "William", "Gerard", "Anthony", "Leslie", "Julie",
    "Steve", "Foon Yue", "George", "Loui", "Pamela", "Larry", "Barry", "Andy",
    "Peter", "Tom", "Mami", "Yoshimi", "Martin", "Carine", "Jean", "Susan",
]
LAST_NAMES = [
    "Murphy", "Patterson", "Firrelli", "Bow", "Jennings", "Thompson", "Tseng",
    "Vanauf", "Bondur", "Hernandez", "Castillo", "Bott", "Jones", "Fixter",
    "Marsh", "King", "Nishi", "Kato", "Gerard", "Schmitt", "King", "Ferguson",
]
JOB_TITLES = [
    "President", "VP Sales", "VP Marketing", "Sales Manager (APAC)",
    "Sale Manager (EMEA)", "Sales Manager (NA)", "Sales Rep",
]
OFFICES = [
    ("San Francisco", "USA", "100 Market Street", "Suite 300"),
    ("Boston", "USA", "1550 Court Place", "Suite 102"),
    ("NYC", "USA", "523 East 53rd Street", "apt. 5A"),
    ("Paris", "France", "43 Rue Jouffroy D'abbans", None),
    ("Tokyo", "Japan", "4-1 Kioicho", None),
    ("Sydney", "Australia", "5-11 Wentworth Avenue", "Floor #2"),
    ("London", "UK", "25 Old Broad Street", "Level 7"),
]
COUNTRIES = [
    "USA", "France", "Australia", "Norway", "Poland", "Germany", "Spain",
    "Sweden", "Denmark", "Singapore", "Portugal", "Japan", "Finland", "UK",
    "Ireland", "Canada", "Hong Kong", "Italy", "Switzerland", "Netherlands",
    "Belgium", "New Zealand", "South Africa", "Austria", "Philippines",
]
NAME_WORDS = [
    "Atelier", "Signal", "Gift", "Mini", "Wheels", "Land", "Euro", "Volvo",
    "Toys", "Collectables", "Auto", "Classic", "Souveniers", "Handji", "Corrida",
    "Dragon", "Muscle", "Machine", "Diecast", "Imports", "Rovelli", "Cambridge",
]
NAME_SUFFIXES = ["Inc.", "Ltd.", "Co.", "Corp", "Ltd", "Co", "", "", "", ""]
PRODUCT_LINES = [
    "Classic Cars", "Motorcycles", "Planes", "Ships", "Trains",
    "Trucks and Buses", "Vintage Cars",
]
PRODUCT_MAKES = [
    "Harley Davidson", "Alpine", "Ferrari", "Ford", "Chevy", "Dodge",
    "Mercedes Benz", "Porsche", "Vespa", "Boeing", "Titanic", "Corsair",
]
PRODUCT_WORDS = ["Classic", "Vintage", "Collectible", "Limited", "Special", "Premium", "Roadster"]
VENDORS = [
    "Min Lin Diecast", "Classic Metal Creations", "Highway 66 Mini Classics",
    "Red Start Diecast", "Motor City Art Classics", "Second Gear Diecast",
    "Autoart Studio Design", "Welly Diecast Productions", "Unimax Art Galleries",
    "Studio M Art Models", "Exoto Designs", "Gearbox Collectibles",
    "Carousel DieCast Legends",
]


# --- Row builders ---
def _customer_name() -> str:
    words = random.sample(NAME_WORDS, k=random.randint(1, 3))
    suffix = random.choice(NAME_SUFFIXES)
    name = " ".join(words + ([suffix] if suffix else []))
    # Occasional data-entry variants so capitalization charts have more than one bar
    roll = random.random()
    if roll < 0.05:
        name = name.upper()
    elif roll < 0.08:
        name = name.lower()
    return name[:50]


def _product_name() -> str:
    year = random.choice(["", f"{random.randint(1930, 2005)} "])
    make = random.choice(PRODUCT_MAKES)
    extra = random.choice(["", " " + random.choice(PRODUCT_WORDS), " " + random.choice(PRODUCT_WORDS) + " Edition"])
    return f"{year}{make}{extra}"[:70]


def build_offices() -> List[Dict[str, Optional[str]]]:
    return [
        {
            "officeCode": str(i + 1),
            "city": city,
            "country": country,
            "addressLine1": line1,
            "addressLine2": line2 or "",
        }
        for i, (city, country, line1, line2) in enumerate(OFFICES)
    ]


def build_employees(num_employees: int, offices: List[dict]) -> List[dict]:
    rows = []
    for i in tqdm(range(num_employees), desc="employees"):
        first = random.choice(FIRST_NAMES)
        last = random.choice(LAST_NAMES)
        rows.append(
            {
                "employeeNumber": 1002 + i,
                "firstName": first,
                "lastName": last,
                "email": f"{first[0].lower()}{last.lower()}@classicmodelcars.com".replace(" ", ""),
                "officeCode": random.choice(offices)["officeCode"],
                "jobTitle": JOB_TITLES[i] if i < 3 else random.choice(JOB_TITLES[3:]),
            }
        )
    return rows


def build_customers(num_customers: int) -> List[dict]:
    rows = []
    for i in tqdm(range(num_customers), desc="customers"):
        rows.append(
            {
                "customerNumber": 103 + i,
                "customerName": _customer_name(),
                "contactFirstName": random.choice(FIRST_NAMES),
                "contactLastName": random.choice(LAST_NAMES),
                "country": random.choice(COUNTRIES),
            }
        )
    return rows


def build_products(num_products: int) -> List[dict]:
    rows = []
    for i in tqdm(range(num_products), desc="products"):
        line = random.choice(PRODUCT_LINES)
        rows.append(
            {
                "productCode": f"S{random.choice([10, 12, 18, 24, 32, 50, 72])}_{1000 + i}",
                "productName": _product_name(),
                "productLine": line,
                "productVendor": random.choice(VENDORS),
            }
        )
    return rows


def _write_csv(path: str, rows: List[dict]) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        writer.writerows(rows)


# --- Main Script ---
def generate_mock_data(
    output_dir: str = "mock_data",
    num_customers: int = 122,
    num_products: int = 110,
    num_employees: int = 23,
):
    """Write offices/employees/customers/products CSVs for SEED_CSV_DIR."""
    os.makedirs(output_dir, exist_ok=True)

    offices = build_offices()
    tables = {
        "offices": offices,
        "employees": build_employees(num_employees, offices),
        "customers": build_customers(num_customers),
        "products": build_products(num_products),
    }
    for table, rows in tables.items():
        _write_csv(os.path.join(output_dir, f"{table}.csv"), rows)

    print(f"\nSuccessfully generated mock data for {len(tables)} tables in '{output_dir}'.")


if __name__ == "__main__":
    random.seed(42)
    generate_mock_data()
