from sqlalchemy import Column, ForeignKey, Integer, String

from app.database import Base


class Office(Base):
    """Sales office; read by the city and address queries."""

    __tablename__ = "offices"

    officeCode = Column(String(10), primary_key=True)
    city = Column(String(50), nullable=False)
    country = Column(String(50), nullable=False)
    addressLine1 = Column(String(50), nullable=False)
    addressLine2 = Column(String(50), nullable=True)


class Employee(Base):
    __tablename__ = "employees"

    employeeNumber = Column(Integer, primary_key=True)
    firstName = Column(String(50), nullable=False)
    lastName = Column(String(50), nullable=False)
    email = Column(String(100), nullable=False)
    officeCode = Column(String(10), ForeignKey("offices.officeCode"), nullable=False, index=True)
    jobTitle = Column(String(50), nullable=False)


class Customer(Base):
    __tablename__ = "customers"

    customerNumber = Column(Integer, primary_key=True)
    customerName = Column(String(50), nullable=False)
    contactFirstName = Column(String(50), nullable=False)
    contactLastName = Column(String(50), nullable=False)
    country = Column(String(50), nullable=False, index=True)


class Product(Base):
    __tablename__ = "products"

    productCode = Column(String(15), primary_key=True)
    productName = Column(String(70), nullable=False)
    productLine = Column(String(50), nullable=False, index=True)
    productVendor = Column(String(50), nullable=False)


# Insert order that satisfies the foreign keys.
TABLES = (Office, Employee, Customer, Product)
