import os
import tempfile

# must be set before app.config is imported
os.environ["ENV"] = "test"
os.environ["SQLALCHEMY_URL"] = "sqlite://"
os.environ["ADMIN_EMAILS"] = '["owner@peaq.example.com"]'
os.environ["IMAGES_DIR"] = os.path.join(tempfile.gettempdir(), "peaq_test_images")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

import app.models  # noqa: F401 (register tables)
from app.database import engine
from app.main import app
from app.repositories.memory import (
    InMemoryOrderRepository,
    InMemoryProductRepository,
    InMemoryUserRepository,
)


@pytest.fixture(autouse=True)
def clean_database():
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def session():
    with Session(engine) as s:
        yield s


# ---------- in-memory repositories ----------

@pytest.fixture
def order_repo():
    return InMemoryOrderRepository()


@pytest.fixture
def product_repo():
    return InMemoryProductRepository()


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


# ---------- payload builders ----------

def customer_payload(**overrides):
    customer = {
        "firstName": "Thandi",
        "lastName": "Mokoena",
        "email": "thandi@example.com",
        "phone": "0821234567",
        "address": "12 Jacaranda Street",
        "city": "Pretoria",
        "postalCode": "0002",
        "province": "Gauteng",
        "deliveryInstructions": "Leave at the gate",
    }
    customer.update(overrides)
    return customer


def sample_cart():
    return [
        {"name": "Velvet Torrida", "category": "For Her", "size": "50ml", "price": 119.99},
        {"name": "Royal For Him", "category": "For Him", "size": "30ml", "price": 49.99},
    ]


def order_payload(**overrides):
    payload = {
        "customer": customer_payload(),
        "items": sample_cart(),
        "subtotal": 169.98,
        "total": 219.98,
    }
    payload.update(overrides)
    return payload


def product_payload(**overrides):
    product = {
        "name": "Velvet Torrida",
        "category": "For Her",
        "size": "50ml",
        "price": 119.99,
        "image_url": "/images/1762590894043.jpeg",
        "description": "Luxurious velvet scent with warm notes",
        "featured": True,
        "stock_quantity": 100,
        "active": True,
    }
    product.update(overrides)
    return product


# ---------- auth helpers ----------

def register_and_login(client, email, password="secret123", first_name="Test", last_name="User"):
    client.post("/api/register", json={
        "firstName": first_name,
        "lastName": last_name,
        "email": email,
        "password": password,
    })
    response = client.post("/api/login", json={"email": email, "password": password})
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(client):
    return register_and_login(client, "owner@peaq.example.com", first_name="Shop", last_name="Owner")


@pytest.fixture
def customer_headers(client):
    return register_and_login(client, "buyer@example.com")
